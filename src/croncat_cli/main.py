"""Typer entry points: the ``croncat`` multi-command app and ``croncat-get-tasks``."""

from __future__ import annotations

import typer

from croncat_cli import __version__
from croncat_cli.cli import network as network_cmd
from croncat_cli.cli import query as query_cmd
from croncat_cli.cli._query_helpers import (
    BINARY_OPTION,
    CHAIN_ID_OPTION,
    CONFIG_OPTION,
    HEIGHT_OPTION,
    NODE_OPTION,
    OUTPUT_OPTION,
    VERBOSE_OPTION,
    NetworkOptions,
    _require_contract,
    _run_query,
    configure_logging,
)
from croncat_cli.core.models import GET_TASKS, OutputFormat

app = typer.Typer(
    name="croncat",
    help="Query CronCat contract state through a Juno node client.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"croncat-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: str = CONFIG_OPTION,
    node: str = NODE_OPTION,
    chain_id: str = CHAIN_ID_OPTION,
    binary: str = BINARY_OPTION,
    output: OutputFormat = OUTPUT_OPTION,
    height: int = HEIGHT_OPTION,
    verbose: bool = VERBOSE_OPTION,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Query CronCat contract state through a Juno node client."""
    configure_logging(verbose)
    ctx.obj = NetworkOptions(
        config_path=config_path,
        node=node,
        chain_id=chain_id,
        binary=binary,
        output=output,
        height=height,
    )


query_cmd.register(app)
network_cmd.register(app)


get_tasks_app = typer.Typer(name="croncat-get-tasks", add_completion=False)


@get_tasks_app.command()
def get_tasks(
    contract: str = typer.Argument(None, help="CronCat contract address"),
    config_path: str = CONFIG_OPTION,
    node: str = NODE_OPTION,
    chain_id: str = CHAIN_ID_OPTION,
    binary: str = BINARY_OPTION,
    output: OutputFormat = OUTPUT_OPTION,
    height: int = HEIGHT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Query {"get_tasks":{}} on a contract and print the node's raw response."""
    configure_logging(verbose)
    contract = _require_contract(contract)
    options = NetworkOptions(
        config_path=config_path,
        node=node,
        chain_id=chain_id,
        binary=binary,
        output=output,
        height=height,
    )
    _run_query(contract, GET_TASKS, options.load())
