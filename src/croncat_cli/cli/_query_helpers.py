"""Shared options and helpers for the query commands."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import typer
from rich.console import Console
from rich.logging import RichHandler

from croncat_cli.core.config import load_config
from croncat_cli.core.dispatcher import dispatch_query, forward_output
from croncat_cli.core.errors import (
    ConfigError,
    CronCatError,
    MissingAccountId,
    MissingContractAddress,
)
from croncat_cli.core.models import NetworkConfig, OutputFormat, QueryMessage
from croncat_cli.core.runner import run_command

console = Console()
err_console = Console(stderr=True)

CONFIG_OPTION = typer.Option(
    None, "--config", "-c",
    help="YAML network config (default: ./.croncatrc.yml if present)",
)
NODE_OPTION = typer.Option(None, "--node", help="Node RPC endpoint")
CHAIN_ID_OPTION = typer.Option(None, "--chain-id", help="Chain identifier")
BINARY_OPTION = typer.Option(None, "--binary", help="Node client executable (default: junod)")
OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Node client output format")
HEIGHT_OPTION = typer.Option(None, "--height", help="Query state at this block height")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log the node client invocation")


@dataclass
class NetworkOptions:
    """Network-related CLI flags, resolved into a config only after argument checks."""

    config_path: str | None = None
    node: str | None = None
    chain_id: str | None = None
    binary: str | None = None
    output: OutputFormat | None = None
    height: int | None = None

    def load(self) -> NetworkConfig:
        overrides = asdict(self)
        path = overrides.pop("config_path")
        try:
            return load_config(path, **overrides)
        except ConfigError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(exc.exit_code)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout carries only node client output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _require_contract(contract: str | None) -> str:
    if not contract:
        typer.echo(str(MissingContractAddress()))
        raise SystemExit(MissingContractAddress.exit_code)
    return contract


def _require_account(account_id: str | None) -> str:
    if not account_id:
        typer.echo(str(MissingAccountId()))
        raise SystemExit(MissingAccountId.exit_code)
    return account_id


def _run_query(contract: str, message: QueryMessage, config: NetworkConfig) -> None:
    """Dispatch one query, echo the node client's output, exit with its status."""
    try:
        result = dispatch_query(contract, message, config, runner=run_command)
    except CronCatError as exc:
        err_console.print(f"[red]Error:[/red] {exc}", highlight=False)
        raise SystemExit(exc.exit_code)

    forward_output(result)
    if not result.ok:
        raise SystemExit(result.exit_status)
