"""Network command: show the resolved network configuration."""

from __future__ import annotations

import shlex

import typer
from rich.table import Table

from croncat_cli.cli._query_helpers import NetworkOptions, console
from croncat_cli.core.dispatcher import build_query_command
from croncat_cli.core.models import GET_TASKS


def register(app: typer.Typer) -> None:
    """Register the network command onto the Typer app."""

    @app.command("network")
    def network(
        ctx: typer.Context,
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ) -> None:
        """Print the network configuration queries would use."""
        options = ctx.obj if isinstance(ctx.obj, NetworkOptions) else NetworkOptions()
        config = options.load()

        if json_output:
            console.print_json(config.model_dump_json())
            return

        table = Table(title="Network configuration", show_header=False)
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        table.add_row("binary", config.binary)
        table.add_row("node", config.node)
        table.add_row("chain id", config.chain_id or "-")
        table.add_row("output", config.output.value if config.output else "-")
        table.add_row("height", str(config.height) if config.height is not None else "latest")
        table.add_row("extra flags", " ".join(config.extra_flags) or "-")
        console.print(table)

        example = build_query_command("<contract>", GET_TASKS, config)
        console.print(
            f"\n[bold]get_tasks:[/bold] {shlex.join(example.argv)}", highlight=False
        )
