"""Contract query commands: tasks, agent-ids, agent, agent-tasks."""

from __future__ import annotations

import typer

from croncat_cli.cli._query_helpers import (
    NetworkOptions,
    _require_account,
    _require_contract,
    _run_query,
)
from croncat_cli.core.models import GET_AGENT_IDS, GET_TASKS, get_agent, get_agent_tasks


def _network(ctx: typer.Context) -> NetworkOptions:
    return ctx.obj if isinstance(ctx.obj, NetworkOptions) else NetworkOptions()


def register(app: typer.Typer) -> None:
    """Register the query commands onto the Typer app."""

    @app.command("tasks")
    def tasks(
        ctx: typer.Context,
        contract: str = typer.Argument(None, help="CronCat contract address"),
    ) -> None:
        """List scheduled tasks (the get_tasks query)."""
        contract = _require_contract(contract)
        _run_query(contract, GET_TASKS, _network(ctx).load())

    @app.command("agent-ids")
    def agent_ids(
        ctx: typer.Context,
        contract: str = typer.Argument(None, help="CronCat contract address"),
    ) -> None:
        """List active and pending agent addresses."""
        contract = _require_contract(contract)
        _run_query(contract, GET_AGENT_IDS, _network(ctx).load())

    @app.command("agent")
    def agent(
        ctx: typer.Context,
        contract: str = typer.Argument(None, help="CronCat contract address"),
        account_id: str = typer.Argument(None, help="Agent account address"),
    ) -> None:
        """Show one agent's status, balance and task counters."""
        contract = _require_contract(contract)
        account_id = _require_account(account_id)
        _run_query(contract, get_agent(account_id), _network(ctx).load())

    @app.command("agent-tasks")
    def agent_tasks(
        ctx: typer.Context,
        contract: str = typer.Argument(None, help="CronCat contract address"),
        account_id: str = typer.Argument(None, help="Agent account address"),
    ) -> None:
        """Show how many tasks an agent can execute."""
        contract = _require_contract(contract)
        account_id = _require_account(account_id)
        _run_query(contract, get_agent_tasks(account_id), _network(ctx).load())
