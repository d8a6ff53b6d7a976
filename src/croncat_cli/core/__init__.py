"""Core query dispatch: models, configuration, subprocess runner."""

from croncat_cli.core.config import load_config
from croncat_cli.core.dispatcher import build_query_command, dispatch_query, run
from croncat_cli.core.models import GET_TASKS, NetworkConfig, QueryMessage
from croncat_cli.core.runner import CommandResult, CommandSpec, run_command

__all__ = [
    "GET_TASKS",
    "CommandResult",
    "CommandSpec",
    "NetworkConfig",
    "QueryMessage",
    "build_query_command",
    "dispatch_query",
    "load_config",
    "run",
    "run_command",
]
