"""Query dispatcher: composes ``wasm contract-state smart`` queries and hands them to the node client."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from croncat_cli.core.config import load_config
from croncat_cli.core.errors import CronCatError, MissingContractAddress
from croncat_cli.core.models import GET_TASKS, NetworkConfig, QueryMessage
from croncat_cli.core.runner import CommandResult, CommandSpec, run_command

logger = logging.getLogger(__name__)

Runner = Callable[[CommandSpec], CommandResult]

QUERY_SMART = ["query", "wasm", "contract-state", "smart"]


def build_query_command(
    contract: str, message: QueryMessage, config: NetworkConfig
) -> CommandSpec:
    """Return the node client invocation for a smart query against *contract*."""
    args = [*QUERY_SMART, contract, message.to_json(), *config.network_flags()]
    return CommandSpec(binary=config.binary, args=args, cwd=config.cwd)


def dispatch_query(
    contract: str,
    message: QueryMessage,
    config: NetworkConfig,
    runner: Runner = run_command,
) -> CommandResult:
    """Run one smart query. The contract address is passed through unchecked."""
    if not contract:
        raise MissingContractAddress()
    spec = build_query_command(contract, message, config)
    logger.info("Querying %s on %s with %s", contract, config.node, message.to_json())
    return runner(spec)


def _write_raw(stream: TextIO, data: bytes) -> None:
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode(errors="replace"))
    else:
        buffer.write(data)
        buffer.flush()


def forward_output(result: CommandResult) -> None:
    """Write the node client's output to our own streams, byte for byte."""
    if result.stdout:
        _write_raw(sys.stdout, result.stdout)
    if result.stderr:
        _write_raw(sys.stderr, result.stderr)


def run(
    args: Sequence[str],
    config: NetworkConfig | None = None,
    runner: Runner = run_command,
) -> int:
    """Query ``get_tasks`` on the contract named by ``args[0]``.

    Returns the node client's exit status (128 + N if it died from signal N),
    or 1 when no contract address was given (nothing is spawned in that case).
    """
    if not args or not args[0]:
        print(MissingContractAddress())
        return 1

    contract = args[0]
    try:
        if config is None:
            config = load_config()
        result = dispatch_query(contract, GET_TASKS, config, runner=runner)
    except CronCatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    forward_output(result)
    return result.exit_status
