"""Tests for the get_tasks query dispatcher."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from croncat_cli.core.dispatcher import build_query_command, dispatch_query, run
from croncat_cli.core.errors import (
    ConfigError,
    MissingContractAddress,
    NodeClientLaunchError,
    NodeClientNotFound,
)
from croncat_cli.core.models import DEFAULT_NODE, GET_TASKS, NetworkConfig, get_agent
from croncat_cli.core.runner import CommandResult, CommandSpec

CONTRACT = "juno1abc...xyz"


class FakeRunner:
    """Records every spec it is handed and replays a canned result."""

    def __init__(self, returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.calls: list[CommandSpec] = []
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __call__(self, spec: CommandSpec) -> CommandResult:
        self.calls.append(spec)
        return CommandResult(
            argv=spec.argv,
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


def test_build_query_command():
    spec = build_query_command(CONTRACT, GET_TASKS, NetworkConfig())

    assert spec.argv == [
        "junod", "query", "wasm", "contract-state", "smart",
        CONTRACT, '{"get_tasks":{}}',
        "--node", DEFAULT_NODE, "--chain-id", "uni-2",
    ]
    assert spec.cwd is None


def test_build_query_command_uses_configured_binary_and_cwd():
    config = NetworkConfig(binary="/opt/junod", cwd="/srv/croncat", chain_id=None)
    spec = build_query_command(CONTRACT, get_agent("juno1agent"), config)

    assert spec.binary == "/opt/junod"
    assert spec.cwd == "/srv/croncat"
    assert spec.args[5] == '{"get_agent":{"account_id":"juno1agent"}}'
    assert spec.args[-2:] == ["--node", DEFAULT_NODE]


def test_dispatch_query_rejects_empty_contract():
    runner = FakeRunner()
    with pytest.raises(MissingContractAddress):
        dispatch_query("", GET_TASKS, NetworkConfig(), runner=runner)
    assert runner.calls == []


def test_run_without_arguments(capsys):
    runner = FakeRunner()

    status = run([], config=NetworkConfig(), runner=runner)

    assert status == 1
    assert capsys.readouterr().out == "Must provide contract address\n"
    assert runner.calls == []


def test_run_with_empty_argument_is_missing(capsys):
    runner = FakeRunner()
    assert run([""], config=NetworkConfig(), runner=runner) == 1
    assert runner.calls == []


def test_run_without_arguments_does_not_load_config(capsys):
    with patch("croncat_cli.core.dispatcher.load_config") as loader:
        assert run([], runner=FakeRunner()) == 1
    loader.assert_not_called()


def test_run_dispatches_exactly_once():
    runner = FakeRunner()

    status = run([CONTRACT], config=NetworkConfig(), runner=runner)

    assert status == 0
    assert len(runner.calls) == 1
    args = runner.calls[0].args
    assert args[:6] == ["query", "wasm", "contract-state", "smart", CONTRACT, '{"get_tasks":{}}']


@pytest.mark.parametrize("contract", ["juno1short", "not-even-an-address", "juno1" + "q" * 58])
def test_query_document_is_constant(contract):
    runner = FakeRunner()
    run([contract, "ignored-extra"], config=NetworkConfig(), runner=runner)

    assert runner.calls[0].args[4] == contract
    assert runner.calls[0].args[5] == '{"get_tasks":{}}'


def test_run_passes_output_through(capsys):
    body = b'{"data":[{"task_hash":"abc","interval":"Once"}]}\n'
    runner = FakeRunner(stdout=body, stderr=b"gas estimate skipped\n")

    status = run([CONTRACT], config=NetworkConfig(), runner=runner)

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == body.decode()
    assert captured.err == "gas estimate skipped\n"


def test_run_propagates_nonzero_status(capsys):
    runner = FakeRunner(returncode=2, stderr=b"Error: post failed: connection refused\n")

    status = run([CONTRACT], config=NetworkConfig(), runner=runner)

    assert status == 2
    assert capsys.readouterr().err == "Error: post failed: connection refused\n"


def test_run_loads_config_when_not_given():
    config = NetworkConfig(node="http://localhost:26657")
    runner = FakeRunner()

    with patch("croncat_cli.core.dispatcher.load_config", return_value=config) as loader:
        run([CONTRACT], runner=runner)

    loader.assert_called_once_with()
    assert "http://localhost:26657" in runner.calls[0].args


def test_run_reports_missing_node_client(capsys):
    def missing(spec: CommandSpec) -> CommandResult:
        raise NodeClientNotFound(spec.binary)

    status = run([CONTRACT], config=NetworkConfig(), runner=missing)

    assert status == 127
    assert "node client 'junod' not found" in capsys.readouterr().err


def test_run_reports_unlaunchable_node_client(capsys):
    def denied(spec: CommandSpec) -> CommandResult:
        raise NodeClientLaunchError(spec.binary, "is not executable")

    status = run([CONTRACT], config=NetworkConfig(), runner=denied)

    assert status == 126
    assert "node client 'junod' is not executable" in capsys.readouterr().err


def test_run_reports_bad_working_directory(capsys):
    def bad_cwd(spec: CommandSpec) -> CommandResult:
        raise ConfigError("Working directory /srv/gone is not usable: No such file or directory")

    status = run([CONTRACT], config=NetworkConfig(cwd="/srv/gone"), runner=bad_cwd)

    assert status == 1
    assert "/srv/gone" in capsys.readouterr().err


def test_run_maps_signal_death_to_shell_status():
    assert run([CONTRACT], config=NetworkConfig(), runner=FakeRunner(returncode=-9)) == 137


def test_run_forwards_bytes_unchanged(capsysbinary):
    body = b"a\r\nb\r\n\xff\xfe"
    runner = FakeRunner(stdout=body, stderr=b"\x80 warn\r\n")

    assert run([CONTRACT], config=NetworkConfig(), runner=runner) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == body
    assert captured.err == b"\x80 warn\r\n"
