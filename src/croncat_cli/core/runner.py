"""Subprocess wrapper used to invoke the node client."""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass, field

from croncat_cli.core.errors import ConfigError, NodeClientLaunchError, NodeClientNotFound

logger = logging.getLogger(__name__)


@dataclass
class CommandSpec:
    """What to run: an executable, its arguments and where to run it."""

    binary: str
    args: list[str] = field(default_factory=list)
    cwd: str | None = None

    @property
    def argv(self) -> list[str]:
        return [self.binary, *self.args]


@dataclass
class CommandResult:
    """Captured outcome of a finished process. Output is kept as raw bytes."""

    argv: list[str]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def exit_status(self) -> int:
        """Return code as a shell reports it: death by signal N becomes 128 + N."""
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode


def _launch_error(spec: CommandSpec, exc: OSError) -> Exception:
    if spec.cwd is not None and exc.filename == spec.cwd:
        return ConfigError(f"Working directory {spec.cwd} is not usable: {exc.strerror}")
    if isinstance(exc, FileNotFoundError):
        return NodeClientNotFound(spec.binary)
    if isinstance(exc, PermissionError):
        return NodeClientLaunchError(spec.binary, "is not executable")
    return NodeClientLaunchError(spec.binary, f"cannot be executed: {exc.strerror}")


def run_command(spec: CommandSpec) -> CommandResult:
    """Run *spec* to completion and capture its output byte for byte.

    The child is always reaped before this returns or raises. If waiting is
    interrupted the child is killed first. No timeout is applied.

    Raises:
        NodeClientNotFound: the executable could not be found.
        NodeClientLaunchError: the executable could not be run.
        ConfigError: the working directory does not exist or cannot be entered.
    """
    argv = spec.argv
    logger.debug("Running: %s", shlex.join(argv))
    try:
        proc = subprocess.Popen(
            argv,
            cwd=spec.cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        raise _launch_error(spec, exc) from exc

    with proc:
        try:
            stdout, stderr = proc.communicate()
        except BaseException:
            proc.kill()
            raise

    logger.debug("%s exited with status %d", spec.binary, proc.returncode)
    return CommandResult(
        argv=argv,
        returncode=proc.returncode,
        stdout=stdout or b"",
        stderr=stderr or b"",
    )
