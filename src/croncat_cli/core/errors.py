"""Exceptions raised by the core layer and mapped to exit codes by the CLI."""

from __future__ import annotations


class CronCatError(Exception):
    """Base class for locally detected failures."""

    exit_code = 1


class MissingContractAddress(CronCatError):
    def __init__(self) -> None:
        super().__init__("Must provide contract address")


class MissingAccountId(CronCatError):
    def __init__(self) -> None:
        super().__init__("Must provide agent account id")


class ConfigError(CronCatError):
    """Network configuration could not be loaded."""


class NodeClientLaunchError(CronCatError):
    """The node client exists but could not be executed."""

    exit_code = 126

    def __init__(self, binary: str, reason: str = "cannot be executed") -> None:
        super().__init__(f"node client '{binary}' {reason}")
        self.binary = binary


class NodeClientNotFound(NodeClientLaunchError):
    """The node client binary could not be found."""

    exit_code = 127

    def __init__(self, binary: str) -> None:
        super().__init__(binary, "not found")
