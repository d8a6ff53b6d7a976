"""Network configuration loading.

Values are layered, later sources winning:

1. defaults baked into :class:`NetworkConfig` (Juno testnet)
2. a YAML file (``--config`` or ``.croncatrc.yml`` in the working directory)
3. ``CRONCAT_*`` environment variables
4. explicit overrides, normally CLI flags
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from croncat_cli.core.errors import ConfigError
from croncat_cli.core.models import NetworkConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".croncatrc.yml"

ENV_VARS = {
    "CRONCAT_BINARY": "binary",
    "CRONCAT_NODE": "node",
    "CRONCAT_CHAIN_ID": "chain_id",
    "CRONCAT_OUTPUT": "output",
    "CRONCAT_HEIGHT": "height",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return raw


def _from_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for var, key in ENV_VARS.items():
        value = env.get(var)
        if value:
            values[key] = value
    return values


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> NetworkConfig:
    """Build the :class:`NetworkConfig` for one invocation.

    Args:
        path: Explicit YAML file. Must exist when given.
        env: Environment mapping; defaults to ``os.environ``.
        **overrides: Field values that win over everything else. ``None``
            values are ignored.

    Raises:
        ConfigError: the file is missing or malformed, or a value is invalid.
    """
    values: dict[str, Any] = {}

    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.is_file():
        logger.debug("Loading network config from %s", config_path)
        values.update(_read_yaml(config_path))

    values.update(_from_env(os.environ if env is None else env))
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return NetworkConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid network configuration: {exc}") from exc
