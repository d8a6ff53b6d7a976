"""Shared fixtures: isolate every test from the caller's config and environment."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from croncat_cli.core.config import ENV_VARS


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with no CRONCAT_* variables set."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
