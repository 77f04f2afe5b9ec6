"""Shared pytest fixtures for sinctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the CLI from an empty directory with no sinctl.toml or SINCTL_* env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SINCTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Undo the handler the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("sinctl").setLevel(logging.NOTSET)
