"""Tests for AppContext service selection."""

from __future__ import annotations

from pathlib import Path

import pytest

from sinctl.commands._context import AppContext
from sinctl.config.settings import SinSettings


@pytest.mark.usefixtures("_isolated_cwd")
class TestServiceFor:
    def test_default_is_shared(self) -> None:
        app = AppContext(SinSettings.from_cli())
        assert app.service_for() is app.service
        assert app.service.fail_fast is False

    def test_flag_returns_fail_fast_service(self) -> None:
        app = AppContext(SinSettings.from_cli())
        svc = app.service_for(fail_fast=True)
        assert svc is not app.service
        assert svc.fail_fast is True

    def test_configured_fail_fast_is_reused(self, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "sinctl.toml").write_text("[batch]\nfail_fast = true\n")
        app = AppContext(SinSettings.from_cli())
        assert app.service_for(fail_fast=True) is app.service
