"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, sinctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)


class BatchConfig(BaseModel):
    """[batch] section — multi-token validation."""

    model_config = {"frozen": True}

    fail_fast: bool = False
