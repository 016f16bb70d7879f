"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, treelayout.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- treelayout.toml sections ---


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    tolerance: float = Field(default=0.0, ge=0.0)
    allow_non_finite: bool = False

