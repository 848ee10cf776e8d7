"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cubicweight.toml only contains
overrides. No config file is needed for a normal run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cubicweight import __version__

# --- cubicweight.toml sections ---


class ApiConfig(BaseModel):
    """[api] section.

    ``timeout_seconds`` is unset by default: a hung connection blocks
    until the process is terminated.
    """

    model_config = {"frozen": True}

    timeout_seconds: float | None = Field(default=None, gt=0)
    follow_redirects: bool = True
    user_agent: str = f"cubicweight/{__version__}"


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    decimal_places: int = Field(default=4, ge=0, le=12)
    unit: str = "kg"
