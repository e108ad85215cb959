"""Configuration management.

Loads from an optional TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "WARNING"
    log_format: str = "console"  # "json" or "console"


class CheckConfig(BaseModel):
    # printf-style, receives the checked value's name
    message_template: str = "%s failed check"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level settings.

    Loaded from a TOML config file, overridden by environment variables
    such as ``SIMS_UTIL_OBSERVABILITY__LOG_LEVEL=DEBUG``.
    """

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)

    model_config = {"env_prefix": "SIMS_UTIL_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional, ignored if absent).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Cannot parse config file {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    return Settings(**data)
