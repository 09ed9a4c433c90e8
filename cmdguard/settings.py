# cmdguard/settings.py
from __future__ import annotations

import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

log = logging.getLogger(__name__)


class GuardSettings(BaseSettings):
    # --- Guard ---
    ENABLED: bool = Field(default=True, description="When false the hook always allows")

    # --- Logging ---
    # Quiet by default: a normal hook run writes nothing to stderr.
    LOG_LEVEL: str = Field(default="WARNING")
    LOG_JSON: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="CMDGUARD_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


def load_settings() -> GuardSettings:
    """Read settings from the environment and .env, falling back to defaults on any bad source."""
    try:
        return GuardSettings()
    except ValidationError as exc:
        log.warning(
            "invalid cmdguard settings, using defaults",
            extra={"errors": [str(err.get("loc")) for err in exc.errors()]},
        )
    except (SettingsError, UnicodeDecodeError, OSError) as exc:
        log.warning("unreadable cmdguard settings, using defaults", extra={"error": str(exc)})
    return GuardSettings.model_construct()


__all__ = ["GuardSettings", "load_settings"]
