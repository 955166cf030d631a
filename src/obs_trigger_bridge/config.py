"""Settings for running the bridge outside an embedding application.

The trigger engine itself takes no settings; these drive the CLI (logging and
where profile directories live).

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BridgeSettings(BaseSettings):
    """Settings for the bridge CLI.

    Environment variables:
    - LOG_LEVEL                 (optional)
    - OBS_BRIDGE_LOG_JSON       (optional)
    - OBS_BRIDGE_PROFILES_PATH  (optional)
    - OBS_BRIDGE_PROFILE        (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `BridgeSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="OBS_BRIDGE_LOG_JSON",
        description="Emit JSON log lines instead of plain text",
    )

    profiles_path: Path = Field(
        default=Path("profiles"),
        validation_alias="OBS_BRIDGE_PROFILES_PATH",
        description="Directory containing one sub-directory per user profile",
    )
    default_profile: str = Field(
        default="default",
        validation_alias="OBS_BRIDGE_PROFILE",
        description="Profile used when none is given on the command line",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    def profile_dir(self, name: str | None = None) -> Path:
        """Directory holding the files of profile `name` (or the default profile)."""

        return self.profiles_path / (name or self.default_profile)
