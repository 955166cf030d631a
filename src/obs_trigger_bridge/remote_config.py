"""Per-profile remote-control configuration.

Each profile directory holds one `OBSRemoteControl.json` file: a JSON list whose
first record is the active configuration. Loading never fails; anything that
cannot be read is replaced by defaults on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from obs_trigger_bridge.workflow.actions import MappingEntry

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "OBSRemoteControl.json"


class RemoteControlConfig(BaseModel):
    """Connection parameters plus the ordered trigger -> action mapping table."""

    enabled: bool = Field(default=False)
    host: str = Field(default="localhost", description="Production tool host")
    port: int = Field(default=4455, ge=0, le=65535)
    credential: str = Field(default="", description="Control channel password")
    mappings: list[MappingEntry] = Field(default_factory=list)

    @staticmethod
    def path_for(profile: Path) -> Path:
        return profile / CONFIG_FILENAME

    @classmethod
    def load(cls, profile: Path) -> RemoteControlConfig:
        """Load the profile's configuration, falling back to defaults.

        A successful load is written straight back so the file on disk is in
        normalized form. Failures write fresh defaults.
        """

        path = cls.path_for(profile)
        config = cls._read(path)
        if config is None:
            logger.warning(
                "Remote-control config missing or unreadable; using defaults",
                extra={"path": str(path)},
            )
            config = cls()
        try:
            cls.write(profile, config)
        except OSError:
            logger.exception(
                "Failed to write remote-control config", extra={"path": str(path)}
            )
        return config

    @classmethod
    def _read(cls, path: Path) -> RemoteControlConfig | None:
        if not path.exists():
            return None

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return None

        if isinstance(raw, dict):
            raw = [raw]
        if not isinstance(raw, list) or not raw:
            return None

        try:
            return cls.model_validate(raw[0])
        except ValidationError as e:
            logger.warning(
                "Remote-control config failed validation",
                extra={"path": str(path), "errors": e.error_count()},
            )
            return None

    @classmethod
    def write(cls, profile: Path, config: RemoteControlConfig) -> None:
        path = cls.path_for(profile)
        payload = [config.model_dump(mode="json")]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def __str__(self) -> str:
        return "OBS Remote Control Config"
