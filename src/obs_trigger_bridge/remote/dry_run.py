"""Remote-control client that records commands instead of sending them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from obs_trigger_bridge.remote.client import RemoteControlClient
from obs_trigger_bridge.workflow.actions import KeyModifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemoteCommand:
    name: str
    args: tuple[object, ...]


class DryRunRemoteControl(RemoteControlClient):
    """Accepts every command and keeps them in `commands`.

    `connect()` succeeds immediately and reports activity, so the dispatch path
    can be exercised without a running production tool.
    """

    def __init__(self) -> None:
        super().__init__()
        self.commands: list[RemoteCommand] = []
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def connect(self, host: str, port: int, credential: str) -> None:
        logger.info("Dry-run connect", extra={"host": host, "port": port})
        self._connected = True
        self._notify_activity(True)

    def set_scene(self, name: str) -> None:
        self._record("set_scene", name)

    def set_source_filter_enabled(self, source: str, filter_name: str, enabled: bool) -> None:
        self._record("set_source_filter_enabled", source, filter_name, enabled)

    def trigger_hotkey_sequence(self, key: str, modifiers: KeyModifier) -> None:
        self._record("trigger_hotkey_sequence", key, modifiers)

    def trigger_hotkey_action(self, name: str) -> None:
        self._record("trigger_hotkey_action", name)

    def close(self) -> None:
        if self._connected:
            self._connected = False
            self._notify_activity(False)

    def _record(self, name: str, *args: object) -> None:
        logger.debug("Dry-run command", extra={"command": name})
        self.commands.append(RemoteCommand(name=name, args=args))
