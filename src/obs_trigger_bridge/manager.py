"""Remote-control manager: wires collaborators, engine and client together."""

import logging
import time
from collections.abc import Callable
from pathlib import Path
from types import TracebackType

from obs_trigger_bridge.adapters import (
    EventAdapters,
    GridNotifications,
    RaceNotifications,
    SceneNotifications,
    TabNotifications,
)
from obs_trigger_bridge.hooks import EventHook
from obs_trigger_bridge.remote.client import RemoteControlClient
from obs_trigger_bridge.remote_config import RemoteControlConfig
from obs_trigger_bridge.workflow.engine import TriggerEngine
from obs_trigger_bridge.workflow.triggers import Trigger

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], RemoteControlClient]


class RemoteControlManager:
    """Drives a production-control tool from race and UI events.

    The configuration is loaded once from the profile directory. When it is
    enabled, the manager subscribes to the collaborators, creates a client and
    starts connecting; otherwise it stays inert.
    """

    def __init__(
        self,
        profile: Path,
        *,
        race: RaceNotifications,
        scenes: SceneNotifications,
        tabs: TabNotifications,
        grid: GridNotifications,
        client_factory: ClientFactory,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the manager.

        Args:
            profile: Directory holding the profile's configuration files.
            race: Race lifecycle and lap/split detection notifications.
            scenes: Scene manager notifications.
            tabs: Tab container notifications and current tab state.
            grid: Channel grid layout notifications.
            client_factory: Creates the remote-control client when enabled.
            clock: Monotonic clock used for debouncing.
        """
        self.config = RemoteControlConfig.load(profile)
        self.activity: EventHook[[bool]] = EventHook()

        self._engine = TriggerEngine(self.config.mappings, clock=clock)
        self._adapters = EventAdapters(self._engine, race=race, scenes=scenes, tabs=tabs, grid=grid)
        self._client: RemoteControlClient | None = None

        if not self.config.enabled:
            logger.info("Remote control disabled for profile", extra={"profile": str(profile)})
            return

        self._adapters.attach()

        client = client_factory()
        client.activity.subscribe(self._on_client_activity)
        self._client = client
        self._engine.client = client

        logger.info(
            "Connecting remote control",
            extra={
                "host": self.config.host,
                "port": self.config.port,
                "mappings": len(self.config.mappings),
            },
        )
        client.connect(self.config.host, self.config.port, self.config.credential)

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @property
    def connected(self) -> bool:
        return self._engine.connected

    @property
    def active(self) -> bool:
        return self._engine.active

    @active.setter
    def active(self, value: bool) -> None:
        self._engine.active = value

    @property
    def engine(self) -> TriggerEngine:
        return self._engine

    def trigger(self, trigger: Trigger) -> int:
        """Fire a trigger through the same debounce and dispatch path as events."""
        return self._engine.trigger(trigger)

    def close(self) -> None:
        """Unsubscribe from every collaborator and release the client."""
        self._adapters.detach()

        client, self._client = self._client, None
        if client is None:
            return
        self._engine.client = None
        # The client may report a final activity(False) while closing.
        try:
            client.close()
        finally:
            client.activity.unsubscribe(self._on_client_activity)
        logger.info("Remote control closed")

    def __enter__(self) -> "RemoteControlManager":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _on_client_activity(self, success: bool) -> None:
        logger.debug("Remote control activity", extra={"success": success})
        self.activity.emit(success)
