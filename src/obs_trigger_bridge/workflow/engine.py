from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable, Sequence

from obs_trigger_bridge.remote.client import RemoteControlClient

from .actions import MappingEntry
from .debounce import DOUBLE_TRIGGER_TIMEOUT_SECONDS, Debouncer
from .dispatcher import UnknownActionError, dispatch
from .triggers import Trigger, detection_trigger

logger = logging.getLogger(__name__)

BEFORE_FIRST_SECTOR = -1


class TriggerEngine:
    """Owns dispatch state and turns triggers into remote commands.

    Every entry point takes the same lock, so triggers raised concurrently by
    race-manager, UI and network callbacks are evaluated one at a time against
    a consistent debounce and sector state.
    """

    def __init__(
        self,
        mappings: Sequence[MappingEntry],
        *,
        clock: Callable[[], float] = time.monotonic,
        debounce_seconds: float = DOUBLE_TRIGGER_TIMEOUT_SECONDS,
    ) -> None:
        self._mappings = tuple(mappings)
        self._lock = threading.RLock()
        self._debouncer = Debouncer(window_seconds=debounce_seconds, clock=clock)
        self._sector_counter = BEFORE_FIRST_SECTOR
        self._client: RemoteControlClient | None = None
        self.active = True

    @property
    def client(self) -> RemoteControlClient | None:
        return self._client

    @client.setter
    def client(self, client: RemoteControlClient | None) -> None:
        with self._lock:
            self._client = client

    @property
    def connected(self) -> bool:
        client = self._client
        return client is not None and client.connected

    @property
    def sector_counter(self) -> int:
        return self._sector_counter

    @property
    def last_trigger(self) -> Trigger | None:
        return self._debouncer.last_trigger

    def trigger(self, trigger: Trigger) -> int:
        """Debounce and dispatch one trigger.

        Returns:
            Number of mapping entries that fired.
        """

        with self._lock:
            return self._trigger_unlocked(trigger)

    def trigger_many(self, triggers: Iterable[Trigger]) -> int:
        with self._lock:
            return sum(self._trigger_unlocked(t) for t in triggers)

    def reset_sectors(self, then: Trigger | None = None) -> int:
        """Forget the sector position, optionally firing `then` in the same step."""

        with self._lock:
            self._sector_counter = BEFORE_FIRST_SECTOR
            if then is None:
                return 0
            return self._trigger_unlocked(then)

    def detect(self, race_sector: int, timing_system_index: int) -> int:
        """Handle a detection; only strictly increasing sectors produce a trigger."""

        with self._lock:
            if race_sector <= self._sector_counter:
                return 0
            self._sector_counter = race_sector
            trigger = detection_trigger(timing_system_index)
            if trigger is None:
                logger.debug(
                    "No detection trigger for timing system",
                    extra={"timing_system_index": timing_system_index},
                )
                return 0
            return self._trigger_unlocked(trigger)

    def _trigger_unlocked(self, trigger: Trigger) -> int:
        client = self._client
        if not self.active or client is None or not client.connected:
            return 0

        if not self._debouncer.allow(trigger):
            logger.debug("Suppressed repeated trigger", extra={"trigger": trigger.value})
            return 0

        try:
            return dispatch(mappings=self._mappings, trigger=trigger, client=client)
        except UnknownActionError:
            logger.exception("Aborted dispatch", extra={"trigger": trigger.value})
            return 0
