"""Adapters from collaborator notifications to triggers.

The adapters depend only on the small Protocols below, not on the GUI or
race-timing classes that implement them. Handlers run on whichever thread the
collaborator emits from; all state changes go through the engine's lock.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from obs_trigger_bridge.hooks import EventHook
from obs_trigger_bridge.workflow.engine import TriggerEngine
from obs_trigger_bridge.workflow.triggers import (
    TAB_TRIGGERS,
    NavigationTab,
    Trigger,
    grid_trigger,
    scene_trigger,
)

logger = logging.getLogger(__name__)


class Detection(Protocol):
    @property
    def race_sector(self) -> int: ...

    @property
    def timing_system_index(self) -> int: ...


class Lap(Protocol):
    @property
    def detection(self) -> Detection | None: ...


class RaceNotifications(Protocol):
    race_pre_start: EventHook
    race_start: EventHook
    race_resumed: EventHook
    race_end: EventHook
    race_cancelled: EventHook
    lap_detected: EventHook
    split_detected: EventHook


class SceneNotifications(Protocol):
    scene_changed: EventHook


class TabNotifications(Protocol):
    tab_changed: EventHook

    def is_on(self, tab: NavigationTab) -> bool:
        """Whether `tab` is currently shown; several tabs may be on at once."""
        ...


class GridNotifications(Protocol):
    grid_count_changed: EventHook


class EventAdapters:
    """Subscribes to collaborator hooks and feeds the engine."""

    def __init__(
        self,
        engine: TriggerEngine,
        *,
        race: RaceNotifications,
        scenes: SceneNotifications,
        tabs: TabNotifications,
        grid: GridNotifications,
    ) -> None:
        self._engine = engine
        self._race = race
        self._scenes = scenes
        self._tabs = tabs
        self._grid = grid
        self._subscriptions: list[tuple[EventHook, Callable[..., object]]] = []

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    def attach(self) -> None:
        if self._subscriptions:
            return

        self._subscriptions = [
            (self._race.race_pre_start, self.on_race_pre_start),
            (self._race.race_start, self.on_race_start),
            (self._race.race_resumed, self.on_race_start),
            (self._race.race_end, self.on_race_end),
            (self._race.race_cancelled, self.on_race_cancelled),
            (self._race.lap_detected, self.on_lap),
            (self._race.split_detected, self.on_detection),
            (self._scenes.scene_changed, self.on_scene_change),
            (self._tabs.tab_changed, self.on_tab_change),
            (self._grid.grid_count_changed, self.on_grid_count_changed),
        ]
        for hook, handler in self._subscriptions:
            hook.subscribe(handler)
        logger.debug("Adapters attached", extra={"subscriptions": len(self._subscriptions)})

    def detach(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for hook, handler in subscriptions:
            hook.unsubscribe(handler)

    def on_race_pre_start(self, *_args: object) -> None:
        self._engine.trigger(Trigger.CLICK_START_RACE)

    def on_race_start(self, *_args: object) -> None:
        self._engine.reset_sectors(then=Trigger.START_RACE_TONE)

    def on_race_end(self, *_args: object) -> None:
        self._engine.reset_sectors(then=Trigger.RACE_END)

    def on_race_cancelled(self, *_args: object) -> None:
        self._engine.trigger(Trigger.RACE_START_CANCELLED)

    def on_scene_change(self, scene: object) -> None:
        self._engine.trigger(scene_trigger(scene))

    def on_tab_change(self, *_args: object) -> None:
        triggers = [trigger for tab, trigger in TAB_TRIGGERS if self._tabs.is_on(tab)]
        self._engine.trigger_many(triggers)

    def on_grid_count_changed(self, count: int) -> None:
        trigger = grid_trigger(count)
        if trigger is not None:
            self._engine.trigger(trigger)

    def on_lap(self, lap: Lap | None) -> None:
        if lap is not None:
            self.on_detection(lap.detection)

    def on_detection(self, detection: Detection | None) -> None:
        if detection is None:
            return
        self._engine.detect(detection.race_sector, detection.timing_system_index)
