"""Test configuration and fixtures."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from obs_trigger_bridge.hooks import EventHook
from obs_trigger_bridge.remote.dry_run import DryRunRemoteControl
from obs_trigger_bridge.remote_config import CONFIG_FILENAME
from obs_trigger_bridge.workflow.triggers import NavigationTab


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass(frozen=True)
class FakeDetection:
    race_sector: int
    timing_system_index: int = 0


@dataclass(frozen=True)
class FakeLap:
    detection: FakeDetection | None


@dataclass
class FakeRaceManager:
    race_pre_start: EventHook = field(default_factory=EventHook)
    race_start: EventHook = field(default_factory=EventHook)
    race_resumed: EventHook = field(default_factory=EventHook)
    race_end: EventHook = field(default_factory=EventHook)
    race_cancelled: EventHook = field(default_factory=EventHook)
    lap_detected: EventHook = field(default_factory=EventHook)
    split_detected: EventHook = field(default_factory=EventHook)

    def hooks(self) -> list[EventHook]:
        return [
            self.race_pre_start,
            self.race_start,
            self.race_resumed,
            self.race_end,
            self.race_cancelled,
            self.lap_detected,
            self.split_detected,
        ]


@dataclass
class FakeSceneManager:
    scene_changed: EventHook = field(default_factory=EventHook)


@dataclass
class FakeTabContainer:
    tab_changed: EventHook = field(default_factory=EventHook)
    current: set[NavigationTab] = field(default_factory=set)

    def is_on(self, tab: NavigationTab) -> bool:
        return tab in self.current


@dataclass
class FakeChannelGrid:
    grid_count_changed: EventHook = field(default_factory=EventHook)


@dataclass
class Collaborators:
    race: FakeRaceManager = field(default_factory=FakeRaceManager)
    scenes: FakeSceneManager = field(default_factory=FakeSceneManager)
    tabs: FakeTabContainer = field(default_factory=FakeTabContainer)
    grid: FakeChannelGrid = field(default_factory=FakeChannelGrid)

    def all_hooks(self) -> list[EventHook]:
        return [
            *self.race.hooks(),
            self.scenes.scene_changed,
            self.tabs.tab_changed,
            self.grid.grid_count_changed,
        ]


@pytest.fixture
def clock() -> FakeClock:
    """Provide a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def collaborators() -> Collaborators:
    """Provide fake race, scene, tab and grid notification sources."""
    return Collaborators()


@pytest.fixture
def client() -> DryRunRemoteControl:
    """Provide a connected dry-run client."""
    c = DryRunRemoteControl()
    c.connect("localhost", 4455, "")
    return c


@pytest.fixture
def profile_dir(tmp_path: Path) -> Path:
    """Provide an empty profile directory."""
    path = tmp_path / "profiles" / "default"
    path.mkdir(parents=True)
    return path


def write_profile_config(profile: Path, record: Any) -> Path:
    """Write a raw configuration payload (a list of records) to a profile."""
    path = profile / CONFIG_FILENAME
    path.write_text(json.dumps(record), encoding="utf-8")
    return path
