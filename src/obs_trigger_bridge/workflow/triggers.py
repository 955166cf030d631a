from __future__ import annotations

from enum import Enum


class Trigger(str, Enum):
    """Closed vocabulary of signals a mapping entry can react to.

    Values are the names persisted in profile configuration files.
    """

    # Race lifecycle
    CLICK_START_RACE = "click_start_race"
    START_RACE_TONE = "start_race_tone"
    RACE_END = "race_end"
    TIMES_UP = "times_up"
    RACE_START_CANCELLED = "race_start_cancelled"

    # Scene state
    PRE_RACE_SCENE = "pre_race_scene"
    POST_RACE_SCENE = "post_race_scene"
    LIVE_SCENE = "live_scene"

    # Navigation tabs
    LIVE_TAB = "live_tab"
    ROUNDS_TAB = "rounds_tab"
    REPLAY_TAB = "replay_tab"
    LAP_RECORDS_TAB = "lap_records_tab"
    LAP_COUNT_TAB = "lap_count_tab"
    POINTS_TAB = "points_tab"
    CHANNEL_LIST_TAB = "channel_list_tab"
    RSSI_TAB = "rssi_tab"
    PHOTO_BOOTH_TAB = "photo_booth_tab"
    PATREONS_TAB = "patreons_tab"

    # Layout grid size
    CHANNEL_GRID_1 = "channel_grid_1"
    CHANNEL_GRID_2 = "channel_grid_2"
    CHANNEL_GRID_3 = "channel_grid_3"
    CHANNEL_GRID_4 = "channel_grid_4"
    CHANNEL_GRID_5 = "channel_grid_5"
    CHANNEL_GRID_6 = "channel_grid_6"
    CHANNEL_GRID_7 = "channel_grid_7"
    CHANNEL_GRID_8 = "channel_grid_8"

    EDIT_LAPS = "edit_laps"

    # Lap / sector detection, one per timing system
    LAP_DETECTION = "lap_detection"
    SECTOR_1_DETECTION = "sector_1_detection"
    SECTOR_2_DETECTION = "sector_2_detection"
    SECTOR_3_DETECTION = "sector_3_detection"
    SECTOR_4_DETECTION = "sector_4_detection"
    SECTOR_5_DETECTION = "sector_5_detection"
    SECTOR_6_DETECTION = "sector_6_detection"
    SECTOR_7_DETECTION = "sector_7_detection"
    SECTOR_8_DETECTION = "sector_8_detection"
    SECTOR_9_DETECTION = "sector_9_detection"
    SECTOR_10_DETECTION = "sector_10_detection"


class NavigationTab(str, Enum):
    LIVE = "live"
    ROUNDS = "rounds"
    REPLAY = "replay"
    LAP_RECORDS = "lap_records"
    LAP_COUNT = "lap_count"
    POINTS = "points"
    CHANNEL_LIST = "channel_list"
    RSSI = "rssi"
    PHOTO_BOOTH = "photo_booth"
    PATREONS = "patreons"


class SceneState(str, Enum):
    """Scene values with a dedicated trigger; anything else counts as live."""

    PRE_RACE = "pre_race"
    RACE_RESULTS = "race_results"


# Ordered: a tab change notification fires tab triggers in this order.
TAB_TRIGGERS: tuple[tuple[NavigationTab, Trigger], ...] = (
    (NavigationTab.LIVE, Trigger.LIVE_TAB),
    (NavigationTab.ROUNDS, Trigger.ROUNDS_TAB),
    (NavigationTab.CHANNEL_LIST, Trigger.CHANNEL_LIST_TAB),
    (NavigationTab.LAP_RECORDS, Trigger.LAP_RECORDS_TAB),
    (NavigationTab.LAP_COUNT, Trigger.LAP_COUNT_TAB),
    (NavigationTab.RSSI, Trigger.RSSI_TAB),
    (NavigationTab.PHOTO_BOOTH, Trigger.PHOTO_BOOTH_TAB),
    (NavigationTab.PATREONS, Trigger.PATREONS_TAB),
    (NavigationTab.POINTS, Trigger.POINTS_TAB),
    (NavigationTab.REPLAY, Trigger.REPLAY_TAB),
)

SCENE_TRIGGERS: dict[SceneState, Trigger] = {
    SceneState.PRE_RACE: Trigger.PRE_RACE_SCENE,
    SceneState.RACE_RESULTS: Trigger.POST_RACE_SCENE,
}

# CHANNEL_GRIDS[n - 1] is the trigger for a grid showing n channels.
CHANNEL_GRIDS: tuple[Trigger, ...] = (
    Trigger.CHANNEL_GRID_1,
    Trigger.CHANNEL_GRID_2,
    Trigger.CHANNEL_GRID_3,
    Trigger.CHANNEL_GRID_4,
    Trigger.CHANNEL_GRID_5,
    Trigger.CHANNEL_GRID_6,
    Trigger.CHANNEL_GRID_7,
    Trigger.CHANNEL_GRID_8,
)

# Indexed by timing-system index: 0 is the lap line, 1..10 are sector slots.
DETECTION_TRIGGERS: tuple[Trigger, ...] = (
    Trigger.LAP_DETECTION,
    Trigger.SECTOR_1_DETECTION,
    Trigger.SECTOR_2_DETECTION,
    Trigger.SECTOR_3_DETECTION,
    Trigger.SECTOR_4_DETECTION,
    Trigger.SECTOR_5_DETECTION,
    Trigger.SECTOR_6_DETECTION,
    Trigger.SECTOR_7_DETECTION,
    Trigger.SECTOR_8_DETECTION,
    Trigger.SECTOR_9_DETECTION,
    Trigger.SECTOR_10_DETECTION,
)


def scene_trigger(scene: object) -> Trigger:
    for state, trigger in SCENE_TRIGGERS.items():
        if scene == state:
            return trigger
    return Trigger.LIVE_SCENE


def grid_trigger(count: int) -> Trigger | None:
    index = count - 1
    if 0 <= index < len(CHANNEL_GRIDS):
        return CHANNEL_GRIDS[index]
    return None


def detection_trigger(timing_system_index: int) -> Trigger | None:
    if 0 <= timing_system_index < len(DETECTION_TRIGGERS):
        return DETECTION_TRIGGERS[timing_system_index]
    return None
