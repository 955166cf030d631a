from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from functools import partial

from obs_trigger_bridge.remote.client import RemoteControlClient

from .actions import (
    HotkeyActionAction,
    HotkeySequenceAction,
    MappingEntry,
    SetSceneAction,
    ToggleSourceFilterAction,
)
from .triggers import Trigger

logger = logging.getLogger(__name__)


class UnknownActionError(TypeError):
    """Raised when a mapping entry carries an action outside the closed set.

    Only reachable when persisted data bypassed validation (tampered or
    version-skewed files).
    """

    def __init__(self, entry: MappingEntry) -> None:
        self.entry = entry
        super().__init__(
            f"Unsupported action {type(entry.action).__name__!r} for trigger {entry.trigger!r}"
        )


def execute_action(client: RemoteControlClient, entry: MappingEntry) -> None:
    """Issue the remote command for one entry.

    A client call that raises is logged, not propagated.

    Raises:
        UnknownActionError: If the entry's action is outside the closed set.
    """

    action = entry.action
    command: Callable[[], None]
    if isinstance(action, SetSceneAction):
        command = partial(client.set_scene, action.scene_name)
    elif isinstance(action, ToggleSourceFilterAction):
        command = partial(
            client.set_source_filter_enabled, action.source_name, action.filter_name, action.enable
        )
    elif isinstance(action, HotkeySequenceAction):
        command = partial(client.trigger_hotkey_sequence, action.hotkey, action.modifier_set)
    elif isinstance(action, HotkeyActionAction):
        command = partial(client.trigger_hotkey_action, action.action_name)
    else:
        raise UnknownActionError(entry)

    extra = {"trigger": entry.trigger.value, "action": action.kind}
    logger.info("Dispatching %s", entry, extra=extra)
    try:
        command()
    except Exception:
        logger.exception("Remote-control call failed", extra=extra)


def dispatch(
    *, mappings: Sequence[MappingEntry], trigger: Trigger, client: RemoteControlClient
) -> int:
    """Issue the remote command of every entry mapped to `trigger`.

    Entries fire in list order. A client call that raises is logged and the
    next entry still fires.

    Returns:
        Number of entries that matched `trigger`.

    Raises:
        UnknownActionError: If a matching entry has an unsupported action.
            Entries after it are not executed.
    """

    matched = 0
    for entry in mappings:
        if entry.trigger != trigger:
            continue
        matched += 1
        execute_action(client, entry)
    return matched
