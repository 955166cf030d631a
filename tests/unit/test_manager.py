"""Unit tests for the remote-control manager lifecycle."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

from conftest import Collaborators, FakeClock, write_profile_config

from obs_trigger_bridge.manager import RemoteControlManager
from obs_trigger_bridge.remote.dry_run import DryRunRemoteControl, RemoteCommand
from obs_trigger_bridge.workflow.triggers import Trigger

ENABLED_RECORD = {
    "enabled": True,
    "host": "obs.local",
    "port": 4455,
    "credential": "pw",
    "mappings": [
        {"trigger": "race_end", "action": {"kind": "set_scene", "scene_name": "Results"}},
        {"trigger": "race_end", "action": {"kind": "hotkey_action", "action_name": "SaveReplay"}},
        {"trigger": "times_up", "action": {"kind": "set_scene", "scene_name": "Times Up"}},
    ],
}


def _manager(
    profile: Path,
    collaborators: Collaborators,
    clock: FakeClock,
    client: DryRunRemoteControl | None = None,
) -> tuple[RemoteControlManager, Mock]:
    factory = Mock(return_value=client or DryRunRemoteControl())
    manager = RemoteControlManager(
        profile,
        race=collaborators.race,
        scenes=collaborators.scenes,
        tabs=collaborators.tabs,
        grid=collaborators.grid,
        client_factory=factory,
        clock=clock,
    )
    return manager, factory


def test_disabled_profile_stays_inert(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    manager, factory = _manager(profile_dir, collaborators, clock)

    assert manager.enabled is False
    assert manager.connected is False
    assert manager.active is True
    factory.assert_not_called()
    assert all(len(hook) == 0 for hook in collaborators.all_hooks())
    assert manager.trigger(Trigger.RACE_END) == 0

    manager.close()
    manager.close()


def test_enabled_profile_connects_and_dispatches(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    write_profile_config(profile_dir, [ENABLED_RECORD])
    client = DryRunRemoteControl()
    client.connect = Mock(wraps=client.connect)  # type: ignore[method-assign]

    manager, factory = _manager(profile_dir, collaborators, clock, client)

    factory.assert_called_once_with()
    client.connect.assert_called_once_with("obs.local", 4455, "pw")
    assert manager.enabled and manager.connected

    collaborators.race.race_end.emit(object())

    assert client.commands == [
        RemoteCommand("set_scene", ("Results",)),
        RemoteCommand("trigger_hotkey_action", ("SaveReplay",)),
    ]


def test_manual_trigger_uses_dispatch_path(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    write_profile_config(profile_dir, [ENABLED_RECORD])
    client = DryRunRemoteControl()
    manager, _ = _manager(profile_dir, collaborators, clock, client)

    assert manager.trigger(Trigger.TIMES_UP) == 1
    assert manager.trigger(Trigger.TIMES_UP) == 0

    manager.active = False
    clock.advance(10)
    assert manager.trigger(Trigger.TIMES_UP) == 0
    assert client.commands == [RemoteCommand("set_scene", ("Times Up",))]


def test_activity_is_rebroadcast(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    write_profile_config(profile_dir, [ENABLED_RECORD])
    client = DryRunRemoteControl()
    manager, _ = _manager(profile_dir, collaborators, clock, client)
    seen: list[bool] = []
    manager.activity.subscribe(seen.append)

    client.activity.emit(False)
    client.activity.emit(True)

    assert seen == [False, True]


def test_connection_loss_makes_dispatch_a_noop(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    write_profile_config(profile_dir, [ENABLED_RECORD])
    client = DryRunRemoteControl()
    manager, _ = _manager(profile_dir, collaborators, clock, client)
    seen: list[bool] = []
    manager.activity.subscribe(seen.append)

    client.close()

    assert seen == [False]
    assert manager.connected is False
    assert manager.trigger(Trigger.RACE_END) == 0


def test_close_releases_everything_once(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    write_profile_config(profile_dir, [ENABLED_RECORD])
    client = DryRunRemoteControl()
    client.close = Mock(wraps=client.close)  # type: ignore[method-assign]

    with _manager(profile_dir, collaborators, clock, client)[0] as manager:
        assert all(len(hook) >= 1 for hook in collaborators.all_hooks())

    manager.close()

    client.close.assert_called_once_with()
    assert len(client.activity) == 0
    assert all(len(hook) == 0 for hook in collaborators.all_hooks())
    assert manager.connected is False


def test_close_reports_final_disconnect_to_observers(
    profile_dir: Path, collaborators: Collaborators, clock: FakeClock
) -> None:
    write_profile_config(profile_dir, [ENABLED_RECORD])
    manager, _ = _manager(profile_dir, collaborators, clock)
    seen: list[bool] = []
    manager.activity.subscribe(seen.append)

    manager.close()
    manager.close()

    assert seen == [False]
    assert manager.connected is False
