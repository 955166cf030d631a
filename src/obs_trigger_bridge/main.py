"""CLI entrypoint for inspecting and rehearsing profile configurations.

The embedding application drives the bridge through `RemoteControlManager`;
this CLI only helps operators check what a profile would do.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from obs_trigger_bridge import __version__
from obs_trigger_bridge.config import BridgeSettings
from obs_trigger_bridge.logging import configure_logging
from obs_trigger_bridge.remote.dry_run import DryRunRemoteControl
from obs_trigger_bridge.remote_config import RemoteControlConfig
from obs_trigger_bridge.workflow.engine import TriggerEngine
from obs_trigger_bridge.workflow.triggers import Trigger

logger = logging.getLogger(__name__)


def _parse_trigger(value: str) -> Trigger:
    try:
        return Trigger(value.strip().lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown trigger: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obs-trigger-bridge",
        description="Race timing to OBS remote-control trigger bridge",
    )
    parser.add_argument("--version", action="version", version=f"obs-trigger-bridge {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("triggers", help="List the trigger vocabulary")

    show_config = subparsers.add_parser(
        "show-config",
        help="Load (and normalize) a profile configuration and print its mappings",
    )
    show_config.add_argument(
        "--profile",
        default=None,
        help="Profile name under OBS_BRIDGE_PROFILES_PATH (defaults to OBS_BRIDGE_PROFILE)",
    )

    fire = subparsers.add_parser(
        "fire",
        help="Replay triggers against a profile using a dry-run client and print the commands",
    )
    fire.add_argument("--profile", default=None, help="Profile name")
    fire.add_argument(
        "triggers",
        nargs="+",
        type=_parse_trigger,
        help="Trigger names in firing order, e.g. 'race_end live_tab'",
    )

    return parser


def _cmd_triggers() -> int:
    for trigger in Trigger:
        print(trigger.value)
    return 0


def _cmd_show_config(settings: BridgeSettings, profile: str | None) -> int:
    path = settings.profile_dir(profile)
    config = RemoteControlConfig.load(path)

    print(f"profile:  {path}")
    print(f"enabled:  {config.enabled}")
    print(f"endpoint: {config.host}:{config.port}")
    print(f"mappings: {len(config.mappings)}")
    for entry in config.mappings:
        print(f"  {entry}")
    return 0


def _cmd_fire(settings: BridgeSettings, profile: str | None, triggers: list[Trigger]) -> int:
    config = RemoteControlConfig.load(settings.profile_dir(profile))

    client = DryRunRemoteControl()
    engine = TriggerEngine(config.mappings)
    engine.client = client
    client.connect(config.host, config.port, config.credential)

    for trigger in triggers:
        fired = engine.trigger(trigger)
        logger.debug("Fired trigger", extra={"trigger": trigger.value, "matched": fired})

    for command in client.commands:
        args = ", ".join(repr(a) for a in command.args)
        print(f"{command.name}({args})")
    client.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = BridgeSettings()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, json_output=settings.log_json)

    if args.command == "triggers":
        return _cmd_triggers()
    if args.command == "show-config":
        return _cmd_show_config(settings, args.profile)
    if args.command == "fire":
        return _cmd_fire(settings, args.profile, args.triggers)

    parser.error(f"Unknown command: {args.command}")
    return 2
