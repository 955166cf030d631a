"""Remote-control package initialization."""

from obs_trigger_bridge.remote.client import RemoteControlClient
from obs_trigger_bridge.remote.dry_run import DryRunRemoteControl, RemoteCommand

__all__ = [
    "DryRunRemoteControl",
    "RemoteCommand",
    "RemoteControlClient",
]
