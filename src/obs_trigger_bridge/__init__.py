"""OBS Trigger Bridge.

Translates race lifecycle, UI navigation, layout and lap/sector detection
events into a closed set of triggers, and turns each trigger into the remote
commands (scene switch, filter toggle, hotkey) mapped to it in the profile's
configuration.
"""

__version__ = "0.1.0"

from obs_trigger_bridge.manager import RemoteControlManager
from obs_trigger_bridge.remote_config import RemoteControlConfig
from obs_trigger_bridge.workflow.triggers import Trigger

__all__ = ["__version__", "RemoteControlConfig", "RemoteControlManager", "Trigger"]
