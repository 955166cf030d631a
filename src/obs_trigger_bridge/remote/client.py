"""Abstract base class for remote-control clients."""

from abc import ABC, abstractmethod

from obs_trigger_bridge.hooks import EventHook
from obs_trigger_bridge.workflow.actions import KeyModifier


class RemoteControlClient(ABC):
    """Abstract base class for production-control clients.

    This interface allows pluggable transports (an OBS websocket client, a
    dry-run client, test doubles). Command methods are fire-and-forget:
    failures are reported through `activity`, not return values.
    """

    def __init__(self) -> None:
        self.activity: EventHook[[bool]] = EventHook()

    @property
    @abstractmethod
    def connected(self) -> bool:
        """Whether a connection is currently established."""
        pass

    @abstractmethod
    def connect(self, host: str, port: int, credential: str) -> None:
        """Start connecting to the remote endpoint.

        Args:
            host: Hostname or address of the production tool.
            port: Control channel port.
            credential: Password for the control channel (may be empty).
        """
        pass

    @abstractmethod
    def set_scene(self, name: str) -> None:
        """Switch the program output to the named scene."""
        pass

    @abstractmethod
    def set_source_filter_enabled(self, source: str, filter_name: str, enabled: bool) -> None:
        """Enable or disable a filter on a source.

        Args:
            source: Source name.
            filter_name: Filter name on that source.
            enabled: Desired filter state.
        """
        pass

    @abstractmethod
    def trigger_hotkey_sequence(self, key: str, modifiers: KeyModifier) -> None:
        """Press a key with the given modifier flags held."""
        pass

    @abstractmethod
    def trigger_hotkey_action(self, name: str) -> None:
        """Invoke a hotkey action by its registered name."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the connection. Must be safe to call more than once."""
        pass

    def _notify_activity(self, success: bool) -> None:
        self.activity.emit(success)
