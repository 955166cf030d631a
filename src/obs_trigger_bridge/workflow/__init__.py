"""Trigger dispatch domain concepts.

This package introduces first-class types for:
- The closed trigger vocabulary
- Remote-control actions (a discriminated union persisted per profile)
- Debouncing of repeated triggers
- Dispatching triggers to a remote-control client

Control flow stays deterministic: the same trigger sequence against the same
mapping table always produces the same remote commands.
"""

__all__: list[str] = []
