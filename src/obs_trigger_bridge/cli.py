"""Console script shim; the CLI lives in `obs_trigger_bridge.main`."""

from __future__ import annotations

from obs_trigger_bridge.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
