from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .triggers import Trigger

DOUBLE_TRIGGER_TIMEOUT_SECONDS = 5.0


@dataclass
class Debouncer:
    """Suppress a trigger that repeats the previous one within the window.

    Only the most recent trigger is remembered, so A, B, A always passes.
    Not thread-safe on its own; the engine calls it under its lock.
    """

    window_seconds: float = DOUBLE_TRIGGER_TIMEOUT_SECONDS
    clock: Callable[[], float] = time.monotonic
    last_trigger: Trigger | None = field(default=None, init=False)
    last_trigger_time: float = field(default=0.0, init=False)

    def allow(self, trigger: Trigger) -> bool:
        now = self.clock()
        if trigger == self.last_trigger and now < self.last_trigger_time + self.window_seconds:
            return False
        self.last_trigger = trigger
        self.last_trigger_time = now
        return True
