"""Debounced watcher for active-low digital sensors."""

from __future__ import annotations

import time
from typing import Callable, Sequence

LOW = 0
HIGH = 1

DEBOUNCE_SECONDS = 0.01

PinReader = Callable[[int], int]
ChangeCallback = Callable[[int, int], None]


class SensorWatcher:
    """Polls sensor pins and reports debounced changes of state.

    A pin counts as pressed (LOW) only when it reads LOW on two consecutive
    checks; any other reading counts as released (HIGH).
    """

    def __init__(
        self,
        pins: Sequence[int],
        read_pin: PinReader,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._pins = tuple(pins)
        self._read = read_pin
        self._sleep = sleep if sleep is not None else time.sleep
        self._last = [self._read(pin) for pin in self._pins]
        self._states = list(self._last)
        self._callback: ChangeCallback | None = None

    @property
    def pins(self) -> tuple[int, ...]:
        """The watched pins, in sensor-index order."""
        return self._pins

    @property
    def states(self) -> tuple[int, ...]:
        """The last reported stable state of each sensor."""
        return tuple(self._states)

    def on_change(self, callback: ChangeCallback | None) -> None:
        """Set the function called with (sensor_index, state) on each change."""
        self._callback = callback

    def check_all(self) -> list[tuple[int, int]]:
        """Read every sensor once, report changes, and return them as (index, state)."""
        changes = []
        for index, pin in enumerate(self._pins):
            reading = self._read(pin)
            if reading != self._last[index]:
                self._sleep(DEBOUNCE_SECONDS)
                reading = self._read(pin)

            stable = LOW if reading == LOW and self._last[index] == LOW else HIGH

            if stable != self._states[index]:
                if self._callback is not None:
                    self._callback(index, stable)
                self._states[index] = stable
                changes.append((index, stable))

            self._last[index] = reading
        return changes