"""Identifier generation for entities created in memory."""

import time
from collections.abc import Callable


class MonotonicIdGenerator:
    """
    Generates strictly increasing, millisecond-timestamp based identifiers.

    Identifiers are decimal strings of the current epoch time in
    milliseconds. When two identifiers are requested within the same
    millisecond (or the wall clock moves backwards), the previous value
    is bumped by one, so every identifier handed out is unique for the
    lifetime of the generator.
    """

    def __init__(self, time_ms: Callable[[], int] | None = None) -> None:
        self._time_ms = time_ms or (lambda: time.time_ns() // 1_000_000)
        self._last = 0

    def next_id(self) -> str:
        """Return a fresh identifier, greater than any previously issued or observed."""
        candidate = self._time_ms()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)

    def observe(self, existing_id: str) -> None:
        """
        Advance past an identifier that already exists (e.g. loaded from storage).

        Non-numeric identifiers cannot collide with generated ones and are ignored.
        """
        try:
            value = int(existing_id)
        except ValueError:
            return
        if value > self._last:
            self._last = value
