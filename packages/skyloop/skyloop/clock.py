"""Clock and TickContext for the tick loop."""

import random
from typing import Callable

from skyloop.types import TickContext


class Clock:
    """Counts ticks and accumulated time.

    ``dt`` is the fixed default step. Callers may advance by a different
    delta per tick; elapsed time tracks whatever was actually advanced.
    """

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._elapsed = 0.0
        self._last_dt = self._dt

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._dt
        elif dt < 0:
            raise ValueError(f"dt must not be negative, got {dt}")
        self._tick_number += 1
        self._elapsed += dt
        self._last_dt = dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )
