"""Lifetime component and repeating timer."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Lifetime:
    """Seconds left before the entity is despawned."""

    remaining: float


@dataclass
class RepeatingTimer:
    """Recurring timer in seconds. ``tick`` reports whether a period just completed.

    A tick that covers several periods still fires only once; the leftover
    time past the last period boundary carries into the next cycle.
    """

    period: float
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.period <= 0.0:
            raise ValueError(f"period must be positive, got {self.period}")

    def tick(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed < self.period:
            return False
        self.elapsed %= self.period
        return True
