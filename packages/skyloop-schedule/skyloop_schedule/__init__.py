"""skyloop-schedule - Time-based scheduling primitives for the tick engine."""
from __future__ import annotations

from skyloop_schedule.components import Lifetime, RepeatingTimer
from skyloop_schedule.systems import make_lifetime_system

__all__ = ["Lifetime", "RepeatingTimer", "make_lifetime_system"]
