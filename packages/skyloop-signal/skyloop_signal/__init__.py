"""skyloop-signal - In-process event bus for the tick engine."""
from __future__ import annotations

from skyloop_signal.bus import SignalBus
from skyloop_signal.systems import make_signal_system

__all__ = ["SignalBus", "make_signal_system"]
