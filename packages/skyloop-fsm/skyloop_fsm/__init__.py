"""skyloop-fsm - Finite state machine primitives for the tick engine."""
from __future__ import annotations

from skyloop_fsm.components import FSM
from skyloop_fsm.guards import FSMGuards
from skyloop_fsm.transitions import evaluate

__all__ = ["FSM", "FSMGuards", "evaluate"]
