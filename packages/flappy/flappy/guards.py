"""Phase FSM guards. Each reads a pending request off the GameState."""
from __future__ import annotations

from skyloop_fsm import FSMGuards


def make_phase_guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register("start_requested", lambda state: state.inputs.start)
    guards.register("restart_requested", lambda state: state.inputs.restart)
    guards.register("termination_requested", lambda state: state.termination_requested)
    return guards
