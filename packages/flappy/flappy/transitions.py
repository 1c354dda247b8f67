"""Phase transition table and the controller that applies it."""
from __future__ import annotations

import logging

from skyloop_fsm import FSM, FSMGuards, evaluate

from flappy.guards import make_phase_guards
from flappy.spawning import reset_run
from flappy.state import GamePhase, GameState

logger = logging.getLogger(__name__)

TRANSITIONS = {
    "idle": [["start_requested", "active"]],
    "active": [["termination_requested", "terminated"]],
    "terminated": [["restart_requested", "active"]],
}


class PhaseController:
    """Owns the game phase. Transitions only happen at ``control_point``.

    Edge hooks run once per transition, never per tick spent in a phase.
    Presentation layers learn about them through bus signals:
    ``menu_closed``, ``game_over``, ``game_over_closed`` and, for every
    transition, ``phase_changed``.
    """

    def __init__(self, state: GameState, guards: FSMGuards | None = None) -> None:
        self._state = state
        self._guards = guards if guards is not None else make_phase_guards()
        self._fsm = FSM(state=state.phase.value, transitions=TRANSITIONS)

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    def control_point(self) -> tuple[GamePhase, GamePhase] | None:
        result = evaluate(self._fsm, self._guards, self._state, self._on_transition)
        if result is None:
            return None
        old, new = result
        return GamePhase(old), GamePhase(new)

    def _on_transition(self, old: str, new: str) -> None:
        state = self._state
        state.phase = GamePhase(new)
        bus = state.bus
        edge = (GamePhase(old), GamePhase(new))

        if edge == (GamePhase.IDLE, GamePhase.ACTIVE):
            bus.publish("menu_closed")
            reset_run(state)
        elif edge == (GamePhase.ACTIVE, GamePhase.TERMINATED):
            state.termination_requested = False
            logger.info("game over, score %d", state.score)
            bus.publish("game_over", score=state.score)
        elif edge == (GamePhase.TERMINATED, GamePhase.ACTIVE):
            bus.publish("game_over_closed")
            reset_run(state)

        logger.info("phase %s -> %s", old, new)
        bus.publish("phase_changed", old=edge[0], new=edge[1])
