"""Wire the engine, systems and phase controller into a playable Game."""
from __future__ import annotations

import logging
from collections.abc import Iterator

from skyloop import Engine
from skyloop_physics import Position, make_gravity_system, make_integration_system
from skyloop_schedule import make_lifetime_system
from skyloop_signal import SignalBus

from flappy.components import Actor, ScoreLabel, Sprite, SpriteKind, score_text
from flappy.config import DEFAULT_CONFIG, GameConfig
from flappy.spawning import reset_run
from flappy.state import GamePhase, GameState, Inputs
from flappy.systems import (
    make_bounds_system,
    make_flap_system,
    make_obstacle_collision_system,
    make_score_display_system,
    make_scoring_system,
    make_spawner_system,
)
from flappy.transitions import PhaseController

logger = logging.getLogger(__name__)


class Game:
    """Drives one process-lifetime game.

    Each ``tick`` is: handle external requests at the first control point;
    if the phase is Active and did not just change, run every system once
    in order; resolve any termination at the second control point; then
    deliver queued signals.
    """

    def __init__(self, state: GameState, controller: PhaseController) -> None:
        self._state = state
        self._controller = controller

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def bus(self) -> SignalBus:
        return self._state.bus

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def score_text(self) -> str:
        return score_text(self._state.score)

    @property
    def exit_requested(self) -> bool:
        return self._state.exit_requested

    def tick(self, dt: float | None = None, inputs: Inputs | None = None) -> None:
        state = self._state
        if state.exit_requested:
            return
        state.inputs = inputs if inputs is not None else Inputs()
        try:
            if state.inputs.exit:
                self._exit()
                return
            self._log_ignored_requests()

            if self._controller.control_point() is None and state.phase is GamePhase.ACTIVE:
                state.engine.step(dt)
                self._controller.control_point()
        finally:
            state.inputs = Inputs()
            state.bus.flush()

    def _exit(self) -> None:
        state = self._state
        logger.debug("exit requested in phase %s", state.phase.value)
        state.exit_requested = True
        state.engine.request_stop()
        state.bus.publish("exit")

    def _log_ignored_requests(self) -> None:
        inputs = self._state.inputs
        phase = self._state.phase
        if inputs.start and phase is not GamePhase.IDLE:
            logger.debug("ignoring start request in phase %s", phase.value)
        if inputs.restart and phase is not GamePhase.TERMINATED:
            logger.debug("ignoring restart request in phase %s", phase.value)

    def sprites(self) -> Iterator[tuple[SpriteKind, float, float, float, float]]:
        """(kind, x, y, width, height) for every drawable entity."""
        for eid, (sprite, pos) in list(self._state.world.query(Sprite, Position)):
            w, h = sprite.size
            yield sprite.kind, pos.x, pos.y, w, h

    def labels(self) -> Iterator[tuple[str, float, float]]:
        for eid, (label, pos) in list(self._state.world.query(ScoreLabel, Position)):
            yield label.text, pos.x, pos.y

    def actor_count(self) -> int:
        return self._state.world.count(Actor)


def build_game(config: GameConfig | None = None, seed: int | None = None) -> Game:
    """Build a Game sitting in the Idle phase with the opening scene spawned."""
    config = config if config is not None else DEFAULT_CONFIG
    engine = Engine(tps=config.tps, seed=seed)
    state = GameState(engine=engine, config=config)

    engine.add_system(make_gravity_system(state.gravity, Actor))
    engine.add_system(make_flap_system(state))
    engine.add_system(make_integration_system())
    engine.add_system(make_spawner_system(state))
    engine.add_system(make_lifetime_system())
    engine.add_system(make_obstacle_collision_system(state))
    engine.add_system(make_bounds_system(state))
    engine.add_system(make_scoring_system(state))
    engine.add_system(make_score_display_system(state))

    # The menu is drawn over the opening scene, as in the first frame of a run.
    reset_run(state)
    logger.debug("game built with seed %d", engine.seed)
    return Game(state, PhaseController(state))
