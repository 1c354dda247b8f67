"""Explicit simulation context shared by every game system."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from skyloop import Engine, World
from skyloop_signal import SignalBus

from flappy.config import GameConfig

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Inputs:
    """Discrete requests for one tick. Each flag is an edge, not a held key."""

    flap: bool = False
    start: bool = False
    restart: bool = False
    exit: bool = False


@dataclass
class GameState:
    """Holds the engine and the process-wide resources.

    ``score`` is written by the scoring system and reset by the restart
    transition; ``phase`` is written only by the phase controller.
    """

    engine: Engine
    config: GameConfig
    bus: SignalBus = field(default_factory=SignalBus)
    score: int = 0
    phase: GamePhase = GamePhase.IDLE
    inputs: Inputs = field(default_factory=Inputs)
    termination_requested: bool = False
    exit_requested: bool = False

    @property
    def world(self) -> World:
        return self.engine.world

    @property
    def gravity(self) -> float:
        return self.config.gravity

    def request_termination(self, reason: str) -> None:
        if self.termination_requested:
            return
        self.termination_requested = True
        logger.debug("termination requested: %s", reason)
