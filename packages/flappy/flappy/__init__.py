"""flappy - Simulation core of a side-scrolling obstacle-avoidance game."""
from __future__ import annotations

from flappy.components import Actor, Obstacle, Scoreable, ScoreLabel, Sprite, SpriteKind, score_text
from flappy.config import DEFAULT_CONFIG, GameConfig
from flappy.setup import Game, build_game
from flappy.state import GamePhase, GameState, Inputs
from flappy.transitions import TRANSITIONS, PhaseController

__all__ = [
    "Actor",
    "DEFAULT_CONFIG",
    "Game",
    "GameConfig",
    "GamePhase",
    "GameState",
    "Inputs",
    "Obstacle",
    "PhaseController",
    "ScoreLabel",
    "Scoreable",
    "Sprite",
    "SpriteKind",
    "TRANSITIONS",
    "build_game",
    "score_text",
]
