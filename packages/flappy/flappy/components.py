"""Game-specific components."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class Actor:
    """The player-controlled falling body."""


@dataclass
class Obstacle:
    """One half of a scrolling obstacle pair."""


@dataclass
class Scoreable:
    """Carried by one obstacle per pair; flips to passed once the actor is beyond it."""

    passed: bool = False


class SpriteKind(Enum):
    ACTOR = "actor"
    TOP_OBSTACLE = "top_obstacle"
    BOTTOM_OBSTACLE = "bottom_obstacle"


@dataclass(frozen=True)
class Sprite:
    """Rendering info: what to draw and its visual size (not the collider)."""

    kind: SpriteKind
    size: tuple[float, float]


@dataclass
class ScoreLabel:
    """On-screen score text, kept in sync by the score display system."""

    text: str = "Score: 0"


def score_text(score: int) -> str:
    return f"Score: {score}"
