"""Physics components."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Position:
    """World-space center of an entity. y grows upward."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Velocity:
    """Units per second along each axis."""

    dx: float
    dy: float


@dataclass(frozen=True)
class AABBCollider:
    """Axis-aligned bounding box. Half-extents from center (Position)."""

    half_extents: tuple[float, float]

    def __post_init__(self) -> None:
        if any(h <= 0.0 for h in self.half_extents):
            raise ValueError(
                f"half_extents must be positive, got {self.half_extents}"
            )
