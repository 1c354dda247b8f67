"""Tunable constants for the simulation, fixed for the lifetime of a game."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """All the numbers the simulation runs on.

    World space is centered on the origin with y growing upward. The actor
    stays at a fixed x while obstacles scroll leftward past it.
    """

    gravity: float = -350.0
    flap_speed: float = 150.0
    spawn_interval: float = 2.0
    gap_size: float = 100.0
    gap_center_range: float = 130.0
    obstacle_size: tuple[float, float] = (50.0, 600.0)
    collider_inset: float = 5.0
    spawn_x: float = 500.0
    scroll_speed: float = -100.0
    obstacle_lifetime: float = 10.0
    play_bounds: tuple[float, float] = (-300.0, 300.0)
    actor_half_extents: tuple[float, float] = (16.0, 16.0)
    actor_origin: tuple[float, float] = (0.0, 0.0)
    score_label_position: tuple[float, float] = (0.0, 250.0)
    tps: int = 60

    def __post_init__(self) -> None:
        if any(h <= 0.0 for h in self.actor_half_extents):
            raise ValueError("actor_half_extents must be positive")
        if any(s <= 2.0 * self.collider_inset for s in self.obstacle_size):
            raise ValueError("collider_inset must leave positive obstacle half-extents")
        if self.spawn_interval <= 0.0:
            raise ValueError("spawn_interval must be positive")
        if self.obstacle_lifetime <= 0.0:
            raise ValueError("obstacle_lifetime must be positive")
        if self.gap_size < 0.0 or self.gap_center_range < 0.0:
            raise ValueError("gap_size and gap_center_range must not be negative")
        lower, upper = self.play_bounds
        if lower >= upper:
            raise ValueError(f"play_bounds must be (lower, upper), got {self.play_bounds}")
        if self.tps <= 0:
            raise ValueError("tps must be positive")

    @property
    def obstacle_half_extents(self) -> tuple[float, float]:
        """Collision half-extents: half the visual size, shrunk by the inset."""
        w, h = self.obstacle_size
        return (w / 2.0 - self.collider_inset, h / 2.0 - self.collider_inset)


DEFAULT_CONFIG = GameConfig()
