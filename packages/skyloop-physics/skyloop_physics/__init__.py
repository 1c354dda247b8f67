"""skyloop-physics - 2D kinematics and AABB collision detection for the tick engine."""
from __future__ import annotations

from skyloop_physics.collision import aabb_overlaps, aabb_vs_aabb, outside_vertical_bounds
from skyloop_physics.components import AABBCollider, Position, Velocity
from skyloop_physics.systems import make_gravity_system, make_integration_system

__all__ = [
    "AABBCollider",
    "Position",
    "Velocity",
    "aabb_overlaps",
    "aabb_vs_aabb",
    "make_gravity_system",
    "make_integration_system",
    "outside_vertical_bounds",
]
