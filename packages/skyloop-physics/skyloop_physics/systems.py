"""System factories for kinematics."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from skyloop_physics.components import Position, Velocity

if TYPE_CHECKING:
    from skyloop import TickContext, World


def make_gravity_system(
    acceleration: float, *filters: type,
) -> Callable[["World", "TickContext"], None]:
    """Add ``acceleration * dt`` to the vertical velocity of matching entities.

    ``filters`` narrows the query (e.g. a marker component) so only the
    bodies that should fall are affected.
    """

    def gravity_system(world: "World", ctx: "TickContext") -> None:
        for eid, (vel, *_rest) in world.query(Velocity, *filters):
            vel.dy += acceleration * ctx.dt

    return gravity_system


def make_integration_system() -> Callable[["World", "TickContext"], None]:
    """Explicit Euler step: position += velocity * dt, one shared dt per tick."""

    def integration_system(world: "World", ctx: "TickContext") -> None:
        dt = ctx.dt
        for eid, (pos, vel) in world.query(Position, Velocity):
            pos.x += vel.dx * dt
            pos.y += vel.dy * dt

    return integration_system
