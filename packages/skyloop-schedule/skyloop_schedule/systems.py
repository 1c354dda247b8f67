"""System factory for lifetime processing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from skyloop_schedule.components import Lifetime

if TYPE_CHECKING:
    from skyloop import TickContext, World


def make_lifetime_system() -> Callable[[World, TickContext], None]:
    """Return a system that counts Lifetimes down and despawns at zero.

    Entities spawned earlier in the same tick keep their full lifetime
    until the next tick.
    """

    def lifetime_system(world: World, ctx: TickContext) -> None:
        for eid, (lifetime,) in world.query(Lifetime):
            if world.spawned_this_tick(eid):
                continue
            lifetime.remaining -= ctx.dt
            if lifetime.remaining <= 0.0:
                world.despawn(eid)

    return lifetime_system
