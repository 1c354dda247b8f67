"""Per-tick game systems. Each factory closes over the shared GameState."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from skyloop_physics import AABBCollider, Position, Velocity, aabb_overlaps, outside_vertical_bounds
from skyloop_schedule import RepeatingTimer

from flappy.components import Actor, Obstacle, Scoreable, ScoreLabel, score_text
from flappy.spawning import spawn_obstacle_pair

if TYPE_CHECKING:
    from skyloop import EntityId, TickContext, World

    from flappy.state import GameState

logger = logging.getLogger(__name__)

System = Callable[["World", "TickContext"], None]


def find_actor(world: World) -> tuple[EntityId, Position, AABBCollider] | None:
    """The single actor with its box, or None before spawn or after teardown."""
    actors = list(world.query(Actor, Position, AABBCollider))
    if not actors:
        return None
    eid, (_, pos, collider) = actors[0]
    return eid, pos, collider


def make_flap_system(state: GameState) -> System:
    """Overwrite the actor's vertical velocity on a flap edge."""

    def flap_system(world: World, ctx: TickContext) -> None:
        if not state.inputs.flap:
            return
        for eid, (vel, _) in world.query(Velocity, Actor):
            vel.dy = state.config.flap_speed

    return flap_system


def make_spawner_system(state: GameState) -> System:
    """Spawn an obstacle pair every ``spawn_interval`` seconds.

    The timer starts on the first tick this system sees and survives
    restarts.
    """
    timer: RepeatingTimer | None = None

    def spawner_system(world: World, ctx: TickContext) -> None:
        nonlocal timer
        if timer is None:
            timer = RepeatingTimer(state.config.spawn_interval)
        if timer.tick(ctx.dt):
            spawn_obstacle_pair(world, state.config, ctx.random)

    return spawner_system


def make_obstacle_collision_system(state: GameState) -> System:
    def obstacle_collision_system(world: World, ctx: TickContext) -> None:
        actor = find_actor(world)
        if actor is None:
            return
        _, actor_pos, actor_box = actor
        for eid, (pos, box, _) in world.query(Position, AABBCollider, Obstacle):
            if aabb_overlaps(
                actor_pos.as_tuple(), actor_box.half_extents,
                pos.as_tuple(), box.half_extents,
            ):
                state.request_termination(f"collided with obstacle {eid}")
                return

    return obstacle_collision_system


def make_bounds_system(state: GameState) -> System:
    lower, upper = state.config.play_bounds

    def bounds_system(world: World, ctx: TickContext) -> None:
        actor = find_actor(world)
        if actor is None:
            return
        _, pos, box = actor
        if outside_vertical_bounds(pos.y, box.half_extents[1], lower, upper):
            state.request_termination(f"left play area at y={pos.y:.1f}")

    return bounds_system


def make_scoring_system(state: GameState) -> System:
    """One point per Scoreable obstacle the actor has moved past."""

    def scoring_system(world: World, ctx: TickContext) -> None:
        actor = find_actor(world)
        if actor is None:
            return
        _, actor_pos, _ = actor
        for eid, (pos, scoreable, _) in world.query(Position, Scoreable, Obstacle):
            if not scoreable.passed and actor_pos.x > pos.x:
                scoreable.passed = True
                state.score += 1
                logger.debug("score %d", state.score)
                state.bus.publish("scored", score=state.score)

    return scoring_system


def make_score_display_system(state: GameState) -> System:
    def score_display_system(world: World, ctx: TickContext) -> None:
        text = score_text(state.score)
        for eid, (label,) in world.query(ScoreLabel):
            label.text = text

    return score_display_system
