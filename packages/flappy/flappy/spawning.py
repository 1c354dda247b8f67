"""Entity builders and the run reset."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from skyloop import AnyOf, EntityId, World
from skyloop_physics import AABBCollider, Position, Velocity
from skyloop_schedule import Lifetime

from flappy.components import Actor, Obstacle, Scoreable, ScoreLabel, Sprite, SpriteKind, score_text
from flappy.config import GameConfig

if TYPE_CHECKING:
    from flappy.state import GameState

logger = logging.getLogger(__name__)


def spawn_actor(world: World, config: GameConfig) -> EntityId:
    hw, hh = config.actor_half_extents
    eid = world.spawn()
    world.attach(eid, Actor())
    world.attach(eid, Position(*config.actor_origin))
    world.attach(eid, Velocity(0.0, 0.0))
    world.attach(eid, AABBCollider((hw, hh)))
    world.attach(eid, Sprite(SpriteKind.ACTOR, (hw * 2.0, hh * 2.0)))
    return eid


def spawn_score_label(world: World, config: GameConfig, score: int = 0) -> EntityId:
    eid = world.spawn()
    world.attach(eid, Position(*config.score_label_position))
    world.attach(eid, ScoreLabel(score_text(score)))
    return eid


def _spawn_obstacle(
    world: World, config: GameConfig, y: float, kind: SpriteKind,
) -> EntityId:
    eid = world.spawn()
    world.attach(eid, Obstacle())
    world.attach(eid, Position(config.spawn_x, y))
    world.attach(eid, Velocity(config.scroll_speed, 0.0))
    world.attach(eid, AABBCollider(config.obstacle_half_extents))
    world.attach(eid, Lifetime(config.obstacle_lifetime))
    world.attach(eid, Sprite(kind, config.obstacle_size))
    return eid


def spawn_obstacle_pair(
    world: World, config: GameConfig, rng: random.Random,
) -> tuple[EntityId, EntityId]:
    """Spawn a top/bottom pair around a random gap center.

    Only the top obstacle is Scoreable, so a pair is worth one point.
    """
    r = config.gap_center_range
    center = rng.uniform(-r, r)
    offset = config.gap_size / 2.0 + config.obstacle_size[1] / 2.0

    top = _spawn_obstacle(world, config, center + offset, SpriteKind.TOP_OBSTACLE)
    world.attach(top, Scoreable(passed=False))
    bottom = _spawn_obstacle(world, config, center - offset, SpriteKind.BOTTOM_OBSTACLE)

    logger.debug("spawned obstacle pair, gap center %.1f", center)
    return top, bottom


def reset_run(state: GameState) -> EntityId:
    """Wipe the previous run and set up a fresh one. Returns the new actor."""
    world = state.world
    stale = [eid for eid, _ in world.query(AnyOf(Actor, Obstacle, ScoreLabel))]
    for eid in stale:
        world.despawn(eid)

    state.score = 0
    state.termination_requested = False
    spawn_score_label(world, state.config)
    actor = spawn_actor(world, state.config)
    logger.info("run reset, cleared %d entities", len(stale))
    return actor
