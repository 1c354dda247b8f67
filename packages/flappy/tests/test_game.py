"""End-to-end tests driving Game.tick the way a front-end would."""
from __future__ import annotations

import math

from skyloop_physics import AABBCollider, Position, Velocity
from skyloop_schedule import Lifetime

from flappy import GameConfig, GamePhase, Inputs, SpriteKind, build_game
from flappy.components import Obstacle, Scoreable
from flappy.systems import find_actor

DT = 1.0 / 60.0


def _started(seed: int = 42):
    game = build_game(seed=seed)
    game.tick(DT, Inputs(start=True))
    return game


def _place_obstacle(game, x: float, y: float, scoreable: bool = False):
    world = game.state.world
    eid = world.spawn()
    world.attach(eid, Obstacle())
    world.attach(eid, Position(x, y))
    world.attach(eid, Velocity(0.0, 0.0))
    world.attach(eid, AABBCollider((20.0, 295.0)))
    if scoreable:
        world.attach(eid, Scoreable())
    return eid


def _actor(game):
    eid, pos, _ = find_actor(game.state.world)
    return pos, game.state.world.get(eid, Velocity)


def test_idle_until_start():
    game = build_game(seed=1)
    assert game.phase is GamePhase.IDLE
    for _ in range(30):
        game.tick(DT)
    assert game.phase is GamePhase.IDLE
    pos, vel = _actor(game)
    assert pos == Position(0.0, 0.0)
    assert vel.dy == 0.0


def test_start_gives_one_actor_at_origin():
    game = _started()
    assert game.phase is GamePhase.ACTIVE
    assert game.actor_count() == 1
    pos, vel = _actor(game)
    assert pos == Position(0.0, 0.0)
    assert vel == Velocity(0.0, 0.0)
    assert game.score == 0


def test_restart_ignored_while_idle():
    game = build_game(seed=1)
    game.tick(DT, Inputs(restart=True))
    assert game.phase is GamePhase.IDLE


def test_gravity_pulls_down_every_tick():
    game = _started()
    _, vel = _actor(game)
    previous = vel.dy
    for _ in range(20):
        game.tick(DT)
        assert vel.dy < previous
        previous = vel.dy


def test_flap_sets_exact_speed():
    game = _started()
    for _ in range(10):
        game.tick(DT)
    game.tick(0.1, Inputs(flap=True))
    pos, vel = _actor(game)
    assert vel.dy == game.state.config.flap_speed


def test_falling_out_of_bounds_ends_run():
    game = _started()
    lower, _ = game.state.config.play_bounds
    for _ in range(600):
        game.tick(DT)
        if game.phase is GamePhase.TERMINATED:
            break
    assert game.phase is GamePhase.TERMINATED
    pos, _ = _actor(game)
    assert pos.y - 16.0 < lower


def test_collision_freezes_until_restart():
    game = _started()
    got = []
    game.bus.subscribe("game_over", lambda name, data: got.append(data["score"]))
    _place_obstacle(game, 10.0, 0.0)

    game.tick(DT)
    assert game.phase is GamePhase.TERMINATED
    assert got == [0]

    pos, _ = _actor(game)
    frozen = (pos.x, pos.y)
    for _ in range(30):
        game.tick(DT, Inputs(flap=True))
    assert (pos.x, pos.y) == frozen
    assert game.score == 0

    game.tick(DT, Inputs(restart=True))
    assert game.phase is GamePhase.ACTIVE
    assert game.score == 0
    assert game.actor_count() == 1
    assert game.state.world.count(Obstacle) == 0
    new_pos, vel = _actor(game)
    assert new_pos == Position(0.0, 0.0)
    assert vel == Velocity(0.0, 0.0)


def test_scoring_and_label_then_restart_resets():
    game = _started()
    _place_obstacle(game, -10.0, 1000.0, scoreable=True)
    game.tick(DT)
    assert game.score == 1
    assert game.score_text == "Score: 1"
    assert [text for text, _, _ in game.labels()] == ["Score: 1"]
    game.tick(DT)
    assert game.score == 1

    game.state.request_termination("test")
    game.tick(DT)
    assert game.phase is GamePhase.TERMINATED
    game.tick(DT, Inputs(restart=True))
    assert game.score == 0
    assert [text for text, _, _ in game.labels()] == ["Score: 0"]


def test_spawner_fires_once_for_a_long_tick():
    game = _started()
    game.tick(9.0)
    assert game.state.world.count(Obstacle) == 2


def test_new_pair_keeps_full_lifetime_on_its_spawn_tick():
    game = _started()
    game.tick(2.0)
    remaining = [lt.remaining for _, (lt,) in game.state.world.query(Lifetime)]
    assert remaining == [game.state.config.obstacle_lifetime] * 2


def test_tick_longer_than_lifetime_does_not_drop_new_pair():
    game = _started()
    game.tick(10.0)
    assert game.state.world.count(Obstacle) == 2


def test_obstacles_cleaned_up_after_lifetime():
    game = _started()
    world = game.state.world
    # Keep the actor parked mid-air so the run never ends.
    eid, _, _ = find_actor(world)
    world.detach(eid, Velocity)
    world.get(eid, Position).y = 1000.0
    world.detach(eid, AABBCollider)

    seen_obstacles = False
    for _ in range(17 * 60):
        game.tick(DT)
        seen_obstacles = seen_obstacles or world.count(Obstacle) > 0
    assert seen_obstacles
    # Pairs live 10s and spawn every 2s: at 17s the pairs from 8s..16s remain.
    assert world.count(Obstacle) == 10
    assert all(pos.x > -600.0 for _, (pos, _) in world.query(Position, Obstacle))


def test_sprites_report_kinds():
    game = _started()
    game.tick(2.0)
    kinds = sorted(kind.value for kind, *_ in game.sprites())
    assert kinds == ["actor", "bottom_obstacle", "top_obstacle"]
    for kind, x, y, w, h in game.sprites():
        if kind is SpriteKind.ACTOR:
            assert (w, h) == (32.0, 32.0)
        else:
            assert (w, h) == (50.0, 600.0)


def test_phase_changed_signals_in_order():
    game = build_game(seed=3)
    seen = []
    game.bus.subscribe("phase_changed", lambda name, data: seen.append((data["old"], data["new"])))
    game.tick(DT, Inputs(start=True))
    _place_obstacle(game, 0.0, 0.0)
    game.tick(DT)
    game.tick(DT, Inputs(restart=True))
    assert seen == [
        (GamePhase.IDLE, GamePhase.ACTIVE),
        (GamePhase.ACTIVE, GamePhase.TERMINATED),
        (GamePhase.TERMINATED, GamePhase.ACTIVE),
    ]


def test_exit_stops_everything():
    game = _started()
    exits = []
    game.bus.subscribe("exit", lambda name, data: exits.append(name))
    game.tick(DT, Inputs(exit=True))
    assert game.exit_requested
    assert exits == ["exit"]

    pos, _ = _actor(game)
    before = (pos.x, pos.y)
    game.tick(DT)
    assert (pos.x, pos.y) == before


def test_exit_from_idle():
    game = build_game(seed=1)
    game.tick(DT, Inputs(exit=True))
    assert game.exit_requested
    assert game.phase is GamePhase.IDLE


def test_default_dt_uses_config_tps():
    game = _started()
    game.tick()
    _, vel = _actor(game)
    assert math.isclose(vel.dy, game.state.config.gravity / game.state.config.tps)


def test_custom_tps_sets_default_dt():
    game = build_game(config=GameConfig(tps=30), seed=42)
    game.tick(None, Inputs(start=True))
    game.tick()
    _, vel = _actor(game)
    assert game.state.engine.clock.tps == 30
    assert math.isclose(vel.dy, game.state.config.gravity / 30)
