"""Engine - core loop and seeded randomness."""

import os
import random

from skyloop.clock import Clock
from skyloop.types import System
from skyloop.world import World


class Engine:
    def __init__(self, tps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None = None) -> None:
        self._clock.advance(dt)
        self._world.begin_tick()
        ctx = self._clock.context(self.request_stop, self._rng)
        try:
            for system in self._systems:
                system(self._world, ctx)
                if self._stop_requested:
                    break
        finally:
            # Deferred despawns land between ticks, never mid-pass.
            self._world.flush()

    def step(self, dt: float | None = None) -> None:
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
