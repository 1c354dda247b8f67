"""skyloop - A minimal tick engine with a generational entity store."""

from skyloop.clock import Clock
from skyloop.engine import Engine
from skyloop.filters import AnyOf
from skyloop.types import DeadEntityError, EntityId, TickContext
from skyloop.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
    "AnyOf",
]
