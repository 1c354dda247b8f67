"""Shared type aliases and protocols for the tick engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, NamedTuple


class EntityId(NamedTuple):
    """Slot index plus the generation the slot had when the entity spawned."""

    index: int
    generation: int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: EntityId, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from skyloop.world import World

System = Callable[["World", TickContext], None]
