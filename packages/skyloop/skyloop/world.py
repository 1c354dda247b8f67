"""World - generational entity and component storage with queries."""

from __future__ import annotations

from typing import Any, Generator, TypeVar, Union, cast

from skyloop.filters import AnyOf
from skyloop.types import DeadEntityError, EntityId

T = TypeVar("T")

# Query arguments: plain component types or the AnyOf sentinel.
QueryArg = Union[type, AnyOf]


class World:
    """Entity store keyed by slot index, guarded by per-slot generations.

    A despawned slot goes on a free list and its generation is bumped, so
    ids handed out before the despawn stop matching. Component tables are
    keyed by slot index; liveness is always checked against the full id.

    Despawns issued while a query is being iterated are deferred until the
    outermost query finishes (or ``flush()`` runs), so no iteration ever
    sees its own entity set change underneath it.
    """

    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._generations: list[int] = []
        self._alive: dict[int, EntityId] = {}
        self._free: list[int] = []
        self._pending: list[EntityId] = []
        self._iterating: int = 0
        self._tick: int = 0
        self._born: dict[int, int] = {}

    def spawn(self) -> EntityId:
        if self._free:
            index = self._free.pop()
        else:
            index = len(self._generations)
            self._generations.append(0)
        eid = EntityId(index, self._generations[index])
        self._alive[index] = eid
        self._born[index] = self._tick
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        if not self.alive(entity_id):
            return
        if self._iterating:
            if entity_id not in self._pending:
                self._pending.append(entity_id)
            return
        self._remove(entity_id)

    def _remove(self, entity_id: EntityId) -> None:
        index = entity_id.index
        if self._alive.get(index) != entity_id:
            return
        del self._alive[index]
        del self._born[index]
        for store in self._components.values():
            store.pop(index, None)
        self._generations[index] += 1
        self._free.append(index)

    def flush(self) -> None:
        """Apply despawns that were deferred during iteration."""
        pending = self._pending
        self._pending = []
        for eid in pending:
            self._remove(eid)

    def begin_tick(self) -> None:
        """Mark the start of a tick; later spawns count as new this tick."""
        self._tick += 1

    def spawned_this_tick(self, entity_id: EntityId) -> bool:
        if not self.alive(entity_id):
            return False
        return self._born[entity_id.index] == self._tick

    def clear(self) -> None:
        for eid in list(self._alive.values()):
            self.despawn(eid)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if not self.alive(entity_id):
            raise DeadEntityError(
                entity_id,
                f"Cannot attach {ctype.__name__} to dead entity {entity_id}",
            )
        self._components.setdefault(ctype, {})[entity_id.index] = component

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        if not self.alive(entity_id):
            return
        store = self._components.get(component_type)
        if store is not None:
            store.pop(entity_id.index, None)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if not self.alive(entity_id):
            raise DeadEntityError(
                entity_id, f"Entity {entity_id} is not alive"
            )
        store = self._components.get(component_type)
        if store is None or entity_id.index not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id.index])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if not self.alive(entity_id):
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id.index in store

    def query(
        self, *args: QueryArg
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        if not args:
            return

        required: list[type] = []
        any_groups: list[tuple[type, ...]] = []

        for arg in args:
            if isinstance(arg, AnyOf):
                any_groups.append(arg.ctypes)
            else:
                required.append(arg)

        # Choose iteration base.
        if required:
            base_store = self._components.get(required[0])
            if base_store is None:
                return
            candidates = list(base_store)
        else:
            # Union of slot indices from the first AnyOf group.
            indices: set[int] = set()
            for ct in any_groups[0]:
                store = self._components.get(ct)
                if store is not None:
                    indices.update(store)
            candidates = sorted(indices)

        self._iterating += 1
        try:
            for index in candidates:
                eid = self._alive.get(index)
                if eid is None:
                    continue

                if not all(
                    any(index in self._components.get(ct, ()) for ct in group)
                    for group in any_groups
                ):
                    continue

                # Collect required components.
                components: list[Any] = []
                for ctype in required:
                    store = self._components.get(ctype)
                    if store is None or index not in store:
                        break
                    components.append(store[index])
                else:
                    yield eid, tuple(components)
        finally:
            self._iterating -= 1
            if not self._iterating:
                self.flush()

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._alive.values())

    def alive(self, entity_id: EntityId) -> bool:
        return self._alive.get(entity_id.index) == entity_id

    def count(self, *args: QueryArg) -> int:
        return sum(1 for _ in self.query(*args))
