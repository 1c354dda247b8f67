"""Query filter sentinel for World.query()."""

from __future__ import annotations


class AnyOf:
    """Match entities that carry at least one of these component types."""

    __slots__ = ("ctypes",)

    def __init__(self, *ctypes: type) -> None:
        if not ctypes:
            raise ValueError("AnyOf requires at least one component type")
        self.ctypes = ctypes
