"""Pure collision detection functions."""
from __future__ import annotations

Vec = tuple[float, ...]


def aabb_vs_aabb(
    pos_a: Vec,
    half_a: Vec,
    pos_b: Vec,
    half_b: Vec,
) -> tuple[Vec, float] | None:
    """Detect AABB overlap. Returns (normal A→B, depth) on minimum-penetration axis or None.

    Touching edges do not count as overlap.
    """
    min_overlap = float("inf")
    min_axis = -1
    min_sign = 1.0
    ndim = len(pos_a)

    for i in range(ndim):
        overlap = (half_a[i] + half_b[i]) - abs(pos_a[i] - pos_b[i])
        if overlap <= 0.0:
            return None
        if overlap < min_overlap:
            min_overlap = overlap
            min_axis = i
            min_sign = 1.0 if pos_b[i] >= pos_a[i] else -1.0

    normal = tuple(
        min_sign if i == min_axis else 0.0 for i in range(ndim)
    )
    return normal, min_overlap


def aabb_overlaps(pos_a: Vec, half_a: Vec, pos_b: Vec, half_b: Vec) -> bool:
    return aabb_vs_aabb(pos_a, half_a, pos_b, half_b) is not None


def outside_vertical_bounds(
    y: float, half_height: float, lower: float, upper: float,
) -> bool:
    """True when the box spanning y ± half_height pokes past either boundary."""
    return y + half_height > upper or y - half_height < lower
