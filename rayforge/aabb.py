"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rayforge.ray import Ray
from rayforge.vector import Vec3


def _reciprocal(value: float) -> float:
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True, slots=True)
class AABB:
    """A box spanned by its minimum and maximum corners."""

    min: Vec3
    max: Vec3

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Whether each axis slab overlaps the ray interval ``(t_min, t_max)``."""
        for low, high, origin, direction in zip(self.min, self.max, ray.origin, ray.direction):
            inv_d = _reciprocal(direction)
            t0 = (low - origin) * inv_d
            t1 = (high - origin) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            near = t0 if t0 > t_min else t_min
            far = t1 if t1 < t_max else t_max
            if far <= near:
                return False
        return True


def surrounding_box(box0: AABB, box1: AABB) -> AABB:
    """The smallest box that contains both boxes."""
    return AABB(
        Vec3(*(min(a, b) for a, b in zip(box0.min, box1.min))),
        Vec3(*(max(a, b) for a, b in zip(box0.max, box1.max))),
    )