"""Bounding volume hierarchy over hittable objects."""

from __future__ import annotations

from typing import Sequence

from rayforge.aabb import AABB, surrounding_box
from rayforge.collision import HitRecord, Hittable
from rayforge.ray import Ray
from rayforge.vector import rand_range

_NO_BOX = "No bounding box in BVH constructor"


def _box_of(hittable: Hittable) -> AABB:
    box = hittable.bounding_box(0.0, 0.0)
    if box is None:
        raise ValueError(_NO_BOX)
    return box


class BVHNode(Hittable):
    """A binary tree node splitting its objects along a random axis."""

    def __init__(self, hittables: Sequence[Hittable]) -> None:
        axis = int(rand_range(0.0, 3.0))

        def key(h: Hittable) -> float:
            return _box_of(h).min[axis]

        if not hittables:
            raise ValueError("Cannot build a BVH with an empty object list")
        if len(hittables) == 1:
            left = right = hittables[0]
        elif len(hittables) == 2:
            first, second = hittables
            left, right = (first, second) if key(first) <= key(second) else (second, first)
        else:
            ordered = sorted(hittables, key=key)
            mid = len(ordered) // 2
            left = BVHNode(ordered[:mid])
            right = BVHNode(ordered[mid:])

        self.left: Hittable = left
        self.right: Hittable = right
        self.aabb: AABB = surrounding_box(_box_of(left), _box_of(right))

    def __repr__(self) -> str:
        return (
            f"BVHNode: Left={self.left.bounding_box(0.0, 0.0)!r} | "
            f"Right={self.right.bounding_box(0.0, 0.0)!r} | AABB={self.aabb!r}"
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        if not self.aabb.hit(ray, t_min, t_max):
            return None
        left = self.left.hit(ray, t_min, t_max)
        right = self.right.hit(ray, t_min, left.t if left is not None else t_max)
        if left is not None and right is not None:
            return left if left.t <= right.t else right
        return left if left is not None else right

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.aabb