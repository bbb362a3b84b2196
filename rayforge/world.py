"""The scene's objects, organised for fast ray queries."""

from __future__ import annotations

from dataclasses import dataclass

from rayforge.bvh import BVHNode
from rayforge.collision import Hittable


@dataclass(frozen=True)
class World:
    """A built scene backed by a bounding volume hierarchy."""

    hittables: BVHNode

    @staticmethod
    def builder() -> WorldBuilder:
        return WorldBuilder()


class WorldBuilder:
    """Collects objects and builds a World from them."""

    def __init__(self) -> None:
        self._hittables: list[Hittable] = []

    def add_object(self, obj: Hittable) -> WorldBuilder:
        self._hittables.append(obj)
        return self

    def build(self) -> World:
        """Build the hierarchy; raises ValueError if there are no objects."""
        return World(BVHNode(self._hittables))