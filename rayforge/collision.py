"""Hit records and the interface of objects that rays can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from rayforge.aabb import AABB
from rayforge.ray import Ray
from rayforge.vector import Vec3

if TYPE_CHECKING:
    from rayforge.materials import Material


@dataclass(frozen=True, repr=False)
class HitRecord:
    """Where and how a ray hit a surface."""

    point: Vec3
    normal: Vec3
    t: float
    front_face: bool
    material: Material

    def __str__(self) -> str:
        return (
            f"Hit Record, point:{self.point!r}, normal:{self.normal!r}, "
            f"t:{self.t!r}, front_face:{self.front_face!r}"
        )

    __repr__ = __str__


def hit_record(ray: Ray, t: float, outward_normal: Vec3, material: Material) -> HitRecord:
    """Build a record whose normal always faces against the incoming ray."""
    front_face = ray.direction.dot(outward_normal) < 0.0
    normal = outward_normal if front_face else -outward_normal
    return HitRecord(ray.at(t), normal, t, front_face, material)


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the nearest hit with ``t_min < t < t_max``, or None."""

    @abstractmethod
    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        """Return a box enclosing the object, or None if it has none."""


class HittableList(Hittable):
    """A flat collection of hittables, searched in order."""

    def __init__(self, hittables: Iterable[Hittable] = ()) -> None:
        self._hittables: list[Hittable] = list(hittables)

    def __len__(self) -> int:
        return len(self._hittables)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._hittables)

    def add(self, hittable: Hittable) -> None:
        self._hittables.append(hittable)

    def clear(self) -> None:
        self._hittables.clear()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = t_max
        for obj in self._hittables:
            record = obj.hit(ray, t_min, closest_so_far)
            if record is not None:
                closest_so_far = record.t
                closest = record
        return closest

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        """None if empty or if any member lacks a box; otherwise the last member's box."""
        output: AABB | None = None
        for obj in self._hittables:
            box = obj.bounding_box(t0, t1)
            if box is None:
                return None
            output = box
        return output