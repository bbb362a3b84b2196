"""Spheres, the only geometry in the scene."""

from __future__ import annotations

import math

from rayforge.aabb import AABB
from rayforge.collision import HitRecord, Hittable, hit_record
from rayforge.materials import Material
from rayforge.ray import Ray
from rayforge.vector import Vec3


class Sphere(Hittable):
    """A sphere with a centre, a radius and a material."""

    def __init__(self, center: Vec3, radius: float, material: Material) -> None:
        self.center = center
        self.radius = radius
        self.material = material

    def __repr__(self) -> str:
        return f"c:{self.center!r} R:{self.radius!r}"

    @property
    def position(self) -> Vec3:
        return self.center

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant <= 0.0:
            return None
        root = math.sqrt(discriminant)
        for t in ((-half_b - root) / a, (-half_b + root) / a):
            if t_min < t < t_max:
                outward_normal = (ray.at(t) - self.center) / self.radius
                return hit_record(ray, t, outward_normal, self.material)
        return None

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        extent = Vec3(self.radius, self.radius, self.radius)
        return AABB(self.center - extent, self.center + extent)