"""Surface materials that decide how rays scatter off a hit."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from rayforge.collision import HitRecord
from rayforge.ray import Ray
from rayforge.vector import Vec3, random_in_unit_sphere, random_unit_vector, schlick


class Material(ABC):
    """A surface response: a scattered ray and an attenuation colour."""

    albedo: Vec3

    @abstractmethod
    def scatter(self, ray_in: Ray, record: HitRecord) -> Ray | None:
        """Return the scattered ray, or None if the ray is absorbed."""


@dataclass(eq=False)
class Diffuse(Material):
    """Lambertian surface."""

    albedo: Vec3 = field(default_factory=lambda: Vec3(0.5, 0.5, 0.5))

    def scatter(self, ray_in: Ray, record: HitRecord) -> Ray | None:
        return Ray(record.point, record.normal + random_unit_vector())


@dataclass(eq=False)
class Metal(Material):
    """Reflective surface; ``fuziness`` is clamped to ``[0, 1]``."""

    albedo: Vec3 = field(default_factory=lambda: Vec3(0.5, 0.5, 0.5))
    fuziness: float = 0.0

    def __post_init__(self) -> None:
        self.fuziness = min(max(self.fuziness, 0.0), 1.0)

    def scatter(self, ray_in: Ray, record: HitRecord) -> Ray | None:
        reflected = ray_in.direction.reflect(record.normal).normalized()
        reflected = reflected + random_in_unit_sphere() * self.fuziness
        if reflected.dot(record.normal) > 0.0:
            return Ray(record.point, reflected)
        return None


@dataclass(eq=False)
class Dielectric(Material):
    """Transparent surface that refracts or reflects, such as glass."""

    refractive_index: float = 0.5
    albedo: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0), init=False)

    def scatter(self, ray_in: Ray, record: HitRecord) -> Ray | None:
        eta = 1.0 / self.refractive_index if record.front_face else self.refractive_index
        unit_direction = ray_in.direction.normalized()
        cos_theta = min((-unit_direction).dot(record.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        if eta * sin_theta > 1.0 or random.random() < schlick(cos_theta, eta):
            return Ray(record.point, unit_direction.reflect(record.normal))
        return Ray(record.point, unit_direction.refract(record.normal, eta))