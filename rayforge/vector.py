"""Three-component vectors and the random sampling helpers used by the tracer."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, k: object) -> Vec3:
        if not isinstance(k, Real):
            return NotImplemented
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: object) -> Vec3:
        if not isinstance(k, Real):
            return NotImplemented
        return Vec3(self.x / k, self.y / k, self.z / k)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction; NaN components for a zero vector."""
        n = self.length()
        if n == 0.0:
            return Vec3(math.nan, math.nan, math.nan)
        return self / n

    def mul(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector about the given normal."""
        return self - normal * (2.0 * normal.dot(self))

    def refract(self, normal: Vec3, eta: float) -> Vec3:
        """Refract this vector through a surface; the zero vector on total internal reflection."""
        n_dot_i = normal.dot(self)
        k = 1.0 - eta * eta * (1.0 - n_dot_i * n_dot_i)
        if k < 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return self * eta - normal * (eta * n_dot_i + math.sqrt(k))

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation: ``self`` at ``t == 0`` and ``other`` at ``t == 1``."""
        return self * (1.0 - t) + other * t


def rand_range(low: float, high: float) -> float:
    """Uniform sample in ``[low, high)``."""
    return low + (high - low) * random.random()


def random_in_unit_sphere() -> Vec3:
    """Sample a point strictly inside the unit sphere, with components drawn from ``[0, 1)``."""
    while True:
        p = Vec3(random.random(), random.random(), random.random())
        if p.length_squared() < 1.0:
            return p


def random_in_unit_disk() -> Vec3:
    """Sample a point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(rand_range(-1.0, 1.0), rand_range(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector() -> Vec3:
    """Sample a direction uniformly on the unit sphere."""
    a = rand_range(0.0, 2.0 * math.pi)
    z = rand_range(-1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vec3(r * math.cos(a), r * math.sin(a), z)


def schlick(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation of the reflectance of a dielectric."""
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5