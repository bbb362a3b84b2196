"""Pinhole and thin-lens cameras that turn image coordinates into rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rayforge.ray import Ray
from rayforge.vector import Vec3, random_in_unit_disk


@dataclass(frozen=True, slots=True)
class FocusData:
    """Thin-lens settings: lens aperture and distance to the plane in focus."""

    aperture: float
    focus_distance: float


@dataclass(frozen=True, slots=True)
class Camera:
    """A camera with a precomputed viewport; build it with :meth:`Camera.builder`."""

    origin: Vec3
    horizontal: Vec3
    vertical: Vec3
    lower_left_corner: Vec3
    u: Vec3
    v: Vec3
    lens_radius: float | None = None

    @staticmethod
    def builder() -> CameraBuilder:
        return CameraBuilder()

    @property
    def position(self) -> Vec3:
        return self.origin

    def get_ray(self, u: float, v: float) -> Ray:
        """Ray through the viewport point at fractions ``u`` (right) and ``v`` (up)."""
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        if self.lens_radius is None:
            return Ray(self.origin, target - self.origin)
        rd = random_in_unit_disk() * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        return Ray(self.origin + offset, target - self.origin - offset)


@dataclass
class CameraBuilder:
    """Collects camera settings; every setter returns the builder for chaining."""

    origin: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    v_up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    look_at: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 1.0))
    vertical_fov: float = 40.0
    aspect_ratio: float = 16.0 / 9.0
    focus: FocusData | None = None

    def set_origin(self, origin: Vec3) -> CameraBuilder:
        self.origin = origin
        return self

    def set_v_up(self, v_up: Vec3) -> CameraBuilder:
        self.v_up = v_up
        return self

    def set_look_at(self, look_at: Vec3) -> CameraBuilder:
        self.look_at = look_at
        return self

    def set_vertical_fov(self, vertical_fov: float) -> CameraBuilder:
        self.vertical_fov = vertical_fov
        return self

    def set_aspect_ratio(self, aspect_ratio: float) -> CameraBuilder:
        self.aspect_ratio = aspect_ratio
        return self

    def set_focus(self, focus: FocusData) -> CameraBuilder:
        self.focus = focus
        return self

    def build(self) -> Camera:
        h = math.tan(self.vertical_fov * math.pi / 360.0)
        viewport_height = 2.0 * h
        viewport_width = self.aspect_ratio * viewport_height

        w = (self.origin - self.look_at).normalized()
        u = self.v_up.cross(w).normalized()
        v = w.cross(u)

        scale = self.focus.focus_distance if self.focus is not None else 1.0
        horizontal = u * (viewport_width * scale)
        vertical = v * (viewport_height * scale)
        lower_left_corner = self.origin - horizontal / 2.0 - vertical / 2.0 - w * scale

        return Camera(
            origin=self.origin,
            horizontal=horizontal,
            vertical=vertical,
            lower_left_corner=lower_left_corner,
            u=u,
            v=v,
            lens_radius=self.focus.aperture / 2.0 if self.focus is not None else None,
        )