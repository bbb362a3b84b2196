"""Monte Carlo path-tracing renderer that accumulates independent sample passes."""

from __future__ import annotations

import copy
import math
import os
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterator

from tqdm import tqdm

from rayforge.camera import Camera
from rayforge.canvas import Canvas
from rayforge.collision import Hittable
from rayforge.ray import Ray
from rayforge.vector import Vec3
from rayforge.world import World

_BLACK = Vec3(0.0, 0.0, 0.0)
_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY = Vec3(0.5, 0.7, 1.0)


@dataclass
class RenderPass:
    """A snapshot of the image after ``current_pass`` of ``total_passes`` samples."""

    canvas: Canvas
    current_pass: int
    total_passes: int


@dataclass
class Render:
    """A finished, normalised and gamma-corrected image."""

    canvas: Canvas

    def save(self, path: str | os.PathLike[str]) -> None:
        self.canvas.write_ppm(path)

    def to_rgba_bytes(self) -> bytes:
        return self.canvas.to_rgba_bytes()


def ray_color(world: Hittable, ray: Ray, depth: int) -> Vec3:
    """Colour seen along ``ray``, following at most ``depth`` scatterings."""
    attenuation = _WHITE
    for _ in range(depth):
        record = world.hit(ray, 0.001, math.inf)
        if record is None:
            t = 0.5 * (ray.direction.normalized().y + 1.0)
            return attenuation.mul(_WHITE.lerp(_SKY, t))
        scattered = record.material.scatter(ray, record)
        if scattered is None:
            return _BLACK
        attenuation = attenuation.mul(record.material.albedo)
        ray = scattered
    return _BLACK


def _fraction(numerator: float, denominator: int) -> float:
    if denominator == 0:
        return math.copysign(math.inf, numerator) if numerator else math.nan
    return numerator / denominator


class Renderer:
    """Renders a world through a camera, one full-image sample pass at a time."""

    def __init__(
        self,
        world: World,
        camera: Camera,
        *,
        width: int = 960,
        height: int = 540,
        samples: int = 100,
        bounces: int = 2,
        progress: bool = False,
    ) -> None:
        self.world = world
        self.camera = camera
        self.width = width
        self.height = height
        self.samples = samples
        self.bounces = bounces
        self.progress = progress

    def _compute_pass(self) -> Canvas:
        canvas = Canvas(self.height, self.width)
        scene = self.world.hittables
        for j in range(self.height):
            for i in range(self.width):
                u = _fraction(i + random.random(), self.width - 1)
                v = _fraction(j + random.random(), self.height - 1)
                ray = self.camera.get_ray(u, v)
                # Canvas rows run downwards while the camera's v axis runs upwards.
                canvas.set_pixel(i, self.height - 1 - j, ray_color(scene, ray, self.bounces))
        return canvas

    def _accumulate(self) -> Iterator[Canvas]:
        total = Canvas(self.height, self.width)
        if self.progress:
            print("Starting render ...")
        with tqdm(total=self.samples, unit="pass", disable=not self.progress) as bar:
            for _ in range(self.samples):
                total += self._compute_pass()
                bar.update(1)
                yield total

    def render_passes(self) -> Iterator[RenderPass]:
        """Yield a corrected snapshot after each pass; stop iterating to stop rendering."""
        for number, accumulated in enumerate(self._accumulate(), start=1):
            snapshot = copy.copy(accumulated)
            snapshot.normalize()
            snapshot.gamma_correction()
            yield RenderPass(snapshot, number, self.samples)

    def render(self) -> Render:
        """Render all passes and return the averaged, gamma-corrected image."""
        last = deque(self._accumulate(), maxlen=1)
        canvas = last[0] if last else Canvas(self.height, self.width)
        canvas.normalize()
        canvas.gamma_correction()
        return Render(canvas)