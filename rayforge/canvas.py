"""Floating-point image buffers and their export to PPM and RGBA bytes."""

from __future__ import annotations

import os
from typing import NamedTuple

import numpy as np

from rayforge.vector import Vec3


class RGBPixel(NamedTuple):
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b}"


class Canvas:
    """A height x width image of RGB floats that can accumulate several render layers."""

    def __init__(self, height: int, width: int) -> None:
        self._data = np.zeros((height, width, 3), dtype=np.float32)
        self._layers = 0

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def layers(self) -> int:
        """Number of renders summed into this canvas."""
        return self._layers

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the pixel values, shaped (height, width, 3)."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"Canvas(height={self.height}, width={self.width}, layers={self._layers})"

    def __copy__(self) -> Canvas:
        clone = Canvas.__new__(Canvas)
        clone._data = self._data.copy()
        clone._layers = self._layers
        return clone

    def _check_shape(self, other: Canvas) -> None:
        if self._data.shape != other._data.shape:
            raise ValueError(
                f"cannot add canvases of shapes {self._data.shape} and {other._data.shape}"
            )

    def __add__(self, other: object) -> Canvas:
        if not isinstance(other, Canvas):
            return NotImplemented
        self._check_shape(other)
        result = Canvas.__new__(Canvas)
        result._data = self._data + other._data
        result._layers = self._layers + other._layers
        return result

    def __iadd__(self, other: object) -> Canvas:
        if not isinstance(other, Canvas):
            return NotImplemented
        self._check_shape(other)
        self._data += other._data
        self._layers += other._layers
        return self

    def set_pixel(self, i: int, j: int, color: Vec3) -> None:
        """Set the pixel in column ``i`` and row ``j`` (row 0 at the top)."""
        if self._layers == 0:
            self._layers = 1
        self._data[j, i] = (color.x, color.y, color.z)

    def gamma_correction(self) -> None:
        """Apply gamma 2 by taking the square root of every value."""
        np.sqrt(self._data, out=self._data)

    def normalize(self) -> None:
        """Average the accumulated layers into one."""
        if self._layers > 1:
            self._data /= np.float32(self._layers)
            self._layers = 1

    def _rgb_bytes(self) -> np.ndarray:
        clean = np.nan_to_num(self._data, nan=0.0)
        scaled = np.clip(clean, 0.0, 0.999).astype(np.float32) * np.float32(256.0)
        return scaled.astype(np.uint8).reshape(-1, 3)

    def pixels(self) -> list[RGBPixel]:
        """Pixels as 8-bit colours, row by row from the top."""
        return [RGBPixel(*values) for values in self._rgb_bytes().tolist()]

    def write_ppm(self, path: str | os.PathLike[str]) -> None:
        """Write the image as a plain-text (P3) PPM file."""
        with open(path, "w", encoding="ascii", newline="\n") as out:
            out.write(f"P3\n{self.width} {self.height}\n255\n")
            out.writelines(f"{pixel}\n" for pixel in self.pixels())

    def to_rgba_bytes(self) -> bytes:
        """Pixels as packed RGBA bytes with a fully opaque alpha channel."""
        rgb = self._rgb_bytes()
        alpha = np.full((rgb.shape[0], 1), 255, dtype=np.uint8)
        return np.concatenate([rgb, alpha], axis=1).tobytes()