"""Rays cast through the scene."""

from __future__ import annotations

from dataclasses import dataclass

from rayforge.vector import Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line with an origin and a (not necessarily unit) direction."""

    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """Point reached after travelling ``t`` times the direction."""
        return self.origin + self.direction * t