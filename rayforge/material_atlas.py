"""Named registry of materials."""

from __future__ import annotations

from typing import Iterator

from rayforge.materials import Diffuse, Material


class MaterialAtlas:
    """Materials by name; always holds a diffuse ``"Default"`` material."""

    def __init__(self) -> None:
        self._atlas: dict[str, Material] = {"Default": Diffuse()}

    def __contains__(self, name: object) -> bool:
        return name in self._atlas

    def __len__(self) -> int:
        return len(self._atlas)

    def __iter__(self) -> Iterator[str]:
        return iter(self._atlas)

    def insert(self, name: str, material: Material) -> Material | None:
        """Store a material, returning the one it replaced, if any."""
        previous = self._atlas.get(name)
        self._atlas[name] = material
        return previous

    def get(self, name: str) -> Material | None:
        return self._atlas.get(name)