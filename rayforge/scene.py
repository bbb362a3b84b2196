"""Loading scenes (materials and objects) from YAML descriptions."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import yaml

from rayforge.material_atlas import MaterialAtlas
from rayforge.materials import Dielectric, Diffuse, Material, Metal
from rayforge.sphere import Sphere
from rayforge.vector import Vec3
from rayforge.world import World


class SceneError(ValueError):
    """Raised when a scene description is malformed or inconsistent."""


class _SceneLoader(yaml.SafeLoader):
    """Safe YAML loader that reads ``!Variant value`` as ``{Variant: value}``."""


def _construct_tagged(loader: yaml.SafeLoader, suffix: str, node: yaml.Node) -> dict[str, Any]:
    if isinstance(node, yaml.MappingNode):
        value: Any = loader.construct_mapping(node, deep=True)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_scalar(node)
    return {suffix: value}


_SceneLoader.add_multi_constructor("!", _construct_tagged)


def _mapping(value: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SceneError(f"{context} must be a mapping")
    return value


def _field(body: Mapping[str, Any], key: str, context: str) -> Any:
    if key not in body:
        raise SceneError(f"{context}: missing field `{key}`")
    return body[key]


def _number(body: Mapping[str, Any], key: str, context: str) -> float:
    value = _field(body, key, context)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{context}: field `{key}` must be a number, got {value!r}")
    return float(value)


def _string(body: Mapping[str, Any], key: str, context: str) -> str:
    value = _field(body, key, context)
    if not isinstance(value, str):
        raise SceneError(f"{context}: field `{key}` must be a string, got {value!r}")
    return value


def _vector(body: Mapping[str, Any], key: str, context: str) -> Vec3:
    value = _field(body, key, context)
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneError(f"{context}: field `{key}` must be a sequence of 3 numbers")
    if any(isinstance(c, bool) or not isinstance(c, (int, float)) for c in value):
        raise SceneError(f"{context}: field `{key}` must be a sequence of 3 numbers")
    return Vec3(*(float(c) for c in value))


def _variant(value: Any, context: str) -> tuple[str, Mapping[str, Any]]:
    if not isinstance(value, Mapping) or len(value) != 1:
        raise SceneError(f"{context} must be a mapping with a single variant name")
    ((name, body),) = value.items()
    if not isinstance(name, str):
        raise SceneError(f"{context}: variant name must be a string, got {name!r}")
    return name, _mapping(body, f"{context} `{name}`")


def _build_material(name: str, description: Any) -> Material:
    context = f"material `{name}`"
    variant, body = _variant(description, context)
    match variant:
        case "Dielectric":
            return Dielectric(_number(body, "refractive_index", context))
        case "Diffuse":
            return Diffuse(_vector(body, "albedo", context))
        case "Metal":
            return Metal(_vector(body, "albedo", context), _number(body, "fuziness", context))
    raise SceneError(
        f"{context}: unknown variant `{variant}`, expected one of Dielectric, Diffuse, Metal"
    )


def _build_object(description: Any, atlas: MaterialAtlas) -> Sphere:
    body = _mapping(description, "object")
    object_id = _string(body, "object_id", "object")
    context = f"object `{object_id}`"
    material_name = _string(body, "material", context)
    variant, geometry = _variant(_field(body, "geometry", context), f"{context} geometry")
    if variant != "Sphere":
        raise SceneError(f"{context}: unknown geometry `{variant}`, expected Sphere")
    center = _vector(geometry, "center", context)
    radius = _number(geometry, "radius", context)
    material = atlas.get(material_name)
    if material is None:
        raise SceneError(f"Cannot find material {material_name}")
    return Sphere(center, radius, material)


def load_scene(data: Any) -> tuple[MaterialAtlas, World]:
    """Build a material atlas and a world from an already parsed scene description."""
    scene = _mapping(data, "scene")
    materials = _mapping(_field(scene, "materials", "scene"), "scene materials")
    objects = _field(scene, "objects", "scene")
    if not isinstance(objects, (list, tuple)):
        raise SceneError("scene objects must be a sequence")

    atlas = MaterialAtlas()
    for name, description in materials.items():
        if not isinstance(name, str):
            raise SceneError(f"material name must be a string, got {name!r}")
        atlas.insert(name, _build_material(name, description))

    builder = World.builder()
    for description in objects:
        builder.add_object(_build_object(description, atlas))
    try:
        world = builder.build()
    except ValueError as exc:
        raise SceneError(str(exc)) from exc
    return atlas, world


def parse_scene(text: str) -> tuple[MaterialAtlas, World]:
    """Parse a YAML scene description."""
    try:
        data = yaml.load(text, Loader=_SceneLoader)  # noqa: S506 - safe loader subclass
    except yaml.YAMLError as exc:
        raise SceneError(f"invalid scene YAML: {exc}") from exc
    return load_scene(data)


def load_scene_file(path: str | os.PathLike[str]) -> tuple[MaterialAtlas, World]:
    """Read and parse a YAML scene file."""
    with open(path, encoding="utf-8") as handle:
        return parse_scene(handle.read())