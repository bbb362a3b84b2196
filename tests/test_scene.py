import math

import pytest

from rayforge.materials import Dielectric, Diffuse, Metal
from rayforge.ray import Ray
from rayforge.scene import SceneError, load_scene, load_scene_file, parse_scene
from rayforge.vector import Vec3

MAP_SCENE = """
materials:
  Large1:
    Dielectric:
      refractive_index: 1.5
  Large2:
    Diffuse:
      albedo: [0.4, 0.2, 0.1]
  Large3:
    Metal:
      albedo: [0.7, 0.6, 0.5]
      fuziness: 0.0
objects:
  - object_id: glass
    geometry:
      Sphere:
        center: [0.0, 1.0, 0.0]
        radius: 1.0
    material: Large1
  - object_id: matte
    geometry:
      Sphere:
        center: [-4.0, 1.0, 0.0]
        radius: 1.0
    material: Large2
  - object_id: mirror
    geometry:
      Sphere:
        center: [4.0, 1.0, 0.0]
        radius: 1.0
    material: Large3
"""

TAG_SCENE = """
materials:
  shiny: !Metal
    albedo: [0.7, 0.6, 0.5]
    fuziness: 0.3
objects:
  - object_id: ball
    geometry: !Sphere
      center: [1, 2, 3]
      radius: 2
    material: shiny
"""


def _scene(materials, objects):
    return {"materials": materials, "objects": objects}


def _sphere(material, center=(0.0, 0.0, 0.0), radius=1.0, object_id="obj"):
    return {
        "object_id": object_id,
        "geometry": {"Sphere": {"center": list(center), "radius": radius}},
        "material": material,
    }


def test_map_form_builds_materials():
    atlas, _world = parse_scene(MAP_SCENE)
    large1 = atlas.get("Large1")
    large2 = atlas.get("Large2")
    large3 = atlas.get("Large3")
    assert isinstance(large1, Dielectric) and large1.refractive_index == 1.5
    assert isinstance(large2, Diffuse) and large2.albedo == Vec3(0.4, 0.2, 0.1)
    assert isinstance(large3, Metal) and large3.albedo == Vec3(0.7, 0.6, 0.5)
    assert large3.fuziness == 0.0


def test_atlas_keeps_default_material():
    atlas, _world = parse_scene(MAP_SCENE)
    assert set(atlas) == {"Default", "Large1", "Large2", "Large3"}


def test_world_objects_use_atlas_materials():
    atlas, world = parse_scene(MAP_SCENE)
    ray = Ray(Vec3(-10.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0))
    record = world.hittables.hit(ray, 0.0, math.inf)
    assert record is not None
    assert record.material is atlas.get("Large2")
    assert record.front_face


def test_tag_form_is_accepted():
    atlas, world = parse_scene(TAG_SCENE)
    shiny = atlas.get("shiny")
    assert isinstance(shiny, Metal)
    assert shiny.fuziness == 0.3
    box = world.hittables.bounding_box(0.0, 0.0)
    assert box.min == Vec3(-1.0, 0.0, 1.0)
    assert box.max == Vec3(3.0, 4.0, 5.0)


def test_metal_fuziness_is_clamped():
    atlas, _world = load_scene(
        _scene({"m": {"Metal": {"albedo": [1, 1, 1], "fuziness": 2.0}}}, [_sphere("m")])
    )
    assert atlas.get("m").fuziness == 1.0


def test_object_may_use_default_material():
    atlas, world = load_scene(_scene({}, [_sphere("Default")]))
    ray = Ray(Vec3(0.0, 0.0, -5.0), Vec3(0.0, 0.0, 1.0))
    record = world.hittables.hit(ray, 0.0, math.inf)
    assert record.material is atlas.get("Default")


def test_missing_material_is_reported():
    with pytest.raises(SceneError, match="Cannot find material nowhere"):
        load_scene(_scene({}, [_sphere("nowhere")]))


def test_unknown_material_variant():
    with pytest.raises(SceneError, match="Glow"):
        load_scene(_scene({"x": {"Glow": {"albedo": [1, 1, 1]}}}, [_sphere("x")]))


def test_unknown_geometry_variant():
    obj = {"object_id": "c", "geometry": {"Cube": {"size": 1}}, "material": "Default"}
    with pytest.raises(SceneError, match="Cube"):
        load_scene(_scene({}, [obj]))


def test_missing_field_is_reported():
    with pytest.raises(SceneError, match="refractive_index"):
        load_scene(_scene({"g": {"Dielectric": {}}}, [_sphere("g")]))


def test_point_needs_three_components():
    with pytest.raises(SceneError, match="center"):
        load_scene(_scene({}, [_sphere("Default", center=(1.0, 2.0))]))


def test_number_must_not_be_text():
    obj = _sphere("Default")
    obj["geometry"]["Sphere"]["radius"] = "big"
    with pytest.raises(SceneError, match="radius"):
        load_scene(_scene({}, [obj]))


def test_missing_sections_are_errors():
    with pytest.raises(SceneError, match="materials"):
        load_scene({"objects": []})
    with pytest.raises(SceneError, match="objects"):
        load_scene({"materials": {}})


def test_empty_object_list_is_an_error():
    with pytest.raises(SceneError, match="empty"):
        load_scene(_scene({}, []))


def test_invalid_yaml_is_an_error():
    with pytest.raises(SceneError):
        parse_scene("materials: [unclosed")


def test_scene_error_is_value_error():
    with pytest.raises(ValueError):
        parse_scene("just a string")


def test_load_scene_file_matches_parse(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(MAP_SCENE, encoding="utf-8")
    atlas, _world = load_scene_file(path)
    assert set(atlas) == set(parse_scene(MAP_SCENE)[0])


def test_load_scene_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene_file(tmp_path / "absent.yaml")