import dataclasses
import random

import pytest

from rayforge.camera import Camera, CameraBuilder, FocusData
from rayforge.vector import Vec3


def _close(a: Vec3, b: Vec3, tol: float = 1e-6) -> bool:
    return all(x == pytest.approx(y, abs=tol) for x, y in zip(a, b))


def _pinhole(**overrides) -> Camera:
    builder = (
        Camera.builder()
        .set_origin(overrides.get("origin", Vec3(0.0, 0.0, 0.0)))
        .set_look_at(overrides.get("look_at", Vec3(0.0, 0.0, -1.0)))
        .set_v_up(Vec3(0.0, 1.0, 0.0))
        .set_vertical_fov(overrides.get("fov", 40.0))
        .set_aspect_ratio(overrides.get("aspect", 16.0 / 9.0))
    )
    return builder.build()


def test_setters_return_the_same_builder():
    builder = Camera.builder()
    assert builder.set_origin(Vec3(1.0, 2.0, 3.0)) is builder
    assert builder.set_vertical_fov(20.0) is builder
    assert builder.origin == Vec3(1.0, 2.0, 3.0)
    assert builder.vertical_fov == 20.0


def test_builder_defaults():
    builder = CameraBuilder()
    assert builder.origin == Vec3(0.0, 0.0, 1.0)
    assert builder.v_up == Vec3(0.0, 1.0, 0.0)
    assert builder.look_at == Vec3(0.0, 0.0, 1.0)
    assert builder.vertical_fov == 40.0
    assert builder.aspect_ratio == pytest.approx(16.0 / 9.0)
    assert builder.focus is None


def test_pinhole_rays_start_at_origin():
    origin = Vec3(13.0, 2.0, 3.0)
    camera = _pinhole(origin=origin, look_at=Vec3(0.0, 0.0, 0.0))
    assert camera.lens_radius is None
    for u, v in [(0.0, 0.0), (0.3, 0.7), (1.0, 1.0)]:
        assert camera.get_ray(u, v).origin == origin


def test_centre_ray_points_at_look_at():
    origin = Vec3(13.0, 2.0, 3.0)
    look_at = Vec3(0.0, 0.0, 0.0)
    camera = _pinhole(origin=origin, look_at=look_at)
    direction = camera.get_ray(0.5, 0.5).direction.normalized()
    expected = (look_at - origin).normalized()
    assert tuple(direction) == pytest.approx(tuple(expected), abs=1e-6)


def test_corner_rays_are_symmetric_about_centre():
    camera = _pinhole(origin=Vec3(1.0, 2.0, 3.0), look_at=Vec3(-2.0, 0.5, 0.0))
    low = camera.get_ray(0.0, 0.0).direction
    high = camera.get_ray(1.0, 1.0).direction
    centre = camera.get_ray(0.5, 0.5).direction
    assert tuple(low + high) == pytest.approx(tuple(centre * 2.0), abs=1e-6)


def test_viewport_follows_aspect_ratio():
    aspect = 3.0 / 2.0
    camera = _pinhole(aspect=aspect)
    width = (camera.get_ray(1.0, 0.5).direction - camera.get_ray(0.0, 0.5).direction).length()
    height = (camera.get_ray(0.5, 1.0).direction - camera.get_ray(0.5, 0.0).direction).length()
    assert width / height == pytest.approx(aspect)


def test_v_up_orients_the_image():
    camera = _pinhole()
    top = camera.get_ray(0.5, 1.0).direction
    bottom = camera.get_ray(0.5, 0.0).direction
    assert top.y > bottom.y


def test_wider_fov_spreads_rays():
    narrow = _pinhole(fov=20.0)
    wide = _pinhole(fov=60.0)

    def spread(camera: Camera) -> float:
        d0 = camera.get_ray(0.5, 0.0).direction.normalized()
        d1 = camera.get_ray(0.5, 1.0).direction.normalized()
        return d0.dot(d1)

    assert spread(wide) < spread(narrow)


def test_worked_example_fov_90_square_viewport():
    camera = _pinhole(fov=90.0, aspect=1.0)
    direction = camera.get_ray(0.0, 0.0).direction
    assert tuple(direction) == pytest.approx((-1.0, -1.0, -1.0), abs=1e-6)


def test_defocus_rays_stay_within_lens_and_converge_on_focus_plane():
    random.seed(3)
    origin = Vec3(13.0, 2.0, 3.0)
    look_at = Vec3(0.0, 0.0, 0.0)
    focus = FocusData(aperture=0.1, focus_distance=10.0)
    camera = (
        Camera.builder()
        .set_origin(origin)
        .set_look_at(look_at)
        .set_v_up(Vec3(0.0, 1.0, 0.0))
        .set_focus(focus)
        .set_vertical_fov(20.0)
        .build()
    )
    assert camera.lens_radius == pytest.approx(focus.aperture / 2.0)
    focus_point = origin + (look_at - origin).normalized() * focus.focus_distance
    for _ in range(50):
        ray = camera.get_ray(0.5, 0.5)
        assert (ray.origin - origin).length() < camera.lens_radius + 1e-9
        assert _close(ray.origin + ray.direction, focus_point, tol=1e-9)


def test_position_is_origin():
    origin = Vec3(4.0, 5.0, 6.0)
    camera = _pinhole(origin=origin)
    assert camera.position == origin


def test_focus_data_is_immutable():
    focus = FocusData(aperture=0.1, focus_distance=10.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        focus.aperture = 0.2
    assert focus.aperture == 0.1
    assert focus.focus_distance == 10.0