# rayforge

rayforge is a compact path tracer. It renders scenes made of spheres with
diffuse, metallic and glass materials, speeds up ray intersection with a
bounding volume hierarchy, supports depth of field through a thin-lens
camera, and writes the result as a plain-text (P3) PPM image.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `rayforge` command renders a YAML scene to a PPM file:

```
rayforge --help
rayforge scene.yaml -o out.ppm --width 600 --samples 16 --bounces 20 --progress
```

Arguments and options:

- `scene` – the scene file; defaults to `examples/from_scene/scene.yaml`
  relative to the working directory. No scene file is installed with the
  package, so pass your own.
- `-o`, `--output` – the PPM file to write (default `laifilfse.ppm`).
- `--width` – image width in pixels (default 1080).
- `--height` – image height in pixels (default: width divided by 1.5).
- `--samples` – number of sample passes per pixel (default 128).
- `--bounces` – maximum number of scatterings per ray (default 50).
- `--progress` – print a start message and show a progress bar.

Width, height, samples and bounces must be positive integers. The camera is
fixed: it sits at (13, 2, 3), looks at the origin with a 20° vertical field
of view, and uses an aperture of 0.1 focused at distance 10. A malformed
scene or an unreadable or unwritable file is reported on standard error and
the command exits with status 1.

## Scene files

A scene lists named materials and the objects that use them. Every object
refers to a material by name; a name that is not defined is an error. A
material named `Default` (a grey diffuse surface) is always available, and a
scene may redefine it.

```yaml
materials:
  ground:
    Diffuse:
      albedo: [0.5, 0.5, 0.5]
  glass:
    Dielectric:
      refractive_index: 1.5
  mirror:
    Metal:
      albedo: [0.7, 0.6, 0.5]
      fuziness: 0.0

objects:
  - object_id: floor
    geometry:
      Sphere:
        center: [0.0, -1000.0, 0.0]
        radius: 1000.0
    material: ground
  - object_id: ball
    geometry:
      Sphere:
        center: [0.0, 1.0, 0.0]
        radius: 1.0
    material: glass
```

A variant may also be written as a YAML tag, for example
`geometry: !Sphere {center: [0, 1, 0], radius: 1}`. Metal fuzziness is
clamped to the range 0 to 1. A scene with no objects is an error.

`rayforge.scene` offers three entry points, all returning a
`(MaterialAtlas, World)` pair and raising `SceneError` (a `ValueError`) for
malformed or inconsistent scenes:

- `load_scene(data)` – from an already parsed mapping,
- `parse_scene(text)` – from YAML text,
- `load_scene_file(path)` – from a YAML file.

## Library use

```python
from rayforge.vector import Vec3
from rayforge.camera import Camera, FocusData
from rayforge.scene import load_scene_file
from rayforge.renderer import Renderer

camera = (
    Camera.builder()
    .set_origin(Vec3(13.0, 2.0, 3.0))
    .set_look_at(Vec3(0.0, 0.0, 0.0))
    .set_v_up(Vec3(0.0, 1.0, 0.0))
    .set_focus(FocusData(aperture=0.1, focus_distance=10.0))
    .set_vertical_fov(20.0)
    .build()
)

atlas, world = load_scene_file("scene.yaml")

render = Renderer(world, camera, width=300, height=200, samples=8, bounces=10).render()
render.save("out.ppm")
```

`Renderer` takes the keyword arguments `width` (default 960), `height`
(default 540), `samples` (default 100), `bounces` (default 2) and `progress`
(default off). Each sample is rendered as a full pass over the image; passes
are averaged and gamma corrected. `Renderer.render_passes()` yields a
`RenderPass` (`canvas`, `current_pass`, `total_passes`) after every completed
pass, so a caller can show progress or stop early by leaving the loop.
`Render.save(path)` writes a PPM file and `Render.to_rgba_bytes()` gives the
image as packed RGBA bytes with an opaque alpha channel. The underlying
`Canvas` also offers `pixels()` and `write_ppm(path)`.

Scenes can also be built in code:

```python
from rayforge.vector import Vec3
from rayforge.materials import Dielectric, Diffuse, Metal
from rayforge.material_atlas import MaterialAtlas
from rayforge.sphere import Sphere
from rayforge.world import World

atlas = MaterialAtlas()
atlas.insert("glass", Dielectric(1.5))
atlas.insert("brown", Diffuse(Vec3(0.4, 0.2, 0.1)))
atlas.insert("steel", Metal(Vec3(0.7, 0.6, 0.5), 0.0))

world = (
    World.builder()
    .add_object(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, atlas.get("glass")))
    .add_object(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, atlas.get("brown")))
    .add_object(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, atlas.get("steel")))
    .build()
)
```

`WorldBuilder.build()` raises `ValueError` when no objects were added. The
built world's `hittables` is a `BVHNode` whose `hit(ray, t_min, t_max)`
returns the nearest `HitRecord` or `None`.

## What rayforge does not do

rayforge has no interactive viewer or window: images are only written to
PPM files or returned as bytes. Spheres are the only geometry, there are no
light-emitting materials (light comes from the sky gradient), and all
passes are rendered one after another in a single process.