"""Command line entry point: render a YAML scene to a PPM image."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rayforge.camera import Camera, FocusData
from rayforge.renderer import Renderer
from rayforge.scene import SceneError, load_scene_file
from rayforge.vector import Vec3

_ASPECT_RATIO = 3.0 / 2.0


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rayforge", description="Render a YAML scene to a plain PPM image."
    )
    parser.add_argument(
        "scene", nargs="?", default="examples/from_scene/scene.yaml", help="scene file"
    )
    parser.add_argument("-o", "--output", default="laifilfse.ppm", help="output PPM file")
    parser.add_argument("--width", type=_positive_int, default=1080, help="image width")
    parser.add_argument(
        "--height", type=_positive_int, default=None, help="image height (default: width / 1.5)"
    )
    parser.add_argument("--samples", type=_positive_int, default=128, help="passes per pixel")
    parser.add_argument("--bounces", type=_positive_int, default=50, help="maximum ray depth")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    return parser


def _camera() -> Camera:
    return (
        Camera.builder()
        .set_origin(Vec3(13.0, 2.0, 3.0))
        .set_look_at(Vec3(0.0, 0.0, 0.0))
        .set_v_up(Vec3(0.0, 1.0, 0.0))
        .set_focus(FocusData(aperture=0.1, focus_distance=10.0))
        .set_vertical_fov(20.0)
        .build()
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Render the scene; returns the process exit status."""
    args = _parser().parse_args(argv)
    height = args.height if args.height is not None else int(args.width / _ASPECT_RATIO)
    try:
        _atlas, world = load_scene_file(args.scene)
        renderer = Renderer(
            world,
            _camera(),
            width=args.width,
            height=height,
            samples=args.samples,
            bounces=args.bounces,
            progress=args.progress,
        )
        renderer.render().save(args.output)
    except (SceneError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())