[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rayforge"
version = "0.1.0"
description = "A small path tracer with spheres, BVH acceleration, diffuse/metal/glass materials, YAML scenes and PPM output"
requires-python = ">=3.10"
keywords = ["raytracing", "path tracing", "rendering", "bvh", "ppm", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyyaml",
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rayforge = "rayforge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rayforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
