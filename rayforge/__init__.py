"""A compact path tracer with spheres, BVH acceleration, YAML scenes and PPM output."""

__version__ = "0.1.0"