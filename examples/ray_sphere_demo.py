#!/usr/bin/env python3
"""Intersect a single ray with a single sphere and print the result.

This script builds a sphere and a ray from the command line, runs the
intersection test, and reports the hit point or the absence of an
intersection. With --kernel the same test is repeated inside a Taichi kernel
and both results are printed.

Usage:
    python -m examples.ray_sphere_demo [options]

Options:
    --center X Y Z      Sphere center (default: 0 10 10)
    --radius R          Sphere radius (default: 5)
    --origin X Y Z      Ray origin (default: 0 0 0)
    --direction X Y Z   Ray direction, normalized by the ray (default: 0 0 1)
    --kernel            Also run the intersection inside a Taichi kernel
    --arch {cpu,gpu}    Taichi backend for --kernel (default: cpu)
    --quiet             Suppress everything except the result line

Example:
    python -m examples.ray_sphere_demo --center 0 0 0 --radius 1 --origin 0 0 -5
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

import taichi as ti

from raysphere import Ray, Sphere, Vector


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Intersect a ray with a sphere.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--center",
        type=float,
        nargs=3,
        default=[0.0, 10.0, 10.0],
        metavar=("X", "Y", "Z"),
        help="Sphere center (default: 0 10 10)",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=5.0,
        help="Sphere radius (default: 5)",
    )
    parser.add_argument(
        "--origin",
        type=float,
        nargs=3,
        default=[0.0, 0.0, 0.0],
        metavar=("X", "Y", "Z"),
        help="Ray origin (default: 0 0 0)",
    )
    parser.add_argument(
        "--direction",
        type=float,
        nargs=3,
        default=[0.0, 0.0, 1.0],
        metavar=("X", "Y", "Z"),
        help="Ray direction (default: 0 0 1)",
    )
    parser.add_argument(
        "--kernel",
        action="store_true",
        help="Also run the intersection inside a Taichi kernel",
    )
    parser.add_argument(
        "--arch",
        choices=["cpu", "gpu"],
        default="cpu",
        help="Taichi backend for --kernel (default: cpu)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def format_result(hit: Optional[Vector]) -> str:
    """Format an intersection result as the demo's report text."""
    if hit is None:
        return "No intersection"
    return f"Hit!\nIntersection point: {hit.x}, {hit.y}, {hit.z}"


def init_backend(arch: str, quiet: bool = False) -> None:
    """Initialize Taichi on the requested backend, falling back to CPU.

    Args:
        arch: "gpu" or "cpu".
        quiet: If True, suppress the fallback notice.
    """
    try:
        ti.init(arch=ti.gpu if arch == "gpu" else ti.cpu)
    except Exception:
        ti.init(arch=ti.cpu)
        if arch == "gpu" and not quiet:
            print("GPU unavailable, using CPU backend")


def intersect_in_kernel(ray: Ray, sphere: Sphere) -> Optional[Vector]:
    """Run hit_sphere inside a Taichi kernel for a single ray.

    Taichi must already be initialized.

    Returns:
        The hit point, or None on a miss.
    """
    from raysphere.geometry.sphere import SphereData, hit_sphere

    origin = ti.Vector.field(3, dtype=ti.f32, shape=())
    direction = ti.Vector.field(3, dtype=ti.f32, shape=())
    center = ti.Vector.field(3, dtype=ti.f32, shape=())
    radius = ti.field(dtype=ti.f32, shape=())
    hit = ti.field(dtype=ti.i32, shape=())
    point = ti.Vector.field(3, dtype=ti.f32, shape=())

    origin[None] = ray.origin.to_tuple()
    direction[None] = ray.direction.to_tuple()
    center[None] = sphere.center.to_tuple()
    radius[None] = sphere.radius

    @ti.kernel
    def run():
        record = hit_sphere(origin[None], direction[None], SphereData(center=center[None], radius=radius[None]))
        hit[None] = record.hit
        point[None] = record.point

    run()
    if hit[None] == 0:
        return None
    p = point[None]
    return Vector(p[0], p[1], p[2])


def main() -> int:
    """Main entry point."""
    args = parse_args()

    sphere = Sphere(Vector(*args.center), args.radius)
    ray = Ray(Vector(*args.origin), Vector(*args.direction))

    if not args.quiet:
        print(f"Testing {ray!r} against {sphere!r}")

    try:
        print(format_result(sphere.ray_intersect(ray)))

        if args.kernel:
            init_backend(args.arch, quiet=args.quiet)
            if not args.quiet:
                print("Kernel result:")
            print(format_result(intersect_in_kernel(ray, sphere)))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
