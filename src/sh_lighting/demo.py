"""Command line demo: project a toy lighting function and compare.

Usage:
    # Project the sky cubemap with default settings
    python sh_demo.py

    # Lambertian cosine lobe with more samples and a progress bar
    python sh_demo.py --function cosine --samples 100000 --progress

    # Print the basis evaluated at a single direction
    python sh_demo.py --direction 0 1 0
"""

import argparse
import logging
from typing import Dict, List, Optional

from .core import (
    Direction,
    SHBasis,
    SphereFunction,
    integrate_over_sphere,
    integrate_over_hemisphere,
)
from .core.spherical_harmonics import SH_C0
from .lighting import CubemapLight, constant, x_squared, clamped_cosine
from .utils.config import ProjectionConfig

UP = Direction(0.0, 0.0, 1.0)

AXIS_DIRECTIONS = [
    ("+X", Direction(1.0, 0.0, 0.0)),
    ("-X", Direction(-1.0, 0.0, 0.0)),
    ("+Y", Direction(0.0, 1.0, 0.0)),
    ("-Y", Direction(0.0, -1.0, 0.0)),
    ("+Z", Direction(0.0, 0.0, 1.0)),
    ("-Z", Direction(0.0, 0.0, -1.0)),
]


def build_functions() -> Dict[str, SphereFunction]:
    """Lighting functions selectable from the command line."""
    return {
        "cubemap": CubemapLight.sky(),
        "constant": constant(1.0),
        "x2": x_squared,
        "cosine": clamped_cosine(UP),
    }


def run_projection(function_name: str, config: ProjectionConfig) -> SHBasis:
    """Project a named function and print a comparison report.

    Args:
        function_name: Key of :func:`build_functions`
        config: Sample count, seed and progress settings

    Returns:
        Projected basis vector
    """
    func = build_functions()[function_name]
    rng = config.make_rng()

    print(f"Projecting '{function_name}' with {config.n_samples} samples (seed={config.seed})")
    sh = SHBasis.project_function(func, rng, config.n_samples, show_progress=config.show_progress)

    print("\nSH coefficients:")
    for i, c in enumerate(sh.coefficients):
        print(f"  [{i}] {c: .6f}")

    print("\nDirection   true        SH approx   error")
    scratch = SHBasis()
    for label, direction in AXIS_DIRECTIONS:
        true_value = func(direction.x, direction.y, direction.z)
        approx = sh.evaluate_at(direction, scratch)
        print(f"  {label:<8} {true_value: .6f}  {approx: .6f}  {approx - true_value: .6f}")

    # Exact projection of f = 1: only the band-0 term is non-zero
    one = SHBasis.from_coefficients([SH_C0] + [0.0] * 8)
    integral = integrate_over_sphere(func, rng, config.n_samples)
    print(f"\nSphere integral (MC):        {integral:.6f}")
    print(f"Sphere integral (SH <f, 1>): {sh.inner_product(one):.6f}")

    upper = integrate_over_hemisphere(UP, func, rng, config.n_samples)
    print(f"Upper hemisphere integral:   {upper:.6f}")

    return sh


def print_direction_basis(x: float, y: float, z: float) -> SHBasis:
    """Print the basis functions evaluated at (x, y, z)."""
    direction = Direction(x, y, z)
    sh = SHBasis.from_direction(direction)
    print(f"Result is {sh}")
    return sh


def main(argv: Optional[List[str]] = None):
    """Entry point for the projection demo."""
    parser = argparse.ArgumentParser(
        description="Project toy lighting functions onto order-2 spherical harmonics"
    )
    parser.add_argument(
        "--function",
        choices=sorted(build_functions()),
        default="cubemap",
        help="Lighting function to project"
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=10000,
        help="Number of Monte Carlo samples"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed"
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while projecting"
    )
    parser.add_argument(
        "--direction",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        help="Print the SH basis at this unit direction and exit"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.direction is not None:
        try:
            print_direction_basis(*args.direction)
        except ValueError as e:
            parser.error(str(e))
        return

    try:
        config = ProjectionConfig(
            n_samples=args.samples,
            seed=args.seed,
            show_progress=args.progress
        )
    except ValueError as e:
        parser.error(str(e))

    run_projection(args.function, config)


if __name__ == "__main__":
    main()
