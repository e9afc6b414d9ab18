"""Monte Carlo SH projection and spherical integration.

All estimators draw directions one at a time from a caller-supplied random
source, so results are reproducible for a fixed seed and sample count.
Variance falls as O(1/N); no stratification or importance sampling is done.
"""

import logging
import math
from typing import Callable

from tqdm import tqdm

from .direction import Direction, RandomSource
from .spherical_harmonics import SHBasis

logger = logging.getLogger(__name__)

# Scalar function of direction components (x, y, z)
SphereFunction = Callable[[float, float, float], float]

SPHERE_SOLID_ANGLE = 4.0 * math.pi
HEMISPHERE_SOLID_ANGLE = 2.0 * math.pi


def _check_count(count: int) -> None:
    if count <= 0:
        raise ValueError(f"Sample count must be positive, got {count}")


def project_function(
    func: SphereFunction,
    rng: RandomSource,
    count: int,
    show_progress: bool = False
) -> SHBasis:
    """Project a function onto the order-2 SH basis.

    Each sample draws a uniform sphere direction, evaluates the basis there,
    weights it by ``func`` and accumulates. The sum is divided by ``count``,
    giving an unbiased estimate of ``(1 / 4pi) * int f Y_i dw`` per
    coefficient.

    Args:
        func: Function to project, called as ``func(x, y, z)``
        rng: Random source
        count: Number of samples
        show_progress: Show a tqdm progress bar

    Returns:
        Projected basis vector
    """
    _check_count(count)

    result = SHBasis()
    scratch = SHBasis()

    iterator = range(count)
    samples = tqdm(iterator, desc="Projecting", unit="sample") if show_progress else iterator

    for _ in samples:
        direction = Direction.sample_uniform_sphere(rng)
        scratch.evaluate_basis_from_direction(direction)
        scratch.scale_in_place(func(direction.x, direction.y, direction.z))
        result.accumulate_in_place(scratch)

    result.scale_in_place(1.0 / count)
    logger.debug(f"Projected function with {count} samples: {result}")
    return result


def integrate_over_sphere(func: SphereFunction, rng: RandomSource, count: int) -> float:
    """Estimate ``int func dw`` over the whole sphere.

    Args:
        func: Integrand, called as ``func(x, y, z)``
        rng: Random source
        count: Number of samples

    Returns:
        Integral estimate
    """
    _check_count(count)

    total = 0.0
    for _ in range(count):
        direction = Direction.sample_uniform_sphere(rng)
        total += func(direction.x, direction.y, direction.z)

    return SPHERE_SOLID_ANGLE * total / count


def integrate_over_hemisphere(
    normal: Direction,
    func: SphereFunction,
    rng: RandomSource,
    count: int
) -> float:
    """Estimate ``int func dw`` over the hemisphere around ``normal``.

    Samples come from :meth:`Direction.sample_hemisphere`, which is uniform
    over the hemisphere's 2pi steradians, so the sample mean is scaled by
    2pi.

    Args:
        normal: Hemisphere orientation
        func: Integrand, called as ``func(x, y, z)``
        rng: Random source
        count: Number of samples

    Returns:
        Integral estimate
    """
    _check_count(count)

    total = 0.0
    for _ in range(count):
        direction = Direction.sample_hemisphere(normal, rng)
        total += func(direction.x, direction.y, direction.z)

    return HEMISPHERE_SOLID_ANGLE * total / count
