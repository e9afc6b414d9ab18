"""Numeric core: directions, SH basis vectors and Monte Carlo estimators.

Main Components:
    Direction: Immutable unit vector with sphere/hemisphere sampling
    SHBasis: 9-coefficient order-2 spherical harmonics vector
    project_function: Monte Carlo projection of a function onto SHBasis
    integrate_over_sphere / integrate_over_hemisphere: Plain MC integrals

Example:
    >>> from sh_lighting.core import Direction, SHBasis, make_rng
    >>>
    >>> rng = make_rng(42)
    >>> sh = SHBasis.project_function(lambda x, y, z: 1.0, rng, 10000)
    >>> round(sh.evaluate_at(Direction(0.0, 0.0, 1.0)), 1)
    1.0
"""

from .direction import Direction, RandomSource, make_rng, NORM_TOLERANCE
from .spherical_harmonics import (
    SHBasis,
    eval_sh_basis,
    project_samples,
    reconstruct_from_sh,
    sample_uniform_sphere_batch,
    verify_sh_orthonormality,
    N_SH_COEFFS,
    SH_ORDER,
)
from .monte_carlo import (
    SphereFunction,
    project_function,
    integrate_over_sphere,
    integrate_over_hemisphere,
)

__all__ = [
    # Core classes
    "Direction",
    "SHBasis",
    "RandomSource",
    "SphereFunction",
    "make_rng",

    # Monte Carlo
    "project_function",
    "integrate_over_sphere",
    "integrate_over_hemisphere",

    # Batched helpers
    "eval_sh_basis",
    "project_samples",
    "reconstruct_from_sh",
    "sample_uniform_sphere_batch",
    "verify_sh_orthonormality",

    # Constants
    "N_SH_COEFFS",
    "SH_ORDER",
    "NORM_TOLERANCE",
]
