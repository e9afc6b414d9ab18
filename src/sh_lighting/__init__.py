"""Monte Carlo projection of spherical functions onto order-2 spherical harmonics."""

from .core import (
    Direction,
    SHBasis,
    make_rng,
    project_function,
    integrate_over_sphere,
    integrate_over_hemisphere,
)
from .lighting import CubemapLight
from .utils.config import ProjectionConfig

__version__ = "0.1.0"
__all__ = [
    "Direction",
    "SHBasis",
    "make_rng",
    "project_function",
    "integrate_over_sphere",
    "integrate_over_hemisphere",
    "CubemapLight",
    "ProjectionConfig",
]
