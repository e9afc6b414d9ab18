"""Unit directions on the sphere and random direction sampling.

Directions are small immutable value objects. Random sampling draws from
any object exposing ``uniform(low, high)``, which ``numpy.random.Generator``
already provides.
"""

import math
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

import numpy as np

# Allowed deviation of the squared norm from 1
NORM_TOLERANCE = 1e-5


class RandomSource(Protocol):
    """Source of uniform floats in ``[low, high)``."""

    def uniform(self, low: float, high: float) -> float:
        ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random source for sampling.

    Args:
        seed: Random seed (None for fresh OS entropy)

    Returns:
        numpy Generator, usable anywhere a RandomSource is expected
    """
    return np.random.default_rng(seed)


@dataclass(frozen=True)
class Direction:
    """A unit vector in 3D.

    Attributes:
        x, y, z: Components. ``x*x + y*y + z*z`` must be within
            ``NORM_TOLERANCE`` of 1.

    Example:
        >>> d = Direction(0.0, 1.0, 0.0)
        >>> d.dot(Direction(0.0, 0.0, 1.0))
        0.0
        >>> Direction(2.0, 0.0, 1.0)
        Traceback (most recent call last):
        ...
        ValueError: Direction is not normalized: ...
    """
    x: float
    y: float
    z: float

    def __post_init__(self):
        """Validate unit length."""
        norm_sq = self.x * self.x + self.y * self.y + self.z * self.z
        if not abs(norm_sq - 1.0) < NORM_TOLERANCE:
            raise ValueError(
                f"Direction is not normalized: ({self.x}, {self.y}, {self.z}) "
                f"has squared length {norm_sq}"
            )

    @classmethod
    def from_vector(cls, x: float, y: float, z: float) -> "Direction":
        """Normalize an arbitrary non-zero vector into a Direction."""
        norm = math.sqrt(x * x + y * y + z * z)
        if norm == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return cls(x / norm, y / norm, z / norm)

    @classmethod
    def sample_uniform_sphere(cls, rng: RandomSource) -> "Direction":
        """Sample a direction uniformly on the unit sphere.

        Uses rejection sampling: points are drawn in the cube [-1, 1)^3 and
        retried until one falls inside the unit ball, then projected onto
        the sphere. On average 6/pi (about 1.91) candidates are drawn per
        accepted sample. There is no retry limit.

        Args:
            rng: Random source

        Returns:
            Uniformly distributed unit direction
        """
        while True:
            x = rng.uniform(-1.0, 1.0)
            y = rng.uniform(-1.0, 1.0)
            z = rng.uniform(-1.0, 1.0)

            r2 = x * x + y * y + z * z
            # The origin has no direction, treat it like a point outside the ball
            if r2 > 1.0 or r2 == 0.0:
                continue

            r = math.sqrt(r2)
            return cls(x / r, y / r, z / r)

    @classmethod
    def sample_hemisphere(cls, normal: "Direction", rng: RandomSource) -> "Direction":
        """Sample a direction uniformly over the hemisphere around ``normal``.

        A uniform sphere sample is mirrored through the origin when it lies
        below the hemisphere, so the result has pdf 1 / (2*pi) per steradian
        and always satisfies ``normal.dot(result) >= 0``.

        Args:
            normal: Hemisphere orientation
            rng: Random source

        Returns:
            Unit direction in the hemisphere
        """
        direction = cls.sample_uniform_sphere(rng)
        if normal.dot(direction) < 0.0:
            return direction.negated()
        return direction

    def dot(self, other: "Direction") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def negated(self) -> "Direction":
        return Direction(-self.x, -self.y, -self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        """Components as a float64 array, shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)
