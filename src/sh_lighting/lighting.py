"""Toy lighting functions for projection demos and tests."""

from dataclasses import dataclass

from .core.direction import Direction
from .core.monte_carlo import SphereFunction


@dataclass
class CubemapLight:
    """Six-face environment with one scalar radiance per cube face.

    The face is chosen by the direction's dominant axis; ties resolve in
    x, y, z order.

    Attributes:
        pos_x, neg_x: Radiance of the +X / -X faces
        pos_y, neg_y: Radiance of the +Y / -Y faces
        pos_z, neg_z: Radiance of the +Z / -Z faces

    Example:
        >>> sky = CubemapLight(pos_z=2.0)
        >>> sky(0.0, 0.0, 1.0)
        2.0
        >>> sky(0.0, 0.0, -1.0)
        0.0
    """
    pos_x: float = 0.0
    neg_x: float = 0.0
    pos_y: float = 0.0
    neg_y: float = 0.0
    pos_z: float = 0.0
    neg_z: float = 0.0

    def __call__(self, x: float, y: float, z: float) -> float:
        ax, ay, az = abs(x), abs(y), abs(z)
        if ax >= ay and ax >= az:
            return self.pos_x if x >= 0 else self.neg_x
        if ay >= az:
            return self.pos_y if y >= 0 else self.neg_y
        return self.pos_z if z >= 0 else self.neg_z

    @classmethod
    def sky(cls, sky: float = 1.0, horizon: float = 0.5, ground: float = 0.1) -> "CubemapLight":
        """Bright sky above, dim ground below, horizon on the side faces."""
        return cls(
            pos_x=horizon, neg_x=horizon,
            pos_y=horizon, neg_y=horizon,
            pos_z=sky, neg_z=ground,
        )


def constant(value: float = 1.0) -> SphereFunction:
    """Function returning ``value`` everywhere."""
    def func(x: float, y: float, z: float) -> float:
        return value
    return func


def x_squared(x: float, y: float, z: float) -> float:
    return x * x


def clamped_cosine(normal: Direction) -> SphereFunction:
    """``max(0, normal . w)``, the Lambertian transfer around ``normal``."""
    def func(x: float, y: float, z: float) -> float:
        return max(0.0, normal.x * x + normal.y * y + normal.z * z)
    return func
