"""Order-2 real spherical harmonics.

Provides the 9-coefficient ``SHBasis`` vector used throughout the package,
a compiled per-direction basis kernel, and batched NumPy helpers for
evaluation, projection and reconstruction over many directions at once.

Coefficients are stored in "coefficient space": a projection holds the
sample mean of ``f * Y_i`` under uniform sphere sampling, i.e.
``(1 / 4pi) * int f Y_i dw``. ``inner_product`` and ``evaluate_at`` rescale
back to real space, where integrating ``f = 1`` over the sphere gives 4pi.
"""

import math
from typing import Callable, Iterable, Optional

import numpy as np
from numba import njit

from .direction import Direction, RandomSource

# SH constants for the 9 band 0-2 basis functions.
# Band 1 carries the Condon-Shortley phase on its x and y terms.
SH_C0 = 0.2820947917738781          # 1 / (2 * sqrt(pi))
SH_C1_Z = 0.4886025119029199        # sqrt(3 / (4 * pi))
SH_C1_XY = -0.48860251190292        # -sqrt(3 / (4 * pi))
SH_C2_ZZ = 0.9461746957575601       # 3 * sqrt(5 / (16 * pi))
SH_C2_ZZ_OFFSET = -0.3153915652525201  # -sqrt(5 / (16 * pi))
SH_C2_XZ = -1.092548430592079       # -sqrt(15 / (4 * pi))
SH_C2_XY = 0.5462742152960395       # sqrt(15 / (16 * pi))

SH_ORDER = 2
N_SH_COEFFS = 9  # (SH_ORDER + 1)^2

# Real-space rescaling of the coefficient-space inner product: (4 * pi)^2
INNER_PRODUCT_SCALE = 16.0 * math.pi * math.pi
SPHERE_AREA = 4.0 * math.pi


@njit(cache=True)
def _eval_sh_basis_into(x: float, y: float, z: float, out: np.ndarray) -> None:
    """Write the 9 basis values for direction (x, y, z) into ``out``."""
    z2 = z * z
    out[0] = SH_C0
    out[2] = SH_C1_Z * z
    out[6] = SH_C2_ZZ * z2 + SH_C2_ZZ_OFFSET

    tmp_a = SH_C1_XY
    out[3] = tmp_a * x
    out[1] = tmp_a * y

    tmp_b = SH_C2_XZ * z
    out[7] = tmp_b * x
    out[5] = tmp_b * y

    c1 = x * x - y * y
    s1 = x * y + y * x
    tmp_c = SH_C2_XY
    out[8] = tmp_c * c1
    out[4] = tmp_c * s1


class SHBasis:
    """Fixed-length vector of 9 order-2 SH coefficients.

    Index 0 is the band-0 constant term, 1-3 are band 1 and 4-8 are band 2.
    Coefficients live in a preallocated float64 array and only change
    through whole-vector operations.

    Example:
        >>> from sh_lighting.core import SHBasis, make_rng
        >>> rng = make_rng(42)
        >>> sh = SHBasis.project_function(lambda x, y, z: x * x, rng, 10000)
        >>> round(sh.evaluate_at(Direction(1.0, 0.0, 0.0)), 1)
        1.0
    """

    __slots__ = ("_coeffs",)

    def __init__(self):
        self._coeffs = np.zeros(N_SH_COEFFS, dtype=np.float64)

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[float]) -> "SHBasis":
        """Build a basis vector from exactly 9 coefficient values."""
        values = np.asarray(list(coefficients), dtype=np.float64)
        if values.shape != (N_SH_COEFFS,):
            raise ValueError(
                f"Expected {N_SH_COEFFS} SH coefficients, got {values.size}"
            )
        basis = cls()
        basis._coeffs[:] = values
        return basis

    @classmethod
    def from_direction(cls, direction: Direction) -> "SHBasis":
        """Basis functions evaluated at ``direction``."""
        basis = cls()
        basis.evaluate_basis_from_direction(direction)
        return basis

    @classmethod
    def project_function(
        cls,
        func: Callable[[float, float, float], float],
        rng: RandomSource,
        count: int,
        show_progress: bool = False
    ) -> "SHBasis":
        """Project ``func`` onto the basis by Monte Carlo sampling.

        See :func:`sh_lighting.core.monte_carlo.project_function`.
        """
        from .monte_carlo import project_function
        return project_function(func, rng, count, show_progress=show_progress)

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only view of the 9 coefficients."""
        view = self._coeffs.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return N_SH_COEFFS

    def __eq__(self, other):
        if not isinstance(other, SHBasis):
            return NotImplemented
        return bool(np.array_equal(self._coeffs, other._coeffs))

    __hash__ = None

    def __repr__(self) -> str:
        values = ", ".join(f"{c:.6g}" for c in self._coeffs)
        return f"SHBasis([{values}])"

    def copy(self) -> "SHBasis":
        duplicate = SHBasis()
        duplicate._coeffs[:] = self._coeffs
        return duplicate

    def evaluate_basis_from_direction(self, direction: Direction) -> None:
        """Overwrite the coefficients with the basis evaluated at ``direction``."""
        _eval_sh_basis_into(
            float(direction.x), float(direction.y), float(direction.z), self._coeffs
        )

    def scale_in_place(self, scalar: float) -> None:
        self._coeffs *= scalar

    def accumulate_in_place(self, other: "SHBasis") -> None:
        self._coeffs += other._coeffs

    def inner_product(self, other: "SHBasis") -> float:
        """Real-space inner product of the two represented functions.

        The coefficient-wise dot product is scaled by (4*pi)^2 so that the
        projection of ``f = 1`` has inner product 4pi with itself, matching
        ``int f^2 dw`` over the sphere.
        """
        return INNER_PRODUCT_SCALE * float(np.dot(self._coeffs, other._coeffs))

    def evaluate_at(self, direction: Direction, scratch: Optional["SHBasis"] = None) -> float:
        """Value of the represented function at ``direction``.

        Args:
            direction: Query direction
            scratch: Reusable basis vector, overwritten with the basis at
                ``direction``. Allocated when not given.

        Returns:
            Reconstructed function value
        """
        if scratch is None:
            scratch = SHBasis()
        scratch.evaluate_basis_from_direction(direction)
        return self.inner_product(scratch) / SPHERE_AREA

    def evaluate_many(self, directions: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`evaluate_at` over directions of shape (..., 3)."""
        return reconstruct_from_sh(directions, self)


def eval_sh_basis(directions: np.ndarray) -> np.ndarray:
    """Evaluate the order-2 SH basis functions for many directions.

    Uses the same constants and index assignment as the per-direction
    kernel behind :meth:`SHBasis.evaluate_basis_from_direction`.

    Args:
        directions: Unit vectors, shape (..., 3)

    Returns:
        Basis values, shape (..., 9)
    """
    directions = np.asarray(directions, dtype=np.float64)
    orig_shape = directions.shape[:-1]

    # Flatten for processing
    dirs = directions.reshape(-1, 3)
    x, y, z = dirs[:, 0], dirs[:, 1], dirs[:, 2]

    coeffs = np.zeros((dirs.shape[0], N_SH_COEFFS), dtype=np.float64)

    # l=0
    coeffs[:, 0] = SH_C0

    # l=1
    coeffs[:, 1] = SH_C1_XY * y
    coeffs[:, 2] = SH_C1_Z * z
    coeffs[:, 3] = SH_C1_XY * x

    # l=2
    tmp_b = SH_C2_XZ * z
    coeffs[:, 4] = SH_C2_XY * (x * y + y * x)
    coeffs[:, 5] = tmp_b * y
    coeffs[:, 6] = SH_C2_ZZ * (z * z) + SH_C2_ZZ_OFFSET
    coeffs[:, 7] = tmp_b * x
    coeffs[:, 8] = SH_C2_XY * (x * x - y * y)

    return coeffs.reshape(*orig_shape, N_SH_COEFFS)


def project_samples(directions: np.ndarray, values: np.ndarray) -> SHBasis:
    """Project pre-sampled function values onto the SH basis.

    Directions must be uniformly distributed on the sphere. The result uses
    the same normalisation as :meth:`SHBasis.project_function`.

    Args:
        directions: Sample directions, shape (N, 3)
        values: Function values at the directions, shape (N,)

    Returns:
        Projected basis vector
    """
    directions = np.asarray(directions, dtype=np.float64)
    values = np.asarray(values, dtype=np.float64)
    if values.shape != directions.shape[:1]:
        raise ValueError(
            f"Expected {directions.shape[0]} values, got array of shape {values.shape}"
        )

    sh_basis = eval_sh_basis(directions)  # (N, 9)
    coeffs = np.mean(values[:, None] * sh_basis, axis=0)
    return SHBasis.from_coefficients(coeffs)


def reconstruct_from_sh(directions: np.ndarray, basis: SHBasis) -> np.ndarray:
    """Reconstruct function values from SH coefficients.

    Args:
        directions: Query directions, shape (..., 3)
        basis: Projected basis vector

    Returns:
        Reconstructed values, shape (...)
    """
    sh_basis = eval_sh_basis(directions)  # (..., 9)
    return (INNER_PRODUCT_SCALE / SPHERE_AREA) * (sh_basis @ basis.coefficients)


def sample_uniform_sphere_batch(n_samples: int, seed: Optional[int] = None) -> np.ndarray:
    """Sample directions uniformly on unit sphere.

    Args:
        n_samples: Number of samples
        seed: Random seed

    Returns:
        Directions, shape (n_samples, 3)
    """
    rng = np.random.default_rng(seed)
    u = rng.random((n_samples, 2))

    z = 1 - 2 * u[:, 0]
    r = np.sqrt(np.maximum(0, 1 - z * z))
    phi = 2 * np.pi * u[:, 1]

    return np.stack([
        r * np.cos(phi),
        r * np.sin(phi),
        z
    ], axis=-1)


def verify_sh_orthonormality(n_samples: int = 100000, seed: int = 42) -> np.ndarray:
    """Verify SH basis orthonormality via Monte Carlo integration.

    Args:
        n_samples: Number of samples for integration
        seed: Random seed

    Returns:
        Inner product matrix, shape (9, 9). Should be close to identity.
    """
    directions = sample_uniform_sphere_batch(n_samples, seed)
    sh_values = eval_sh_basis(directions)  # (N, 9)

    # int Y_i * Y_j dw = (4pi/N) sum Y_i * Y_j
    weight = SPHERE_AREA / n_samples
    return weight * (sh_values.T @ sh_values)
