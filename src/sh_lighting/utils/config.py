"""Configuration for Monte Carlo projection runs."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.direction import make_rng


@dataclass
class ProjectionConfig:
    """Configuration for Monte Carlo projection and integration.

    Attributes:
        n_samples: Monte Carlo samples per projection or integral (default: 10000)
        seed: Random seed, None for nondeterministic runs (default: 42)
        show_progress: Show a progress bar while projecting (default: False)
    """

    n_samples: int = 10000
    seed: Optional[int] = 42
    show_progress: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.n_samples, bool) or not isinstance(self.n_samples, (int, np.integer)):
            raise ValueError(f"n_samples must be an integer, got {self.n_samples!r}")
        if self.n_samples <= 0:
            raise ValueError(f"n_samples must be positive, got {self.n_samples}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

    def make_rng(self) -> np.random.Generator:
        """Fresh random source seeded from this configuration."""
        return make_rng(self.seed)
