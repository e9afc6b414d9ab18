"""Basic usage example for SH projection of a lighting environment."""

import math

from sh_lighting import (
    CubemapLight,
    Direction,
    ProjectionConfig,
    SHBasis,
    integrate_over_hemisphere,
)
from sh_lighting.lighting import clamped_cosine


def example_project_cubemap():
    """Project a sky cubemap and evaluate it in a few directions."""
    config = ProjectionConfig(n_samples=50000, seed=0, show_progress=True)
    rng = config.make_rng()

    light = CubemapLight.sky(sky=1.0, horizon=0.4, ground=0.05)
    sh = SHBasis.project_function(light, rng, config.n_samples, show_progress=config.show_progress)

    print(f"Projected coefficients: {sh}")

    # Reuse one scratch vector for all evaluations
    scratch = SHBasis()
    for direction in [Direction(0.0, 0.0, 1.0), Direction(1.0, 0.0, 0.0), Direction(0.0, 0.0, -1.0)]:
        approx = sh.evaluate_at(direction, scratch)
        print(f"  {direction.as_tuple()}: true={light(*direction.as_tuple()):.3f} sh={approx:.3f}")


def example_irradiance():
    """Irradiance at an upward-facing surface, directly and via SH."""
    config = ProjectionConfig(n_samples=50000, seed=1)
    rng = config.make_rng()

    up = Direction(0.0, 0.0, 1.0)
    light = CubemapLight.sky()
    lobe = clamped_cosine(up)

    # Direct estimate: int L(w) (n . w) dw over the upper hemisphere
    direct = integrate_over_hemisphere(
        up, lambda x, y, z: light(x, y, z) * lobe(x, y, z), rng, config.n_samples
    )

    # SH estimate: inner product of the projected light and cosine lobe
    light_sh = SHBasis.project_function(light, rng, config.n_samples)
    lobe_sh = SHBasis.project_function(lobe, rng, config.n_samples)
    via_sh = light_sh.inner_product(lobe_sh)

    print(f"Irradiance (direct): {direct:.4f}")
    print(f"Irradiance (SH):     {via_sh:.4f}")
    print(f"Uniform sky of 1.0 would give pi = {math.pi:.4f}")


if __name__ == "__main__":
    print("=== Cubemap projection ===")
    example_project_cubemap()

    print("\n=== Irradiance ===")
    example_irradiance()
