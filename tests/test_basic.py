"""Basic tests for configuration, lighting functions and the demo CLI."""

import math

import pytest

from sh_lighting import CubemapLight, Direction, ProjectionConfig
from sh_lighting.demo import main, build_functions, run_projection
from sh_lighting.lighting import constant, x_squared, clamped_cosine


def test_config():
    """Test configuration defaults and validation."""
    config = ProjectionConfig()
    assert config.n_samples == 10000
    assert config.seed == 42
    assert not config.show_progress

    with pytest.raises(ValueError):
        ProjectionConfig(n_samples=0)
    with pytest.raises(ValueError):
        ProjectionConfig(n_samples=2.5)
    with pytest.raises(ValueError):
        ProjectionConfig(seed=-1)

    print(" Config test passed")


def test_config_rng():
    """Test that the configured seed gives reproducible generators."""
    config = ProjectionConfig(seed=5)
    assert config.make_rng().uniform(-1, 1) == config.make_rng().uniform(-1, 1)

    unseeded = ProjectionConfig(seed=None)
    assert -1 <= unseeded.make_rng().uniform(-1, 1) < 1

    print(" Config RNG test passed")


def test_cubemap_faces():
    """Test dominant-axis face lookup."""
    light = CubemapLight(pos_x=1, neg_x=2, pos_y=3, neg_y=4, pos_z=5, neg_z=6)

    assert light(1.0, 0.0, 0.0) == 1
    assert light(-1.0, 0.0, 0.0) == 2
    assert light(0.0, 1.0, 0.0) == 3
    assert light(0.0, -1.0, 0.0) == 4
    assert light(0.0, 0.0, 1.0) == 5
    assert light(0.0, 0.0, -1.0) == 6
    assert light(0.2, -0.9, 0.3) == 4

    # Ties resolve towards x, then y
    assert light(0.5, 0.5, 0.5) == 1
    assert light(0.0, -0.5, 0.5) == 4

    print(" Cubemap test passed")


def test_cubemap_sky():
    """Test the sky preset."""
    sky = CubemapLight.sky(sky=2.0, horizon=1.0, ground=0.0)
    assert sky(0.0, 0.0, 1.0) == 2.0
    assert sky(0.0, 0.0, -1.0) == 0.0
    assert sky(0.0, 1.0, 0.0) == 1.0


def test_analytic_functions():
    """Test the small analytic lighting functions."""
    assert constant(3.0)(0.0, 1.0, 0.0) == 3.0
    assert x_squared(0.5, 0.0, 0.0) == 0.25

    lobe = clamped_cosine(Direction(0.0, 0.0, 1.0))
    assert lobe(0.0, 0.0, 1.0) == 1.0
    assert lobe(0.0, 0.0, -1.0) == 0.0
    assert math.isclose(lobe(0.6, 0.0, 0.8), 0.8)


def test_demo_direction(capsys):
    """Test printing the basis at a single direction."""
    main(["--direction", "0", "1", "0"])
    out = capsys.readouterr().out
    assert out.startswith("Result is SHBasis([0.282095, -0.488603")


def test_demo_invalid_direction():
    """Test that a non-unit direction is a usage error."""
    with pytest.raises(SystemExit):
        main(["--direction", "2", "0", "1"])


def test_demo_invalid_samples():
    """Test that a non-positive sample count is a usage error."""
    with pytest.raises(SystemExit):
        main(["--samples", "0"])


@pytest.mark.parametrize("name", sorted(build_functions()))
def test_demo_projection(name, capsys):
    """Test the projection report for every demo function."""
    sh = run_projection(name, ProjectionConfig(n_samples=2000, seed=1))
    out = capsys.readouterr().out

    assert len(sh) == 9
    assert "SH coefficients" in out
    assert "Upper hemisphere integral" in out


def test_demo_main(capsys):
    """Test the full CLI path."""
    main(["--function", "x2", "--samples", "1000", "--seed", "3"])
    out = capsys.readouterr().out
    assert "Projecting 'x2' with 1000 samples (seed=3)" in out


if __name__ == "__main__":
    print("Running basic tests...\n")

    test_config()
    test_config_rng()
    test_cubemap_faces()

    print("\n" + "=" * 50)
    print("All tests passed! ")
    print("=" * 50)
