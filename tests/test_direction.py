"""Tests for unit directions and direction sampling."""

import dataclasses

import numpy as np
import pytest

from sh_lighting.core import Direction, make_rng, NORM_TOLERANCE


class SequenceSource:
    """Random source replaying a fixed list of values."""

    def __init__(self, values):
        self._values = iter(values)

    def uniform(self, low, high):
        return next(self._values)


class TestDirectionConstruction:
    """Tests for Direction validation."""

    def test_axis_directions(self):
        """Test that axis-aligned unit vectors are accepted."""
        for components in [(1, 0, 0), (0, -1, 0), (0, 0, 1)]:
            d = Direction(*components)
            assert d.as_tuple() == components

    def test_non_axis_direction(self):
        """Test a unit vector off the axes."""
        d = Direction(0.6, 0.8, 0.0)
        assert d.x == 0.6
        assert d.y == 0.8

    def test_non_normalized_fails(self):
        """Test that a non-unit vector is rejected."""
        with pytest.raises(ValueError, match="not normalized"):
            Direction(2.0, 0.0, 1.0)

    def test_zero_vector_fails(self):
        """Test that the zero vector is rejected."""
        with pytest.raises(ValueError):
            Direction(0.0, 0.0, 0.0)

    def test_tolerance(self):
        """Test behaviour at the edge of the norm tolerance."""
        Direction(1.0 + NORM_TOLERANCE / 4, 0.0, 0.0)
        with pytest.raises(ValueError):
            Direction(1.0 + NORM_TOLERANCE, 0.0, 0.0)

    def test_immutable(self):
        """Test that directions cannot be modified after construction."""
        d = Direction(0.0, 0.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.x = 1.0

    def test_from_vector(self):
        """Test normalization of an arbitrary vector."""
        d = Direction.from_vector(3.0, 0.0, 4.0)
        assert np.isclose(d.x, 0.6)
        assert np.isclose(d.z, 0.8)

    def test_from_vector_zero(self):
        """Test that the zero vector cannot be normalized."""
        with pytest.raises(ValueError):
            Direction.from_vector(0.0, 0.0, 0.0)

    def test_dot_and_negated(self):
        """Test dot product and negation."""
        a = Direction(1.0, 0.0, 0.0)
        b = Direction.from_vector(1.0, 1.0, 0.0)
        assert np.isclose(a.dot(b), np.sqrt(0.5))
        assert a.negated().as_tuple() == (-1.0, 0.0, 0.0)
        assert a.dot(a.negated()) == -1.0

    def test_as_array(self):
        """Test conversion to numpy array."""
        arr = Direction(0.0, 1.0, 0.0).as_array()
        assert arr.shape == (3,)
        assert arr.dtype == np.float64


class TestUniformSphereSampling:
    """Tests for uniform sphere rejection sampling."""

    def test_samples_are_normalized(self):
        """Test that every sample is a unit vector."""
        rng = make_rng(0)
        for _ in range(1000):
            d = Direction.sample_uniform_sphere(rng)
            assert abs(d.x * d.x + d.y * d.y + d.z * d.z - 1.0) < 1e-5

    def test_direction_sampling_isotropic(self):
        """Test that the per-axis sample mean is close to zero."""
        rng = make_rng(1234)
        count = 20000

        samples = np.array([
            Direction.sample_uniform_sphere(rng).as_tuple() for _ in range(count)
        ])
        mean = samples.mean(axis=0)

        assert abs(mean[0]) < 0.05, f"Distribution not equal in x, {mean[0]}"
        assert abs(mean[1]) < 0.05, f"Distribution not equal in y, {mean[1]}"
        assert abs(mean[2]) < 0.05, f"Distribution not equal in z, {mean[2]}"

    def test_rejects_points_outside_ball(self):
        """Test that cube corners are rejected and the next point normalized."""
        rng = SequenceSource([0.9, 0.9, 0.9, 0.0, 0.0, 0.5])
        d = Direction.sample_uniform_sphere(rng)
        assert d.as_tuple() == (0.0, 0.0, 1.0)

    def test_rejects_origin(self):
        """Test that a candidate at the origin is retried."""
        rng = SequenceSource([0.0, 0.0, 0.0, 0.0, -0.25, 0.0])
        d = Direction.sample_uniform_sphere(rng)
        assert d.as_tuple() == (0.0, -1.0, 0.0)

    def test_accepts_point_on_sphere(self):
        """Test that a candidate with squared norm exactly 1 is accepted."""
        rng = SequenceSource([-1.0, 0.0, 0.0])
        d = Direction.sample_uniform_sphere(rng)
        assert d.as_tuple() == (-1.0, 0.0, 0.0)

    def test_seeded_reproducible(self):
        """Test that identical seeds give identical samples."""
        a = [Direction.sample_uniform_sphere(make_rng(7)) for _ in range(3)]
        b = [Direction.sample_uniform_sphere(make_rng(7)) for _ in range(3)]
        assert a == b


class TestHemisphereSampling:
    """Tests for oriented hemisphere sampling."""

    @pytest.mark.parametrize("normal", [
        (0.0, 0.0, 1.0),
        (0.0, 0.0, -1.0),
        (1.0, 1.0, 1.0),
        (-0.3, 0.2, 0.9),
    ])
    def test_samples_in_hemisphere(self, normal):
        """Test that every sample has non-negative dot with the normal."""
        n = Direction.from_vector(*normal)
        rng = make_rng(99)
        for _ in range(5000):
            d = Direction.sample_hemisphere(n, rng)
            assert n.dot(d) >= 0.0

    def test_lower_sample_is_mirrored(self):
        """Test that a sample below the hemisphere is flipped."""
        up = Direction(0.0, 0.0, 1.0)
        rng = SequenceSource([0.0, 0.0, -0.5])
        d = Direction.sample_hemisphere(up, rng)
        assert d.as_tuple() == (0.0, 0.0, 1.0)

    def test_hemisphere_mean(self):
        """Test that the mean of a uniform hemisphere sample is normal / 2."""
        up = Direction(0.0, 0.0, 1.0)
        rng = make_rng(5)
        samples = np.array([
            Direction.sample_hemisphere(up, rng).as_tuple() for _ in range(20000)
        ])
        mean = samples.mean(axis=0)

        assert abs(mean[0]) < 0.05
        assert abs(mean[1]) < 0.05
        assert abs(mean[2] - 0.5) < 0.05
