"""Tests for the field noise sources."""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.noise import NoiseSource, HashNoise, GeneratorNoise


class TestHashNoise:
    def test_implements_interface(self):
        assert isinstance(HashNoise(), NoiseSource)

    def test_range(self):
        lat = np.linspace(40, 60, 500)
        lng = np.linspace(-10, 15, 500)
        u = HashNoise(seed=3).sample(lat, lng)
        assert np.all(u >= 0.0)
        assert np.all(u < 1.0)

    def test_shape_preserved(self):
        lat = np.zeros((4, 5))
        assert HashNoise().sample(lat, lat).shape == (4, 5)

    def test_position_keyed(self):
        """Same position gives the same value regardless of the batch it is in."""
        noise = HashNoise(seed=1)
        alone = noise.sample(np.array([54.25]), np.array([2.5]))
        batch = noise.sample(np.array([50.0, 54.25, 58.0]), np.array([0.0, 2.5, 5.0]))
        assert alone[0] == batch[1]

    def test_repeatable(self):
        lat = np.array([54.0, 55.0])
        lng = np.array([3.0, 4.0])
        np.testing.assert_array_equal(
            HashNoise(seed=2).sample(lat, lng),
            HashNoise(seed=2).sample(lat, lng),
        )

    def test_seed_changes_output(self):
        lat = np.array([54.0, 55.0, 56.0])
        lng = np.array([3.0, 4.0, 5.0])
        assert not np.array_equal(
            HashNoise(seed=1).sample(lat, lng),
            HashNoise(seed=2).sample(lat, lng),
        )


class TestGeneratorNoise:
    def test_implements_interface(self):
        assert isinstance(GeneratorNoise(), NoiseSource)

    def test_seeded_repeatable(self):
        lat = np.zeros(50)
        np.testing.assert_array_equal(
            GeneratorNoise(7).sample(lat, lat),
            GeneratorNoise(7).sample(lat, lat),
        )

    def test_range_and_shape(self):
        lat = np.zeros((10, 3))
        u = GeneratorNoise(0).sample(lat, lat)
        assert u.shape == (10, 3)
        assert np.all((u >= 0.0) & (u < 1.0))
