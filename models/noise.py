"""
Noise sources for the synthetic spatial fields.

Generators draw their local variation from a ``NoiseSource`` rather than
calling a random module directly, so callers decide between a
position-keyed hash (bit-reproducible), a seeded generator, or true
randomness.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from config import HASH_NOISE_LAT_COEF, HASH_NOISE_LNG_COEF, HASH_NOISE_SCALE


class NoiseSource(ABC):
    """Abstract source of uniform noise in [0, 1)."""

    @abstractmethod
    def sample(self, lat: np.ndarray, lng: np.ndarray) -> np.ndarray:
        """Return one value in [0, 1) per (lat, lng) pair.

        Args:
            lat: Latitudes in degrees (any shape).
            lng: Longitudes in degrees, same shape as ``lat``.

        Returns:
            Array of the same shape as ``lat``.
        """
        ...


class HashNoise(NoiseSource):
    """Deterministic noise keyed on position and seed.

    ``frac(sin(lat * 12.9898 + lng * 78.233 + seed) * 43758.5453)``

    The same (lat, lng, seed) always yields the same value, independent of
    call order or how many points are requested.
    """

    def __init__(self, seed: float = 0.0):
        self.seed = seed

    def sample(self, lat: np.ndarray, lng: np.ndarray) -> np.ndarray:
        lat = np.asarray(lat, dtype=float)
        lng = np.asarray(lng, dtype=float)
        n = np.sin(lat * HASH_NOISE_LAT_COEF + lng * HASH_NOISE_LNG_COEF + self.seed)
        n = n * HASH_NOISE_SCALE
        return n - np.floor(n)

    def __repr__(self) -> str:
        return f"HashNoise(seed={self.seed!r})"


class GeneratorNoise(NoiseSource):
    """Noise drawn from a numpy Generator, ignoring position.

    Args:
        seed: Seed for ``np.random.default_rng``.  ``None`` draws fresh
              entropy from the OS, so output differs on every call.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def sample(self, lat: np.ndarray, lng: np.ndarray) -> np.ndarray:
        shape = np.shape(lat)
        return self._rng.random(shape)

    def __repr__(self) -> str:
        return f"GeneratorNoise(seed={self.seed!r})"
