"""
Dice Golf - Noise Field

Multi-octave coherent noise sampled at integer cell coordinates.
"""

import logging
import random
from typing import Optional

import numpy as np
from opensimplex import OpenSimplex

from .constants import HEIGHT_SCALE, NOISE_LACUNARITY, NOISE_OCTAVES, NOISE_PERSISTENCE

logger = logging.getLogger(__name__)

# Seeds are drawn from this range when none is given
MAX_SEED = 2**31 - 1


class NoiseField:
    """
    Fractal sum of 2D OpenSimplex noise.

    Each octave doubles the frequency and halves the amplitude. The sum is
    normalized by the total amplitude so samples stay within [-1, 1].

    Usage:
        field = NoiseField(seed=42)
        height = field.sample(3, 7, scale=15)
    """

    def __init__(self, seed: Optional[int] = None, octaves: int = NOISE_OCTAVES):
        """
        Create a noise field.

        Args:
            seed: Noise seed. If None, a random seed is chosen.
            octaves: Number of octaves summed per sample (default: 4)
        """
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        self.octaves = octaves
        self.seed: int = 0
        self._noise: OpenSimplex
        self.reseed(seed)

    def reseed(self, seed: Optional[int] = None) -> int:
        """
        Replace the underlying noise with a freshly seeded one.

        Args:
            seed: New seed. If None, a random seed is chosen so successive
                  courses differ.

        Returns:
            The seed now in use
        """
        if seed is None:
            seed = random.randint(0, MAX_SEED)
        self.seed = seed
        self._noise = OpenSimplex(seed=seed)
        logger.debug("Noise field seeded with %d", seed)
        return seed

    def sample(self, x: float, y: float, scale: float = HEIGHT_SCALE) -> float:
        """
        Sample the field at (x, y).

        Args:
            x: Horizontal coordinate
            y: Vertical coordinate
            scale: Divisor controlling feature size; larger is smoother

        Returns:
            Normalized value in [-1, 1]
        """
        value = 0.0
        amplitude = 1.0
        frequency = 1.0
        max_value = 0.0

        for _ in range(self.octaves):
            value += amplitude * self._noise.noise2(
                x * frequency / scale, y * frequency / scale
            )
            max_value += amplitude
            amplitude *= NOISE_PERSISTENCE
            frequency *= NOISE_LACUNARITY

        return value / max_value

    def sample_grid(self, width: int, height: int, scale: float = HEIGHT_SCALE) -> np.ndarray:
        """
        Sample every integer coordinate of a width x height grid.

        Returns:
            Array of shape (height, width), indexed [y, x]
        """
        grid = np.empty((height, width), dtype=float)
        for y in range(height):
            for x in range(width):
                grid[y, x] = self.sample(x, y, scale)
        return grid
