"""Shared pytest fixtures for course and engine tests."""

import random
from unittest.mock import Mock

import numpy as np
import pytest

from dicegolf.core.course import Course
from dicegolf.core.dice import DiceRoller
from dicegolf.formats.terrain_rows import parse_terrain_rows


class FixedNoiseField:
    """Noise field stand-in returning a fixed grid of heights."""

    def __init__(self, heights):
        self.heights = np.array(heights, dtype=float)
        self.seed = 0

    def reseed(self, seed=None):
        self.seed = 99 if seed is None else seed
        return self.seed

    def sample(self, x, y, scale=250):
        return float(self.heights[y, x])

    def sample_grid(self, width, height, scale=250):
        return self.heights[:height, :width]


@pytest.fixture
def make_course():
    """Build a course from rows of terrain symbols (see terrain_rows)."""

    def _make(rows, seed=None):
        return Course.from_terrain(parse_terrain_rows(rows), seed=seed)

    return _make


@pytest.fixture
def fixed_dice():
    """Build a DiceRoller whose die shows the given faces in order."""

    def _make(*faces):
        rng = Mock(spec=random.Random)
        if len(faces) == 1:
            rng.randint.return_value = faces[0]
        else:
            rng.randint.side_effect = list(faces)
        return DiceRoller(rng=rng)

    return _make


@pytest.fixture
def fixed_noise():
    """Build a noise field stand-in from a grid of heights indexed [y][x]."""
    return FixedNoiseField


@pytest.fixture
def open_course(make_course):
    """8x12 fairway course with the tee at (5, 10) and the hole at (5, 6)."""
    rows = ["........"] * 12
    rows[6] = ".....O.."
    rows[10] = ".....B.."
    return make_course(rows, seed=1)
