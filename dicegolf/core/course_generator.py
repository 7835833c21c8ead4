"""
Dice Golf - Course Generator

Builds a course from noise: classifies every cell, resolves tile variants,
then places the hole and the tee on fairway.
"""

import logging
from typing import Optional

from .autotile import AutotileResolver, grid_neighbors
from .classifier import TerrainClassifier
from .constants import (
    COURSE_HEIGHT,
    COURSE_WIDTH,
    HOLE_MAX_Y_FRACTION,
    HOLE_MIN_X_FRACTION,
    TEE_MIN_X,
    TEE_MIN_Y_FRACTION,
    TERRAIN_SCALE,
)
from .course import Cell, Course
from .course_validation import CourseValidator
from .noise_field import NoiseField
from .terrain import Terrain

logger = logging.getLogger(__name__)


class CourseGenerator:
    """
    Generates playable courses.

    Algorithm:
        1. Sample noise at every cell (scale 15) and classify it. This fixes
           each cell's terrain.
        2. Scan the classified grid row by row, x varying fastest, resolving
           each cell's tile variant.
        3. In the same scan, the first fairway cell in the upper-right region
           becomes the hole and the first fairway cell along the bottom edge
           becomes the tee. Placement never reclassifies a cell.
    """

    def __init__(
        self,
        noise: Optional[NoiseField] = None,
        classifier: Optional[TerrainClassifier] = None,
        resolver: Optional[AutotileResolver] = None,
        terrain_scale: float = TERRAIN_SCALE,
    ):
        self.noise = noise if noise is not None else NoiseField()
        self.classifier = classifier if classifier is not None else TerrainClassifier()
        self.resolver = resolver if resolver is not None else AutotileResolver()
        self.terrain_scale = terrain_scale
        self.validator = CourseValidator()

    def generate(
        self,
        width: int = COURSE_WIDTH,
        height: int = COURSE_HEIGHT,
        seed: Optional[int] = None,
        validate: bool = True,
    ) -> Course:
        """
        Generate a new course.

        Args:
            width: Course width in cells
            height: Course height in cells
            seed: Noise seed. If None, a fresh random seed is used.
            validate: If False, return the course even when the hole or tee
                      could not be placed

        Returns:
            Generated course

        Raises:
            ValueError: If width or height is not positive
            IncompleteCourseError: If validate is True and no fairway cell
                                   qualified for the hole or the tee
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Course size must be positive, got {width}x{height}")

        seed = self.noise.reseed(seed)
        terrain = self.classify_grid(width, height)

        hole = None
        ball = None
        cells = []
        for y in range(height):
            row = []
            for x in range(width):
                terrain_type = terrain[y][x]
                variant = self.resolver.resolve(terrain_type, grid_neighbors(terrain, x, y))
                cell = Cell(x, y, terrain_type, variant)

                if hole is None and self.is_hole_candidate(x, y, terrain_type, width, height):
                    cell.place_overlay(Terrain.HOLE)
                    hole = (x, y)
                elif ball is None and self.is_tee_candidate(x, y, terrain_type, width, height):
                    cell.place_overlay(Terrain.BALL)
                    ball = (x, y)

                row.append(cell)
            cells.append(row)

        course = Course(cells, hole=hole, ball=ball, seed=seed)
        logger.debug(
            "Generated %dx%d course (seed %d): hole=%s tee=%s",
            width, height, seed, hole, ball,
        )

        if not course.is_complete:
            logger.warning(
                "Course with seed %d is incomplete: hole=%s tee=%s", seed, hole, ball
            )
            if validate:
                self.validator.validate(course)

        return course

    def classify_grid(self, width: int, height: int) -> list[list[Terrain]]:
        """Classify every cell of a width x height grid from the current noise."""
        heights = self.noise.sample_grid(width, height, self.terrain_scale)
        return [
            [self.classifier.classify(float(heights[y, x])) for x in range(width)]
            for y in range(height)
        ]

    @staticmethod
    def is_hole_candidate(x: int, y: int, terrain: Terrain, width: int, height: int) -> bool:
        """Hole goes in the upper half, right of center, on fairway."""
        return (
            y < height * HOLE_MAX_Y_FRACTION
            and x > width * HOLE_MIN_X_FRACTION
            and terrain == Terrain.FAIRWAY
        )

    @staticmethod
    def is_tee_candidate(x: int, y: int, terrain: Terrain, width: int, height: int) -> bool:
        """Tee goes along the bottom edge, off the first column, on fairway."""
        return (
            y > height * TEE_MIN_Y_FRACTION
            and x > TEE_MIN_X
            and terrain == Terrain.FAIRWAY
        )
