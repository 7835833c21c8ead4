"""
Core Dice Golf functionality.

This package contains course generation (noise, terrain classification,
autotiling, hole and tee placement) and the rules engine (move validation,
dice, strokes and turns).
"""

from .terrain import Terrain, TileVariant
from .noise_field import NoiseField
from .classifier import TerrainClassifier
from .autotile import AutotileResolver
from .course import Cell, Course, CellOutOfBoundsError
from .course_validation import CourseValidator, IncompleteCourseError
from .course_generator import CourseGenerator
from .move_validator import MoveValidator, MoveCheck
from .dice import DiceRoller, DiceRoll
from .strokes import StrokeHistory
from .turn_engine import TurnEngine, TurnState, TurnStateError, HitResult, Reaction

__all__ = [
    "Terrain",
    "TileVariant",
    "NoiseField",
    "TerrainClassifier",
    "AutotileResolver",
    "Cell",
    "Course",
    "CellOutOfBoundsError",
    "CourseValidator",
    "IncompleteCourseError",
    "CourseGenerator",
    "MoveValidator",
    "MoveCheck",
    "DiceRoller",
    "DiceRoll",
    "StrokeHistory",
    "TurnEngine",
    "TurnState",
    "TurnStateError",
    "HitResult",
    "Reaction",
]
