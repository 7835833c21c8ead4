"""
Dice Golf - Move Validator

Decides whether a shot from the ball's cell to a target cell is allowed.
"""

from dataclasses import dataclass
from typing import Optional

from .course import Course, Position
from .flight_path import flight_path
from .terrain import Terrain

# Rejection reasons reported by MoveValidator.check
REASON_SELF = "self"
REASON_DISTANCE = "distance"
REASON_WATER = "water"
REASON_TREES = "trees"
REASON_BLOCKED = "blocked"


@dataclass
class MoveCheck:
    """Outcome of checking one candidate move."""

    legal: bool
    reason: Optional[str] = None
    path: tuple[Position, ...] = ()

    def __bool__(self) -> bool:
        return self.legal


def is_exact_distance(origin: Position, target: Position, distance: int) -> bool:
    """
    Check a displacement is exactly `distance` in one of eight directions.

    Horizontal and vertical moves need the moving axis to match distance;
    diagonal moves need both axes to match. Shorter or bent moves fail.
    """
    dx = abs(target[0] - origin[0])
    dy = abs(target[1] - origin[1])
    return (
        (dx == distance and dy == 0)  # Horizontal
        or (dy == distance and dx == 0)  # Vertical
        or (dx == distance and dy == distance)  # Diagonal
    )


class MoveValidator:
    """
    Validates shots against the course rules.

    A move is legal when:
        - it goes somewhere other than the ball's own cell
        - it travels exactly the allowed distance horizontally, vertically
          or diagonally
        - it does not land on water or trees
        - its flight path crosses no trees, unless the ball lies on fairway
    """

    def check(self, origin: Position, target: Position, distance: int, course: Course) -> MoveCheck:
        """
        Check a candidate move and report why it fails.

        Args:
            origin: Ball position
            target: Requested landing cell
            distance: Allowed distance for this shot
            course: Course being played

        Returns:
            MoveCheck with legal set, the failure reason and the flight path

        Raises:
            CellOutOfBoundsError: If origin or target is outside the course
        """
        origin_cell = course.cell_at(*origin)
        target_cell = course.cell_at(*target)

        if target == origin:
            return MoveCheck(False, REASON_SELF)
        if distance <= 0 or not is_exact_distance(origin, target, distance):
            return MoveCheck(False, REASON_DISTANCE)
        if target_cell.terrain == Terrain.WATER:
            return MoveCheck(False, REASON_WATER)
        if target_cell.terrain == Terrain.TREES:
            return MoveCheck(False, REASON_TREES)

        path = tuple(
            (x, y) for x, y in flight_path(origin, target, distance) if course.in_bounds(x, y)
        )
        if origin_cell.lie != Terrain.FAIRWAY and self.path_has_trees(path, course):
            return MoveCheck(False, REASON_BLOCKED, path)

        return MoveCheck(True, None, path)

    def is_legal(self, origin: Position, target: Position, distance: int, course: Course) -> bool:
        """Check if a move is legal. See check() for details."""
        return self.check(origin, target, distance, course).legal

    @staticmethod
    def path_has_trees(path, course: Course) -> bool:
        return any(course.terrain_at(x, y) == Terrain.TREES for x, y in path)
