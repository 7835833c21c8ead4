"""
Dice Golf - Course Validation

Validates that a course can be played before a turn is started on it.
Catches courses where the generator found no fairway for the hole or tee.
"""

from typing import Optional

from .course import Course
from .terrain import Terrain


class IncompleteCourseError(Exception):
    """Raised when a course is missing its hole or tee, or they are inconsistent."""

    def __init__(self, problems: list[str], seed: Optional[int] = None):
        self.problems = problems
        self.seed = seed
        super().__init__(str(self))

    def __str__(self) -> str:
        seed = f"seed {self.seed}" if self.seed is not None else "unseeded course"
        lines = [f"Course ({seed}) cannot be played:"]
        for problem in self.problems:
            lines.append(f"  {problem}")
        lines.append("  Fix: regenerate the course with a fresh seed.")
        return "\n".join(lines)


class CourseValidator:
    """Validates hole and tee placement on a course.

    A playable course has exactly one hole and one tee, on distinct cells,
    each marked with its overlay terrain and sitting on fairway.
    """

    def validate(self, course: Course) -> None:
        """Validate a course.

        Args:
            course: Course to check

        Raises:
            IncompleteCourseError: If the hole or tee is missing or malformed
        """
        problems = self.find_problems(course)
        if problems:
            raise IncompleteCourseError(problems, course.seed)

    def find_problems(self, course: Course) -> list[str]:
        """Collect every placement problem without raising."""
        problems: list[str] = []

        if course.hole is None:
            problems.append("No fairway cell found for the hole")
        else:
            problems.extend(self._check_overlay(course, course.hole, Terrain.HOLE))

        if course.ball is None:
            problems.append("No fairway cell found for the tee")
        else:
            problems.extend(self._check_overlay(course, course.ball, Terrain.BALL))

        if course.hole is not None and course.hole == course.ball:
            problems.append(f"Hole and tee share cell {course.hole}")

        return problems

    def _check_overlay(self, course: Course, position, overlay: Terrain) -> list[str]:
        x, y = position
        if not course.in_bounds(x, y):
            return [f"{overlay.value.capitalize()} at ({x}, {y}) is outside the course"]

        cell = course.cell_at(x, y)
        problems = []
        if cell.terrain != overlay:
            problems.append(
                f"{overlay.value.capitalize()} at ({x}, {y}) is marked {cell.terrain.value}"
            )
        if cell.underlay != Terrain.FAIRWAY:
            problems.append(
                f"{overlay.value.capitalize()} at ({x}, {y}) sits on {cell.underlay.value}, not fairway"
            )
        return problems
