"""
Dice Golf - Stroke History

Records where the ball has been on the current course.
"""

from typing import Iterator

from .course import Position


class StrokeHistory:
    """Ordered ball positions, starting at the tee."""

    def __init__(self, tee: Position):
        self._positions: list[Position] = [tee]

    def record(self, position: Position):
        """Append the ball's position after a stroke."""
        self._positions.append(position)

    def reset(self, tee: Position):
        """Clear back to a single tee position for a new course."""
        self._positions = [tee]

    @property
    def tee(self) -> Position:
        return self._positions[0]

    @property
    def current(self) -> Position:
        return self._positions[-1]

    @property
    def stroke_count(self) -> int:
        """Number of strokes taken; the tee entry is not a stroke."""
        return len(self._positions) - 1

    def positions(self) -> tuple[Position, ...]:
        return tuple(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)
