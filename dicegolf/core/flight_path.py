"""
Dice Golf - Shot Flight Path

Projects a shot onto one of the eight fixed directions and lists the grid
cells its straight flight line crosses.
"""

from .course import Position


def sign(value: int) -> int:
    """Normalize to -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def shot_direction(origin: Position, target: Position) -> tuple[int, int]:
    """Get the unit step (dx, dy) from origin toward target."""
    return (sign(target[0] - origin[0]), sign(target[1] - origin[1]))


def project_target(origin: Position, target: Position, distance: int) -> Position:
    """
    Project a shot the full allowed distance toward the requested target.

    The result lies exactly `distance` cells from origin horizontally,
    vertically or diagonally, whatever the exact position of target.

    Example:
        >>> project_target((5, 10), (6, 2), 4)
        (9, 6)
    """
    step_x, step_y = shot_direction(origin, target)
    return (origin[0] + step_x * distance, origin[1] + step_y * distance)


def supercover_line(start: Position, end: Position) -> list[Position]:
    """
    List every cell crossed by the segment between two cell centers.

    Walks the grid one cell boundary at a time. Where the segment passes
    exactly through a grid corner, both cells sharing that corner are
    included as well as the diagonal cell.

    Args:
        start: Cell containing the segment's start (its center)
        end: Cell containing the segment's end (its center)

    Returns:
        Cells in order of travel, starting with start and ending with end
    """
    x, y = start
    dx = end[0] - x
    dy = end[1] - y
    nx, ny = abs(dx), abs(dy)
    step_x, step_y = sign(dx), sign(dy)

    cells = [(x, y)]
    ix = iy = 0
    while ix < nx or iy < ny:
        # Compare where the next vertical and horizontal boundaries are crossed
        decision = (1 + 2 * ix) * ny - (1 + 2 * iy) * nx
        if decision == 0:
            cells.append((x + step_x, y))
            cells.append((x, y + step_y))
            x += step_x
            y += step_y
            ix += 1
            iy += 1
        elif decision < 0:
            x += step_x
            ix += 1
        else:
            y += step_y
            iy += 1
        cells.append((x, y))
    return cells


def flight_path(origin: Position, target: Position, distance: int) -> list[Position]:
    """
    Cells crossed by a shot from origin toward target at the given distance.

    The line runs from the origin's center to the projected target's center,
    so it covers the whole flight rather than just the landing cell.
    """
    return supercover_line(origin, project_target(origin, target, distance))
