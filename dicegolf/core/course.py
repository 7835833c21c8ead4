"""
Dice Golf - Course Model

A generated course: a fixed-size grid of cells plus its hole and tee.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .autotile import NEIGHBOR_OFFSETS, AutotileResolver
from .terrain import Terrain, TileVariant, tile_index

# Grid coordinate as (x, y), y increasing downward
Position = tuple[int, int]


class CellOutOfBoundsError(IndexError):
    """Raised when a coordinate outside the course grid is queried."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Cell ({self.x}, {self.y}) is outside the "
            f"{self.width}x{self.height} course"
        )


@dataclass
class Cell:
    """A single grid position."""

    x: int
    y: int
    terrain: Terrain
    variant: TileVariant = TileVariant.SINGLE
    # Terrain before a hole/ball overlay was placed
    underlay: Optional[Terrain] = field(default=None)

    def __post_init__(self):
        if self.underlay is None:
            self.underlay = self.terrain

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    @property
    def lie(self) -> Terrain:
        """Surface the ball rests on when sitting in this cell."""
        return self.underlay

    @property
    def tile_index(self) -> int:
        return tile_index(self.terrain, self.variant)

    def place_overlay(self, overlay: Terrain):
        """Mark this cell as the hole or the tee without reclassifying it."""
        if not overlay.is_overlay:
            raise ValueError(f"{overlay.value} is not a placement overlay")
        self.underlay = self.terrain
        self.terrain = overlay


class Course:
    """
    A course grid with its designated hole and tee.

    Cells are stored row-major and indexed [y][x]. After generation only the
    hole and tee placements ever change a cell's terrain.
    """

    def __init__(
        self,
        cells: list[list[Cell]],
        hole: Optional[Position] = None,
        ball: Optional[Position] = None,
        seed: Optional[int] = None,
    ):
        if not cells or not cells[0]:
            raise ValueError("Course must have at least one cell")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise ValueError("Course rows must all have the same width")

        self.cells = cells
        self.width = width
        self.height = len(cells)
        self.hole = tuple(hole) if hole is not None else None
        self.ball = tuple(ball) if ball is not None else None
        self.seed = seed

    @classmethod
    def from_terrain(
        cls,
        terrain: list[list[Terrain]],
        variants: Optional[list[list[TileVariant]]] = None,
        seed: Optional[int] = None,
    ) -> "Course":
        """
        Build a course from a terrain grid.

        Hole and ball overlays in the grid become the course's hole and tee,
        sitting on fairway. Variants are resolved from the grid unless given.

        Args:
            terrain: 2D list of terrain indexed [y][x]
            variants: Optional precomputed variants with the same shape
            seed: Noise seed the terrain came from, if any

        Raises:
            ValueError: If the grid holds more than one hole or ball
        """
        underlay = [
            [Terrain.FAIRWAY if t.is_overlay else t for t in row] for row in terrain
        ]
        if variants is None:
            variants = AutotileResolver().resolve_grid(underlay)

        hole: Optional[Position] = None
        ball: Optional[Position] = None
        cells = []
        for y, row in enumerate(terrain):
            cell_row = []
            for x, t in enumerate(row):
                cell = Cell(x, y, underlay[y][x], variants[y][x])
                if t == Terrain.HOLE:
                    if hole is not None:
                        raise ValueError(f"Second hole at ({x}, {y}), first at {hole}")
                    hole = (x, y)
                    cell.place_overlay(t)
                elif t == Terrain.BALL:
                    if ball is not None:
                        raise ValueError(f"Second ball at ({x}, {y}), first at {ball}")
                    ball = (x, y)
                    cell.place_overlay(t)
                cell_row.append(cell)
            cells.append(cell_row)

        return cls(cells, hole=hole, ball=ball, seed=seed)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Get the cell at (x, y).

        Raises:
            CellOutOfBoundsError: If (x, y) is outside the grid
        """
        if not self.in_bounds(x, y):
            raise CellOutOfBoundsError(x, y, self.width, self.height)
        return self.cells[y][x]

    def terrain_at(self, x: int, y: int) -> Terrain:
        return self.cell_at(x, y).terrain

    def neighbors(self, x: int, y: int) -> dict[str, Optional[Cell]]:
        """Get the orthogonal neighbors of (x, y), None where out of bounds."""
        self.cell_at(x, y)
        result: dict[str, Optional[Cell]] = {}
        for direction, (dx, dy) in NEIGHBOR_OFFSETS.items():
            nx, ny = x + dx, y + dy
            result[direction] = self.cells[ny][nx] if self.in_bounds(nx, ny) else None
        return result

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate cells row by row, x varying fastest."""
        for row in self.cells:
            yield from row

    def terrain_rows(self) -> list[list[Terrain]]:
        return [[cell.terrain for cell in row] for row in self.cells]

    def variant_rows(self) -> list[list[TileVariant]]:
        return [[cell.variant for cell in row] for row in self.cells]

    @property
    def is_complete(self) -> bool:
        """True when both the hole and the tee were placed."""
        return self.hole is not None and self.ball is not None
