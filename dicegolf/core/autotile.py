"""
Dice Golf - Autotile Resolver

Picks the orientated tile variant for a cell from which of its four
orthogonal neighbors share its terrain.
"""

from typing import Mapping, Optional

from .terrain import Terrain, TileVariant

# Neighbor offsets as (dx, dy) with y increasing downward
NEIGHBOR_OFFSETS = {
    "top": (0, -1),
    "left": (-1, 0),
    "right": (1, 0),
    "bottom": (0, 1),
}

NEIGHBOR_BITS = {
    "top": 2,
    "left": 8,
    "right": 16,
    "bottom": 64,
}

# Partial table: masks not listed here fall back to SINGLE.
# 255 can never be produced from four orthogonal bits but is kept so the
# table matches the tileset it was authored against.
VARIANT_TABLE: dict[int, TileVariant] = {
    0: TileVariant.SINGLE,  # No neighbors
    2: TileVariant.BOTTOM_CENTER,  # Only top
    8: TileVariant.MIDDLE_RIGHT,  # Only left
    10: TileVariant.BOTTOM_RIGHT,  # Top & left
    16: TileVariant.MIDDLE_LEFT,  # Only right
    18: TileVariant.BOTTOM_LEFT,  # Top & right
    24: TileVariant.MIDDLE_CENTER,  # Left & right
    26: TileVariant.MIDDLE_CENTER,  # Top, left, right
    64: TileVariant.TOP_CENTER,  # Only bottom
    66: TileVariant.MIDDLE_CENTER,  # Top & bottom
    72: TileVariant.TOP_RIGHT,  # Left & bottom
    74: TileVariant.MIDDLE_CENTER,  # Top, bottom, left
    80: TileVariant.TOP_LEFT,  # Right & bottom
    82: TileVariant.MIDDLE_CENTER,  # Top, bottom, right
    88: TileVariant.MIDDLE_CENTER,  # Left, right, bottom
    90: TileVariant.MIDDLE_CENTER,  # All four
    255: TileVariant.MIDDLE_CENTER,  # Surrounded completely
}

FALLBACK_VARIANT = TileVariant.SINGLE


class AutotileResolver:
    """
    Resolves tile variants from neighbor bitmasks.

    Neighbors are passed as a mapping of "top"/"left"/"right"/"bottom" to the
    neighbor's terrain, or None where the neighbor lies outside the grid.
    Diagonals are never considered.
    """

    def bitmask(self, terrain: Terrain, neighbors: Mapping[str, Optional[Terrain]]) -> int:
        """
        Sum the bits of neighbors sharing the cell's terrain.

        Args:
            terrain: Terrain of the cell being resolved
            neighbors: Neighbor terrain by direction; missing or None entries
                       never contribute

        Returns:
            Bitmask built from NEIGHBOR_BITS
        """
        mask = 0
        for direction, bit in NEIGHBOR_BITS.items():
            neighbor = neighbors.get(direction)
            if neighbor is not None and neighbor == terrain:
                mask += bit
        return mask

    def resolve(self, terrain: Terrain, neighbors: Mapping[str, Optional[Terrain]]) -> TileVariant:
        """Get the tile variant for a cell."""
        return self.variant_for_mask(self.bitmask(terrain, neighbors))

    @staticmethod
    def variant_for_mask(mask: int) -> TileVariant:
        return VARIANT_TABLE.get(mask, FALLBACK_VARIANT)

    def resolve_grid(self, terrain: list[list[Terrain]]) -> list[list[TileVariant]]:
        """
        Resolve variants for every cell of a terrain grid.

        Args:
            terrain: 2D list of terrain indexed [y][x]

        Returns:
            2D list of variants with the same shape
        """
        height = len(terrain)
        width = len(terrain[0]) if terrain else 0

        variants = []
        for y in range(height):
            row = []
            for x in range(width):
                row.append(self.resolve(terrain[y][x], grid_neighbors(terrain, x, y)))
            variants.append(row)
        return variants


def grid_neighbors(terrain: list[list[Terrain]], x: int, y: int) -> dict[str, Optional[Terrain]]:
    """Get the orthogonal neighbors of (x, y), None where out of bounds."""
    height = len(terrain)
    width = len(terrain[0]) if terrain else 0

    neighbors: dict[str, Optional[Terrain]] = {}
    for direction, (dx, dy) in NEIGHBOR_OFFSETS.items():
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            neighbors[direction] = terrain[ny][nx]
        else:
            neighbors[direction] = None
    return neighbors
