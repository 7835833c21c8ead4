"""
Dice Golf - Terrain Categories and Tileset

Terrain categories, autotile variants, and their tileset indices.
"""

from enum import Enum


class Terrain(str, Enum):
    """Terrain category of a course cell."""

    ROUGH = "rough"
    FAIRWAY = "fairway"
    SAND = "sand"
    WATER = "water"
    TREES = "trees"
    # Placement overlays, never produced by the classifier
    HOLE = "hole"
    BALL = "ball"

    @property
    def is_overlay(self) -> bool:
        return self in (Terrain.HOLE, Terrain.BALL)


class TileVariant(str, Enum):
    """Autotile variant picked from a cell's matching neighbors."""

    SINGLE = "single"
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    MIDDLE_CENTER = "middle_center"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


# Tileset indices for terrain drawn with a single tile
TILE_HOLE = 0
TILE_BALL = 1
TILE_TREES = 2
TILE_ROUGH = 3

# Tileset indices for terrain drawn with orientated tiles
TILE_FAIRWAY = {
    TileVariant.SINGLE: 4,
    TileVariant.TOP_LEFT: 9,
    TileVariant.TOP_CENTER: 10,
    TileVariant.TOP_RIGHT: 11,
    TileVariant.MIDDLE_LEFT: 18,
    TileVariant.MIDDLE_CENTER: 19,
    TileVariant.MIDDLE_RIGHT: 20,
    TileVariant.BOTTOM_LEFT: 27,
    TileVariant.BOTTOM_CENTER: 28,
    TileVariant.BOTTOM_RIGHT: 29,
}

TILE_SAND = {
    TileVariant.SINGLE: 5,
    TileVariant.TOP_LEFT: 12,
    TileVariant.TOP_CENTER: 13,
    TileVariant.TOP_RIGHT: 14,
    TileVariant.MIDDLE_LEFT: 21,
    TileVariant.MIDDLE_CENTER: 22,
    TileVariant.MIDDLE_RIGHT: 23,
    TileVariant.BOTTOM_LEFT: 30,
    TileVariant.BOTTOM_CENTER: 31,
    TileVariant.BOTTOM_RIGHT: 32,
}

TILE_WATER = {
    TileVariant.SINGLE: 6,
    TileVariant.TOP_LEFT: 15,
    TileVariant.TOP_CENTER: 16,
    TileVariant.TOP_RIGHT: 17,
    TileVariant.MIDDLE_LEFT: 24,
    TileVariant.MIDDLE_CENTER: 25,
    TileVariant.MIDDLE_RIGHT: 26,
    TileVariant.BOTTOM_LEFT: 33,
    TileVariant.BOTTOM_CENTER: 34,
    TileVariant.BOTTOM_RIGHT: 35,
}

FIXED_TILES = {
    Terrain.HOLE: TILE_HOLE,
    Terrain.BALL: TILE_BALL,
    Terrain.TREES: TILE_TREES,
    Terrain.ROUGH: TILE_ROUGH,
}

ORIENTATED_TILES = {
    Terrain.FAIRWAY: TILE_FAIRWAY,
    Terrain.SAND: TILE_SAND,
    Terrain.WATER: TILE_WATER,
}

# One-character symbols used by text dumps and saved courses
TERRAIN_SYMBOLS = {
    Terrain.ROUGH: ",",
    Terrain.FAIRWAY: ".",
    Terrain.SAND: "s",
    Terrain.WATER: "~",
    Terrain.TREES: "T",
    Terrain.HOLE: "O",
    Terrain.BALL: "B",
}

SYMBOL_TERRAIN = {symbol: terrain for terrain, symbol in TERRAIN_SYMBOLS.items()}


def tile_index(terrain: Terrain, variant: TileVariant) -> int:
    """
    Get the tileset index used to draw a cell.

    Hole, ball, trees and rough always use one tile; the variant only
    matters for fairway, sand and water.
    """
    if terrain in FIXED_TILES:
        return FIXED_TILES[terrain]
    return ORIENTATED_TILES[terrain][variant]
