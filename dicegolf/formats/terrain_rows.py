"""
Dice Golf - Terrain Row Utilities

Utilities for parsing and formatting the terrain and variant rows used in
saved courses, text dumps and test fixtures.
"""

from typing import List

from ..core.terrain import SYMBOL_TERRAIN, TERRAIN_SYMBOLS, Terrain, TileVariant

# Variants are saved by their position in this list
VARIANT_CODES: List[TileVariant] = list(TileVariant)


def parse_terrain_row(row_str: str) -> List[Terrain]:
    """
    Parse a string of terrain symbols.

    Args:
        row_str: One symbol per cell (e.g., ",..sT")

    Returns:
        List of terrain values

    Raises:
        ValueError: If the row contains an unknown symbol

    Example:
        >>> parse_terrain_row(",.~")
        [<Terrain.ROUGH: 'rough'>, <Terrain.FAIRWAY: 'fairway'>, <Terrain.WATER: 'water'>]
    """
    try:
        return [SYMBOL_TERRAIN[symbol] for symbol in row_str]
    except KeyError as e:
        raise ValueError(f"Unknown terrain symbol {e.args[0]!r} in row {row_str!r}") from None


def format_terrain_row(row: List[Terrain]) -> str:
    """
    Format a list of terrain values as a symbol string.

    Example:
        >>> format_terrain_row([Terrain.ROUGH, Terrain.FAIRWAY])
        ',.'
    """
    return "".join(TERRAIN_SYMBOLS[t] for t in row)


def parse_terrain_rows(rows: List[str]) -> List[List[Terrain]]:
    """
    Parse multiple terrain rows.

    Raises:
        ValueError: If rows differ in width or contain unknown symbols
    """
    parsed = [parse_terrain_row(row) for row in rows]
    widths = {len(row) for row in parsed}
    if len(widths) > 1:
        raise ValueError(f"Terrain rows have mixed widths: {sorted(widths)}")
    return parsed


def format_terrain_rows(rows: List[List[Terrain]]) -> List[str]:
    return [format_terrain_row(row) for row in rows]


def parse_variant_row(row_str: str) -> List[TileVariant]:
    """
    Parse space-separated variant codes.

    Example:
        >>> parse_variant_row("0 5")
        [<TileVariant.SINGLE: 'single'>, <TileVariant.MIDDLE_CENTER: 'middle_center'>]
    """
    variants = []
    for code in row_str.split():
        index = int(code)
        if not 0 <= index < len(VARIANT_CODES):
            raise ValueError(f"Unknown variant code {code!r} in row {row_str!r}")
        variants.append(VARIANT_CODES[index])
    return variants


def format_variant_row(row: List[TileVariant]) -> str:
    return " ".join(str(VARIANT_CODES.index(v)) for v in row)
