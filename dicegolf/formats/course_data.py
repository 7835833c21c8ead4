"""
Dice Golf - Course Data Files

Saves generated courses to JSON and loads them back, so interesting seeds
can be kept, inspected and replayed.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.course import Course
from .terrain_rows import (
    format_terrain_rows,
    format_variant_row,
    parse_terrain_rows,
    parse_variant_row,
)

PathLike = Union[str, Path]


def course_to_dict(course: Course) -> Dict[str, Any]:
    """Convert a course to its JSON-ready form."""
    return {
        "width": course.width,
        "height": course.height,
        "seed": course.seed,
        "hole": _position_dict(course.hole),
        "tee": _position_dict(course.ball),
        "terrain": {"rows": format_terrain_rows(course.terrain_rows())},
        "variants": {"rows": [format_variant_row(row) for row in course.variant_rows()]},
    }


def course_from_dict(data: Dict[str, Any]) -> Course:
    """
    Rebuild a course from its JSON form.

    Terrain and variants are taken as stored; nothing is reclassified.

    Raises:
        ValueError: If the data is malformed or inconsistent
    """
    try:
        terrain = parse_terrain_rows(data["terrain"]["rows"])
        variant_rows = data.get("variants", {}).get("rows")
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed course data: {e}") from e

    variants = None
    if variant_rows is not None:
        variants = [parse_variant_row(row) for row in variant_rows]
        if [len(row) for row in variants] != [len(row) for row in terrain]:
            raise ValueError("Variant rows do not match terrain rows")

    course = Course.from_terrain(terrain, variants=variants, seed=data.get("seed"))

    if (course.width, course.height) != (data.get("width", course.width), data.get("height", course.height)):
        raise ValueError(
            f"Declared size {data.get('width')}x{data.get('height')} does not match "
            f"terrain {course.width}x{course.height}"
        )
    if course.hole != _position_tuple(data.get("hole")):
        raise ValueError(f"Declared hole {data.get('hole')} does not match terrain {course.hole}")
    if course.ball != _position_tuple(data.get("tee")):
        raise ValueError(f"Declared tee {data.get('tee')} does not match terrain {course.ball}")

    return course


def save_course(course: Course, path: PathLike):
    """Save a course to a JSON file."""
    with open(path, "w") as f:
        json.dump(course_to_dict(course), f, indent=2)


def load_course(path: PathLike) -> Course:
    """Load a course from a JSON file."""
    with open(path, "r") as f:
        data = json.load(f)
    return course_from_dict(data)


def _position_dict(position) -> Optional[Dict[str, int]]:
    if position is None:
        return None
    return {"x": position[0], "y": position[1]}


def _position_tuple(data) -> Optional[tuple]:
    if data is None:
        return None
    try:
        return (data["x"], data["y"])
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed position {data!r}: {e}") from e
