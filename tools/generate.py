#!/usr/bin/env python3
"""
Dice Golf - Course Generator Tool

Generates a course, prints it as text and optionally saves it as JSON.
"""

import argparse
import logging
import sys

from dicegolf.core import CourseGenerator, IncompleteCourseError
from dicegolf.core.constants import COURSE_HEIGHT, COURSE_WIDTH
from dicegolf.formats.course_data import save_course
from dicegolf.formats.terrain_rows import format_terrain_row

logger = logging.getLogger(__name__)


def generate_playable(generator, width, height, seed=None, attempts=20):
    """
    Generate courses until one places both its hole and tee.

    An explicit seed is tried first; later attempts use fresh seeds.

    Raises:
        IncompleteCourseError: From the last attempt if none succeeded
    """
    last_error = None
    for attempt in range(max(1, attempts)):
        try:
            return generator.generate(width, height, seed=seed if attempt == 0 else None)
        except IncompleteCourseError as e:
            logger.info("Attempt %d failed (seed %s), regenerating", attempt + 1, e.seed)
            last_error = e
    raise last_error


def print_course(course):
    """Print the course as rows of terrain symbols with its key facts."""
    print(f"Seed: {course.seed}  Size: {course.width}x{course.height}")
    print(f"Hole: {course.hole}  Tee: {course.ball}")
    print()
    print("    " + "".join(str(x % 10) for x in range(course.width)))
    for y, row in enumerate(course.terrain_rows()):
        print(f"{y:3d} {format_terrain_row(row)}")


def main():
    parser = argparse.ArgumentParser(
        description="Generate a dice golf course",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate and print a random course
  dicegolf-generate

  # Reproduce a course and save it
  dicegolf-generate --seed 1234 -o course.json
""",
    )
    parser.add_argument("--width", type=int, default=COURSE_WIDTH, help="Course width in cells")
    parser.add_argument("--height", type=int, default=COURSE_HEIGHT, help="Course height in cells")
    parser.add_argument("--seed", type=int, default=None, help="Noise seed (default: random)")
    parser.add_argument(
        "--attempts",
        type=int,
        default=20,
        help="Seeds to try before giving up on placing hole and tee",
    )
    parser.add_argument("-o", "--output", default=None, help="Save the course as JSON")
    parser.add_argument("--verbose", action="store_true", help="Show generation details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    generator = CourseGenerator()
    try:
        course = generate_playable(generator, args.width, args.height, args.seed, args.attempts)
    except IncompleteCourseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_course(course)

    if args.output:
        save_course(course, args.output)
        print(f"\nSaved to {args.output}")


if __name__ == "__main__":
    main()
