#!/usr/bin/env python3
"""
Dice Golf - Terminal Player

Plays generated courses in the terminal, one typed shot at a time.

Commands:
    x y   hit toward cell (x, y)
    p     switch to the putter (distance 1)
    r     reroll when the roll allows no move (distance 0 or less)
    q     quit
"""

import argparse
import logging
import sys

from dicegolf.core import CellOutOfBoundsError, CourseGenerator, DiceRoller, TurnEngine
from dicegolf.core.constants import COURSE_HEIGHT, COURSE_WIDTH
from dicegolf.formats.course_data import load_course
from dicegolf.formats.terrain_rows import format_terrain_row

from tools.generate import generate_playable

BALL_MARK = "*"


def show(engine):
    """Print the course with the ball marked, then the roll and strokes."""
    bx, by = engine.position
    print()
    print("    " + "".join(str(x % 10) for x in range(engine.course.width)))
    for y, row in enumerate(engine.course.terrain_rows()):
        text = format_terrain_row(row)
        if y == by:
            text = text[:bx] + BALL_MARK + text[bx + 1:]
        print(f"{y:3d} {text}")
    print(f"\n{engine.last_roll.label()}  Strokes: {engine.stroke_count}/{engine.stroke_limit}")


def parse_target(command):
    parts = command.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'x y', got {command!r}")
    return (int(parts[0]), int(parts[1]))


def play(engine, generator, width, height, attempts):
    """Read commands until the player quits."""
    show(engine)
    for line in sys.stdin:
        command = line.strip().lower()
        if not command:
            continue
        if command == "q":
            return
        if command == "p":
            engine.force_putter()
            show(engine)
            continue
        if command == "r":
            if engine.allowed_distance > 0:
                print("Reroll is only allowed when the roll gives no move")
            else:
                engine.roll_dice()
                show(engine)
            continue

        try:
            result = engine.attempt_hit(parse_target(command))
        except (ValueError, CellOutOfBoundsError) as e:
            print(f"Error: {e}")
            continue

        if not result.accepted:
            print(f"Can't hit there ({result.reason})")
            continue

        if result.reaction is not None:
            print(f"*{result.reaction.value}*")
        if result.is_win:
            print(f"\nIn the hole in {result.stroke_count}!")
            engine.start_course(generate_playable(generator, width, height, attempts=attempts))
        show(engine)


def main():
    parser = argparse.ArgumentParser(description="Play dice golf in the terminal")
    parser.add_argument("course", nargs="?", help="Saved course JSON to start with")
    parser.add_argument("--width", type=int, default=COURSE_WIDTH, help="Course width in cells")
    parser.add_argument("--height", type=int, default=COURSE_HEIGHT, help="Course height in cells")
    parser.add_argument("--seed", type=int, default=None, help="Noise seed for the first course")
    parser.add_argument("--dice-seed", type=int, default=None, help="Seed for the dice")
    parser.add_argument("--attempts", type=int, default=20, help="Seeds to try per course")
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    generator = CourseGenerator()
    if args.course:
        course = load_course(args.course)
    else:
        course = generate_playable(generator, args.width, args.height, args.seed, args.attempts)

    engine = TurnEngine(course, dice=DiceRoller(seed=args.dice_seed), generator=generator)
    play(engine, generator, course.width, course.height, args.attempts)


if __name__ == "__main__":
    main()
