#!/usr/bin/env python3
"""
Dice Golf - Course Analyzer

Generates many courses and reports terrain mix, placement success and how
many strokes a simple greedy player needs.
Usage: python analyze.py [--courses N] [--seed S]
"""

import argparse
import logging
import random
from collections import defaultdict

import numpy as np

from dicegolf.core import CourseGenerator, DiceRoller, Terrain, TurnEngine
from dicegolf.core.constants import COURSE_HEIGHT, COURSE_WIDTH

# Greedy games give up after this many strokes or rerolls
MAX_GREEDY_STROKES = 40
MAX_REROLLS = 200


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "count": len(values),
    }


def candidate_targets(engine):
    """Every in-bounds cell exactly the allowed distance away in 8 directions."""
    distance = engine.allowed_distance
    x, y = engine.position
    targets = []
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            tx, ty = x + dx * distance, y + dy * distance
            if engine.course.in_bounds(tx, ty):
                targets.append((tx, ty))
    return targets


def play_greedy(engine):
    """
    Play the current course by always taking the legal shot nearest the hole.

    Rerolls whenever no shot is legal and putts when one cell away.

    Returns:
        Strokes taken, or None if the game was abandoned
    """
    hole_x, hole_y = engine.course.hole
    rerolls = 0
    while engine.stroke_count < MAX_GREEDY_STROKES:
        x, y = engine.position
        if max(abs(hole_x - x), abs(hole_y - y)) == 1:
            engine.force_putter()

        legal = [t for t in candidate_targets(engine) if engine.is_legal_move(t)]
        if not legal:
            rerolls += 1
            if rerolls > MAX_REROLLS:
                return None
            engine.roll_dice()
            continue

        target = min(legal, key=lambda t: max(abs(hole_x - t[0]), abs(hole_y - t[1])))
        result = engine.attempt_hit(target)
        if result.is_win:
            return result.stroke_count
    return None


def analyze_courses(count, width, height, seed):
    """Generate count courses and print statistics about them."""
    rng = random.Random(seed)
    generator = CourseGenerator()

    terrain_fractions = defaultdict(list)
    hole_failures = 0
    tee_failures = 0
    tee_to_hole = []
    greedy_strokes = []
    abandoned = 0

    for _ in range(count):
        course_seed = rng.randint(0, 2**31 - 1)
        course = generator.generate(width, height, seed=course_seed, validate=False)

        counts = defaultdict(int)
        for cell in course.iter_cells():
            counts[cell.underlay] += 1
        for terrain in (Terrain.ROUGH, Terrain.FAIRWAY, Terrain.SAND, Terrain.WATER, Terrain.TREES):
            terrain_fractions[terrain].append(counts[terrain] / (width * height))

        if course.hole is None:
            hole_failures += 1
        if course.ball is None:
            tee_failures += 1
        if not course.is_complete:
            continue

        tx, ty = course.ball
        hx, hy = course.hole
        tee_to_hole.append(max(abs(hx - tx), abs(hy - ty)))

        engine = TurnEngine(course, dice=DiceRoller(seed=course_seed))
        strokes = play_greedy(engine)
        if strokes is None:
            abandoned += 1
        else:
            greedy_strokes.append(strokes)

    print(f"Analyzed {count} courses of {width}x{height} cells\n")

    print("=" * 60)
    print("TERRAIN MIX (fraction of cells before placement)")
    print("=" * 60)
    for terrain, fractions in terrain_fractions.items():
        stats = percentile_stats(fractions)
        print(f"\n{terrain.value.capitalize()}:")
        print(f"  Mean: {np.mean(fractions):.3f}")
        print(f"  Min:  {stats['min']:.3f}")
        print(f"  50th: {stats['50th']:.3f}")
        print(f"  Max:  {stats['max']:.3f}")

    print("\n" + "=" * 60)
    print("PLACEMENT")
    print("=" * 60)
    complete = len(tee_to_hole)
    print(f"\nNo hole placed: {hole_failures}/{count}")
    print(f"No tee placed:  {tee_failures}/{count}")
    print(f"Playable:       {complete}/{count} ({complete / count:.1%})")

    if tee_to_hole:
        stats = percentile_stats(tee_to_hole)
        print("\nTee to hole (cells, king moves):")
        print(f"  Min:  {stats['min']:.0f}")
        print(f"  25th: {stats['25th']:.1f}")
        print(f"  50th: {stats['50th']:.1f}")
        print(f"  75th: {stats['75th']:.1f}")
        print(f"  Max:  {stats['max']:.0f}")

    print("\n" + "=" * 60)
    print("GREEDY PLAYER")
    print("=" * 60)
    if greedy_strokes:
        stats = percentile_stats(greedy_strokes)
        print(f"\nStrokes to hole out (n={stats['count']}, abandoned={abandoned}):")
        print(f"  Average: {np.mean(greedy_strokes):.2f}")
        print(f"  Std dev: {np.std(greedy_strokes):.2f}")
        print(f"  Min:  {stats['min']:.0f}")
        print(f"  50th: {stats['50th']:.1f}")
        print(f"  Max:  {stats['max']:.0f}")
    else:
        print(f"\nNo course was completed (abandoned={abandoned})")


def main():
    parser = argparse.ArgumentParser(description="Generate dice golf courses and report statistics")
    parser.add_argument("--courses", type=int, default=100, help="Number of courses to generate")
    parser.add_argument("--width", type=int, default=COURSE_WIDTH, help="Course width in cells")
    parser.add_argument("--height", type=int, default=COURSE_HEIGHT, help="Course height in cells")
    parser.add_argument("--seed", type=int, default=0, help="Seed for picking course seeds")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.courses < 1:
        parser.error("--courses must be at least 1")

    analyze_courses(args.courses, args.width, args.height, args.seed)


if __name__ == "__main__":
    main()
