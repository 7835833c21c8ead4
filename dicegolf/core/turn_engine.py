"""
Dice Golf - Turn Engine

Holds the state of one game session: the course being played, the ball's
position, the strokes taken and the distance allowed for the next shot.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import PUTTER_DISTANCE, STROKE_LIMIT
from .course import Course, Position
from .course_generator import CourseGenerator
from .course_validation import CourseValidator
from .dice import DiceRoll, DiceRoller
from .flight_path import flight_path as trace_flight, project_target
from .move_validator import MoveValidator
from .strokes import StrokeHistory
from .terrain import Terrain

logger = logging.getLogger(__name__)


class TurnState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    HOLE_COMPLETE = "hole_complete"


class Reaction(str, Enum):
    """Kind of hit, used by hosts to pick a sound."""

    FAIRWAY = "fairway"
    ROUGH = "rough"
    SAND = "sand"
    PUTT = "putt"


LIE_REACTIONS = {
    Terrain.FAIRWAY: Reaction.FAIRWAY,
    Terrain.ROUGH: Reaction.ROUGH,
    Terrain.SAND: Reaction.SAND,
}


class TurnStateError(Exception):
    """Raised when an operation is not allowed in the engine's current state."""

    pass


@dataclass(frozen=True)
class HitResult:
    """Outcome of attempting a hit."""

    accepted: bool
    position: Optional[Position]
    stroke_count: int
    is_win: bool = False
    reaction: Optional[Reaction] = None
    reason: Optional[str] = None


def reaction_for(lie: Terrain, distance: int) -> Optional[Reaction]:
    """Reaction for a hit from a lie; any shot at putter distance is a putt."""
    if distance == PUTTER_DISTANCE:
        return Reaction.PUTT
    return LIE_REACTIONS.get(lie)


class TurnEngine:
    """
    Turn-based play on one course at a time.

    States:
        AWAITING_INPUT: a legal hit moves the ball, records a stroke and
            either completes the hole or rolls the next distance
        HOLE_COMPLETE: the ball is in the hole; start a new course with
            next_course() or start_course()

    Usage:
        generator = CourseGenerator()
        engine = TurnEngine(generator.generate(), generator=generator)
        result = engine.attempt_hit((x, y))
        if result.is_win:
            engine.next_course()
    """

    def __init__(
        self,
        course: Course,
        dice: Optional[DiceRoller] = None,
        generator: Optional[CourseGenerator] = None,
        stroke_limit: int = STROKE_LIMIT,
    ):
        """
        Create an engine and start play on a course.

        Args:
            course: Course to play first
            dice: Dice roller (default: unseeded DiceRoller)
            generator: Generator used by next_course()
            stroke_limit: Strokes shown as the target for each course

        Raises:
            IncompleteCourseError: If the course has no hole or tee
        """
        self.dice = dice if dice is not None else DiceRoller()
        self.generator = generator
        self.stroke_limit = stroke_limit
        self.validator = MoveValidator()
        self.course_validator = CourseValidator()

        self.course: Course
        self.position: Position
        self.history: StrokeHistory
        self.state = TurnState.AWAITING_INPUT
        self.last_roll: DiceRoll
        self.start_course(course)

    # ------------------------------------------------------------------
    # Course lifecycle
    # ------------------------------------------------------------------

    def start_course(self, course: Course):
        """
        Put the ball on the tee of a course and roll for the first shot.

        Raises:
            IncompleteCourseError: If the course has no hole or tee
        """
        self.course_validator.validate(course)

        self.course = course
        self.position = course.ball
        self.history = StrokeHistory(course.ball)
        self.state = TurnState.AWAITING_INPUT
        self.last_roll = self.dice.roll(self.lie)
        logger.debug("Started course (seed %s), tee=%s hole=%s", course.seed, course.ball, course.hole)

    def next_course(self, seed: Optional[int] = None) -> Course:
        """
        Generate a course the same size as the current one and start it.

        Raises:
            TurnStateError: If the engine has no generator
            IncompleteCourseError: If the new course could not place its
                                   hole or tee
        """
        if self.generator is None:
            raise TurnStateError("No course generator configured for next_course()")
        course = self.generator.generate(self.course.width, self.course.height, seed=seed)
        self.start_course(course)
        return course

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def lie(self) -> Terrain:
        """Terrain the ball currently rests on."""
        return self.course.cell_at(*self.position).lie

    @property
    def allowed_distance(self) -> int:
        return self.last_roll.final

    @property
    def stroke_count(self) -> int:
        return self.history.stroke_count

    @property
    def strokes_remaining(self) -> int:
        """Strokes left against the limit; may go negative, never enforced."""
        return self.stroke_limit - self.stroke_count

    def stroke_history(self) -> tuple[Position, ...]:
        return self.history.positions()

    def is_legal_move(self, target: Position) -> bool:
        """Check whether hitting to target would be accepted now."""
        if self.state != TurnState.AWAITING_INPUT:
            return False
        return self.validator.is_legal(self.position, tuple(target), self.allowed_distance, self.course)

    def shot_target(self, pointer: Position) -> Position:
        """Where a full-distance shot aimed toward pointer would land."""
        return project_target(self.position, tuple(pointer), self.allowed_distance)

    def flight_path(self, pointer: Position) -> list[Position]:
        """Cells on the course crossed by a shot aimed toward pointer."""
        return [
            (x, y)
            for x, y in trace_flight(self.position, tuple(pointer), self.allowed_distance)
            if self.course.in_bounds(x, y)
        ]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def roll_dice(self) -> DiceRoll:
        """Roll a new distance for the current lie."""
        self.last_roll = self.dice.roll(self.lie)
        return self.last_roll

    def force_putter(self) -> DiceRoll:
        """Switch to the putter: the next shot travels exactly one cell."""
        self.last_roll = self.dice.force_putter()
        return self.last_roll

    def attempt_hit(self, target: Position) -> HitResult:
        """
        Try to hit the ball to target.

        An illegal target is a normal outcome: nothing changes and the result
        is not accepted.

        Args:
            target: Requested landing cell (x, y)

        Returns:
            HitResult describing the outcome

        Raises:
            TurnStateError: If the hole is already complete
            CellOutOfBoundsError: If target is outside the course
        """
        if self.state == TurnState.HOLE_COMPLETE:
            raise TurnStateError("Hole is complete; start a new course before hitting")

        target = tuple(target)
        distance = self.allowed_distance
        check = self.validator.check(self.position, target, distance, self.course)
        if not check.legal:
            logger.debug("Rejected hit %s -> %s at distance %d: %s", self.position, target, distance, check.reason)
            return HitResult(False, None, self.stroke_count, reason=check.reason)

        reaction = reaction_for(self.lie, distance)
        self.position = target
        self.history.record(target)

        is_win = target == self.course.hole
        if is_win:
            self.state = TurnState.HOLE_COMPLETE
            logger.debug("Holed out in %d strokes", self.stroke_count)
        else:
            self.last_roll = self.dice.roll(self.lie)

        return HitResult(True, target, self.stroke_count, is_win, reaction)
