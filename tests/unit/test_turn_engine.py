"""Unit tests for TurnEngine."""

import pytest

from dicegolf.core.course import CellOutOfBoundsError, Course
from dicegolf.core.course_generator import CourseGenerator
from dicegolf.core.course_validation import IncompleteCourseError
from dicegolf.core.terrain import Terrain
from dicegolf.core.turn_engine import (
    Reaction,
    TurnEngine,
    TurnState,
    TurnStateError,
    reaction_for,
)


def course_rows(overrides):
    """8x12 fairway rows with the tee at (5, 10), the hole at (5, 6) and overrides."""
    rows = [list("........") for _ in range(12)]
    rows[6][5] = "O"
    rows[10][5] = "B"
    for (x, y), symbol in overrides.items():
        rows[y][x] = symbol
    return ["".join(row) for row in rows]


class TestStart:
    """Tests for starting play on a course."""

    def test_ball_on_tee(self, open_course, fixed_dice):
        """Starting should put the ball on the tee with no strokes."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        assert engine.position == (5, 10)
        assert engine.stroke_history() == ((5, 10),)
        assert engine.stroke_count == 0
        assert engine.state == TurnState.AWAITING_INPUT

    def test_first_roll_uses_tee_lie(self, open_course, fixed_dice):
        """The tee sits on fairway, so the first roll gets +1."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        assert engine.lie == Terrain.FAIRWAY
        assert engine.allowed_distance == 4

    def test_incomplete_course_refused(self, make_course, fixed_dice):
        """A course without a hole should not be played."""
        course = make_course(["....", "..B."], seed=8)
        with pytest.raises(IncompleteCourseError, match="hole"):
            TurnEngine(course, dice=fixed_dice(3))


class TestAttemptHit:
    """Tests for attempt_hit()."""

    def test_straight_shot_into_hole(self, open_course, fixed_dice):
        """A full-distance shot into the hole should win."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        result = engine.attempt_hit((5, 6))

        assert result.accepted is True
        assert result.is_win is True
        assert result.position == (5, 6)
        assert result.stroke_count == 1
        assert result.reaction == Reaction.FAIRWAY
        assert engine.state == TurnState.HOLE_COMPLETE

    def test_rejected_hit_changes_nothing(self, open_course, fixed_dice):
        """An illegal hit should leave position, history and roll alone."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        result = engine.attempt_hit((5, 7))

        assert result.accepted is False
        assert result.position is None
        assert result.stroke_count == 0
        assert result.reason == "distance"
        assert engine.position == (5, 10)
        assert engine.stroke_history() == ((5, 10),)
        assert engine.allowed_distance == 4

    def test_accepts_list_targets(self, open_course, fixed_dice):
        """Targets given as lists should be treated like tuples."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        assert engine.attempt_hit([5, 6]).is_win

    def test_list_positions_in_course_can_win(self, open_course, fixed_dice):
        """A course built with list coordinates should still end in a win."""
        course = Course(open_course.cells, hole=[5, 6], ball=[5, 10], seed=1)
        engine = TurnEngine(course, dice=fixed_dice(3))
        result = engine.attempt_hit((5, 6))
        assert result.is_win
        assert engine.state == TurnState.HOLE_COMPLETE

    def test_hit_records_stroke_and_rerolls(self, open_course, fixed_dice):
        """An accepted hit should record a stroke and roll again."""
        engine = TurnEngine(open_course, dice=fixed_dice(3, 5))
        result = engine.attempt_hit((1, 10))

        assert result.accepted is True
        assert result.is_win is False
        assert engine.position == (1, 10)
        assert engine.stroke_history() == ((5, 10), (1, 10))
        assert engine.allowed_distance == 6
        assert engine.state == TurnState.AWAITING_INPUT

    def test_reroll_uses_new_lie(self, make_course, fixed_dice):
        """The next roll should use the modifier of the new lie."""
        course = make_course(course_rows({(1, 10): "s"}))
        engine = TurnEngine(course, dice=fixed_dice(3, 3))
        engine.attempt_hit((1, 10))
        assert engine.lie == Terrain.SAND
        assert engine.allowed_distance == 2

    def test_out_of_bounds_target_raises(self, open_course, fixed_dice):
        """Hitting off the course should raise CellOutOfBoundsError."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        with pytest.raises(CellOutOfBoundsError):
            engine.attempt_hit((5, 14))

    def test_hit_after_win_raises(self, open_course, fixed_dice):
        """Hitting after holing out should raise TurnStateError."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        engine.attempt_hit((5, 6))
        with pytest.raises(TurnStateError, match="complete"):
            engine.attempt_hit((5, 2))
        assert engine.is_legal_move((5, 2)) is False


class TestReactions:
    """Tests for the reaction reported with each accepted hit."""

    def test_rough_reaction(self, make_course, fixed_dice):
        """A full shot from rough should report the rough reaction."""
        course = make_course(course_rows({(1, 10): ","}))
        engine = TurnEngine(course, dice=fixed_dice(3, 2, 4))
        engine.attempt_hit((1, 10))
        result = engine.attempt_hit((1, 8))
        assert result.reaction == Reaction.ROUGH

    def test_sand_reaction(self, make_course, fixed_dice):
        """A full shot from sand should report the sand reaction."""
        course = make_course(course_rows({(1, 10): "s"}))
        engine = TurnEngine(course, dice=fixed_dice(3, 3, 4))
        engine.attempt_hit((1, 10))
        result = engine.attempt_hit((3, 10))
        assert result.reaction == Reaction.SAND

    def test_putt_reaction(self, open_course, fixed_dice):
        """A putter shot should report the putt reaction."""
        engine = TurnEngine(open_course, dice=fixed_dice(3, 4))
        engine.force_putter()
        result = engine.attempt_hit((5, 9))
        assert result.accepted
        assert result.reaction == Reaction.PUTT

    def test_reaction_for(self):
        """Distance one should always putt; other lies map by terrain."""
        assert reaction_for(Terrain.FAIRWAY, 1) == Reaction.PUTT
        assert reaction_for(Terrain.SAND, 3) == Reaction.SAND
        assert reaction_for(Terrain.WATER, 3) is None


class TestDice:
    """Tests for rolling and the putter."""

    def test_force_putter(self, open_course, fixed_dice):
        """Forcing the putter should allow exactly one cell."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        engine.force_putter()
        assert engine.allowed_distance == 1
        assert engine.is_legal_move((5, 9))
        assert not engine.is_legal_move((5, 6))

    def test_zero_roll_allows_no_move(self, make_course, fixed_dice):
        """A zero roll should allow no move until the dice are rolled again."""
        course = make_course(course_rows({(1, 10): "s"}))
        engine = TurnEngine(course, dice=fixed_dice(3, 1, 2))
        engine.attempt_hit((1, 10))
        assert engine.allowed_distance == 0

        candidates = [(x, y) for x in range(8) for y in range(12)]
        assert not any(engine.is_legal_move(t) for t in candidates)

        roll = engine.roll_dice()
        assert roll.final == 1
        assert engine.allowed_distance == 1


class TestQueries:
    """Tests for read-only queries."""

    def test_strokes_remaining(self, open_course, fixed_dice):
        """Strokes remaining should count down from the limit."""
        engine = TurnEngine(open_course, dice=fixed_dice(3, 3), stroke_limit=6)
        assert engine.strokes_remaining == 6
        engine.attempt_hit((1, 10))
        assert engine.strokes_remaining == 5

    def test_shot_target(self, open_course, fixed_dice):
        """The shot target should be projected to the full distance."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        assert engine.shot_target((5, 9)) == (5, 6)
        assert engine.shot_target((7, 9)) == (9, 6)

    def test_flight_path_clipped_to_course(self, open_course, fixed_dice):
        """Flight path cells off the course should be dropped."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        assert engine.flight_path((6, 10)) == [(5, 10), (6, 10), (7, 10)]

    def test_stroke_history_is_read_only(self, open_course, fixed_dice):
        """Stroke history should be returned as an immutable copy."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        history = engine.stroke_history()
        assert isinstance(history, tuple)


class TestCourseLifecycle:
    """Tests for moving on to a new course."""

    def test_next_course_without_generator(self, open_course, fixed_dice):
        """next_course() without a generator should raise TurnStateError."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        engine.attempt_hit((5, 6))
        with pytest.raises(TurnStateError, match="generator"):
            engine.next_course()

    def test_next_course_resets_play(self, open_course, fixed_dice, fixed_noise):
        """next_course() should start fresh play on the generated course."""
        heights = [[-0.5] * 8 for _ in range(12)]
        heights[1][6] = 0.1  # Hole
        heights[11][3] = 0.1  # Tee
        generator = CourseGenerator(noise=fixed_noise(heights))

        engine = TurnEngine(open_course, dice=fixed_dice(3, 2), generator=generator)
        engine.attempt_hit((5, 6))
        course = engine.next_course(seed=12)

        assert course.seed == 12
        assert course.hole == (6, 1)
        assert course.ball == (3, 11)
        assert engine.course is course
        assert engine.position == (3, 11)
        assert engine.stroke_history() == ((3, 11),)
        assert engine.state == TurnState.AWAITING_INPUT
        assert engine.allowed_distance == 3

    def test_start_course_refuses_incomplete(self, open_course, make_course, fixed_dice):
        """start_course() should keep the current course when refusing."""
        engine = TurnEngine(open_course, dice=fixed_dice(3))
        with pytest.raises(IncompleteCourseError):
            engine.start_course(make_course(["...."]))
        assert engine.course is open_course
