"""Unit tests for terrain rows and course JSON files."""

import json

import pytest

from dicegolf.core.course_generator import CourseGenerator
from dicegolf.core.terrain import Terrain, TileVariant
from dicegolf.formats.course_data import course_from_dict, course_to_dict, load_course, save_course
from dicegolf.formats.terrain_rows import (
    format_terrain_row,
    format_variant_row,
    parse_terrain_row,
    parse_terrain_rows,
    parse_variant_row,
)


class TestTerrainRows:
    """Tests for terrain symbol rows."""

    def test_parse(self):
        assert parse_terrain_row(",.s~TOB") == [
            Terrain.ROUGH,
            Terrain.FAIRWAY,
            Terrain.SAND,
            Terrain.WATER,
            Terrain.TREES,
            Terrain.HOLE,
            Terrain.BALL,
        ]

    def test_format(self):
        assert format_terrain_row([Terrain.WATER, Terrain.TREES]) == "~T"

    def test_unknown_symbol(self):
        with pytest.raises(ValueError, match="Unknown terrain symbol 'x'"):
            parse_terrain_row("..x")

    def test_mixed_widths(self):
        with pytest.raises(ValueError, match="mixed widths"):
            parse_terrain_rows(["...", ".."])

    def test_variant_codes(self):
        row = [TileVariant.SINGLE, TileVariant.MIDDLE_CENTER, TileVariant.BOTTOM_RIGHT]
        assert format_variant_row(row) == "0 5 9"
        assert parse_variant_row("0 5 9") == row

    @pytest.mark.parametrize("row", ["0 10", "0 99", "0 -1"])
    def test_variant_code_out_of_range(self, row):
        """Variant codes outside the enum should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown variant code"):
            parse_variant_row(row)


class TestCourseFiles:
    """Tests for saving and loading courses."""

    def test_to_dict_layout(self, make_course):
        course = make_course([",O", "B."], seed=4)
        data = course_to_dict(course)
        assert data["width"] == 2
        assert data["height"] == 2
        assert data["seed"] == 4
        assert data["hole"] == {"x": 1, "y": 0}
        assert data["tee"] == {"x": 0, "y": 1}
        assert data["terrain"]["rows"] == [",O", "B."]
        assert len(data["variants"]["rows"]) == 2

    def test_save_and_load_generated_course(self, tmp_path):
        course = CourseGenerator().generate(seed=31, validate=False)
        path = tmp_path / "course.json"

        save_course(course, path)
        loaded = load_course(path)

        assert loaded.terrain_rows() == course.terrain_rows()
        assert loaded.variant_rows() == course.variant_rows()
        assert (loaded.hole, loaded.ball, loaded.seed) == (course.hole, course.ball, course.seed)

    def test_file_is_json(self, tmp_path, make_course):
        path = tmp_path / "course.json"
        save_course(make_course(["O.B"]), path)
        with open(path) as f:
            assert json.load(f)["terrain"]["rows"] == ["O.B"]

    def test_missing_terrain(self):
        with pytest.raises(ValueError, match="Malformed"):
            course_from_dict({"width": 2})

    def test_declared_hole_mismatch(self, make_course):
        data = course_to_dict(make_course(["O.B"]))
        data["hole"] = {"x": 1, "y": 0}
        with pytest.raises(ValueError, match="hole"):
            course_from_dict(data)

    def test_declared_size_mismatch(self, make_course):
        data = course_to_dict(make_course(["O.B"]))
        data["width"] = 5
        with pytest.raises(ValueError, match="size"):
            course_from_dict(data)

    def test_variant_rows_must_match(self, make_course):
        data = course_to_dict(make_course(["O.B"]))
        data["variants"]["rows"] = ["0 0"]
        with pytest.raises(ValueError, match="Variant rows"):
            course_from_dict(data)

    @pytest.mark.parametrize("code", ["99", "-1"])
    def test_stored_variant_code_out_of_range(self, make_course, code):
        """A saved variant code outside the enum should fail to load."""
        data = course_to_dict(make_course(["..O.", ".B.."]))
        data["variants"]["rows"][0] = f"0 0 0 {code}"
        with pytest.raises(ValueError, match="variant code"):
            course_from_dict(data)

    @pytest.mark.parametrize("key", ["hole", "tee"])
    def test_position_missing_coordinate(self, make_course, key):
        """A hole or tee entry without both coordinates should raise ValueError."""
        data = course_to_dict(make_course(["..O.", ".B.."]))
        data[key] = {"x": 2}
        with pytest.raises(ValueError, match="Malformed position"):
            course_from_dict(data)

    def test_position_not_a_mapping(self, make_course):
        """A hole stored as a bare number should raise ValueError."""
        data = course_to_dict(make_course(["..O.", ".B.."]))
        data["hole"] = 3
        with pytest.raises(ValueError, match="Malformed position"):
            course_from_dict(data)
