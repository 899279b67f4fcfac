# File: tests/core/test_json_schemas.py
"""Tests for project file serialization."""

import json

import pytest

from deck_designer.config.spacing import DeckColor, SpacingConfig
from deck_designer.core.errors import ProjectFileError
from deck_designer.core.json_schemas import (
    PROJECT_FILE_VERSION,
    DeckProject,
    deserialize_project,
    evaluate_project,
    serialize_project,
    validate_project_data,
)
from deck_designer.utils.geometry_helpers import Point


@pytest.fixture
def project(l_shape):
    return DeckProject(
        points=l_shape,
        config=SpacingConfig(has_railings=True, deck_color="Hazelnut"),
        width_ft=12,
        length_ft=16,
    )


@pytest.fixture
def project_data():
    return {
        "points": [{"x": 0, "y": 0}, {"x": 600, "y": 0}, {"x": 600, "y": 600}],
        "deckColor": "Khaki",
        "joistSpacing": 0.3048,
        "beamSpacing": 2.4384,
        "postSpacing": 2.4384,
        "hasRailings": False,
        "version": "1.0",
    }


class TestDeckProject:

    def test_points_are_coerced(self, project):
        assert project.points[1] == Point(500, 0)

    def test_to_dict_uses_file_keys(self, project):
        data = project.to_dict()
        assert data["deckColor"] == "Hazelnut"
        assert data["hasRailings"] is True
        assert data["joistSpacing"] == pytest.approx(0.3048)
        assert data["widthFt"] == 12
        assert data["lengthFt"] == 16
        assert data["version"] == PROJECT_FILE_VERSION
        assert data["points"][0] == {"x": 0.0, "y": 0.0}

    def test_optional_dimensions_are_omitted(self, l_shape):
        data = DeckProject(points=l_shape).to_dict()
        assert "widthFt" not in data
        assert "lengthFt" not in data

    def test_from_dict(self, project_data):
        project = DeckProject.from_dict(project_data)
        assert len(project.points) == 3
        assert project.config.deck_color == DeckColor.KHAKI
        assert project.width_ft is None


class TestSerialization:

    def test_save_and_reload_gives_same_results(self, project):
        loaded = deserialize_project(serialize_project(project))
        assert loaded.points == project.points
        assert loaded.config == project.config

        layout_before, bom_before = evaluate_project(project)
        layout_after, bom_after = evaluate_project(loaded)
        assert layout_after.to_dict() == layout_before.to_dict()
        assert bom_after.to_dict() == bom_before.to_dict()

    def test_serialized_text_is_json(self, project):
        assert json.loads(serialize_project(project))["version"] == "1.0"

    def test_accepts_bytes_and_dicts(self, project_data):
        assert len(deserialize_project(json.dumps(project_data).encode()).points) == 3
        assert len(deserialize_project(project_data).points) == 3

    def test_malformed_json(self):
        with pytest.raises(ProjectFileError, match="Invalid JSON"):
            deserialize_project("{not json")

    def test_invalid_file_lists_every_problem(self, project_data):
        project_data["joistSpacing"] = 0
        project_data["deckColor"] = "Purple"
        del project_data["hasRailings"]
        with pytest.raises(ProjectFileError) as exc_info:
            deserialize_project(project_data)
        errors = exc_info.value.errors
        assert "Missing required field: hasRailings" in errors
        assert any(e.startswith("joistSpacing") for e in errors)
        assert any("Purple" in e for e in errors)

    def test_project_file_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            deserialize_project([])


class TestValidateProjectData:

    def test_valid(self, project_data):
        assert validate_project_data(project_data) == (True, [])

    def test_not_an_object(self):
        is_valid, errors = validate_project_data("points")
        assert not is_valid
        assert "JSON object" in errors[0]

    def test_unsupported_version(self, project_data):
        project_data["version"] = "2.0"
        is_valid, errors = validate_project_data(project_data)
        assert not is_valid
        assert errors == ["Unsupported project version: '2.0'"]

    def test_bad_point(self, project_data):
        project_data["points"].append({"x": 1})
        is_valid, errors = validate_project_data(project_data)
        assert errors == ["Point 3 is not a valid {x, y} pair"]

    def test_two_character_strings_are_not_points(self, project_data):
        project_data["points"] = ["00", "99", "90"]
        is_valid, errors = validate_project_data(project_data)
        assert not is_valid
        assert errors == [f"Point {i} is not a valid {{x, y}} pair" for i in range(3)]

    def test_has_railings_must_be_bool(self, project_data):
        project_data["hasRailings"] = "yes"
        assert validate_project_data(project_data)[1] == ["hasRailings must be true or false"]

    def test_dimensions_must_be_numbers(self, project_data):
        project_data["widthFt"] = "12"
        project_data["lengthFt"] = None
        assert validate_project_data(project_data)[1] == ["widthFt must be a number"]
