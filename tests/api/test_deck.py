# tests/api/test_deck.py
import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError as PydanticValidationError

from api.main import app
from api.models.deck_models import PointModel
from api.utils.config import Config

# Create test client
client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_does_not_require_auth():
    assert client.get("/").status_code == 200


class TestAuthentication:

    def test_missing_api_key(self, square_design):
        response = client.post("/deck/layout", json=square_design)
        assert response.status_code == 401

    def test_invalid_api_key(self, square_design):
        response = client.post("/deck/layout", json=square_design,
                               headers={"X-API-Key": "invalid_key"})
        assert response.status_code == 401


class TestLayoutEndpoint:

    def test_layout(self, api_headers, square_design):
        response = client.post("/deck/layout", json=square_design, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["counts"] == {"joist": 39, "beam": 4, "post": 25, "railing": 4}
        assert data["deck_surface"]["color"] == "Khaki"
        assert len(data["edges"]) == 4
        assert data["edges"][0]["label"] == "39.37 ft"

    def test_too_few_points(self, api_headers):
        response = client.post("/deck/layout", json={"points": [{"x": 0, "y": 0}]},
                               headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["deck_surface"] is None
        assert data["joists"] == []
        assert data["edges"] == []

    def test_zero_spacing_is_rejected(self, api_headers, square_design):
        square_design["joist_spacing"] = 0
        response = client.post("/deck/layout", json=square_design, headers=api_headers)
        assert response.status_code == 422

    @pytest.mark.parametrize("coordinate", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_coordinate_is_rejected(self, api_headers, coordinate):
        body = (
            '{"points": [{"x": %s, "y": 0}, {"x": 600, "y": 0}, {"x": 600, "y": 600}]}'
            % coordinate
        )
        response = client.post(
            "/deck/layout",
            content=body,
            headers={**api_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 422

    def test_non_finite_point_model(self):
        with pytest.raises(PydanticValidationError, match="finite"):
            PointModel(x=float("nan"), y=0)

    def test_unknown_color_is_rejected(self, api_headers, square_design):
        square_design["deck_color"] = "Purple"
        response = client.post("/deck/layout", json=square_design, headers=api_headers)
        assert response.status_code == 422

    def test_oversized_design(self, api_headers, square_design, monkeypatch):
        monkeypatch.setattr(Config, "MAX_MEMBERS", 10)
        response = client.post("/deck/layout", json=square_design, headers=api_headers)
        assert response.status_code == 413
        assert response.json()["detail"]["code"] == "design_too_large"


class TestBomEndpoints:

    def test_bom(self, api_headers, square_design):
        response = client.post("/deck/bom", json=square_design, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total_boards"] == 170
        assert data["total_fasteners"] == 340
        assert data["railing_length"] == pytest.approx(48.0)

    def test_bom_csv(self, api_headers, square_design):
        response = client.post("/deck/bom.csv", json=square_design, headers=api_headers)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "deck_bom.csv" in response.headers["content-disposition"]
        lines = response.text.splitlines()
        assert lines[0] == "Item,Quantity,Unit,Details"
        assert lines[-1] == "Fasteners,340,Each,Hidden Fasteners"


class TestProjectEndpoints:

    def test_export_then_evaluate(self, api_headers, square_design):
        square_design["width_ft"] = 39.37
        response = client.post("/deck/project", json=square_design, headers=api_headers)
        assert response.status_code == 200
        assert "deck_project.json" in response.headers["content-disposition"]
        project = response.json()
        assert project["deckColor"] == "Khaki"
        assert project["hasRailings"] is True
        assert project["widthFt"] == 39.37
        assert "lengthFt" not in project

        response = client.post("/deck/project/evaluate", json=project, headers=api_headers)
        assert response.status_code == 200
        result = response.json()
        assert result["bom"]["total_boards"] == 170
        assert result["layout"]["counts"]["railing"] == 4

    def test_unsupported_version(self, api_headers):
        project = {
            "points": [], "deckColor": "Khaki", "joistSpacing": 0.3, "beamSpacing": 2,
            "postSpacing": 2, "hasRailings": False, "version": "9.9",
        }
        response = client.post("/deck/project/evaluate", json=project, headers=api_headers)
        assert response.status_code == 422


class TestDefaultDeck:

    def test_default_deck(self, api_headers):
        response = client.get("/deck/default", headers=api_headers)
        assert response.status_code == 200
        points = response.json()["points"]
        assert len(points) == 4
        assert points[2]["x"] == pytest.approx(182.88, abs=1e-3)

    def test_custom_dimensions(self, api_headers):
        response = client.get("/deck/default", params={"width_ft": 20, "length_ft": 10},
                              headers=api_headers)
        assert response.status_code == 200
        assert response.json()["width_ft"] == 20

    def test_invalid_dimensions(self, api_headers):
        response = client.get("/deck/default", params={"width_ft": 0}, headers=api_headers)
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "validation_error"


class TestParseFeet:

    def test_lenient(self, api_headers):
        response = client.post("/deck/parse-feet", json={"text": "12 1/2"}, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["feet"] == 12.5
        assert data["meters"] == pytest.approx(3.81, abs=1e-4)

    def test_lenient_bad_input_reads_as_zero(self, api_headers):
        response = client.post("/deck/parse-feet", json={"text": "3/4"}, headers=api_headers)
        assert response.json()["feet"] == 0.0

    def test_strict_bad_input(self, api_headers):
        response = client.post("/deck/parse-feet", json={"text": "3/4", "strict": True},
                               headers=api_headers)
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "validation_error"

    def test_lenient_keeps_leading_whole_feet(self, api_headers):
        response = client.post("/deck/parse-feet", json={"text": "12' 1/2"}, headers=api_headers)
        assert response.json()["feet"] == 12.5
