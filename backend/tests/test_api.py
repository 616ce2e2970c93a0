"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient
from linklink.main import app

from conftest import grid_from_rows


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def crossed_grid():
    """2x2 deadlocked board as JSON."""
    return grid_from_rows(["AB", "BA"]).to_dict()


@pytest.fixture
def open_grid():
    """Board with a one-turn pair and a straight pair."""
    return grid_from_rows([
        "A..",
        "..A",
        "BB.",
    ]).to_dict()


def types_of(grid_json):
    return [[t["type"] for t in row] for row in grid_json["tiles"]]


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert "endpoints" in data


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        """Test health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLevelingEndpoints:
    """Tests for level progression endpoints."""

    def test_level_config(self, client):
        response = client.get("/api/levels/2/config")

        assert response.status_code == 200
        data = response.json()
        assert data["rows"] == 8
        assert data["cols"] == 6
        assert data["types_count"] == 12
        assert data["pattern"] == "ring"

    def test_level_config_invalid(self, client):
        response = client.get("/api/levels/0/config")

        assert response.status_code == 400

    def test_progression(self, client):
        response = client.get("/api/levels/progression", params={"start_level": 9, "count": 3})

        assert response.status_code == 200
        data = response.json()
        assert [d["level"] for d in data] == [9, 10, 11]
        assert (data[2]["rows"], data[2]["cols"]) == (9, 7)


class TestGenerateEndpoint:
    """Tests for generate endpoint."""

    def test_generate_basic(self, client):
        response = client.post("/api/generate", json={"level": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["config"]["rows"] == 8
        assert data["config"]["cols"] == 6
        assert data["pattern"] == "full"
        assert data["tile_count"] == 48
        assert len(data["grid"]["tiles"]) == 8

    def test_generate_with_overrides(self, client):
        response = client.post(
            "/api/generate",
            json={"level": 2, "rows": 8, "cols": 8, "types_count": 12, "seed": 1},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["pattern"] == "ring"
        assert data["tile_count"] == 28
        assert data["config"]["time_seconds"] == 128

    def test_generate_seed_reproducible(self, client):
        body = {"level": 3, "seed": 99}
        first = client.post("/api/generate", json=body).json()
        second = client.post("/api/generate", json=body).json()

        assert types_of(first["grid"]) == types_of(second["grid"])

    def test_generate_invalid_level(self, client):
        response = client.post("/api/generate", json={"level": 0})

        assert response.status_code == 422  # Validation error

    def test_generate_no_slots(self, client):
        response = client.post("/api/generate", json={"level": 1, "rows": 1, "cols": 1})

        assert response.status_code == 400


class TestConnectEndpoint:
    """Tests for connect endpoint."""

    def test_connect_one_turn(self, client, open_grid):
        response = client.post(
            "/api/connect",
            json={"grid": open_grid, "p1": [0, 0], "p2": [1, 2]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["connected"] is True
        assert data["path"] == [[0, 0], [0, 2], [1, 2]]
        assert data["turns"] == 1

    def test_connect_blocked(self, client, crossed_grid):
        response = client.post(
            "/api/connect",
            json={"grid": crossed_grid, "p1": [0, 0], "p2": [1, 1]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["connected"] is False
        assert data["path"] is None

    def test_connect_invalid_grid(self, client):
        response = client.post(
            "/api/connect",
            json={"grid": {"tiles": [[{"type": "A"}], []]}, "p1": [0, 0], "p2": [1, 0]},
        )

        assert response.status_code == 400

    def test_connect_missing_points(self, client, open_grid):
        response = client.post("/api/connect", json={"grid": open_grid})

        assert response.status_code == 422


class TestMatchEndpoint:
    """Tests for match endpoint."""

    def test_match_pair(self, client, open_grid):
        response = client.post(
            "/api/match",
            json={"grid": open_grid, "p1": [2, 0], "p2": [2, 1]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["tile_type"] == "B"
        assert data["cleared"] is False
        assert data["grid"]["tiles"][2][0]["status"] == "matched"
        assert data["grid"]["tiles"][2][1]["status"] == "matched"

    def test_match_different_types(self, client, open_grid):
        response = client.post(
            "/api/match",
            json={"grid": open_grid, "p1": [0, 0], "p2": [2, 0]},
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid move")


class TestHintEndpoint:
    """Tests for hint endpoint."""

    def test_hint_found(self, client, open_grid):
        response = client.post("/api/hint", json={"grid": open_grid})

        assert response.status_code == 200
        data = response.json()
        assert data["pair"] == [[0, 0], [1, 2]]
        assert data["deadlocked"] is False
        assert data["remaining"] == 4

    def test_hint_deadlocked(self, client, crossed_grid):
        response = client.post("/api/hint", json={"grid": crossed_grid})

        data = response.json()
        assert data["pair"] is None
        assert data["deadlocked"] is True


class TestShuffleEndpoint:
    """Tests for shuffle endpoint."""

    def test_shuffle_keeps_footprint(self, client, open_grid):
        response = client.post("/api/shuffle", json={"grid": open_grid, "seed": 4})

        assert response.status_code == 200
        data = response.json()
        statuses = [[t["status"] for t in row] for row in data["grid"]["tiles"]]
        original = [[t["status"] for t in row] for row in open_grid["tiles"]]
        assert statuses == original
        assert sorted(sum(types_of(data["grid"]), [])) == sorted(sum(types_of(open_grid), []))

    def test_shuffle_ensure_solvable(self, client, crossed_grid):
        response = client.post(
            "/api/shuffle",
            json={"grid": crossed_grid, "seed": 8, "ensure_solvable": True},
        )

        assert response.status_code == 200
        assert response.json()["solvable"] is True


class TestSimulateEndpoint:
    """Tests for simulate endpoint."""

    def test_simulate_basic(self, client):
        response = client.post(
            "/api/simulate",
            json={"level": 1, "iterations": 3, "rows": 4, "cols": 4, "types_count": 4, "seed": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert 0 <= data["clear_rate"] <= 1
        assert data["iterations"] == 3

    def test_simulate_invalid_strategy(self, client):
        response = client.post(
            "/api/simulate",
            json={"level": 1, "iterations": 2, "strategy": "optimal"},
        )

        assert response.status_code == 400


class TestErrorResponses:
    """Tests for documented 400 responses."""

    @pytest.mark.parametrize(
        "path,method",
        [
            ("/api/connect", "post"),
            ("/api/match", "post"),
            ("/api/hint", "post"),
            ("/api/shuffle", "post"),
            ("/api/generate", "post"),
            ("/api/simulate", "post"),
            ("/api/levels/{level}/config", "get"),
        ],
    )
    def test_error_schema_documented(self, client, path, method):
        schema = client.get("/openapi.json").json()
        response_400 = schema["paths"][path][method]["responses"]["400"]

        ref = response_400["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")

    def test_error_body_matches_schema(self, client):
        response = client.get("/api/levels/0/config")

        assert response.status_code == 400
        assert set(response.json()) == {"detail"}
