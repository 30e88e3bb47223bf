"""Tests for the web interface."""

import pytest
from fastapi.testclient import TestClient

from src.web import app as web_app
from src.query import CityPathFinder, build_graph


@pytest.fixture
def client(monkeypatch):
    # Skip loading the data directory; every test runs on the sample graph
    monkeypatch.setattr(web_app, "load_path_finder", lambda: CityPathFinder(build_graph()))
    monkeypatch.setattr(web_app, "path_finder", None)
    with TestClient(web_app.app) as test_client:
        yield test_client


class TestApi:
    """Tests for the JSON API."""

    def test_query(self, client):
        response = client.post("/api/query", json={"start": "A", "end": "D", "algorithm": "astar"})
        assert response.status_code == 200
        data = response.json()
        assert data["found"] is True
        assert data["status"] == "ok"
        assert data["distance"] == 20
        assert data["path"] == ["A", "C", "D"]

    def test_default_algorithm(self, client):
        data = client.post("/api/query", json={"start": "A", "end": "E"}).json()
        assert data["algorithm"] == "dijkstra"
        assert data["distance"] == 12

    def test_no_path(self, client):
        data = client.post("/api/query", json={"start": "E", "end": "A"}).json()
        assert data["status"] == "no_path"
        assert data["distance"] == -1
        assert data["path"] == []

    def test_unknown_algorithm(self, client):
        response = client.post("/api/query", json={"start": "A", "end": "D", "algorithm": "bfs"})
        assert response.status_code == 200
        assert response.json()["status"] == "unknown_algorithm"

    def test_invalid_input(self, client):
        data = client.post("/api/query", json={"start": "", "end": "D"}).json()
        assert data["status"] == "invalid_input"
        assert data["found"] is False

    def test_algorithms(self, client):
        data = client.get("/api/algorithms").json()
        assert data == [
            {"name": "dijkstra", "label": "Dijkstra"},
            {"name": "astar", "label": "A*"},
        ]

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert data["nodes"] == 5
        assert data["edges"] == 6


class TestForm:
    """Tests for the HTML form."""

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Find Path" in response.text
        assert '<option value="astar"' in response.text

    def test_submit(self, client):
        response = client.post("/", data={"start": "A", "end": "D", "algorithm": "dijkstra"})
        assert response.status_code == 200
        assert "Shortest distance from A to D using dijkstra" in response.text
        assert "<strong>20</strong>" in response.text

    def test_submit_missing_field(self, client):
        response = client.post("/", data={"start": "A", "algorithm": "dijkstra"})
        assert response.status_code == 200
        assert "Please enter both start and end points." in response.text
