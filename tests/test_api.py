"""Tests for the diagram API endpoints."""

import pytest
from fastapi.testclient import TestClient

from py_climate_diagram.api.main import app
from py_climate_diagram.core.series import DEFAULT_PRECIPITATION, DEFAULT_TEMPERATURES


class TestDiagramAPI:
    """Test the diagram endpoints."""

    def setup_method(self):
        """Set up test client."""
        self.client = TestClient(app)

    def test_root_and_health(self):
        response = self.client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

        response = self.client.get("/health")
        assert response.json() == {"status": "healthy"}

    def test_default_diagram(self):
        response = self.client.get("/diagrams/default")

        assert response.status_code == 200
        data = response.json()
        assert data["scale"] == {"num_steps": 7, "lowest_step": 0}
        assert len(data["polylines"]["precipitation"]) == 14
        assert len(data["meshes"]["very_humid"]["vertices"]) == 12

    def test_create_diagram(self):
        response = self.client.post("/diagrams", json={
            "temperatures": DEFAULT_TEMPERATURES,
            "precipitation": DEFAULT_PRECIPITATION,
            "location": "Sample",
            "location_height": 120,
            "width": 800,
            "height": 400,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["size"] == {"width": 800, "height": 400}
        assert data["labels"]["location"] == "Sample (120 m)"
        assert data["labels"]["precipitation_total"] == pytest.approx(827.0)
        assert len(data["meshes"]["humid"]["vertices"]) == 54

    def test_null_values_fall_back_to_sample_data(self):
        temperatures = [None] * 12
        temperatures[6] = 35.0
        response = self.client.post("/diagrams", json={"temperatures": temperatures})

        assert response.status_code == 200
        data = response.json()
        july = data["polylines"]["temperature"][6]
        january = data["polylines"]["temperature"][0]
        assert july[1] > january[1]
        assert len(data["polylines"]["precipitation"]) == 14

    def test_flags(self):
        response = self.client.post("/diagrams", json={"draw_full": False, "draw_partial": False})

        assert response.status_code == 200
        meshes = response.json()["meshes"]
        assert all(not mesh["vertices"] for mesh in meshes.values())

    def test_wrong_length_rejected(self):
        response = self.client.post("/diagrams", json={"temperatures": [1.0] * 11})

        assert response.status_code == 422
        assert "12 values" in response.json()["detail"]

    def test_invalid_size_rejected(self):
        response = self.client.post("/diagrams", json={"width": -5})
        assert response.status_code == 422

    def test_scale_endpoint(self):
        response = self.client.post("/diagrams/scale", json={"precipitation": [300.0] * 12})

        assert response.status_code == 200
        data = response.json()
        assert data["num_steps"] == 7
        assert data["temperature_labels"] == [0, 10, 20, 30, 40, 50, 60]
        assert data["precipitation_labels"][-1] == 120
        assert len(data["tick_positions"]) == 7

    def test_requests_do_not_share_state(self):
        self.client.post("/diagrams", json={"precipitation": [500.0] * 12})
        response = self.client.get("/diagrams/default")

        assert len(response.json()["meshes"]["very_humid"]["vertices"]) == 12
