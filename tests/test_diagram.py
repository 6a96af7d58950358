"""Tests for the full diagram rebuild."""

import json

import numpy as np
import pytest

from py_climate_diagram.config.diagram_settings import DiagramSettings
from py_climate_diagram.core.areas import AreaKind
from py_climate_diagram.core.diagram import rebuild
from py_climate_diagram.core.series import ChartDataStore, ChartState, SeriesLengthError


class TestRebuild:
    """Test rebuilding the default diagram and variations of it."""

    @pytest.fixture
    def store(self):
        store = ChartDataStore(location_name="Sample", location_height=250)
        return store

    def test_default_scenario(self, store):
        diagram = rebuild(store)

        assert diagram.scale.num_steps == 7
        assert diagram.scale.lowest_step == 0
        assert len(diagram.ticks) == 7
        assert len(diagram.temperature_line) == 12
        assert len(diagram.precipitation_line) == 14
        assert diagram.humid.triangle_count == 18
        assert diagram.dry.triangle_count == 6
        assert diagram.very_humid.triangle_count == 4

    def test_labels(self, store):
        labels = rebuild(store).labels

        assert labels.temperature_average == pytest.approx(176.5 / 12)
        assert labels.precipitation_total == pytest.approx(827.0)
        assert labels.precipitation_text == "827 mm"
        assert labels.temperature_text.endswith("°C")
        assert labels.location == "Sample (250 m)"

    def test_idempotent(self, store):
        first = rebuild(store).to_dict()
        second = rebuild(store).to_dict()
        assert first == second

    def test_accepts_snapshot(self, store):
        from_store = rebuild(store).to_dict()
        from_state = rebuild(store.snapshot()).to_dict()
        assert from_store == from_state

    def test_settings_change_size_and_flags(self, store):
        diagram = rebuild(store, DiagramSettings(width=800, height=300, draw_partial=False))

        assert diagram.temperature_line.vertices[0][0] == pytest.approx(800 / 12 * 0.5)
        assert diagram.ticks[-1].y == pytest.approx(300 / 7 * 6)
        # Only the two separated intervals disappear
        assert diagram.humid.triangle_count == 16
        assert diagram.dry.triangle_count == 4

    def test_no_areas_when_disabled(self, store):
        diagram = rebuild(store, DiagramSettings(draw_full=False, draw_partial=False))
        assert all(mesh.is_empty for mesh in diagram.meshes.values())

    def test_rejects_wrong_length_state(self):
        state = ChartState(temperatures=(1.0,) * 11, precipitation=(1.0,) * 12)
        with pytest.raises(SeriesLengthError):
            rebuild(state)

    def test_extreme_input_stays_finite(self):
        store = ChartDataStore(
            temperatures=[-45, -40, -30, -10, 5, 40, 48, 45, 20, -5, -30, -44],
            precipitation=[-10, 0, 5, 900, 1200, 3, 0, 450, 101, 99, 0, 2000],
        )
        diagram = rebuild(store)
        data = diagram.to_dict()

        for mesh in diagram.meshes.values():
            assert np.all(np.isfinite(mesh.vertices))
        assert np.all(np.isfinite(diagram.precipitation_line.vertices))
        assert np.all(np.isfinite(diagram.temperature_line.vertices))
        json.dumps(data)

    def test_to_dict_layout(self, store):
        data = rebuild(store).to_dict()

        assert set(data["meshes"]) == {kind.value for kind in AreaKind}
        assert len(data["meshes"]["very_humid"]["vertices"]) == 12
        assert data["meshes"]["very_humid"]["indices"] == list(range(12))
        assert len(data["data_points"]["precipitation"]) == 12
        assert len(data["month_axes"]) == 12
        assert data["ticks"][0]["line_width"] == 1.5
        assert data["scale"] == {"num_steps": 7, "lowest_step": 0}

    def test_stores_are_isolated(self):
        wet = ChartDataStore(precipitation=[300] * 12)
        dry = ChartDataStore(precipitation=[0] * 12)

        wet_diagram = rebuild(wet)
        dry_diagram = rebuild(dry)

        assert wet_diagram.very_humid.triangle_count == 22
        assert dry_diagram.very_humid.is_empty
        assert rebuild(wet).to_dict() == wet_diagram.to_dict()
