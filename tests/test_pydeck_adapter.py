"""Tests for the pydeck adapter."""

import json

from sitmap.config import DEFAULT_STYLE
from sitmap.models.viewport import ViewportState
from sitmap.rendering.composer import compose_layers
from sitmap.rendering.pydeck_adapter import create_deck, to_pydeck_layer, to_pydeck_view_state


class TestPydeckAdapter:
    """Test descriptor conversion."""

    def test_layer_ids_follow_descriptor_order(self, all_on, full_results, geometry):
        descriptors = compose_layers(all_on, full_results, "UKR", geometry, 1.0)
        deck = create_deck(descriptors, ViewportState(longitude=30, latitude=40, zoom=3), DEFAULT_STYLE)

        assert [layer.id for layer in deck.layers] == [d.layer_id for d in descriptors]
        assert deck.map_style == DEFAULT_STYLE

    def test_descriptor_only_keys_dropped(self, all_on, full_results, geometry):
        choropleth = compose_layers(all_on, full_results, "UKR", geometry, 1.0)[0]

        spec = json.loads(to_pydeck_layer(choropleth).to_json())

        assert spec["@@type"] == "GeoJsonLayer"
        assert spec["id"] == "choropleth"
        assert "selectedRegionId" not in spec
        assert spec["highlightedObjectIndex"] == 0

    def test_view_state(self):
        view = to_pydeck_view_state(
            ViewportState(longitude=1, latitude=2, zoom=3, pitch=4, bearing=5)
        )
        assert (view.longitude, view.latitude, view.zoom, view.pitch, view.bearing) == (1, 2, 3, 4, 5)
