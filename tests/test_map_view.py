"""Tests for the Streamlit map view wiring, with a stand-in for the streamlit module."""

import json

import pytest

from sitmap.models.viewport import DEFAULT_VIEWPORT
from sitmap.ui import controls, map_view, state


class FakeStreamlit:
    """Records what the map view renders; session state is a plain dict."""

    def __init__(self):
        self.session_state = {}
        self.charts = []
        self.captions = []
        self.sidebar = self
        self.selectbox_choice = None

    def pydeck_chart(self, deck, **kwargs):
        self.charts.append(deck)

    def caption(self, text):
        self.captions.append(text)

    def selectbox(self, label, options, index=0, format_func=str):
        return self.selectbox_choice if self.selectbox_choice is not None else options[index]


@pytest.fixture
def fake_st(monkeypatch):
    fake = FakeStreamlit()
    for module in (map_view, state, controls):
        monkeypatch.setattr(module, "st", fake)
    state.init_session_state()
    return fake


def _click(fake_st, region_id, name):
    feature = {"type": "Feature", "properties": {"ISO_A3": region_id, "NAME": name}}
    fake_st.session_state[map_view.MAP_CHART_KEY] = {
        "selection": {"indices": {"choropleth": [0]}, "objects": {"choropleth": [feature]}},
    }


def _choropleth_json(deck):
    layer = next(layer for layer in deck.layers if layer.id == "choropleth")
    return json.loads(layer.to_json())


class TestMapFrame:
    """Test that a click is drawn by the run it triggers."""

    def test_click_highlights_and_frames_in_same_run(self, fake_st, geometry, full_results):
        _click(fake_st, "SDN", "Sudan")

        map_view._render_map_frame(geometry, full_results)

        assert state.get_selected_region() == "SDN"
        deck = fake_st.charts[-1]
        # SDN is the second region in the geometry fixture
        assert _choropleth_json(deck)["highlightedObjectIndex"] == 1
        viewport = state.get_viewport()
        assert viewport != DEFAULT_VIEWPORT
        assert viewport.longitude == pytest.approx(30.0)
        assert deck.initial_view_state.longitude == pytest.approx(viewport.longitude)
        assert fake_st.captions == ["📍 Sudan"]

    def test_no_selection_draws_plain_map(self, fake_st, geometry, full_results):
        map_view._render_map_frame(geometry, full_results)

        assert state.get_selected_region() is None
        assert _choropleth_json(fake_st.charts[-1])["highlightedObjectIndex"] == -1
        assert state.get_viewport() == DEFAULT_VIEWPORT

    def test_persisting_selection_is_handled_once(self, fake_st, geometry, full_results):
        _click(fake_st, "UKR", "Ukraine")
        map_view._render_map_frame(geometry, full_results)
        state.set_viewport(DEFAULT_VIEWPORT)

        map_view._render_map_frame(geometry, full_results)

        assert state.get_viewport() == DEFAULT_VIEWPORT
        assert state.get_selected_region() == "UKR"


class TestRegionSelector:
    """Test the sidebar selection path."""

    def test_choosing_region_frames_it(self, fake_st, geometry):
        fake_st.selectbox_choice = "YEM"

        controls.render_region_selector(geometry, {"UKR": "Ukraine", "SDN": "Sudan", "YEM": "Yemen"})

        assert state.get_selected_region() == "YEM"
        assert state.get_viewport().longitude == pytest.approx(47.75)

    def test_clearing_selection_keeps_viewport(self, fake_st, geometry):
        state.set_selected_region("UKR")
        fake_st.selectbox_choice = controls.NO_SELECTION

        controls.render_region_selector(geometry, {"UKR": "Ukraine"})

        assert state.get_selected_region() is None
        assert state.get_viewport() == DEFAULT_VIEWPORT
