"""
Situation map component for sitmap.
Renders the composed layers once the map container is ready.
"""

from typing import Optional

import streamlit as st

from sitmap.config import get_config
from sitmap.interaction import InteractionResolver, picks_from_selection
from sitmap.models.geometry import ReferenceGeometry
from sitmap.models.results import AnalyticalResultBundle
from sitmap.rendering.pydeck_adapter import create_deck
from sitmap.ui.state import (
    get_composer,
    get_frame_clock,
    get_layer_toggles,
    get_pulse_scheduler,
    get_readiness_gate,
    get_selected_region,
    get_viewport,
    is_animation_running,
    select_region,
    set_viewport,
)
from sitmap.viewport import ViewportController

MAP_CHART_KEY = "situation_map"
LAST_PICK_KEY = "last_map_pick"


def _render_placeholder(height: int) -> None:
    st.markdown(
        f"<div style='height:{height}px;display:flex;align-items:center;"
        "justify-content:center;color:#8a939e;font-size:0.9rem'>"
        "Initializing map...</div>",
        unsafe_allow_html=True,
    )


def _handle_picks(
    selection: Optional[dict],
    resolver: InteractionResolver,
) -> Optional[str]:
    """Route new picks through the resolver; returns a label for the last pick."""
    label = None
    for pick in picks_from_selection(selection):
        label = resolver.tooltip(pick)
        pick_key = (pick["layer"], label)
        # Selections persist across reruns; only act on new ones
        if st.session_state.get(LAST_PICK_KEY) == pick_key:
            continue
        st.session_state[LAST_PICK_KEY] = pick_key
        resolver.handle_click(pick)
    return label


def _render_map_frame(
    geometry: Optional[ReferenceGeometry],
    results: AnalyticalResultBundle,
) -> None:
    config = get_config()

    # Each fragment run is one animation frame
    get_frame_clock().advance()

    # A click reruns with the chart's selection already in session state;
    # apply it before composing so this run draws the new selection and camera
    resolver = InteractionResolver(
        on_region_click=lambda region_id: select_region(geometry, region_id)
    )
    chart_state = st.session_state.get(MAP_CHART_KEY)
    label = _handle_picks(chart_state.get("selection") if chart_state else None, resolver)

    controller = ViewportController(get_viewport(), on_change=set_viewport)
    layers = get_composer().compose(
        get_layer_toggles(),
        results,
        selection=get_selected_region(),
        geometry=geometry,
        pulsing_intensity=get_pulse_scheduler().value,
    )

    deck = create_deck(layers, controller.surface_view_state(), config.map.style_url)
    st.pydeck_chart(
        deck,
        height=config.map.height,
        on_select="rerun",
        selection_mode="single-object",
        key=MAP_CHART_KEY,
    )

    if label:
        st.caption(f"📍 {label}")


def render_map_view(
    geometry: Optional[ReferenceGeometry],
    results: AnalyticalResultBundle,
) -> None:
    """
    Render the situation map.

    Shows a placeholder until the readiness gate opens. While the pulse
    animation runs the map re-renders every frame interval.

    Args:
        geometry: Reference geometry, None while not loaded
        results: Analytical result bundle
    """
    config = get_config()

    if not get_readiness_gate().is_ready:
        _render_placeholder(config.map.height)
        return

    run_every = config.animation.frame_interval_s if is_animation_running() else None
    st.fragment(_render_map_frame, run_every=run_every)(geometry, results)
