"""
Sidebar controls for the sitmap Streamlit app.
Layer toggles, region selection and animation switch.
"""

from typing import Optional

import streamlit as st

from sitmap.models.geometry import ReferenceGeometry
from sitmap.models.layers import LAYER_LABELS, LAYER_ORDER, LayerToggleState
from sitmap.models.results import AnalyticalResultBundle, Domain
from sitmap.ui.state import (
    get_layer_toggles,
    get_selected_region,
    is_animation_running,
    select_region,
    set_animation_running,
    set_layer_toggles,
)

NO_SELECTION = "__none__"


def render_layer_toggles() -> LayerToggleState:
    """
    Render one checkbox per layer kind.

    Returns:
        The (possibly updated) toggle state
    """
    st.sidebar.markdown("### 🗺️ Layers")

    toggles = get_layer_toggles()
    for kind in LAYER_ORDER:
        enabled = st.sidebar.checkbox(
            LAYER_LABELS[kind],
            value=toggles.is_enabled(kind),
            key=f"toggle_{kind.value}",
        )
        if enabled != toggles.is_enabled(kind):
            toggles = toggles.with_toggle(kind, enabled)

    set_layer_toggles(toggles)
    return toggles


def render_region_selector(
    geometry: Optional[ReferenceGeometry], region_names: dict[str, str]
) -> None:
    """Render a select box mirroring the map selection; choosing a region frames it."""
    options = [NO_SELECTION] + list(region_names)
    current = get_selected_region()

    selected = st.sidebar.selectbox(
        "Selected region",
        options=options,
        index=options.index(current) if current in region_names else 0,
        format_func=lambda x: "None" if x == NO_SELECTION else region_names[x],
    )

    selected = None if selected == NO_SELECTION else selected
    if selected != current:
        select_region(geometry, selected)


def render_animation_toggle() -> None:
    running = st.sidebar.toggle("Pulse conflict zones", value=is_animation_running())
    set_animation_running(running)


def render_results_status(results: AnalyticalResultBundle) -> None:
    """Show which analytical domains have reported."""
    st.sidebar.markdown("### 📡 Analysis")
    for domain in Domain:
        icon = "✅" if results.has(domain) else "⏳"
        st.sidebar.caption(f"{icon} {domain.value.replace('_', ' ').title()}")
