"""
UI package for sitmap.
Streamlit components for the situation map.
"""

from sitmap.ui.controls import (
    render_animation_toggle,
    render_layer_toggles,
    render_region_selector,
    render_results_status,
)
from sitmap.ui.map_view import render_map_view
from sitmap.ui.state import init_session_state

__all__ = [
    "render_animation_toggle",
    "render_layer_toggles",
    "render_region_selector",
    "render_results_status",
    "render_map_view",
    "init_session_state",
]
