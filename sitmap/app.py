"""
Situational awareness map.

This is the main Streamlit application entry point:
    streamlit run sitmap/app.py
"""

import sys
from pathlib import Path

# Add the project root to the Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

# Page configuration must be first Streamlit command
st.set_page_config(
    page_title="Situational Awareness Map",
    page_icon="🛰️",
    layout="wide",
    initial_sidebar_state="expanded",
)

from sitmap.data.loaders import get_data_service
from sitmap.ui import (
    init_session_state,
    render_animation_toggle,
    render_layer_toggles,
    render_map_view,
    render_region_selector,
    render_results_status,
)


def main() -> None:
    init_session_state()

    data_service = get_data_service()
    geometry = data_service.load_reference_geometry()
    results = data_service.load_results()

    st.title("🛰️ Situational Awareness Map")

    render_layer_toggles()
    st.sidebar.divider()
    render_region_selector(geometry, data_service.get_region_names())
    render_animation_toggle()
    st.sidebar.divider()
    render_results_status(results)

    render_map_view(geometry, results)


main()
