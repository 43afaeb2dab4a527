"""
Session state management for the sitmap Streamlit app.
Holds the viewport, toggles, selection and the per-session map machinery.
"""

from typing import Optional

import streamlit as st

from sitmap.config import get_config
from sitmap.lifecycle.animation import (
    AnimationHandle,
    AnimationScheduler,
    ManualFrameClock,
    PulseAnimation,
)
from sitmap.lifecycle.readiness import ReadinessGate, StaticContainer
from sitmap.models.geometry import ReferenceGeometry
from sitmap.models.layers import LayerToggleState
from sitmap.models.viewport import DEFAULT_VIEWPORT, ViewportState
from sitmap.rendering.composer import LayerComposer
from sitmap.viewport import ViewportController


# Session state keys
VIEWPORT_KEY = "viewport"
TOGGLES_KEY = "layer_toggles"
SELECTION_KEY = "selected_region"
COMPOSER_KEY = "layer_composer"
GATE_KEY = "readiness_gate"
FRAME_CLOCK_KEY = "frame_clock"
SCHEDULER_KEY = "pulse_scheduler"
ANIMATION_HANDLE_KEY = "pulse_handle"


def init_session_state() -> None:
    """
    Initialize all session state variables.
    Should be called at the start of the application.
    """
    config = get_config()

    if VIEWPORT_KEY not in st.session_state:
        st.session_state[VIEWPORT_KEY] = DEFAULT_VIEWPORT

    if TOGGLES_KEY not in st.session_state:
        st.session_state[TOGGLES_KEY] = LayerToggleState()

    if SELECTION_KEY not in st.session_state:
        st.session_state[SELECTION_KEY] = None

    if COMPOSER_KEY not in st.session_state:
        st.session_state[COMPOSER_KEY] = LayerComposer()

    if GATE_KEY not in st.session_state:
        gate = ReadinessGate()
        gate.mount(StaticContainer(config.map.width, config.map.height))
        st.session_state[GATE_KEY] = gate

    if FRAME_CLOCK_KEY not in st.session_state:
        clock = ManualFrameClock()
        animation = PulseAnimation(
            step=config.animation.step,
            lower=config.animation.lower,
            upper=config.animation.upper,
        )
        st.session_state[FRAME_CLOCK_KEY] = clock
        st.session_state[SCHEDULER_KEY] = AnimationScheduler(clock, animation)
        st.session_state[ANIMATION_HANDLE_KEY] = st.session_state[SCHEDULER_KEY].start()


# Viewport Functions
def get_viewport() -> ViewportState:
    """Get the current viewport."""
    return st.session_state.get(VIEWPORT_KEY, DEFAULT_VIEWPORT)


def set_viewport(viewport: ViewportState) -> None:
    """Replace the current viewport."""
    st.session_state[VIEWPORT_KEY] = viewport


# Toggle Functions
def get_layer_toggles() -> LayerToggleState:
    """Get the current layer toggles."""
    return st.session_state.get(TOGGLES_KEY, LayerToggleState())


def set_layer_toggles(toggles: LayerToggleState) -> None:
    st.session_state[TOGGLES_KEY] = toggles


# Selection Functions
def get_selected_region() -> Optional[str]:
    """Get the currently selected region identifier."""
    return st.session_state.get(SELECTION_KEY)


def set_selected_region(region_id: Optional[str]) -> None:
    st.session_state[SELECTION_KEY] = region_id


# Map machinery
def get_composer() -> LayerComposer:
    return st.session_state[COMPOSER_KEY]


def get_readiness_gate() -> ReadinessGate:
    return st.session_state[GATE_KEY]


def get_frame_clock() -> ManualFrameClock:
    return st.session_state[FRAME_CLOCK_KEY]


def get_pulse_scheduler() -> AnimationScheduler:
    return st.session_state[SCHEDULER_KEY]


def is_animation_running() -> bool:
    handle: Optional[AnimationHandle] = st.session_state.get(ANIMATION_HANDLE_KEY)
    return handle is not None and handle.running


def set_animation_running(running: bool) -> None:
    """Start or stop the pulse animation."""
    if running == is_animation_running():
        return
    if running:
        st.session_state[ANIMATION_HANDLE_KEY] = get_pulse_scheduler().start()
    else:
        st.session_state[ANIMATION_HANDLE_KEY].stop()


def select_region(geometry: Optional[ReferenceGeometry], region_id: Optional[str]) -> None:
    """
    Select a region and frame it in the viewport.
    Map clicks and the sidebar selector both go through here.
    """
    set_selected_region(region_id)
    if region_id is not None:
        controller = ViewportController(get_viewport(), on_change=set_viewport)
        controller.fly_to_region(geometry, region_id)
