"""
PyDeck adapter for sitmap.
Turns layer descriptors and viewports into pydeck objects for display.
"""

from typing import Optional, Sequence

import pydeck as pdk

from sitmap.models.layers import LayerDescriptor
from sitmap.models.viewport import MAX_ZOOM_LEVEL, MIN_ZOOM_LEVEL, ViewportState


# Style keys that describe the descriptor but are not deck.gl props
DESCRIPTOR_ONLY_KEYS = frozenset({"selected_region_id"})

DEFAULT_TOOLTIP = {
    "html": "<b>{NAME}</b>",
    "style": {
        "backgroundColor": "#1f2933",
        "color": "white",
    },
}


def to_pydeck_layer(descriptor: LayerDescriptor) -> pdk.Layer:
    """
    Create a PyDeck layer from a descriptor.

    Args:
        descriptor: Layer descriptor produced by a builder

    Returns:
        PyDeck Layer with the descriptor's id, data and props
    """
    props = {
        key: value
        for key, value in descriptor.style.items()
        if key not in DESCRIPTOR_ONLY_KEYS
    }
    return pdk.Layer(
        descriptor.layer_type,
        id=descriptor.layer_id,
        data=descriptor.data,
        **props,
    )


def to_pydeck_view_state(
    viewport: ViewportState,
    min_zoom: float = MIN_ZOOM_LEVEL,
    max_zoom: float = MAX_ZOOM_LEVEL,
) -> pdk.ViewState:
    """Create a PyDeck ViewState from a viewport."""
    return pdk.ViewState(
        longitude=viewport.longitude,
        latitude=viewport.latitude,
        zoom=viewport.zoom,
        pitch=viewport.pitch,
        bearing=viewport.bearing,
        min_zoom=min_zoom,
        max_zoom=max_zoom,
    )


def create_deck(
    descriptors: Sequence[LayerDescriptor],
    viewport: ViewportState,
    map_style: str,
    tooltip: Optional[dict] = None,
) -> pdk.Deck:
    """
    Create a PyDeck map from composed descriptors.

    Args:
        descriptors: Ordered layer descriptors (paint order)
        viewport: Current viewport
        map_style: Base map style URL
        tooltip: Optional tooltip configuration

    Returns:
        PyDeck Deck object ready for display
    """
    return pdk.Deck(
        layers=[to_pydeck_layer(descriptor) for descriptor in descriptors],
        initial_view_state=to_pydeck_view_state(viewport),
        map_style=map_style,
        tooltip=tooltip or DEFAULT_TOOLTIP,
    )
