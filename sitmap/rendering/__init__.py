"""
Rendering package for sitmap.
Layer composition and map visualization using pydeck.
"""

from sitmap.rendering.composer import (
    LAYER_REGISTRY,
    CompositionInputs,
    LayerComposer,
    LayerSpec,
    compose_layers,
)
from sitmap.rendering.pydeck_adapter import (
    create_deck,
    to_pydeck_layer,
    to_pydeck_view_state,
)

__all__ = [
    "LAYER_REGISTRY",
    "CompositionInputs",
    "LayerComposer",
    "LayerSpec",
    "compose_layers",
    "create_deck",
    "to_pydeck_layer",
    "to_pydeck_view_state",
]
