"""
Layer models for sitmap.
Layer kinds, toggle state and the descriptors handed to the render surface.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LayerKind(str, Enum):
    """Closed set of layer kinds, declared in paint order (bottom first)."""
    CHOROPLETH = "choropleth"
    CONFLICT = "conflict"
    FOOD_DESERT = "foodDesert"
    INFRASTRUCTURE = "infrastructure"
    TRADE_ARCS = "tradeArcs"
    DISPLACEMENT_ARCS = "displacementArcs"
    HEATMAP = "heatmap"


# Canonical paint order. Enum iteration order is declaration order.
LAYER_ORDER: tuple[LayerKind, ...] = tuple(LayerKind)

LAYER_LABELS = {
    LayerKind.CHOROPLETH: "Regional risk",
    LayerKind.CONFLICT: "Conflict zones",
    LayerKind.FOOD_DESERT: "Food deserts",
    LayerKind.INFRASTRUCTURE: "Infrastructure",
    LayerKind.TRADE_ARCS: "Trade routes",
    LayerKind.DISPLACEMENT_ARCS: "Displacement",
    LayerKind.HEATMAP: "Impact heatmap",
}


class LayerToggleState(BaseModel):
    """
    Which layer kinds are eligible for display.
    Accepts both the snake_case field names and the camelCase kind values.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    choropleth: bool = Field(True, alias="choropleth")
    conflict: bool = Field(True, alias="conflict")
    food_desert: bool = Field(False, alias="foodDesert")
    infrastructure: bool = Field(True, alias="infrastructure")
    trade_arcs: bool = Field(True, alias="tradeArcs")
    displacement_arcs: bool = Field(True, alias="displacementArcs")
    heatmap: bool = Field(False, alias="heatmap")

    def is_enabled(self, kind: LayerKind) -> bool:
        """Check whether a layer kind is toggled on."""
        return getattr(self, _toggle_field(kind))

    def with_toggle(self, kind: LayerKind, enabled: bool) -> "LayerToggleState":
        """Return a new toggle state with one kind switched."""
        return self.model_copy(update={_toggle_field(kind): enabled})

    def enabled_kinds(self) -> list[LayerKind]:
        """Get enabled kinds in paint order."""
        return [kind for kind in LAYER_ORDER if self.is_enabled(kind)]

    @classmethod
    def all_on(cls) -> "LayerToggleState":
        return cls(**{field_name: True for field_name in _TOGGLE_FIELDS.values()})

    @classmethod
    def all_off(cls) -> "LayerToggleState":
        return cls(**{field_name: False for field_name in _TOGGLE_FIELDS.values()})


_TOGGLE_FIELDS = {
    LayerKind.CHOROPLETH: "choropleth",
    LayerKind.CONFLICT: "conflict",
    LayerKind.FOOD_DESERT: "food_desert",
    LayerKind.INFRASTRUCTURE: "infrastructure",
    LayerKind.TRADE_ARCS: "trade_arcs",
    LayerKind.DISPLACEMENT_ARCS: "displacement_arcs",
    LayerKind.HEATMAP: "heatmap",
}


def _toggle_field(kind: LayerKind) -> str:
    return _TOGGLE_FIELDS[LayerKind(kind)]


class LayerDescriptor(BaseModel):
    """
    One renderable layer directive.

    The composer never looks inside data or style; they are produced by the
    per-kind builder and consumed by the render surface adapter.
    """
    model_config = ConfigDict(frozen=True)

    kind: LayerKind = Field(..., description="Layer kind this descriptor renders")
    layer_type: str = Field(..., description="deck.gl layer class name")
    layer_id: str = Field(..., description="Stable layer identifier")
    data: Any = Field(..., description="Layer data payload")
    style: dict[str, Any] = Field(default_factory=dict, description="deck.gl layer props")
