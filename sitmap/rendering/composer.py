"""
Layer composition for sitmap.

Maps toggles, analytical results, selection, reference geometry and the
pulsing intensity onto an ordered list of layer descriptors. Inclusion rules
and builders live in a registry keyed by layer kind; the composer only
selects and orders.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from sitmap.models.geometry import ReferenceGeometry
from sitmap.models.layers import LAYER_ORDER, LayerDescriptor, LayerKind, LayerToggleState
from sitmap.models.results import AnalyticalResultBundle
from sitmap.rendering.layers import (
    create_choropleth_layer,
    create_conflict_layer,
    create_displacement_arc_layer,
    create_food_desert_layer,
    create_heatmap_layer,
    create_infrastructure_layer,
    create_trade_arc_layer,
)
from sitmap.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompositionInputs:
    """Everything a composition depends on."""
    toggles: LayerToggleState
    results: AnalyticalResultBundle
    selection: Optional[str] = None
    geometry: Optional[ReferenceGeometry] = None
    pulsing_intensity: float = 1.0


@dataclass(frozen=True)
class LayerSpec:
    """
    Inclusion rule and builder for one layer kind.

    Attributes:
        available: Data precondition, checked after the toggle
        select_inputs: Picks the builder arguments out of the inputs
        build: Pure builder called with the selected arguments
    """
    available: Callable[[CompositionInputs], bool]
    select_inputs: Callable[[CompositionInputs], tuple]
    build: Callable[..., LayerDescriptor]

    def is_included(self, kind: LayerKind, inputs: CompositionInputs) -> bool:
        return inputs.toggles.is_enabled(kind) and self.available(inputs)


LAYER_REGISTRY: dict[LayerKind, LayerSpec] = {
    LayerKind.CHOROPLETH: LayerSpec(
        available=lambda i: i.geometry is not None,
        select_inputs=lambda i: (i.geometry, i.results, i.selection),
        build=create_choropleth_layer,
    ),
    LayerKind.CONFLICT: LayerSpec(
        available=lambda i: i.results.geopolitics is not None,
        select_inputs=lambda i: (i.results.geopolitics, i.pulsing_intensity),
        build=create_conflict_layer,
    ),
    LayerKind.FOOD_DESERT: LayerSpec(
        available=lambda i: i.geometry is not None and i.results.food_supply is not None,
        select_inputs=lambda i: (i.geometry, i.results.food_supply),
        build=create_food_desert_layer,
    ),
    LayerKind.INFRASTRUCTURE: LayerSpec(
        available=lambda i: i.results.infrastructure is not None,
        select_inputs=lambda i: (i.results.infrastructure,),
        build=create_infrastructure_layer,
    ),
    LayerKind.TRADE_ARCS: LayerSpec(
        available=lambda i: i.results.economy is not None or i.results.food_supply is not None,
        select_inputs=lambda i: (i.results.economy, i.results.food_supply),
        build=create_trade_arc_layer,
    ),
    LayerKind.DISPLACEMENT_ARCS: LayerSpec(
        available=lambda i: i.results.civilian_impact is not None,
        select_inputs=lambda i: (i.results.civilian_impact,),
        build=create_displacement_arc_layer,
    ),
    LayerKind.HEATMAP: LayerSpec(
        available=lambda i: i.results is not None,
        select_inputs=lambda i: (i.results,),
        build=create_heatmap_layer,
    ),
}


def _included_specs(
    inputs: CompositionInputs,
    registry: Mapping[LayerKind, LayerSpec],
) -> list[tuple[LayerKind, LayerSpec]]:
    included = []
    for kind in LAYER_ORDER:
        spec = registry.get(kind)
        if spec is not None and spec.is_included(kind, inputs):
            included.append((kind, spec))
    return included


def compose_layers(
    toggles: LayerToggleState,
    results: AnalyticalResultBundle,
    selection: Optional[str] = None,
    geometry: Optional[ReferenceGeometry] = None,
    pulsing_intensity: float = 1.0,
    registry: Optional[Mapping[LayerKind, LayerSpec]] = None,
) -> list[LayerDescriptor]:
    """
    Build the ordered layer list from scratch.

    Args:
        toggles: Layer toggle state
        results: Analytical result bundle (may be partially populated)
        selection: Selected region identifier, if any
        geometry: Reference region geometry, None until loaded
        pulsing_intensity: Current animation scalar
        registry: Optional replacement registry

    Returns:
        At most one descriptor per kind, in canonical paint order
    """
    inputs = CompositionInputs(toggles, results, selection, geometry, pulsing_intensity)
    return [
        spec.build(*spec.select_inputs(inputs))
        for _, spec in _included_specs(inputs, registry or LAYER_REGISTRY)
    ]


class LayerComposer:
    """
    Memoizing layer composer.

    The whole list is reused when no input changed, and each descriptor is
    reused while the inputs its own builder consumes are unchanged, so an
    unrelated toggle or an animation frame leaves other descriptors intact.
    """

    def __init__(self, registry: Optional[Mapping[LayerKind, LayerSpec]] = None):
        self._registry = registry or LAYER_REGISTRY
        self._last_inputs: Optional[CompositionInputs] = None
        self._last_layers: list[LayerDescriptor] = []
        self._descriptor_cache: dict[LayerKind, tuple[tuple[Any, ...], LayerDescriptor]] = {}

    def compose(
        self,
        toggles: LayerToggleState,
        results: AnalyticalResultBundle,
        selection: Optional[str] = None,
        geometry: Optional[ReferenceGeometry] = None,
        pulsing_intensity: float = 1.0,
    ) -> list[LayerDescriptor]:
        """Compose layers, reusing previous work where inputs are unchanged."""
        inputs = CompositionInputs(toggles, results, selection, geometry, pulsing_intensity)
        if self._last_inputs is not None and inputs == self._last_inputs:
            return self._last_layers

        included = _included_specs(inputs, self._registry)
        layers = []
        for kind, spec in included:
            args = spec.select_inputs(inputs)
            cached = self._descriptor_cache.get(kind)
            if cached is not None and cached[0] == args:
                layers.append(cached[1])
                continue
            descriptor = spec.build(*args)
            self._descriptor_cache[kind] = (args, descriptor)
            layers.append(descriptor)

        logger.debug(
            "Composed layers %s (omitted %s)",
            [kind.value for kind, _ in included],
            [kind.value for kind in LAYER_ORDER if kind not in dict(included)],
        )

        self._last_inputs = inputs
        self._last_layers = layers
        return layers

    def invalidate(self) -> None:
        """Drop all memoized state."""
        self._last_inputs = None
        self._last_layers = []
        self._descriptor_cache.clear()
