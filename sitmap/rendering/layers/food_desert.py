"""
Food desert layer: regions reporting food insecurity, filled by severity.
"""

from sitmap.models.geometry import ReferenceGeometry, RegionFeature
from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.outputs import FoodSupplyOutput
from sitmap.rendering.colors import hex_to_rgba

# IPC phase 1 (minimal) through 5 (famine)
IPC_PHASE_COLORS = {
    1: "#CDFACD",
    2: "#FAE61E",
    3: "#E67800",
    4: "#C80000",
    5: "#640000",
}


def _phase_for(severity: float) -> int:
    return min(5, max(1, int(severity * 5) + 1))


def create_food_desert_layer(
    geometry: ReferenceGeometry,
    food_supply: FoodSupplyOutput,
) -> LayerDescriptor:
    """
    Create the food desert layer.

    Only regions listed in the food security entries are drawn. Entries
    without an IPC phase get one derived from their severity.

    Args:
        geometry: Reference region polygons
        food_supply: Food supply output

    Returns:
        GeoJsonLayer descriptor
    """
    entries = {entry.iso3: entry for entry in food_supply.food_security}

    def _properties(feature: RegionFeature) -> dict:
        entry = entries[feature.region_id]
        phase = entry.ipc_phase or _phase_for(entry.severity)
        return {
            "severity": entry.severity,
            "ipc_phase": phase,
            "population_affected": entry.population_affected,
            "fill_color": hex_to_rgba(IPC_PHASE_COLORS[phase], 0.55),
        }

    data = geometry.to_feature_collection(
        properties_for=_properties,
        region_ids=set(entries),
    )

    return LayerDescriptor(
        kind=LayerKind.FOOD_DESERT,
        layer_type="GeoJsonLayer",
        layer_id="food-desert",
        data=data,
        style={
            "pickable": True,
            "stroked": True,
            "filled": True,
            "get_fill_color": "properties.fill_color",
            "get_line_color": [200, 120, 0, 200],
            "line_width_min_pixels": 1,
        },
    )
