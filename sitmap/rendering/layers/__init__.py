"""
Per-kind layer builders.
Each builder is a pure function from its inputs to one LayerDescriptor.
"""

from sitmap.rendering.layers.choropleth import create_choropleth_layer
from sitmap.rendering.layers.conflict import create_conflict_layer
from sitmap.rendering.layers.displacement_arcs import create_displacement_arc_layer
from sitmap.rendering.layers.food_desert import create_food_desert_layer
from sitmap.rendering.layers.heatmap import create_heatmap_layer
from sitmap.rendering.layers.infrastructure import create_infrastructure_layer
from sitmap.rendering.layers.trade_arcs import create_trade_arc_layer

__all__ = [
    "create_choropleth_layer",
    "create_conflict_layer",
    "create_displacement_arc_layer",
    "create_food_desert_layer",
    "create_heatmap_layer",
    "create_infrastructure_layer",
    "create_trade_arc_layer",
]
