"""
Displacement arc layer: movement of displaced people.
"""

import math

from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.outputs import CivilianImpactOutput

ORIGIN_COLOR = [231, 76, 60, 220]
DESTINATION_COLOR = [236, 240, 241, 200]


def _width_for(people: int) -> float:
    # log scale: 1k people ~ 1px, 1M people ~ 7px
    return max(1.0, math.log10(max(people, 1)) * 2 - 5)


def create_displacement_arc_layer(civilian_impact: CivilianImpactOutput) -> LayerDescriptor:
    """Create the displacement arc layer, arc width scaled by people moved."""
    data = [
        {
            "source_position": [flow.origin_longitude, flow.origin_latitude],
            "target_position": [flow.destination_longitude, flow.destination_latitude],
            "NAME": f"{flow.origin_name} → {flow.destination_name}",
            "people": flow.people,
            "width": _width_for(flow.people),
        }
        for flow in civilian_impact.displacement_flows
    ]

    return LayerDescriptor(
        kind=LayerKind.DISPLACEMENT_ARCS,
        layer_type="ArcLayer",
        layer_id="displacement-arcs",
        data=data,
        style={
            "pickable": True,
            "get_source_position": "source_position",
            "get_target_position": "target_position",
            "get_source_color": ORIGIN_COLOR,
            "get_target_color": DESTINATION_COLOR,
            "get_width": "width",
            "get_height": 0.5,
        },
    )
