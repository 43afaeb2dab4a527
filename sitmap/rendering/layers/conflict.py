"""
Conflict layer: pulsing circles over active conflict zones.
"""

from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.outputs import GeopoliticsOutput
from sitmap.rendering.colors import severity_color


def create_conflict_layer(
    geopolitics: GeopoliticsOutput,
    pulsing_intensity: float,
) -> LayerDescriptor:
    """
    Create the conflict zone layer.

    Zone radii are stored in meters on the data rows; the pulsing intensity
    only drives the radius scale, so animation frames never rebuild the data.

    Args:
        geopolitics: Geopolitics output with conflict zones
        pulsing_intensity: Current animation scalar (around 0.8-1.2)

    Returns:
        ScatterplotLayer descriptor
    """
    data = [
        {
            "position": zone.position,
            "NAME": zone.name,
            "intensity": zone.intensity,
            "parties": ", ".join(zone.parties),
            "radius": zone.radius_km * 1000,
            "color": severity_color(0.5 + zone.intensity / 2, opacity=0.6),
        }
        for zone in geopolitics.conflict_zones
    ]

    return LayerDescriptor(
        kind=LayerKind.CONFLICT,
        layer_type="ScatterplotLayer",
        layer_id="conflict",
        data=data,
        style={
            "pickable": True,
            "stroked": True,
            "filled": True,
            "get_position": "position",
            "get_radius": "radius",
            "get_fill_color": "color",
            "get_line_color": [255, 80, 60, 220],
            "radius_scale": pulsing_intensity,
            "radius_min_pixels": 4,
            "line_width_min_pixels": 1,
        },
    )
