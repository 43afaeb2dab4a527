"""
Infrastructure layer: critical assets colored by operational status.
"""

from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.outputs import AssetStatus, InfrastructureOutput

STATUS_COLORS = {
    AssetStatus.OPERATIONAL: [46, 204, 113, 200],
    AssetStatus.DEGRADED: [241, 196, 15, 200],
    AssetStatus.DAMAGED: [230, 126, 34, 220],
    AssetStatus.DESTROYED: [231, 76, 60, 240],
}

BASE_RADIUS_M = 20000
CRITICALITY_RADIUS_M = 60000


def create_infrastructure_layer(infrastructure: InfrastructureOutput) -> LayerDescriptor:
    """Create the infrastructure asset layer, sized by criticality."""
    data = [
        {
            "position": asset.position,
            "NAME": asset.name,
            "asset_type": asset.asset_type,
            "status": asset.status.value,
            "radius": BASE_RADIUS_M + asset.criticality * CRITICALITY_RADIUS_M,
            "color": STATUS_COLORS[asset.status],
        }
        for asset in infrastructure.assets
    ]

    return LayerDescriptor(
        kind=LayerKind.INFRASTRUCTURE,
        layer_type="ScatterplotLayer",
        layer_id="infrastructure",
        data=data,
        style={
            "pickable": True,
            "get_position": "position",
            "get_radius": "radius",
            "get_fill_color": "color",
            "radius_min_pixels": 3,
            "radius_max_pixels": 18,
        },
    )
