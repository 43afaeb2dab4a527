"""
Heatmap layer: weighted impact points gathered from every available domain.
"""

from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.outputs import AssetStatus
from sitmap.models.results import AnalyticalResultBundle

_IMPACTED_STATUSES = {AssetStatus.DAMAGED, AssetStatus.DESTROYED}


def heatmap_points(results: AnalyticalResultBundle) -> list[dict]:
    """
    Collect weighted points from the result bundle.

    Conflict zones weigh by intensity, damaged or destroyed infrastructure by
    criticality, displacement origins by their share of the largest flow.
    """
    points = []

    if results.geopolitics:
        for zone in results.geopolitics.conflict_zones:
            points.append({"position": zone.position, "weight": zone.intensity})

    if results.infrastructure:
        for asset in results.infrastructure.assets:
            if asset.status in _IMPACTED_STATUSES:
                points.append({"position": asset.position, "weight": asset.criticality})

    if results.civilian_impact and results.civilian_impact.displacement_flows:
        flows = results.civilian_impact.displacement_flows
        peak = max(flow.people for flow in flows) or 1
        for flow in flows:
            points.append({
                "position": [flow.origin_longitude, flow.origin_latitude],
                "weight": flow.people / peak,
            })

    return points


def create_heatmap_layer(results: AnalyticalResultBundle) -> LayerDescriptor:
    """
    Create the impact heatmap.
    An empty bundle yields a layer with no points.
    """
    return LayerDescriptor(
        kind=LayerKind.HEATMAP,
        layer_type="HeatmapLayer",
        layer_id="heatmap",
        data=heatmap_points(results),
        style={
            "get_position": "position",
            "get_weight": "weight",
            "aggregation": "SUM",
            "radius_pixels": 40,
            "intensity": 1,
            "threshold": 0.05,
        },
    )
