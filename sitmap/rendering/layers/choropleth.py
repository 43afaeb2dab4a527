"""
Choropleth layer: every reference region filled by its composite severity.
"""

from typing import Optional

from sitmap.models.geometry import ReferenceGeometry, RegionFeature
from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.results import AnalyticalResultBundle
from sitmap.rendering.colors import HIGHLIGHT_COLOR, REGION_LINE, severity_color


def region_scores(results: AnalyticalResultBundle) -> dict[str, float]:
    """
    Composite severity per region across every available domain.
    The worst (maximum) score reported for a region wins.
    """
    scores: dict[str, float] = {}

    def _merge(iso3: str, score: float) -> None:
        scores[iso3] = max(score, scores.get(iso3, 0.0))

    if results.geopolitics:
        for risk in results.geopolitics.country_risks:
            _merge(risk.iso3, risk.risk_score)
    if results.economy:
        for impact in results.economy.country_impacts:
            _merge(impact.iso3, impact.severity)
    if results.food_supply:
        for entry in results.food_supply.food_security:
            _merge(entry.iso3, entry.severity)
    if results.civilian_impact:
        for region in results.civilian_impact.affected_regions:
            _merge(region.iso3, region.severity)

    return scores


def create_choropleth_layer(
    geometry: ReferenceGeometry,
    results: AnalyticalResultBundle,
    selected_region: Optional[str],
) -> LayerDescriptor:
    """
    Create the regional choropleth.

    The feature data depends only on geometry and results; the selection is
    carried as the highlighted object index so selecting a region leaves the
    data untouched.

    Args:
        geometry: Reference region polygons
        results: Full analytical result bundle
        selected_region: Currently selected region identifier, if any

    Returns:
        GeoJsonLayer descriptor
    """
    scores = region_scores(results)

    def _properties(feature: RegionFeature) -> dict:
        score = scores.get(feature.region_id)
        return {
            "score": round(score, 3) if score is not None else None,
            "fill_color": severity_color(score),
        }

    data = geometry.to_feature_collection(properties_for=_properties)

    selected = selected_region.upper() if selected_region else None
    highlighted_index = -1
    if selected:
        ids = geometry.region_ids()
        if selected in ids:
            highlighted_index = ids.index(selected)

    return LayerDescriptor(
        kind=LayerKind.CHOROPLETH,
        layer_type="GeoJsonLayer",
        layer_id="choropleth",
        data=data,
        style={
            "pickable": True,
            "stroked": True,
            "filled": True,
            "extruded": False,
            "get_fill_color": "properties.fill_color",
            "get_line_color": REGION_LINE,
            "line_width_min_pixels": 1,
            "auto_highlight": False,
            "highlight_color": HIGHLIGHT_COLOR,
            "highlighted_object_index": highlighted_index,
            "selected_region_id": selected,
        },
    )
