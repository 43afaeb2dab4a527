"""
Models package for sitmap.
Contains Pydantic models for viewports, layers, reference geometry and
analytical outputs.
"""

from sitmap.models.geometry import ReferenceGeometry, RegionFeature
from sitmap.models.layers import (
    LAYER_ORDER,
    LayerDescriptor,
    LayerKind,
    LayerToggleState,
)
from sitmap.models.outputs import (
    AssetStatus,
    CivilianImpactOutput,
    EconomyOutput,
    FoodSupplyOutput,
    GeopoliticsOutput,
    InfrastructureOutput,
)
from sitmap.models.results import AnalyticalResultBundle, Domain
from sitmap.models.viewport import DEFAULT_VIEWPORT, ViewportState, viewport_for_bounds

__all__ = [
    "ReferenceGeometry",
    "RegionFeature",
    "LAYER_ORDER",
    "LayerDescriptor",
    "LayerKind",
    "LayerToggleState",
    "AssetStatus",
    "CivilianImpactOutput",
    "EconomyOutput",
    "FoodSupplyOutput",
    "GeopoliticsOutput",
    "InfrastructureOutput",
    "AnalyticalResultBundle",
    "Domain",
    "DEFAULT_VIEWPORT",
    "ViewportState",
    "viewport_for_bounds",
]
