"""Shared fixtures and configuration for sitmap tests."""

import pytest
from shapely.geometry import box, mapping

from sitmap.data.loaders import create_sample_results
from sitmap.models.geometry import ReferenceGeometry, RegionFeature
from sitmap.models.layers import LayerToggleState
from sitmap.models.outputs import (
    ConflictZone,
    EconomyOutput,
    GeopoliticsOutput,
    TradeFlow,
)
from sitmap.models.results import AnalyticalResultBundle


@pytest.fixture
def geometry() -> ReferenceGeometry:
    """Three boxed regions."""
    return ReferenceGeometry(features=[
        RegionFeature(region_id="UKR", name="Ukraine", geometry=mapping(box(22, 44.4, 40.2, 52.4))),
        RegionFeature(region_id="SDN", name="Sudan", geometry=mapping(box(22, 9, 38, 22))),
        RegionFeature(region_id="YEM", name="Yemen", geometry=mapping(box(42.5, 12.5, 53, 19))),
    ])


@pytest.fixture
def full_results() -> AnalyticalResultBundle:
    """Bundle with every domain populated."""
    return create_sample_results()


@pytest.fixture
def empty_results() -> AnalyticalResultBundle:
    return AnalyticalResultBundle()


@pytest.fixture
def geopolitics() -> GeopoliticsOutput:
    return GeopoliticsOutput(
        conflict_zones=[
            ConflictZone(name="Front", latitude=48.0, longitude=37.8, intensity=0.9, radius_km=100),
        ],
    )


@pytest.fixture
def economy() -> EconomyOutput:
    return EconomyOutput(
        trade_flows=[
            TradeFlow(
                source_name="Odesa", source_latitude=46.5, source_longitude=30.7,
                target_name="Istanbul", target_latitude=41.0, target_longitude=29.0,
                volume=10,
            ),
        ],
    )


@pytest.fixture
def all_on() -> LayerToggleState:
    return LayerToggleState.all_on()
