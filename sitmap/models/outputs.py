"""
Output models for the analytical domains feeding the map.
One plain record per domain; each layer builder reads a known shape.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class _Located(_Record):
    """A record carrying a single latitude/longitude pair."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    @property
    def position(self) -> list[float]:
        """[lon, lat] as deck.gl expects."""
        return [self.longitude, self.latitude]


class CountryRisk(_Record):
    """Geopolitical risk for a single region."""
    iso3: str = Field(..., min_length=3, max_length=3, description="ISO3 region code")
    risk_score: float = Field(..., ge=0, le=1, description="Normalized risk (0-1)")
    stance: Optional[str] = Field(None, description="Alignment or stance label")

    @field_validator("iso3")
    @classmethod
    def normalize_iso3(cls, v: str) -> str:
        return v.upper()


class ConflictZone(_Located):
    """An active conflict area."""
    name: str = Field(..., description="Display name")
    intensity: float = Field(..., ge=0, le=1, description="Conflict intensity (0-1)")
    radius_km: float = Field(50.0, gt=0, description="Approximate radius of the zone")
    parties: list[str] = Field(default_factory=list, description="Parties involved")


class GeopoliticsOutput(_Record):
    """Output of the geopolitics analysis."""
    country_risks: list[CountryRisk] = Field(default_factory=list)
    conflict_zones: list[ConflictZone] = Field(default_factory=list)
    summary: Optional[str] = None


class TradeFlow(_Record):
    """A flow of goods between two places."""
    source_name: str = Field(..., description="Origin name")
    source_latitude: float = Field(..., ge=-90, le=90)
    source_longitude: float = Field(..., ge=-180, le=180)
    target_name: str = Field(..., description="Destination name")
    target_latitude: float = Field(..., ge=-90, le=90)
    target_longitude: float = Field(..., ge=-180, le=180)
    volume: float = Field(0.0, ge=0, description="Relative flow volume")
    commodity: Optional[str] = Field(None, description="Commodity carried")
    disrupted: bool = Field(False, description="Whether the route is disrupted")


class CountryImpact(_Record):
    """Economic impact on a single region."""
    iso3: str = Field(..., min_length=3, max_length=3)
    gdp_impact_pct: float = Field(0.0, description="Projected GDP change in percent")
    severity: float = Field(..., ge=0, le=1, description="Normalized severity (0-1)")

    @field_validator("iso3")
    @classmethod
    def normalize_iso3(cls, v: str) -> str:
        return v.upper()


class EconomyOutput(_Record):
    """Output of the economy analysis."""
    trade_flows: list[TradeFlow] = Field(default_factory=list)
    country_impacts: list[CountryImpact] = Field(default_factory=list)
    summary: Optional[str] = None


class FoodSecurityEntry(_Record):
    """Food security status of a region."""
    iso3: str = Field(..., min_length=3, max_length=3)
    severity: float = Field(..., ge=0, le=1, description="Normalized severity (0-1)")
    ipc_phase: Optional[int] = Field(None, ge=1, le=5, description="IPC phase classification")
    population_affected: Optional[int] = Field(None, ge=0)

    @field_validator("iso3")
    @classmethod
    def normalize_iso3(cls, v: str) -> str:
        return v.upper()


class FoodSupplyOutput(_Record):
    """Output of the food supply analysis."""
    food_security: list[FoodSecurityEntry] = Field(default_factory=list)
    supply_routes: list[TradeFlow] = Field(default_factory=list)
    summary: Optional[str] = None


class AssetStatus(str, Enum):
    """Operational status of an infrastructure asset."""
    OPERATIONAL = "operational"
    DEGRADED = "degraded"
    DAMAGED = "damaged"
    DESTROYED = "destroyed"


class InfrastructureAsset(_Located):
    """A piece of critical infrastructure."""
    name: str
    asset_type: str = Field(..., description="e.g. port, power_plant, bridge")
    status: AssetStatus = AssetStatus.OPERATIONAL
    criticality: float = Field(0.5, ge=0, le=1)


class InfrastructureOutput(_Record):
    """Output of the infrastructure analysis."""
    assets: list[InfrastructureAsset] = Field(default_factory=list)
    summary: Optional[str] = None


class DisplacementFlow(_Record):
    """Movement of displaced people between two places."""
    origin_name: str
    origin_latitude: float = Field(..., ge=-90, le=90)
    origin_longitude: float = Field(..., ge=-180, le=180)
    destination_name: str
    destination_latitude: float = Field(..., ge=-90, le=90)
    destination_longitude: float = Field(..., ge=-180, le=180)
    people: int = Field(0, ge=0, description="Number of people displaced")


class AffectedRegion(_Record):
    """Humanitarian severity for a region."""
    iso3: str = Field(..., min_length=3, max_length=3)
    severity: float = Field(..., ge=0, le=1)
    casualties: Optional[int] = Field(None, ge=0)

    @field_validator("iso3")
    @classmethod
    def normalize_iso3(cls, v: str) -> str:
        return v.upper()


class CivilianImpactOutput(_Record):
    """Output of the civilian impact analysis."""
    displacement_flows: list[DisplacementFlow] = Field(default_factory=list)
    affected_regions: list[AffectedRegion] = Field(default_factory=list)
    summary: Optional[str] = None
