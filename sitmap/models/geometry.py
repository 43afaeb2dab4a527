"""
Reference geometry models for sitmap.
Named region polygons with stable identifiers (ISO3 codes).
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry


# Feature properties carried on every rendered region. The interaction
# resolver probes these names on pick results.
REGION_ID_PROPERTY = "ISO_A3"
REGION_NAME_PROPERTY = "NAME"


class RegionFeature(BaseModel):
    """A single region polygon."""
    model_config = ConfigDict(frozen=True)

    region_id: str = Field(..., description="Stable region identifier (ISO3)")
    name: str = Field(..., description="Display name")
    geometry: dict[str, Any] = Field(..., description="GeoJSON geometry object")

    @field_validator("region_id")
    @classmethod
    def normalize_region_id(cls, v: str) -> str:
        return v.upper()

    def to_shapely(self) -> BaseGeometry:
        """Convert the GeoJSON geometry to a Shapely geometry object."""
        return shape(self.geometry)

    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box [min_lon, min_lat, max_lon, max_lat]."""
        return tuple(self.to_shapely().bounds)

    def to_feature(self, extra_properties: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        properties = {
            REGION_ID_PROPERTY: self.region_id,
            REGION_NAME_PROPERTY: self.name,
        }
        if extra_properties:
            properties.update(extra_properties)
        return {
            "type": "Feature",
            "id": self.region_id,
            "properties": properties,
            "geometry": self.geometry,
        }


class ReferenceGeometry(BaseModel):
    """Collection of region polygons keyed by region identifier."""
    model_config = ConfigDict(frozen=True)

    features: list[RegionFeature] = Field(default_factory=list)

    def region_ids(self) -> list[str]:
        return [feature.region_id for feature in self.features]

    def get(self, region_id: str) -> Optional[RegionFeature]:
        """Get a region by identifier (case-insensitive)."""
        wanted = region_id.upper()
        for feature in self.features:
            if feature.region_id == wanted:
                return feature
        return None

    def bounds(self, region_id: str) -> Optional[tuple[float, float, float, float]]:
        """Bounding box of a region, or None if unknown."""
        feature = self.get(region_id)
        return feature.bounds() if feature else None

    def to_feature_collection(
        self,
        properties_for: Optional[Callable[[RegionFeature], Optional[dict[str, Any]]]] = None,
        region_ids: Optional[set[str]] = None,
    ) -> dict[str, Any]:
        """
        Convert to a GeoJSON FeatureCollection.

        Args:
            properties_for: Optional callable returning extra properties per region
            region_ids: Optional subset of regions to include

        Returns:
            GeoJSON FeatureCollection dict
        """
        features = []
        for feature in self.features:
            if region_ids is not None and feature.region_id not in region_ids:
                continue
            extra = properties_for(feature) if properties_for else None
            features.append(feature.to_feature(extra))
        return {"type": "FeatureCollection", "features": features}

    @classmethod
    def from_feature_collection(cls, collection: dict[str, Any]) -> "ReferenceGeometry":
        """
        Build reference geometry from a GeoJSON FeatureCollection.
        Features without a recognizable identifier are skipped.
        """
        features = []
        for feature in collection.get("features", []):
            props = feature.get("properties") or {}
            region_id = (
                props.get(REGION_ID_PROPERTY)
                or props.get("ISO3")
                or props.get("iso_a3")
                or feature.get("id")
            )
            if not region_id or not feature.get("geometry"):
                continue
            features.append(RegionFeature(
                region_id=str(region_id),
                name=props.get(REGION_NAME_PROPERTY) or props.get("name") or str(region_id),
                geometry=feature["geometry"],
            ))
        return cls(features=features)

    @classmethod
    def from_geodataframe(
        cls,
        gdf: Any,
        id_column: str = "ISO3",
        name_column: str = "NAME",
    ) -> "ReferenceGeometry":
        """
        Build reference geometry from a GeoDataFrame in EPSG:4326.

        Args:
            gdf: GeoDataFrame with id, name and geometry columns
            id_column: Column holding the region identifier
            name_column: Column holding the display name

        Returns:
            ReferenceGeometry with one feature per valid row
        """
        features = []
        for _, row in gdf.iterrows():
            region_id = row.get(id_column)
            geom = row.geometry
            if not isinstance(region_id, str) or geom is None or geom.is_empty:
                continue
            # Make geometry valid if needed to prevent topology errors
            if not geom.is_valid:
                geom = geom.buffer(0)
            name = row.get(name_column)
            features.append(RegionFeature(
                region_id=region_id,
                name=name if isinstance(name, str) else region_id,
                geometry=mapping(geom),
            ))
        return cls(features=features)
