"""
Data loaders for sitmap.
Provides loading and caching of reference geometry and analytical results.
"""

from pathlib import Path
from typing import Optional

import geopandas as gpd
from shapely.geometry import box

from sitmap.config import DataConfig, get_config
from sitmap.models.geometry import ReferenceGeometry
from sitmap.models.outputs import (
    AffectedRegion,
    AssetStatus,
    CivilianImpactOutput,
    ConflictZone,
    CountryImpact,
    CountryRisk,
    DisplacementFlow,
    EconomyOutput,
    FoodSecurityEntry,
    FoodSupplyOutput,
    GeopoliticsOutput,
    InfrastructureAsset,
    InfrastructureOutput,
    TradeFlow,
)
from sitmap.models.results import AnalyticalResultBundle
from sitmap.utils.logger import get_logger

logger = get_logger(__name__)

# Source column names normalized to ISO3 / NAME
ID_COLUMNS = ("ISO3", "shapeGroup", "ISO_A3", "iso_a3", "ADM0_A3")
NAME_COLUMNS = ("NAME", "shapeName", "ADMIN", "name")


class DataService:
    """
    Service class for loading reference geometry and analytical results.
    Falls back to built-in sample data when no path is configured.
    """

    def __init__(self, config: Optional[DataConfig] = None):
        """Initialize the data service."""
        self._config = config or get_config().data
        self._geometry: Optional[ReferenceGeometry] = None
        self._results: Optional[AnalyticalResultBundle] = None

    def load_countries(self) -> gpd.GeoDataFrame:
        """
        Load country boundaries as a GeoDataFrame with ISO3 and NAME columns.

        Raises:
            FileNotFoundError: If a configured countries path does not exist
        """
        path = self._config.countries_path
        if not path:
            return _create_sample_countries()

        source = Path(path)
        if not source.exists():
            raise FileNotFoundError(f"Countries file not found: {source}")

        gdf = gpd.read_file(source)
        column_mapping = {}
        id_column = next((c for c in ID_COLUMNS if c in gdf.columns), None)
        name_column = next((c for c in NAME_COLUMNS if c in gdf.columns), None)
        if id_column and id_column != "ISO3":
            column_mapping[id_column] = "ISO3"
        if name_column and name_column != "NAME":
            column_mapping[name_column] = "NAME"
        if column_mapping:
            gdf = gdf.rename(columns=column_mapping)

        # Ensure CRS is WGS84; a file without one is assumed to be WGS84 already
        if gdf.crs is None:
            gdf = gdf.set_crs("EPSG:4326")
        elif gdf.crs.to_epsg() != 4326:
            gdf = gdf.to_crs("EPSG:4326")

        logger.info("Loaded %d country features from %s", len(gdf), source)
        return gdf

    def load_reference_geometry(self) -> ReferenceGeometry:
        """Load (and cache) the reference region geometry."""
        if self._geometry is None:
            self._geometry = ReferenceGeometry.from_geodataframe(self.load_countries())
        return self._geometry

    def load_results(self) -> AnalyticalResultBundle:
        """
        Load (and cache) the analytical result bundle.

        Raises:
            FileNotFoundError: If a configured results path does not exist
        """
        if self._results is not None:
            return self._results

        path = self._config.results_path
        if not path:
            self._results = create_sample_results()
            return self._results

        source = Path(path)
        if not source.exists():
            raise FileNotFoundError(f"Results file not found: {source}")
        self._results = AnalyticalResultBundle.model_validate_json(source.read_text())
        logger.info(
            "Loaded results for %s from %s",
            [domain.value for domain in self._results.available_domains()],
            source,
        )
        return self._results

    def get_region_names(self) -> dict[str, str]:
        """Map region identifiers to display names, sorted by name."""
        geometry = self.load_reference_geometry()
        pairs = sorted(((f.name, f.region_id) for f in geometry.features))
        return {region_id: name for name, region_id in pairs}


def _create_sample_countries() -> gpd.GeoDataFrame:
    """Create sample country data with approximate bounding boxes."""
    data = [
        {"NAME": "Ukraine", "ISO3": "UKR", "geometry": box(22, 44.4, 40.2, 52.4)},
        {"NAME": "Russia", "ISO3": "RUS", "geometry": box(40.2, 41, 60, 70)},
        {"NAME": "Poland", "ISO3": "POL", "geometry": box(14, 49, 24, 54.8)},
        {"NAME": "Turkey", "ISO3": "TUR", "geometry": box(26, 36, 44.8, 42)},
        {"NAME": "Egypt", "ISO3": "EGY", "geometry": box(25, 22, 35, 31.6)},
        {"NAME": "Sudan", "ISO3": "SDN", "geometry": box(22, 9, 38, 22)},
        {"NAME": "Yemen", "ISO3": "YEM", "geometry": box(42.5, 12.5, 53, 19)},
        {"NAME": "Somalia", "ISO3": "SOM", "geometry": box(41, -1.7, 51.4, 12)},
        {"NAME": "Germany", "ISO3": "DEU", "geometry": box(5.9, 47.3, 14, 55)},
        {"NAME": "India", "ISO3": "IND", "geometry": box(68, 6, 97, 35.5)},
    ]

    return gpd.GeoDataFrame(data, crs="EPSG:4326")


def create_sample_results() -> AnalyticalResultBundle:
    """Create a sample analytical result bundle for demonstration and testing."""
    geopolitics = GeopoliticsOutput(
        country_risks=[
            CountryRisk(iso3="UKR", risk_score=0.95, stance="contested"),
            CountryRisk(iso3="RUS", risk_score=0.7),
            CountryRisk(iso3="SDN", risk_score=0.85),
            CountryRisk(iso3="YEM", risk_score=0.8),
            CountryRisk(iso3="POL", risk_score=0.3),
        ],
        conflict_zones=[
            ConflictZone(name="Donbas front", latitude=48.0, longitude=37.8,
                         intensity=0.9, radius_km=150, parties=["UKR", "RUS"]),
            ConflictZone(name="Khartoum", latitude=15.5, longitude=32.5,
                         intensity=0.8, radius_km=80),
            ConflictZone(name="Red Sea corridor", latitude=14.8, longitude=42.9,
                         intensity=0.6, radius_km=120),
        ],
    )
    economy = EconomyOutput(
        trade_flows=[
            TradeFlow(source_name="Odesa", source_latitude=46.5, source_longitude=30.7,
                      target_name="Istanbul", target_latitude=41.0, target_longitude=29.0,
                      volume=40, commodity="grain"),
            TradeFlow(source_name="Mumbai", source_latitude=19.1, source_longitude=72.9,
                      target_name="Hamburg", target_latitude=53.5, target_longitude=10.0,
                      volume=100, commodity="containers", disrupted=True),
        ],
        country_impacts=[
            CountryImpact(iso3="EGY", gdp_impact_pct=-2.1, severity=0.55),
            CountryImpact(iso3="DEU", gdp_impact_pct=-0.4, severity=0.2),
        ],
    )
    food_supply = FoodSupplyOutput(
        food_security=[
            FoodSecurityEntry(iso3="SDN", severity=0.9, ipc_phase=4, population_affected=17_700_000),
            FoodSecurityEntry(iso3="YEM", severity=0.8, population_affected=17_000_000),
            FoodSecurityEntry(iso3="SOM", severity=0.65, ipc_phase=3),
        ],
        supply_routes=[
            TradeFlow(source_name="Odesa", source_latitude=46.5, source_longitude=30.7,
                      target_name="Alexandria", target_latitude=31.2, target_longitude=29.9,
                      volume=25, commodity="wheat"),
        ],
    )
    infrastructure = InfrastructureOutput(
        assets=[
            InfrastructureAsset(name="Zaporizhzhia NPP", asset_type="power_plant",
                                latitude=47.5, longitude=34.6,
                                status=AssetStatus.DEGRADED, criticality=1.0),
            InfrastructureAsset(name="Port of Odesa", asset_type="port",
                                latitude=46.5, longitude=30.7,
                                status=AssetStatus.DAMAGED, criticality=0.8),
            InfrastructureAsset(name="Port Sudan", asset_type="port",
                                latitude=19.6, longitude=37.2, criticality=0.7),
        ],
    )
    civilian_impact = CivilianImpactOutput(
        displacement_flows=[
            DisplacementFlow(origin_name="Kharkiv", origin_latitude=50.0, origin_longitude=36.2,
                             destination_name="Warsaw", destination_latitude=52.2,
                             destination_longitude=21.0, people=1_200_000),
            DisplacementFlow(origin_name="Khartoum", origin_latitude=15.5, origin_longitude=32.5,
                             destination_name="Cairo", destination_latitude=30.0,
                             destination_longitude=31.2, people=450_000),
        ],
        affected_regions=[
            AffectedRegion(iso3="UKR", severity=0.85, casualties=30_000),
            AffectedRegion(iso3="SDN", severity=0.9),
        ],
    )
    return AnalyticalResultBundle(
        geopolitics=geopolitics,
        economy=economy,
        food_supply=food_supply,
        infrastructure=infrastructure,
        civilian_impact=civilian_impact,
    )


# Global data service instance
_data_service: Optional[DataService] = None


def get_data_service() -> DataService:
    """Get the global data service instance."""
    global _data_service
    if _data_service is None:
        _data_service = DataService()
    return _data_service
