"""
Viewport models for sitmap.
Camera position shared between the map surface and its owner.
"""

import math
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Minimum zoom level to prevent world repetition (1.0 shows ~one full world)
MIN_ZOOM_LEVEL = 1.0
MAX_ZOOM_LEVEL = 18.0

_CAMERA_FIELDS = ("longitude", "latitude", "zoom", "pitch", "bearing")


class ViewportState(BaseModel):
    """Immutable camera position. Replaced wholesale on every update."""
    model_config = ConfigDict(frozen=True)

    longitude: float = Field(..., description="Center longitude in decimal degrees")
    latitude: float = Field(..., description="Center latitude in decimal degrees")
    zoom: float = Field(..., description="Zoom level")
    pitch: float = Field(0.0, description="Camera pitch in degrees")
    bearing: float = Field(0.0, description="Camera bearing in degrees")

    @field_validator("longitude", "latitude", "zoom", "pitch", "bearing")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Viewport values must be finite numbers")
        return v

    @classmethod
    def from_mapping(cls, camera: Mapping[str, Any]) -> "ViewportState":
        """
        Build a viewport from a camera mapping emitted by a render surface.

        Keys other than the five camera parameters (minZoom, transitionDuration,
        width, height, ...) are ignored.

        Args:
            camera: Mapping with at least longitude, latitude and zoom

        Returns:
            New ViewportState
        """
        values = {
            key: camera[key] for key in _CAMERA_FIELDS if camera.get(key) is not None
        }
        return cls(**values)


DEFAULT_VIEWPORT = ViewportState(longitude=20.0, latitude=20.0, zoom=2.0)


def viewport_for_bounds(
    bbox: tuple[float, float, float, float],
    min_zoom: float = MIN_ZOOM_LEVEL,
    max_zoom: float = MAX_ZOOM_LEVEL,
    pitch: float = 0.0,
    bearing: float = 0.0,
) -> ViewportState:
    """
    Center a viewport on a bounding box.

    Args:
        bbox: Bounding box [min_lon, min_lat, max_lon, max_lat]
        min_zoom: Minimum zoom level (prevents world repetition)
        max_zoom: Maximum zoom level
        pitch: Camera pitch to keep
        bearing: Camera bearing to keep

    Returns:
        ViewportState framing the bounding box
    """
    min_lon, min_lat, max_lon, max_lat = bbox
    latitude = (min_lat + max_lat) / 2
    longitude = (min_lon + max_lon) / 2

    max_range = max(max_lat - min_lat, max_lon - min_lon)

    # Rough zoom calculation
    if max_range > 180:
        zoom = min_zoom
    elif max_range > 90:
        zoom = max(1.2, min_zoom)
    elif max_range > 45:
        zoom = max(2, min_zoom)
    elif max_range > 22:
        zoom = 3
    elif max_range > 11:
        zoom = 4
    elif max_range > 5:
        zoom = 5
    elif max_range > 2.5:
        zoom = 6
    elif max_range > 1:
        zoom = 7
    else:
        zoom = 8

    zoom = max(min_zoom, min(zoom, max_zoom))

    return ViewportState(
        longitude=longitude,
        latitude=latitude,
        zoom=zoom,
        pitch=pitch,
        bearing=bearing,
    )

