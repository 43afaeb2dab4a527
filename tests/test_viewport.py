"""Tests for viewport models and the viewport controller."""

import math

import pytest
from pydantic import ValidationError

from sitmap.models.viewport import (
    DEFAULT_VIEWPORT,
    MIN_ZOOM_LEVEL,
    ViewportState,
    viewport_for_bounds,
)
from sitmap.viewport import ViewportController


class TestViewportState:
    """Test the viewport value type."""

    def test_defaults(self):
        viewport = ViewportState(longitude=1, latitude=2, zoom=3)
        assert (viewport.pitch, viewport.bearing) == (0.0, 0.0)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValidationError):
            ViewportState(longitude=bad, latitude=0, zoom=1)

    def test_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_VIEWPORT.zoom = 5

    def test_from_surface_mapping_ignores_extra_keys(self):
        viewport = ViewportState.from_mapping({
            "longitude": 10, "latitude": 20, "zoom": 4, "pitch": 30, "bearing": 15,
            "minZoom": 1, "transitionDuration": 300, "width": 800,
        })
        assert viewport == ViewportState(longitude=10, latitude=20, zoom=4, pitch=30, bearing=15)

    def test_viewport_for_bounds(self):
        viewport = viewport_for_bounds((22, 9, 38, 22))
        assert (viewport.longitude, viewport.latitude) == (30, 15.5)
        assert viewport.zoom == 4

    def test_viewport_for_world_bounds_uses_min_zoom(self):
        assert viewport_for_bounds((-180, -85, 180, 85)).zoom == MIN_ZOOM_LEVEL


class TestViewportController:
    """Test viewport synchronization."""

    def test_surface_built_from_external_state(self):
        controller = ViewportController(DEFAULT_VIEWPORT)
        assert controller.surface_view_state() is DEFAULT_VIEWPORT

    def test_surface_change_forwarded_unconditionally(self):
        published = []
        controller = ViewportController(DEFAULT_VIEWPORT, on_change=published.append)

        controller.on_surface_change(DEFAULT_VIEWPORT)
        moved = controller.on_surface_change({"longitude": 5, "latitude": 6, "zoom": 7})

        assert published == [DEFAULT_VIEWPORT, moved]
        assert controller.viewport == ViewportState(longitude=5, latitude=6, zoom=7)

    def test_programmatic_change_not_echoed(self):
        published = []
        controller = ViewportController(DEFAULT_VIEWPORT, on_change=published.append)
        target = ViewportState(longitude=1, latitude=1, zoom=9)

        controller.set_viewport(target)

        assert controller.surface_view_state() is target
        assert published == []

    def test_fly_to_region(self, geometry):
        published = []
        start = ViewportState(longitude=0, latitude=0, zoom=2, pitch=20, bearing=10)
        controller = ViewportController(start, on_change=published.append)

        viewport = controller.fly_to_region(geometry, "sdn")

        assert (viewport.longitude, viewport.latitude) == (30, 15.5)
        assert (viewport.pitch, viewport.bearing) == (20, 10)
        assert published == [viewport]

    def test_fly_to_unknown_region(self, geometry):
        controller = ViewportController(DEFAULT_VIEWPORT)
        assert controller.fly_to_region(geometry, "FRA") is None
        assert controller.fly_to_region(None, "SDN") is None
        assert controller.viewport is DEFAULT_VIEWPORT
