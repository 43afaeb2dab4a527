"""
Viewport synchronization between the map surface and its owner.
"""

from typing import Any, Callable, Mapping, Optional, Union

from sitmap.models.geometry import ReferenceGeometry
from sitmap.models.viewport import ViewportState, viewport_for_bounds
from sitmap.utils.logger import get_logger

logger = get_logger(__name__)

ViewportListener = Callable[[ViewportState], None]


class ViewportController:
    """
    Keeps one authoritative viewport.

    The owner sets it programmatically; the surface reports gesture-driven
    changes, which are forwarded to the owner unconditionally. The surface is
    always constructed from the current value, so there is no echo to
    suppress.
    """

    def __init__(
        self,
        viewport: ViewportState,
        on_change: Optional[ViewportListener] = None,
    ):
        self._viewport = viewport
        self._on_change = on_change

    @property
    def viewport(self) -> ViewportState:
        return self._viewport

    def surface_view_state(self) -> ViewportState:
        """Viewport the render surface must be constructed with."""
        return self._viewport

    def set_viewport(self, viewport: ViewportState) -> None:
        """Programmatic change from the owner."""
        self._viewport = viewport

    def on_surface_change(
        self, viewport: Union[ViewportState, Mapping[str, Any]]
    ) -> ViewportState:
        """
        Accept a gesture-driven change from the render surface.

        Args:
            viewport: New viewport, or the raw camera mapping the surface emitted

        Returns:
            The adopted viewport
        """
        if not isinstance(viewport, ViewportState):
            viewport = ViewportState.from_mapping(viewport)
        self._viewport = viewport
        if self._on_change is not None:
            self._on_change(viewport)
        return viewport

    def fly_to_region(
        self, geometry: Optional[ReferenceGeometry], region_id: str
    ) -> Optional[ViewportState]:
        """
        Frame a region and publish the new viewport.

        Returns:
            The new viewport, or None if the region is unknown
        """
        bbox = geometry.bounds(region_id) if geometry is not None else None
        if bbox is None:
            logger.debug("Cannot frame unknown region %s", region_id)
            return None
        viewport = viewport_for_bounds(
            bbox, pitch=self._viewport.pitch, bearing=self._viewport.bearing
        )
        self._viewport = viewport
        if self._on_change is not None:
            self._on_change(viewport)
        return viewport
