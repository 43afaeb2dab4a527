"""
Interaction resolution for map picks.
Translates whatever the render surface picked into region identifiers and
tooltip labels.
"""

from typing import Any, Callable, Mapping, Optional

from sitmap.utils.logger import get_logger

logger = get_logger(__name__)

# Probed in priority order
REGION_ID_KEYS = ("ISO_A3", "iso_a3", "ISO3", "region_id")
LABEL_KEYS = ("NAME", "name")


def _get(source: Any, key: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def _properties(pick: Any) -> Optional[Any]:
    """Find the property bag of the picked object, if any."""
    picked = _get(pick, "object")
    if picked is None:
        return None
    props = _get(picked, "properties")
    return props if props is not None else picked


def _first_value(props: Any, keys: tuple[str, ...]) -> Optional[str]:
    for key in keys:
        value = _get(props, key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def resolve_region(pick: Any) -> Optional[str]:
    """
    Get the region identifier carried by a pick result.

    Args:
        pick: Pick info with an ``object`` (a GeoJSON feature or a flat row)

    Returns:
        Region identifier, or None when the pick carries none
    """
    return _first_value(_properties(pick), REGION_ID_KEYS)


def hover_label(pick: Any) -> Optional[str]:
    """Human-readable label: display name first, region identifier second."""
    props = _properties(pick)
    return _first_value(props, LABEL_KEYS) or _first_value(props, REGION_ID_KEYS)


def picks_from_selection(selection: Optional[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """
    Convert a Streamlit pydeck selection state into pick results.

    Args:
        selection: Selection state, ``{"objects": {layer_id: [obj, ...]}, ...}``

    Returns:
        List of ``{"layer": layer_id, "object": obj}`` pick results
    """
    if not selection:
        return []
    picks = []
    for layer_id, objects in (selection.get("objects") or {}).items():
        for obj in objects or []:
            picks.append({"layer": layer_id, "object": obj})
    return picks


class InteractionResolver:
    """Routes click picks carrying a region identifier to a callback."""

    def __init__(self, on_region_click: Optional[Callable[[str], None]] = None):
        self._on_region_click = on_region_click

    def handle_click(self, pick: Any) -> Optional[str]:
        """
        Emit a region click for a pick result.

        Returns:
            The emitted region identifier, or None if nothing was emitted
        """
        region_id = resolve_region(pick)
        if region_id is None:
            logger.debug("Ignoring pick without region identifier")
            return None
        if self._on_region_click is not None:
            self._on_region_click(region_id)
        return region_id

    def tooltip(self, pick: Any) -> Optional[str]:
        return hover_label(pick)
