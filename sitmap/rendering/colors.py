"""
Color helpers shared by the layer builders.
"""

from typing import Optional


SEVERITY_LOW = "#2ECC71"
SEVERITY_MID = "#F1C40F"
SEVERITY_HIGH = "#E74C3C"

NEUTRAL_FILL = [90, 98, 110, 60]
REGION_LINE = [140, 150, 160, 120]
HIGHLIGHT_COLOR = [0, 200, 255, 200]


def hex_to_rgba(hex_color: str, opacity: float = 1.0) -> list[int]:
    """
    Convert hex color to RGBA list.

    Args:
        hex_color: Hex color string (e.g., "#FF0000")
        opacity: Opacity value (0-1)

    Returns:
        List of [R, G, B, A] values (0-255)
    """
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join([c * 2 for c in hex_color])

    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    a = int(opacity * 255)

    return [r, g, b, a]


def _lerp(a: list[int], b: list[int], t: float) -> list[int]:
    return [round(x + (y - x) * t) for x, y in zip(a, b)]


def severity_color(score: Optional[float], opacity: float = 0.7) -> list[int]:
    """
    Map a 0-1 severity score onto a green-yellow-red ramp.

    Args:
        score: Severity score, None for "no data"
        opacity: Opacity of the returned color (0-1)

    Returns:
        RGBA list; the neutral fill when score is None
    """
    if score is None:
        return list(NEUTRAL_FILL)

    score = max(0.0, min(1.0, score))
    low = hex_to_rgba(SEVERITY_LOW, opacity)
    mid = hex_to_rgba(SEVERITY_MID, opacity)
    high = hex_to_rgba(SEVERITY_HIGH, opacity)

    if score <= 0.5:
        return _lerp(low, mid, score / 0.5)
    return _lerp(mid, high, (score - 0.5) / 0.5)
