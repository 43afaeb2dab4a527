"""
Trade arc layer: economic trade flows and food supply routes.
"""

from typing import Optional

from sitmap.models.layers import LayerDescriptor, LayerKind
from sitmap.models.outputs import EconomyOutput, FoodSupplyOutput, TradeFlow

ECONOMY_COLORS = ([52, 152, 219, 200], [155, 89, 182, 200])
FOOD_COLORS = ([46, 204, 113, 200], [241, 196, 15, 200])
DISRUPTED_COLOR = [231, 76, 60, 230]

MAX_ARC_WIDTH = 8.0


def _arc_rows(
    flows: list[TradeFlow],
    source: str,
    colors: tuple[list[int], list[int]],
) -> list[dict]:
    if not flows:
        return []
    peak = max(flow.volume for flow in flows) or 1.0
    rows = []
    for flow in flows:
        source_color, target_color = colors
        if flow.disrupted:
            source_color = target_color = DISRUPTED_COLOR
        rows.append({
            "source_position": [flow.source_longitude, flow.source_latitude],
            "target_position": [flow.target_longitude, flow.target_latitude],
            "NAME": f"{flow.source_name} → {flow.target_name}",
            "commodity": flow.commodity or "",
            "origin": source,
            "disrupted": flow.disrupted,
            "width": 1.0 + (MAX_ARC_WIDTH - 1.0) * flow.volume / peak,
            "source_color": source_color,
            "target_color": target_color,
        })
    return rows


def create_trade_arc_layer(
    economy: Optional[EconomyOutput],
    food_supply: Optional[FoodSupplyOutput],
) -> LayerDescriptor:
    """
    Create the trade arc layer.

    Either output may be missing; arcs are drawn from whichever is present.

    Args:
        economy: Economy output with trade flows, or None
        food_supply: Food supply output with supply routes, or None

    Returns:
        ArcLayer descriptor
    """
    data = []
    if economy is not None:
        data.extend(_arc_rows(economy.trade_flows, "economy", ECONOMY_COLORS))
    if food_supply is not None:
        data.extend(_arc_rows(food_supply.supply_routes, "food_supply", FOOD_COLORS))

    return LayerDescriptor(
        kind=LayerKind.TRADE_ARCS,
        layer_type="ArcLayer",
        layer_id="trade-arcs",
        data=data,
        style={
            "pickable": True,
            "get_source_position": "source_position",
            "get_target_position": "target_position",
            "get_source_color": "source_color",
            "get_target_color": "target_color",
            "get_width": "width",
            "great_circle": True,
        },
    )
