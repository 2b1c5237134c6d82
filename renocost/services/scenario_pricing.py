"""Scenario pricing for renocost.

Produces a low/medium/high direct-cost range for scope lines from the
tiered fallback tables alone. Useful for a quick what-if price band before
(or instead of) a full estimate; no markup, tax or jurisdiction is applied.
"""

from typing import Iterable, Optional

from renocost.models.estimate import CostRange, PricePoint
from renocost.models.scope import ScopeLineItem
from renocost.services.fallback_rates import (
    get_fallback_labor_rate,
    get_fallback_material_unit_cost,
)
from renocost.services.pricing_keys import is_area_unit


def _point_cost(item: ScopeLineItem, category: str, point: PricePoint) -> float:
    quantity = item.quantity if item.quantity > 0 else 0.0
    # labor table is $/sqft, so only area lines carry a labor component
    labor = get_fallback_labor_rate(category, point) * quantity if is_area_unit(item.unit) else 0.0
    unit_cost = get_fallback_material_unit_cost(item.task, item.material, item.unit, point)
    material = unit_cost * quantity if unit_cost is not None else 0.0
    return round(labor + material, 2)


def price_line_range(item: ScopeLineItem, category: Optional[str] = None) -> CostRange:
    """Direct-cost range for one line.

    Args:
        item: Scope line.
        category: Labor category label; defaults to the line's segment and task.

    Returns:
        CostRange with one total per price point.
    """
    label = category if category is not None else f"{item.segment} {item.task}"
    return CostRange(
        low=_point_cost(item, label, PricePoint.LOW),
        medium=_point_cost(item, label, PricePoint.MEDIUM),
        high=_point_cost(item, label, PricePoint.HIGH),
    )


def price_estimate_range(items: Iterable[ScopeLineItem]) -> CostRange:
    """Sum of line ranges."""
    total = CostRange.zero()
    for item in items:
        total = total + price_line_range(item)
    return total
