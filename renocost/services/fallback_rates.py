"""Tiered fallback rate tables for renocost.

Low/medium/high labor and material rates used for scenario pricing when a
line has no better price signal. The main estimate path never reads these;
it uses the point estimates from the material catalog.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple, Union

from renocost.models.estimate import CostRange, PricePoint


# =============================================================================
# LABOR $/SQFT BY CATEGORY
# =============================================================================

LABOR_SQFT_BY_CATEGORY: Mapping[str, CostRange] = MappingProxyType({
    "painting": CostRange(low=1.4, medium=2.2, high=3.3),
    "drywall": CostRange(low=1.2, medium=1.9, high=2.8),
    "flooring": CostRange(low=2.1, medium=3.2, high=4.8),
    "tiling": CostRange(low=4.0, medium=6.0, high=8.5),
    "demolition": CostRange(low=1.1, medium=1.8, high=2.9),
    "kitchen": CostRange(low=4.2, medium=6.8, high=10.5),
    "bathroom": CostRange(low=4.8, medium=7.5, high=11.5),
    "general": CostRange(low=1.8, medium=2.9, high=4.4),
})

# (substrings, category); first hit wins
_CATEGORY_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("paint",), "painting"),
    (("drywall", "taping"), "drywall"),
    (("floor",), "flooring"),
    (("tile",), "tiling"),
    (("demo",), "demolition"),
    (("kitchen",), "kitchen"),
    (("bath",), "bathroom"),
)


# =============================================================================
# MATERIAL $/UNIT BY KEYWORD
# =============================================================================

# Rates are per sqft for surface work, per lf for trim, per each for fixtures.
MATERIAL_UNIT_FALLBACKS: Tuple[Tuple[Pattern, CostRange], ...] = (
    (re.compile(r"\b(paint|primer)\b", re.I), CostRange(low=0.35, medium=0.6, high=1.05)),
    (re.compile(r"\b(drywall|taping|mud)\b", re.I), CostRange(low=0.45, medium=0.85, high=1.4)),
    (re.compile(r"\b(vinyl|laminate|lvp|lvt|hardwood|floor)\b", re.I), CostRange(low=1.4, medium=2.2, high=3.4)),
    (re.compile(r"\b(tile|porcelain|ceramic|backsplash)\b", re.I), CostRange(low=2.4, medium=3.9, high=6.0)),
    (re.compile(r"\b(trim|baseboard|casing)\b", re.I), CostRange(low=1.8, medium=3.2, high=5.5)),
    (re.compile(r"\b(counter|countertop)\b", re.I), CostRange(low=180.0, medium=320.0, high=620.0)),
    (re.compile(r"\b(vanity|sink|toilet|faucet)\b", re.I), CostRange(low=95.0, medium=180.0, high=340.0)),
    (re.compile(r"\b(cabinet|door|hardware)\b", re.I), CostRange(low=120.0, medium=240.0, high=460.0)),
)

LINEAR_FLOOR = 1.2
EACH_FLOOR = 30.0
HOUSE_FACTOR = 120.0
HOUSE_FLOOR = 250.0


# =============================================================================
# LOOKUPS
# =============================================================================


def to_price_point(point: Union[PricePoint, str, None]) -> PricePoint:
    """Coerce a price point; anything other than low/high means medium."""
    if isinstance(point, PricePoint):
        return point
    value = (point or "").strip().lower()
    if value == PricePoint.LOW.value:
        return PricePoint.LOW
    if value == PricePoint.HIGH.value:
        return PricePoint.HIGH
    return PricePoint.MEDIUM


def normalize_category(category: Optional[str]) -> str:
    """Fold a free-text trade/area label into a labor table category."""
    c = (category or "").strip().lower()
    if not c:
        return "general"
    for needles, name in _CATEGORY_RULES:
        if any(n in c for n in needles):
            return name
    return "general"


def get_fallback_labor_rate(category: Optional[str], point: Union[PricePoint, str, None]) -> float:
    """Labor $/sqft for a category at a price point."""
    rates = LABOR_SQFT_BY_CATEGORY.get(normalize_category(category), LABOR_SQFT_BY_CATEGORY["general"])
    return rates.for_point(to_price_point(point))


def get_fallback_material_unit_cost(
    task: Optional[str],
    material: Optional[str],
    unit: Optional[str],
    point: Union[PricePoint, str, None],
) -> Optional[float]:
    """Fallback material cost per unit, scaled to the line's unit.

    Args:
        task: Task description.
        material: Material description.
        unit: Unit label of the line.
        point: Price point tier.

    Returns:
        Unit cost, or None when no keyword pattern matches the text.
    """
    text = f"{task or ''} {material or ''}".lower()
    u = (unit or "").lower()

    rates = next((r for pattern, r in MATERIAL_UNIT_FALLBACKS if pattern.search(text)), None)
    if rates is None:
        return None
    base = rates.for_point(to_price_point(point))

    if "sqft" in u or "sq ft" in u:
        return base
    if "lf" in u or "linear" in u:
        return max(LINEAR_FLOOR, base)
    if "each" in u or "set" in u or "room" in u:
        return max(EACH_FLOOR, base)
    if "house" in u:
        return max(HOUSE_FLOOR, base * HOUSE_FACTOR)
    return base
