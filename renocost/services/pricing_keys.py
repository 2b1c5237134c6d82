"""Pricing-key inference for renocost.

A pricing key is the canonical category under which a contractor stores an
all-in per-unit rate (e.g. ``flooring_sqft``). Only area-measured lines get a
key; everything else is priced through the material resolver.
"""

import re
from typing import Optional, Pattern, Tuple

# Ordered: first matching rule wins.
_FLOORING = re.compile(r"\b(floor|vinyl|laminate|lvp|lvt|hardwood|plank)\b")
_WALLS = re.compile(r"\b(wall|paint|drywall)\b")
_TAPING_TASK = re.compile(r"\btap(e|ing)\b")
_TILING = re.compile(r"\b(tile|tiling)\b")
_DRYWALL_TAPING = re.compile(r"\b(drywall|tap(e|ing)|mud)\b")

FLOORING_SQFT = "flooring_sqft"
WALLS_SQFT = "walls_sqft"
TILING_SQFT = "tiling_sqft"
DRYWALL_TAPING_SQFT = "drywall_taping_sqft"

PRICING_KEYS: Tuple[str, ...] = (FLOORING_SQFT, WALLS_SQFT, TILING_SQFT, DRYWALL_TAPING_SQFT)


def is_area_unit(unit: Optional[str]) -> bool:
    """True for square-foot style units ('sqft', 'sq ft', 'SqFt')."""
    u = (unit or "").lower()
    return "sqft" in u or "sq ft" in u


def units_compatible(override_unit: Optional[str], line_unit: Optional[str]) -> bool:
    """An override applies when its unit equals the line's, or both are area units."""
    if (override_unit or "") == (line_unit or ""):
        return True
    return is_area_unit(override_unit) and is_area_unit(line_unit)


def _matches(pattern: Pattern, text: str) -> bool:
    return pattern.search(text) is not None


def infer_pricing_key(task: Optional[str], material: Optional[str], unit: Optional[str]) -> Optional[str]:
    """Classify a line into a pricing key.

    Args:
        task: Task description.
        material: Material description.
        unit: Unit label; non-area units never get a key.

    Returns:
        One of PRICING_KEYS, or None.
    """
    if not is_area_unit(unit):
        return None

    t = (task or "").lower()
    text = f"{t} {(material or '').lower()}"

    if _matches(_FLOORING, text):
        return FLOORING_SQFT
    # Taping work is drywall finishing, not wall surfacing
    if _matches(_WALLS, text) and not _matches(_TAPING_TASK, t):
        return WALLS_SQFT
    if _matches(_TILING, text):
        return TILING_SQFT
    if _matches(_DRYWALL_TAPING, text):
        return DRYWALL_TAPING_SQFT
    return None
