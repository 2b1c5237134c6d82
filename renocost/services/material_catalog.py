"""Material baseline table and material cost resolver for renocost.

Resolution order for a line's material text:
1. the contractor's own ``mat:`` rates (substring match either way),
2. the baseline keyword table (first keyword contained in the text),
3. a generic default unit cost.

The baseline is an ordered sequence; earlier keywords win, so
"luxury vinyl plank" resolves to the "vinyl plank" entry.
"""

from typing import Dict, Mapping, Optional, Tuple, Union

import structlog

from renocost.models.estimate import MaterialMatch, PricingSource
from renocost.models.scope import PricingOverride

logger = structlog.get_logger(__name__)


# =============================================================================
# BASELINE TABLE ($ per unit, before jurisdiction multiplier)
# =============================================================================

MATERIAL_BASELINE: Tuple[Tuple[str, float], ...] = (
    ("vinyl plank", 4.5),
    ("luxury vinyl plank", 6.0),
    ("lvt", 6.0),
    ("laminate", 3.5),
    ("hardwood", 12.0),
    ("engineered hardwood", 8.0),
    ("tile", 7.0),
    ("ceramic tile", 7.0),
    ("porcelain tile", 9.0),
    ("marble tile", 18.0),
    ("underlayment", 0.8),
    ("transition strips", 15.0),
    ("baseboard", 3.5),
    ("subfloor", 2.5),
    ("paint", 0.5),
    ("primer", 0.3),
    ("drywall sheet", 14.0),
    ("drywall compound", 0.4),
)

DEFAULT_MATERIAL_COST = 5.0
DEFAULT_MATERIAL_NAME = "general"

MATERIAL_OVERRIDE_PREFIX = "mat:"

OverrideLike = Union[PricingOverride, Mapping[str, object]]


# =============================================================================
# OVERRIDE MAP HELPERS
# =============================================================================


def coerce_override(value: OverrideLike) -> PricingOverride:
    """Accept either a PricingOverride or a ``{rate, unit}`` mapping."""
    if isinstance(value, PricingOverride):
        return value
    return PricingOverride.model_validate(value)


def split_user_pricing(
    user_pricing: Optional[Mapping[str, OverrideLike]],
) -> Tuple[Dict[str, PricingOverride], Dict[str, PricingOverride]]:
    """Separate pricing-key overrides from ``mat:`` material overrides.

    Args:
        user_pricing: Raw override map as stored by the caller.

    Returns:
        (key_rates, material_rates). Material names have the prefix removed
        and are lower-cased; both dicts keep the caller's insertion order.
    """
    key_rates: Dict[str, PricingOverride] = {}
    material_rates: Dict[str, PricingOverride] = {}
    if not user_pricing:
        return key_rates, material_rates

    for key, value in user_pricing.items():
        override = coerce_override(value)
        if key.startswith(MATERIAL_OVERRIDE_PREFIX):
            name = key[len(MATERIAL_OVERRIDE_PREFIX):].strip().lower()
            # first registration of a name wins
            material_rates.setdefault(name, override)
        else:
            key_rates[key] = override
    return key_rates, material_rates


# =============================================================================
# RESOLVER
# =============================================================================


def baseline_cost(material_text: Optional[str]) -> Optional[Tuple[str, float]]:
    """First baseline entry whose keyword occurs in the text, or None."""
    lower = (material_text or "").lower()
    for keyword, cost in MATERIAL_BASELINE:
        if keyword in lower:
            return keyword, cost
    return None


def resolve_material_cost(
    material_text: Optional[str],
    user_materials: Optional[Mapping[str, OverrideLike]] = None,
) -> MaterialMatch:
    """Resolve a per-unit material cost and its provenance.

    Args:
        material_text: Free-text material description from the scope line.
        user_materials: Contractor material rates keyed by material name
            (already stripped of the ``mat:`` prefix).

    Returns:
        MaterialMatch with the raw unit cost. The jurisdiction multiplier is
        applied by the caller and only for default-sourced costs.
    """
    lower = (material_text or "").strip().lower()

    if user_materials:
        for name, value in user_materials.items():
            registered = (name or "").strip().lower()
            if not registered:
                continue
            if registered in lower or lower in registered:
                override = coerce_override(value)
                return MaterialMatch(
                    cost=override.rate,
                    source=PricingSource.USER,
                    matched_name=registered,
                )

    found = baseline_cost(lower)
    if found is not None:
        keyword, cost = found
        return MaterialMatch(cost=cost, source=PricingSource.DEFAULT, matched_name=keyword)

    logger.debug("material_unmatched_using_default", material=material_text)
    return MaterialMatch(
        cost=DEFAULT_MATERIAL_COST,
        source=PricingSource.DEFAULT,
        matched_name=DEFAULT_MATERIAL_NAME,
    )
