"""renocost pricing services."""

from renocost.services.jurisdiction_rates import rate_for, supported_jurisdictions
from renocost.services.pricing_keys import infer_pricing_key, is_area_unit, units_compatible
from renocost.services.material_catalog import resolve_material_cost, split_user_pricing
from renocost.services.fallback_rates import (
    normalize_category,
    get_fallback_labor_rate,
    get_fallback_material_unit_cost,
)
from renocost.services.flyer_matcher import normalize_tokens, unit_hint_tokens, match_flyer_items
from renocost.services.estimate_service import (
    compute_estimate,
    price_line,
    apply_line_adjustments,
    MARKUP_PERCENT,
)
from renocost.services.estimate_review import review_estimate
from renocost.services.scenario_pricing import price_line_range, price_estimate_range

__all__ = [
    "rate_for",
    "supported_jurisdictions",
    "infer_pricing_key",
    "is_area_unit",
    "units_compatible",
    "resolve_material_cost",
    "split_user_pricing",
    "normalize_category",
    "get_fallback_labor_rate",
    "get_fallback_material_unit_cost",
    "normalize_tokens",
    "unit_hint_tokens",
    "match_flyer_items",
    "compute_estimate",
    "price_line",
    "apply_line_adjustments",
    "MARKUP_PERCENT",
    "review_estimate",
    "price_line_range",
    "price_estimate_range",
]
