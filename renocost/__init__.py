"""renocost - renovation estimate pricing and flyer matching.

Pure, in-process pricing rules for contractor estimates:
- Jurisdiction rate table (labor, material multiplier, tax)
- Material baseline and contractor override resolution
- Tiered low/medium/high fallback rates for scenario pricing
- Token-overlap matching of retail flyer items to scope lines
- Estimate computation, manual line adjustments and review warnings
"""

__version__ = "1.0.0"

from renocost.models import (
    ScopeLineItem,
    PricingOverride,
    LineAdjustment,
    FlyerItem,
    FlyerMatch,
    JurisdictionRate,
    LineItemCost,
    EstimateResult,
    EstimateReview,
    CostRange,
    PricePoint,
    PricingSource,
)
from renocost.services import (
    rate_for,
    infer_pricing_key,
    resolve_material_cost,
    get_fallback_labor_rate,
    get_fallback_material_unit_cost,
    normalize_tokens,
    unit_hint_tokens,
    match_flyer_items,
    compute_estimate,
    apply_line_adjustments,
    review_estimate,
    price_line_range,
    price_estimate_range,
)

__all__ = [
    "ScopeLineItem",
    "PricingOverride",
    "LineAdjustment",
    "FlyerItem",
    "FlyerMatch",
    "JurisdictionRate",
    "LineItemCost",
    "EstimateResult",
    "EstimateReview",
    "CostRange",
    "PricePoint",
    "PricingSource",
    "rate_for",
    "infer_pricing_key",
    "resolve_material_cost",
    "get_fallback_labor_rate",
    "get_fallback_material_unit_cost",
    "normalize_tokens",
    "unit_hint_tokens",
    "match_flyer_items",
    "compute_estimate",
    "apply_line_adjustments",
    "review_estimate",
    "price_line_range",
    "price_estimate_range",
]
