"""renocost data models."""

from renocost.models.jurisdiction import JurisdictionRate
from renocost.models.scope import ScopeLineItem, PricingOverride, LineAdjustment
from renocost.models.flyer import FlyerItem, FlyerMatch
from renocost.models.estimate import (
    PricingSource,
    PricePoint,
    CostRange,
    MaterialMatch,
    LineItemCost,
    EstimateAssumptions,
    EstimateResult,
    EstimateReview,
)

__all__ = [
    "JurisdictionRate",
    "ScopeLineItem",
    "PricingOverride",
    "LineAdjustment",
    "FlyerItem",
    "FlyerMatch",
    "PricingSource",
    "PricePoint",
    "CostRange",
    "MaterialMatch",
    "LineItemCost",
    "EstimateAssumptions",
    "EstimateResult",
    "EstimateReview",
]
