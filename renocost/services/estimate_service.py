"""Estimate computer for renocost.

Turns an ordered list of scope lines into a priced estimate for one
jurisdiction. Each line is priced on its own:

- a unit-compatible contractor rate for the line's pricing key is treated as
  an all-in rate and split into labor and material;
- otherwise the material cost comes from the material resolver and labor
  hours from the line (or an area heuristic) at the jurisdiction rate.

Markup and tax are applied per line; estimate totals are plain sums.
Unknown jurisdictions, unmatched materials and missing hours all fall back
to defaults, so no well-formed input raises.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

import structlog

from renocost.models.estimate import (
    EstimateAssumptions,
    EstimateResult,
    LineItemCost,
    PricingSource,
)
from renocost.models.jurisdiction import JurisdictionRate
from renocost.models.scope import LineAdjustment, PricingOverride, ScopeLineItem
from renocost.services.jurisdiction_rates import rate_for
from renocost.services.material_catalog import (
    OverrideLike,
    resolve_material_cost,
    split_user_pricing,
)
from renocost.services.pricing_keys import infer_pricing_key, units_compatible

logger = structlog.get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MARKUP_PERCENT = 0.15

# Share of a contractor's all-in unit rate attributed to labor; rest is material.
BLENDED_LABOR_SHARE = 0.6
BLENDED_MATERIAL_SHARE = 0.4

# Area units covered per labor hour when a line carries no hours estimate.
UNITS_PER_LABOR_HOUR = 50.0

INCLUDED_IN_RATE = "included in rate"

ScopeLike = Union[ScopeLineItem, Mapping[str, object]]


# =============================================================================
# HELPERS
# =============================================================================


def _coerce_item(item: ScopeLike) -> ScopeLineItem:
    if isinstance(item, ScopeLineItem):
        return item
    return ScopeLineItem.model_validate(item)


def _non_negative(value: Optional[float]) -> float:
    """Clamp to a finite, non-negative float (NaN and negatives become 0)."""
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def _roll_up(
    base: Dict[str, object],
    labor_cost: float,
    material_cost: float,
    tax_rate: float,
) -> LineItemCost:
    subtotal = labor_cost + material_cost
    markup = subtotal * MARKUP_PERCENT
    tax = (subtotal + markup) * tax_rate
    return LineItemCost(
        **base,
        labor_cost=labor_cost,
        material_cost=material_cost,
        subtotal=subtotal,
        markup=markup,
        tax=tax,
        total=subtotal + markup + tax,
    )


def _find_user_rate(
    item: ScopeLineItem,
    key_rates: Mapping[str, PricingOverride],
) -> Optional[PricingOverride]:
    key = infer_pricing_key(item.task, item.material, item.unit)
    if key is None:
        return None
    override = key_rates.get(key)
    if override is None:
        return None
    if not units_compatible(override.unit, item.unit):
        logger.debug(
            "user_rate_unit_incompatible",
            scope_item_id=item.id,
            pricing_key=key,
            override_unit=override.unit,
            line_unit=item.unit,
        )
        return None
    return override


# =============================================================================
# LINE PRICING
# =============================================================================


def price_line(
    item: ScopeLineItem,
    jurisdiction: JurisdictionRate,
    key_rates: Optional[Mapping[str, PricingOverride]] = None,
    material_rates: Optional[Mapping[str, PricingOverride]] = None,
) -> LineItemCost:
    """Price a single scope line.

    Args:
        item: Scope line.
        jurisdiction: Rates to apply.
        key_rates: Contractor all-in rates keyed by pricing key.
        material_rates: Contractor material rates keyed by material name.

    Returns:
        LineItemCost for the line.
    """
    quantity = _non_negative(item.quantity)
    labor_rate = jurisdiction.labor_rate_per_hour

    base: Dict[str, object] = {
        "scope_item_id": item.id,
        "segment": item.segment,
        "task": item.task,
        "material": item.material,
        "quantity": quantity,
        "unit": item.unit,
        "labor_rate": labor_rate,
    }

    user_rate = _find_user_rate(item, key_rates or {})
    if user_rate is not None:
        all_in = quantity * user_rate.rate
        labor_cost = all_in * BLENDED_LABOR_SHARE
        material_cost = all_in * BLENDED_MATERIAL_SHARE
        base.update(
            labor_hours=labor_cost / labor_rate,
            material_unit_cost=user_rate.rate * BLENDED_MATERIAL_SHARE,
            material_name=item.material or INCLUDED_IN_RATE,
            pricing_source=PricingSource.USER,
        )
        return _roll_up(base, labor_cost, material_cost, jurisdiction.tax_rate)

    matched = resolve_material_cost(item.material, material_rates)
    unit_cost = matched.cost
    if matched.source == PricingSource.DEFAULT:
        unit_cost *= jurisdiction.material_multiplier

    if item.labor_hours is not None:
        labor_hours = _non_negative(item.labor_hours)
    else:
        labor_hours = quantity / UNITS_PER_LABOR_HOUR

    base.update(
        labor_hours=labor_hours,
        material_unit_cost=unit_cost,
        material_name=matched.matched_name,
        pricing_source=matched.source,
    )
    return _roll_up(base, labor_hours * labor_rate, quantity * unit_cost, jurisdiction.tax_rate)


# =============================================================================
# ESTIMATE
# =============================================================================


def build_assumptions(jurisdiction: JurisdictionRate) -> EstimateAssumptions:
    """Echo the constants an estimate was computed with."""
    return EstimateAssumptions(
        jurisdiction=jurisdiction.code,
        labor_rate=jurisdiction.labor_rate_per_hour,
        material_multiplier=jurisdiction.material_multiplier,
        tax_rate=jurisdiction.tax_rate,
        tax_name=jurisdiction.tax_name,
        markup_percent=MARKUP_PERCENT * 100,
    )


def summarize(lines: Sequence[LineItemCost], assumptions: EstimateAssumptions) -> EstimateResult:
    """Aggregate priced lines into an EstimateResult."""
    total_labor = sum(line.labor_cost for line in lines)
    total_material = sum(line.material_cost for line in lines)
    subtotal = total_labor + total_material
    markup = sum(line.markup for line in lines)
    return EstimateResult(
        lines=list(lines),
        total_labor=total_labor,
        total_material=total_material,
        subtotal=subtotal,
        markup=markup,
        total_before_tax=subtotal + markup,
        tax=sum(line.tax for line in lines),
        grand_total=sum(line.total for line in lines),
        assumptions=assumptions,
    )


def compute_estimate(
    jurisdiction: Optional[str],
    scope_items: Iterable[ScopeLike],
    user_pricing: Optional[Mapping[str, OverrideLike]] = None,
) -> EstimateResult:
    """Price every scope line and roll up totals.

    Args:
        jurisdiction: Province/territory code; unknown codes use the default.
        scope_items: Scope lines (models or camelCase/snake_case mappings).
        user_pricing: Contractor rates keyed by pricing key or ``mat:<name>``.

    Returns:
        EstimateResult with one line per input item, in input order.

    Example:
        >>> result = compute_estimate("ON", [{
        ...     "id": "1", "task": "Install vinyl plank", "material": "vinyl plank",
        ...     "quantity": 500, "unit": "sqft"}])
        >>> round(result.grand_total, 2)
        3784.79
    """
    rates = rate_for(jurisdiction)
    key_rates, material_rates = split_user_pricing(user_pricing)

    lines: List[LineItemCost] = [
        price_line(_coerce_item(item), rates, key_rates, material_rates)
        for item in scope_items
    ]
    result = summarize(lines, build_assumptions(rates))

    logger.info(
        "estimate_computed",
        jurisdiction=rates.code,
        line_count=len(lines),
        user_priced_lines=sum(1 for line in lines if line.pricing_source == PricingSource.USER),
        grand_total=round(result.grand_total, 2),
    )
    return result


# =============================================================================
# MANUAL ADJUSTMENTS
# =============================================================================


def _accepted(value: Optional[float], allow_zero: bool) -> bool:
    if value is None or not math.isfinite(value):
        return False
    return value >= 0 if allow_zero else value > 0


def adjust_line(line: LineItemCost, adjustment: LineAdjustment, tax_rate: float) -> LineItemCost:
    """Apply a manual adjustment to one priced line and reprice it.

    Invalid values (non-positive quantity or unit cost, negative hours,
    blank name) are ignored. Changing quantity or hours, or setting a unit
    cost, marks the line as user-priced.
    """
    quantity = line.quantity
    labor_hours = line.labor_hours
    material_unit_cost = line.material_unit_cost
    material_name = line.material_name
    pricing_source = line.pricing_source

    if _accepted(adjustment.quantity, allow_zero=False):
        quantity = float(adjustment.quantity)
        if quantity != line.quantity:
            pricing_source = PricingSource.USER
    if _accepted(adjustment.labor_hours, allow_zero=True):
        labor_hours = float(adjustment.labor_hours)
        if labor_hours != line.labor_hours:
            pricing_source = PricingSource.USER
    if _accepted(adjustment.material_unit_cost, allow_zero=False):
        material_unit_cost = float(adjustment.material_unit_cost)
        pricing_source = PricingSource.USER
    if adjustment.material_name and adjustment.material_name.strip():
        material_name = adjustment.material_name.strip()

    base: Dict[str, object] = {
        "scope_item_id": line.scope_item_id,
        "segment": line.segment,
        "task": line.task,
        "material": line.material,
        "quantity": quantity,
        "unit": line.unit,
        "labor_hours": labor_hours,
        "labor_rate": line.labor_rate,
        "material_unit_cost": material_unit_cost,
        "material_name": material_name,
        "pricing_source": pricing_source,
    }
    return _roll_up(base, labor_hours * line.labor_rate, quantity * material_unit_cost, tax_rate)


def apply_line_adjustments(
    result: EstimateResult,
    adjustments: Optional[Mapping[str, Union[LineAdjustment, Mapping[str, object]]]],
) -> EstimateResult:
    """Apply per-line manual adjustments and recompute totals.

    Args:
        result: A computed estimate.
        adjustments: Adjustments keyed by scope item ID. IDs with no matching
            line are ignored.

    Returns:
        A new EstimateResult; the input is left untouched.
    """
    if not adjustments:
        return result

    tax_rate = result.assumptions.tax_rate
    lines: List[LineItemCost] = []
    applied = 0
    for line in result.lines:
        raw = adjustments.get(line.scope_item_id)
        if raw is None:
            lines.append(line)
            continue
        adjustment = raw if isinstance(raw, LineAdjustment) else LineAdjustment.model_validate(raw)
        lines.append(adjust_line(line, adjustment, tax_rate))
        applied += 1

    logger.info(
        "line_adjustments_applied",
        requested=len(adjustments),
        applied=applied,
    )
    return summarize(lines, result.assumptions)
