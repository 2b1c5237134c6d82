"""Scope input models for renocost.

These are the plain records a caller hands to the engine: scope-of-work
line items, the contractor's own pricing overrides and per-line manual
adjustments applied after a first pass.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ScopeLineItem(BaseModel):
    """A unit of renovation work.

    Quantity is not range-checked here; see
    :func:`renocost.validators.validate_scope_items` for caller-side checks.
    """

    id: str = Field(..., description="Scope item ID")
    segment: str = Field(default="", description="Area or room label")
    task: str = Field(default="", description="Free-text task description")
    material: str = Field(default="", description="Free-text material description")
    quantity: float = Field(..., description="Quantity in `unit`")
    unit: str = Field(default="", description="Unit label (sqft, linear ft, each, ...)")
    labor_hours: Optional[float] = Field(
        default=None, alias="laborHours", description="Estimated labor hours, if known"
    )

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("segment", "task", "material", "unit", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Persistence rows may carry nulls for optional text columns."""
        return "" if v is None else v


class PricingOverride(BaseModel):
    """A contractor-entered rate.

    Keyed in the override map either by pricing key (``flooring_sqft``) or
    by ``mat:<material name>``.
    """

    rate: float = Field(..., ge=0, description="Rate per unit")
    unit: str = Field(default="sqft", description="Unit the rate is quoted in")

    class Config:
        frozen = True

    @field_validator("unit", mode="before")
    @classmethod
    def default_blank_unit(cls, v):
        if v is None or not str(v).strip():
            return "sqft"
        return str(v).strip()


class LineAdjustment(BaseModel):
    """Manual edits to a computed line.

    Any field may be absent. Values outside the accepted range are ignored
    when the adjustment is applied rather than rejected here.
    """

    quantity: Optional[float] = Field(default=None, description="Replacement quantity")
    material_unit_cost: Optional[float] = Field(
        default=None, alias="materialUnitCost", description="Replacement material cost per unit"
    )
    labor_hours: Optional[float] = Field(
        default=None, alias="laborHours", description="Replacement labor hours"
    )
    material_name: Optional[str] = Field(
        default=None, alias="materialName", description="Replacement material label"
    )

    class Config:
        populate_by_name = True
        frozen = True
