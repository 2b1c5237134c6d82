"""Estimate models for renocost.

This module defines the priced output of the estimate computer, the
provenance tags attached to each line, and the low/medium/high cost range
used for scenario pricing.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class PricingSource(str, Enum):
    """Which precedence tier supplied a line's costs."""

    USER = "user"
    DEFAULT = "default"


class PricePoint(str, Enum):
    """Tier selector for the fallback rate tables."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# =============================================================================
# COST RANGE MODEL (LOW/MEDIUM/HIGH)
# =============================================================================


class CostRange(BaseModel):
    """Three-tier cost for scenario pricing.

    - low: budget finishes and fast crews
    - medium: typical mid-range job
    - high: premium finishes or difficult access
    """

    low: float = Field(..., ge=0, description="Low price point")
    medium: float = Field(..., ge=0, description="Medium price point")
    high: float = Field(..., ge=0, description="High price point")

    @model_validator(mode="after")
    def validate_order(self) -> "CostRange":
        """Ensure low <= medium <= high."""
        if not (self.low <= self.medium <= self.high):
            raise ValueError(
                f"Cost range must be low <= medium <= high, got: "
                f"low={self.low}, medium={self.medium}, high={self.high}"
            )
        return self

    @classmethod
    def zero(cls) -> "CostRange":
        """Create a zero cost range."""
        return cls(low=0.0, medium=0.0, high=0.0)

    def for_point(self, point: PricePoint) -> float:
        """Value at a single price point."""
        return getattr(self, PricePoint(point).value)

    def __add__(self, other: "CostRange") -> "CostRange":
        """Add two cost ranges."""
        return CostRange(
            low=round(self.low + other.low, 2),
            medium=round(self.medium + other.medium, 2),
            high=round(self.high + other.high, 2)
        )

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {
            "low": self.low,
            "medium": self.medium,
            "high": self.high
        }


# =============================================================================
# MATERIAL RESOLUTION
# =============================================================================


class MaterialMatch(BaseModel):
    """Per-unit material cost and where it came from."""

    cost: float = Field(..., ge=0, description="Unit cost before any jurisdiction multiplier")
    source: PricingSource = Field(..., description="user or default")
    matched_name: str = Field(..., alias="matchedName", description="Override or baseline key that matched")

    class Config:
        populate_by_name = True
        frozen = True


# =============================================================================
# LINE ITEM COST MODEL
# =============================================================================


class LineItemCost(BaseModel):
    """Cost breakdown for a single scope line.

    ``total`` is always ``subtotal + markup + tax`` of this line alone.
    """

    # Identification (echoed from the scope item)
    scope_item_id: str = Field(..., alias="scopeItemId", description="Scope item ID")
    segment: str = Field(default="", description="Area or room label")
    task: str = Field(default="", description="Task description")
    material: str = Field(default="", description="Material description")
    quantity: float = Field(..., ge=0, description="Priced quantity")
    unit: str = Field(default="", description="Unit of measurement")

    # Labor
    labor_hours: float = Field(..., ge=0, alias="laborHours", description="Labor hours")
    labor_rate: float = Field(..., ge=0, alias="laborRate", description="Labor rate ($/hr)")
    labor_cost: float = Field(..., ge=0, alias="laborCost", description="labor_hours × labor_rate")

    # Material
    material_unit_cost: float = Field(
        ..., ge=0, alias="materialUnitCost", description="Resolved material cost per unit"
    )
    material_name: str = Field(..., alias="materialName", description="Resolved material label")
    material_cost: float = Field(
        ..., ge=0, alias="materialCost", description="quantity × material_unit_cost"
    )
    pricing_source: PricingSource = Field(
        ..., alias="pricingSource", description="Provenance of the line's rates"
    )

    # Roll-up
    subtotal: float = Field(..., ge=0, description="labor_cost + material_cost")
    markup: float = Field(..., ge=0, description="Flat markup on subtotal")
    tax: float = Field(..., ge=0, description="Tax on subtotal + markup")
    total: float = Field(..., ge=0, description="subtotal + markup + tax")

    class Config:
        populate_by_name = True
        frozen = True


# =============================================================================
# ESTIMATE RESULT
# =============================================================================


class EstimateAssumptions(BaseModel):
    """Constants used for an estimate, echoed back for auditability."""

    jurisdiction: str = Field(..., description="Jurisdiction code actually applied")
    labor_rate: float = Field(..., alias="laborRate", description="Labor rate ($/hr)")
    material_multiplier: float = Field(
        ..., alias="materialMultiplier", description="Baseline material multiplier"
    )
    tax_rate: float = Field(..., alias="taxRate", description="Tax rate (fraction)")
    tax_name: str = Field(..., alias="taxName", description="Tax display label")
    markup_percent: float = Field(..., alias="markupPercent", description="Markup in percent")

    class Config:
        populate_by_name = True
        frozen = True


class EstimateResult(BaseModel):
    """Priced estimate: all lines plus their summed totals."""

    lines: List[LineItemCost] = Field(default_factory=list, description="Priced lines in input order")
    total_labor: float = Field(..., alias="totalLabor", description="Σ labor_cost")
    total_material: float = Field(..., alias="totalMaterial", description="Σ material_cost")
    subtotal: float = Field(..., description="total_labor + total_material")
    markup: float = Field(..., description="Σ markup")
    total_before_tax: float = Field(..., alias="totalBeforeTax", description="subtotal + markup")
    tax: float = Field(..., description="Σ tax")
    grand_total: float = Field(..., alias="grandTotal", description="Σ line total")
    assumptions: EstimateAssumptions = Field(..., description="Constants used")

    class Config:
        populate_by_name = True
        frozen = True

    def get_line(self, scope_item_id: str):
        """Look up a line by scope item ID, or None."""
        for line in self.lines:
            if line.scope_item_id == scope_item_id:
                return line
        return None


class EstimateReview(BaseModel):
    """Sanity warnings raised against a computed estimate."""

    line_warnings: List[str] = Field(
        default_factory=list, alias="lineWarnings", description="Per-line warnings"
    )
    overlap_warnings: List[str] = Field(
        default_factory=list, alias="overlapWarnings", description="Possible double-counted work"
    )

    class Config:
        populate_by_name = True

    @property
    def has_warnings(self) -> bool:
        return bool(self.line_warnings or self.overlap_warnings)
