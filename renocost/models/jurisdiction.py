"""Jurisdiction rate model for renocost.

One record per supported province/territory: labor rate, material
multiplier and sales tax applied by the estimate computer.
"""

from pydantic import BaseModel, Field


class JurisdictionRate(BaseModel):
    """Per-region pricing constants.

    The material multiplier applies only to baseline-sourced material costs.
    User-entered rates are assumed to already reflect the local market.
    """

    code: str = Field(..., min_length=2, max_length=3, description="Jurisdiction code (e.g. 'ON')")
    labor_rate_per_hour: float = Field(
        ..., gt=0, alias="laborRatePerHour", description="Labor rate ($/hr)"
    )
    material_multiplier: float = Field(
        ..., ge=0, alias="materialMultiplier", description="Multiplier for baseline material costs"
    )
    tax_rate: float = Field(..., ge=0, lt=1, alias="taxRate", description="Sales tax as a fraction")
    tax_name: str = Field(..., min_length=1, alias="taxName", description="Tax display label")

    class Config:
        populate_by_name = True
        frozen = True
