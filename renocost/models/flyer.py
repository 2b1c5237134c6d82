"""Retail flyer models for renocost.

Flyer items are parsed upstream from scanned store flyers; the engine only
reads them when ranking candidates against a scope line.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class FlyerItem(BaseModel):
    """A single priced product from a store flyer."""

    id: Optional[str] = Field(default=None, description="Flyer item ID")
    name: str = Field(..., description="Product name as printed")
    unit_label: Optional[str] = Field(
        default=None, alias="unitLabel", description="Unit label (e.g. 'per sq ft', 'each')"
    )
    price: float = Field(..., ge=0, description="Advertised price")
    promo_notes: Optional[str] = Field(
        default=None, alias="promoNotes", description="Promotion details"
    )
    normalized_tokens: Optional[List[str]] = Field(
        default=None,
        alias="normalizedTokens",
        description="Tokens precomputed when the flyer was scanned",
    )
    store_name: Optional[str] = Field(default=None, alias="storeName", description="Retailer")
    release_date: Optional[datetime] = Field(
        default=None, alias="releaseDate", description="Flyer release date"
    )

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("normalized_tokens", mode="before")
    @classmethod
    def coerce_tokens(cls, v):
        """Stored token columns are loosely typed JSON; anything but a list is ignored."""
        if v is None:
            return None
        if not isinstance(v, (list, tuple)):
            return None
        return [str(t) for t in v if t is not None]


class FlyerMatch(BaseModel):
    """A flyer item ranked against a scope line."""

    item: FlyerItem = Field(..., description="Matched flyer item")
    match_score: float = Field(..., gt=0, alias="matchScore", description="Token overlap score")

    class Config:
        populate_by_name = True
        frozen = True
