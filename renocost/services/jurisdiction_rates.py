"""Jurisdiction Rate Table for renocost.

Static labor rate, material multiplier and sales tax per Canadian province
or territory. Lookups never fail: an unknown code resolves to the default
jurisdiction so an estimate can always be produced.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

import structlog

from renocost.config.settings import settings
from renocost.models.jurisdiction import JurisdictionRate

logger = structlog.get_logger(__name__)


# =============================================================================
# RATE TABLE
# =============================================================================

DEFAULT_JURISDICTION = "ON"


def _rate(code: str, labor: float, multiplier: float, tax: float, tax_name: str) -> JurisdictionRate:
    return JurisdictionRate(
        code=code,
        labor_rate_per_hour=labor,
        material_multiplier=multiplier,
        tax_rate=tax,
        tax_name=tax_name,
    )


JURISDICTION_RATES: Mapping[str, JurisdictionRate] = MappingProxyType({
    "ON": _rate("ON", 55.0, 1.05, 0.13, "HST"),
    "BC": _rate("BC", 52.0, 1.08, 0.12, "GST+PST"),
    "AB": _rate("AB", 50.0, 1.00, 0.05, "GST"),
    "QC": _rate("QC", 48.0, 1.03, 0.14975, "QST+GST"),
    "SK": _rate("SK", 45.0, 0.98, 0.11, "GST+PST"),
    "MB": _rate("MB", 46.0, 0.99, 0.12, "GST+PST"),
    "NS": _rate("NS", 48.0, 1.02, 0.15, "HST"),
    "NB": _rate("NB", 47.0, 1.01, 0.15, "HST"),
    "NL": _rate("NL", 46.0, 1.04, 0.15, "HST"),
    "PE": _rate("PE", 47.0, 1.02, 0.15, "HST"),
    # Territories: remote freight and labor premiums
    "NT": _rate("NT", 65.0, 1.25, 0.05, "GST"),
    "NU": _rate("NU", 70.0, 1.30, 0.05, "GST"),
    "YT": _rate("YT", 58.0, 1.15, 0.05, "GST"),
})


# =============================================================================
# LOOKUPS
# =============================================================================


def normalize_code(code: Optional[str]) -> str:
    """Trim and upper-case a jurisdiction code; None becomes ''."""
    return (code or "").strip().upper()


def default_jurisdiction() -> JurisdictionRate:
    """The jurisdiction used for unknown codes.

    Honors ``RENOCOST_DEFAULT_JURISDICTION`` when it names a supported code.
    """
    configured = normalize_code(settings.default_jurisdiction)
    if configured in JURISDICTION_RATES:
        return JURISDICTION_RATES[configured]
    return JURISDICTION_RATES[DEFAULT_JURISDICTION]


def is_supported(code: Optional[str]) -> bool:
    """Check whether a code has its own rate record."""
    return normalize_code(code) in JURISDICTION_RATES


def supported_jurisdictions() -> List[str]:
    """Supported codes in table order."""
    return list(JURISDICTION_RATES.keys())


def rate_for(code: Optional[str]) -> JurisdictionRate:
    """Get the rate record for a jurisdiction code.

    Args:
        code: Province/territory code, any case.

    Returns:
        The matching JurisdictionRate, or the default jurisdiction's record
        when the code is unknown or empty.
    """
    normalized = normalize_code(code)
    rate = JURISDICTION_RATES.get(normalized)
    if rate is not None:
        return rate

    fallback = default_jurisdiction()
    logger.debug(
        "jurisdiction_unknown_using_default",
        requested=code,
        default=fallback.code,
    )
    return fallback
