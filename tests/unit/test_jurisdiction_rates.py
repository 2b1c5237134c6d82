"""Unit tests for the jurisdiction rate table."""

import pytest
from pydantic import ValidationError as PydanticValidationError
from structlog.testing import capture_logs

from renocost.models.jurisdiction import JurisdictionRate
from renocost.services import jurisdiction_rates
from renocost.services.jurisdiction_rates import (
    JURISDICTION_RATES,
    is_supported,
    rate_for,
    supported_jurisdictions,
)


# =============================================================================
# TABLE CONTENTS
# =============================================================================


class TestRateTable:
    """Static table invariants."""

    @pytest.mark.parametrize("code", list(JURISDICTION_RATES.keys()))
    def test_every_jurisdiction_has_sane_rates(self, code):
        """Every record has a positive labor rate and tax in [0, 1)."""
        rate = rate_for(code)
        assert rate.code == code
        assert rate.labor_rate_per_hour > 0
        assert 0 <= rate.tax_rate < 1
        assert rate.material_multiplier >= 0
        assert rate.tax_name

    def test_ontario_rates(self):
        """Ontario: $55/hr, 1.05 material multiplier, 13% HST."""
        rate = rate_for("ON")
        assert rate.labor_rate_per_hour == 55.0
        assert rate.material_multiplier == 1.05
        assert rate.tax_rate == 0.13
        assert rate.tax_name == "HST"

    def test_quebec_combined_tax(self):
        """Quebec carries QST+GST at 14.975%."""
        rate = rate_for("QC")
        assert rate.tax_rate == pytest.approx(0.14975)
        assert rate.tax_name == "QST+GST"

    def test_supported_jurisdictions_lists_provinces_and_territories(self):
        """Ten provinces plus three territories."""
        codes = supported_jurisdictions()
        assert len(codes) == 13
        assert codes[0] == "ON"
        assert {"NT", "NU", "YT"} <= set(codes)

    def test_table_is_read_only(self):
        """The module-level table cannot be mutated."""
        with pytest.raises(TypeError):
            JURISDICTION_RATES["XX"] = rate_for("ON")

    def test_records_are_frozen(self):
        """Rate records reject attribute assignment."""
        rate = rate_for("AB")
        with pytest.raises(PydanticValidationError):
            rate.tax_rate = 0.5

    def test_record_rejects_tax_of_one_or_more(self):
        """tax_rate must be a fraction below 1."""
        with pytest.raises(PydanticValidationError):
            JurisdictionRate(
                code="XX",
                labor_rate_per_hour=50,
                material_multiplier=1.0,
                tax_rate=1.0,
                tax_name="TAX",
            )


# =============================================================================
# LOOKUP BEHAVIOR
# =============================================================================


class TestRateFor:
    """rate_for lookups and soft defaults."""

    def test_lookup_is_case_and_whitespace_insensitive(self):
        """' qc ' resolves to Quebec."""
        assert rate_for(" qc ").code == "QC"

    @pytest.mark.parametrize("code", ["ZZ", "", None, "Ontario"])
    def test_unknown_code_returns_default(self, code):
        """Unknown, empty or missing codes fall back to Ontario."""
        assert rate_for(code) == rate_for("ON")

    def test_unknown_code_logs_fallback(self):
        """The fallback is logged at debug with the requested code."""
        with capture_logs() as logs:
            rate_for("ZZ")
        events = [entry for entry in logs if entry["event"] == "jurisdiction_unknown_using_default"]
        assert len(events) == 1
        assert events[0]["requested"] == "ZZ"
        assert events[0]["default"] == "ON"

    def test_configured_default_jurisdiction(self, monkeypatch):
        """A supported configured default replaces Ontario."""
        monkeypatch.setattr(jurisdiction_rates.settings, "default_jurisdiction", "bc")
        assert rate_for("ZZ").code == "BC"

    def test_unsupported_configured_default_is_ignored(self, monkeypatch):
        """An unsupported configured default falls back to Ontario."""
        monkeypatch.setattr(jurisdiction_rates.settings, "default_jurisdiction", "XX")
        assert rate_for("ZZ").code == "ON"

    def test_is_supported(self):
        """Known codes are supported in any case; others are not."""
        assert is_supported("nu")
        assert not is_supported("CA")
        assert not is_supported(None)
