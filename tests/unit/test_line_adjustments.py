"""Unit tests for manual line adjustments."""

import pytest
from structlog.testing import capture_logs

from renocost.models.estimate import PricingSource
from renocost.models.scope import LineAdjustment
from renocost.services.estimate_service import apply_line_adjustments, compute_estimate


@pytest.fixture
def vinyl_estimate(vinyl_line):
    """Ontario default-priced vinyl plank estimate."""
    return compute_estimate("ON", [vinyl_line])


class TestApplyLineAdjustments:
    """Repricing after manual edits."""

    def test_quantity_change_reprices_and_marks_user(self, vinyl_estimate):
        result = apply_line_adjustments(vinyl_estimate, {"floor-1": {"quantity": 600}})
        line = result.lines[0]
        assert line.quantity == 600
        assert line.material_cost == pytest.approx(2835.0)
        assert line.labor_cost == pytest.approx(550.0)
        assert line.pricing_source == PricingSource.USER
        assert result.grand_total == pytest.approx(line.total)

    def test_unit_cost_change(self, vinyl_estimate):
        result = apply_line_adjustments(
            vinyl_estimate, {"floor-1": LineAdjustment(material_unit_cost=3.0)}
        )
        line = result.lines[0]
        assert line.material_cost == pytest.approx(1500.0)
        assert line.pricing_source == PricingSource.USER

    def test_zero_hours_are_accepted(self, vinyl_estimate):
        """Zero hours is a valid edit; the line becomes labor-free."""
        line = apply_line_adjustments(vinyl_estimate, {"floor-1": {"laborHours": 0}}).lines[0]
        assert line.labor_hours == 0
        assert line.labor_cost == 0
        assert line.pricing_source == PricingSource.USER

    def test_invalid_values_are_ignored(self, vinyl_estimate):
        adjustment = {
            "quantity": -1,
            "materialUnitCost": 0,
            "laborHours": -2,
            "materialName": "   ",
        }
        line = apply_line_adjustments(vinyl_estimate, {"floor-1": adjustment}).lines[0]
        original = vinyl_estimate.lines[0]
        assert line.total == pytest.approx(original.total)
        assert line.material_name == original.material_name
        assert line.pricing_source == PricingSource.DEFAULT

    def test_same_quantity_keeps_source(self, vinyl_estimate):
        line = apply_line_adjustments(vinyl_estimate, {"floor-1": {"quantity": 500}}).lines[0]
        assert line.pricing_source == PricingSource.DEFAULT

    def test_rename_only_keeps_source(self, vinyl_estimate):
        line = apply_line_adjustments(
            vinyl_estimate, {"floor-1": {"materialName": " Premium LVP "}}
        ).lines[0]
        assert line.material_name == "Premium LVP"
        assert line.pricing_source == PricingSource.DEFAULT
        assert line.total == pytest.approx(vinyl_estimate.lines[0].total)

    def test_markup_and_tax_follow_the_edit(self, vinyl_estimate):
        line = apply_line_adjustments(vinyl_estimate, {"floor-1": {"materialUnitCost": 3.0}}).lines[0]
        assert line.subtotal == pytest.approx(2050.0)
        assert line.markup == pytest.approx(307.5)
        assert line.tax == pytest.approx(2357.5 * 0.13)

    def test_unknown_ids_and_other_lines_untouched(self, mixed_scope):
        estimate = compute_estimate("ON", mixed_scope)
        result = apply_line_adjustments(
            estimate, {"trim-1": {"quantity": 240}, "missing": {"quantity": 1}}
        )
        assert result.get_line("floor-1") == estimate.get_line("floor-1")
        assert result.get_line("trim-1").material_cost == pytest.approx(882.0)
        assert result.grand_total == pytest.approx(sum(l.total for l in result.lines))

    def test_input_is_not_mutated(self, vinyl_estimate):
        before = vinyl_estimate.model_dump_json()
        apply_line_adjustments(vinyl_estimate, {"floor-1": {"quantity": 900}})
        assert vinyl_estimate.model_dump_json() == before

    def test_no_adjustments_returns_same_result(self, vinyl_estimate):
        assert apply_line_adjustments(vinyl_estimate, {}) is vinyl_estimate
        assert apply_line_adjustments(vinyl_estimate, None) is vinyl_estimate

    def test_logs_applied_count(self, vinyl_estimate):
        with capture_logs() as logs:
            apply_line_adjustments(vinyl_estimate, {"floor-1": {"quantity": 10}, "x": {}})
        event = next(e for e in logs if e["event"] == "line_adjustments_applied")
        assert event["requested"] == 2
        assert event["applied"] == 1
