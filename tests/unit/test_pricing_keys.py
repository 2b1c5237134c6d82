"""Unit tests for pricing-key inference and unit helpers."""

import pytest

from renocost.services.pricing_keys import (
    DRYWALL_TAPING_SQFT,
    FLOORING_SQFT,
    TILING_SQFT,
    WALLS_SQFT,
    infer_pricing_key,
    is_area_unit,
    units_compatible,
)


class TestAreaUnits:
    """Area unit detection and compatibility."""

    @pytest.mark.parametrize("unit", ["sqft", "SqFt", "sq ft", "sqft (floor)"])
    def test_area_units(self, unit):
        assert is_area_unit(unit)

    @pytest.mark.parametrize("unit", ["each", "linear ft", "room", "", None])
    def test_non_area_units(self, unit):
        assert not is_area_unit(unit)

    def test_identical_units_are_compatible(self):
        """Any unit is compatible with itself."""
        assert units_compatible("each", "each")

    def test_area_spellings_are_compatible(self):
        """'sq ft' and 'sqft' both denote area."""
        assert units_compatible("sq ft", "sqft")
        assert units_compatible("sqft", "SQFT")

    def test_different_units_are_incompatible(self):
        assert not units_compatible("each", "sqft")
        assert not units_compatible("linear ft", "lf")


class TestInferPricingKey:
    """Ordered keyword rules for area lines."""

    def test_vinyl_plank_is_flooring(self):
        assert infer_pricing_key("Install vinyl plank", "vinyl plank", "sqft") == FLOORING_SQFT

    def test_painting_walls(self):
        assert infer_pricing_key("Paint walls", "eggshell paint", "sqft") == WALLS_SQFT

    def test_drywall_without_taping_is_walls(self):
        """Hanging drywall prices as wall surface."""
        assert infer_pricing_key("Hang drywall", "1/2in board", "sq ft") == WALLS_SQFT

    def test_taping_task_is_drywall_taping(self):
        """Taping vocabulary in the task excludes the walls rule."""
        assert infer_pricing_key("Tape and mud drywall", "compound", "sqft") == DRYWALL_TAPING_SQFT

    def test_mud_only_is_drywall_taping(self):
        assert infer_pricing_key("Skim coat", "mud", "sqft") == DRYWALL_TAPING_SQFT

    def test_tile_backsplash(self):
        assert infer_pricing_key("Tile backsplash", "ceramic tile", "sqft") == TILING_SQFT

    def test_flooring_rule_beats_tiling(self):
        """A tiled floor matches the flooring rule first."""
        assert infer_pricing_key("Tile bathroom floor", "porcelain tile", "sqft") == FLOORING_SQFT

    def test_walls_rule_beats_tiling(self):
        """Wall tile matches the walls rule first."""
        assert infer_pricing_key("Tile shower wall", "subway tile", "sqft") == WALLS_SQFT

    def test_case_insensitive(self):
        assert infer_pricing_key("INSTALL LAMINATE", "", "SQFT") == FLOORING_SQFT

    def test_non_area_unit_has_no_key(self):
        """Only area-measured lines get a key."""
        assert infer_pricing_key("Install vinyl plank", "vinyl plank", "each") is None

    def test_unmatched_text_has_no_key(self):
        assert infer_pricing_key("Install pot lights", "LED", "sqft") is None

    def test_none_inputs(self):
        assert infer_pricing_key(None, None, None) is None
