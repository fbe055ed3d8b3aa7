# airindex: national air quality index calculations
# Copyright (C) 2025 Ruaraidh Dobson, South London Scientific

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Tests for airindex.base - formulas, tables and unit handling.

Tests cover:
- Breakpoint interpolation and out-of-table signals
- The NEPM ratio formula
- Exponential risk terms and alternates groups
- Rounding and truncation helpers
- Table construction and validation
- Unit conversion and pollutant name standardisation
"""

import math

import pytest

from airindex.base import (
    BreakpointInterval,
    Pollutant,
    check_concentration,
    ensure_ugm3,
    exponential_term,
    interpolate,
    is_banded,
    make_bands,
    make_stepped_table,
    make_table,
    ppb_to_ugm3,
    ratio_index,
    risk_score,
    round_half_away,
    round_places,
    standardise_pollutant,
    truncate,
    ugm3_to_ppb,
    validate_table,
)
from airindex.exceptions import AboveTable, BelowTable, InvalidInput, OutOfTable

CAQI_NO2 = make_table((0, 25, 50, 75, 100), (0, 50, 100, 200, 400))

# =============================================================================
# Interpolation Tests
# =============================================================================


class TestInterpolate:
    """Tests for piecewise-linear breakpoint interpolation."""

    def test_interpolates_within_interval(self):
        """Test a value inside the second interval."""
        # 25 + (50 - 25) / (100 - 50) * (60 - 50) = 30
        assert interpolate(CAQI_NO2, 60) == 30

    def test_zero_concentration(self):
        """Test that zero maps to the bottom of the table."""
        assert interpolate(CAQI_NO2, 0) == 0

    def test_boundary_uses_first_matching_interval(self):
        """Test that a shared boundary gives the same value from either side."""
        assert interpolate(CAQI_NO2, 50) == 25
        assert interpolate(CAQI_NO2, 400) == 100

    def test_rounds_half_away_from_zero(self):
        """Test that x.5 results round up rather than to even."""
        table = make_table((0, 25, 50), (0, 60, 120))
        # 25 + 25 / 60 * 30 = 37.5
        assert interpolate(table, 90) == 38

    def test_above_table(self):
        """Test that values above the last bound raise AboveTable."""
        with pytest.raises(AboveTable) as excinfo:
            interpolate(CAQI_NO2, 450)
        assert excinfo.value.concentration == 450
        assert excinfo.value.bound == 400

    def test_below_threshold_table(self):
        """Test that threshold tables raise BelowTable under their first bound."""
        table = make_table((200, 300), (1130, 2260))
        with pytest.raises(BelowTable):
            interpolate(table, 1000)

    def test_out_of_table_is_not_a_value_error(self):
        """Test that lookup signals are separate from caller-facing errors."""
        with pytest.raises(OutOfTable):
            interpolate(CAQI_NO2, 1000)
        assert not issubclass(OutOfTable, ValueError)

    def test_banded_table(self):
        """Test that banded tables report the band level."""
        table = make_bands((1, 2, 3), (10, 20, float("inf")))
        assert interpolate(table, 0) == 1
        assert interpolate(table, 10) == 1
        assert interpolate(table, 10.5) == 2
        assert interpolate(table, 5000) == 3

    @pytest.mark.parametrize("value", [-1, -0.001, math.nan, math.inf])
    def test_rejects_invalid_concentration(self, value):
        """Test that negative and non-finite concentrations are rejected."""
        with pytest.raises(InvalidInput):
            interpolate(CAQI_NO2, value)


# =============================================================================
# Ratio Formula Tests
# =============================================================================


class TestRatioIndex:
    """Tests for the NEPM ratio formula."""

    def test_at_standard_is_100(self):
        """Test that a concentration equal to the standard gives exactly 100."""
        assert ratio_index(10310.4, 10310.4) == 100

    def test_zero_concentration(self):
        """Test that zero gives zero."""
        assert ratio_index(10310.4, 0) == 0

    def test_no_upper_bound(self):
        """Test that the ratio keeps growing above the standard."""
        assert ratio_index(50, 150) == 300

    def test_rounding(self):
        """Test that the percentage is rounded half away from zero."""
        # 12.5 / 25 * 100 = 50; 12.625 / 25 * 100 = 50.5
        assert ratio_index(25, 12.5) == 50
        assert ratio_index(25, 12.625) == 51

    @pytest.mark.parametrize("standard", [0, -5])
    def test_rejects_non_positive_standard(self, standard):
        """Test that zero and negative standards are rejected."""
        with pytest.raises(InvalidInput):
            ratio_index(standard, 10)

    def test_rejects_negative_concentration(self):
        """Test that negative concentrations are rejected."""
        with pytest.raises(InvalidInput):
            ratio_index(50, -1)

    def test_rejects_overflowing_ratio(self):
        """Test that a percentage too large for a float is rejected."""
        with pytest.raises(InvalidInput, match="too large"):
            ratio_index(25, 1.7e308)


# =============================================================================
# Exponential Risk Tests
# =============================================================================


class TestRiskScore:
    """Tests for exponential AQHI risk terms."""

    def test_term_at_zero(self):
        """Test that zero concentration adds no risk."""
        assert exponential_term(0.000487, 0) == 0

    def test_term_formula(self):
        """Test the term against 100 * (exp(beta * c) - 1)."""
        assert exponential_term(0.001, 100) == pytest.approx(100 * (math.e**0.1 - 1))

    def test_term_overflow_is_infinite(self):
        """Test that an exponent beyond float range gives infinity."""
        assert exponential_term(0.000487, 2e6) == math.inf

    def test_infinite_terms_sum_to_infinity(self):
        """Test that one overflowing term makes the total infinite."""
        total = risk_score({"a": 10, "b": 2e6}, {"a": 0.001, "b": 0.000487})
        assert total == math.inf

    def test_terms_are_summed(self):
        """Test that independent pollutants are added together."""
        coefficients = {"a": 0.001, "b": 0.002}
        total = risk_score({"a": 100, "b": 50}, coefficients)
        assert total == pytest.approx(2 * exponential_term(0.001, 100))

    def test_alternates_take_the_max(self):
        """Test that an alternates group contributes only its largest term."""
        coefficients = {"a": 0.001, "b": 0.002, "c": 0.001}
        total = risk_score(
            {"a": 100, "b": 100, "c": 100}, coefficients, [frozenset({"a", "b"})]
        )
        expected = exponential_term(0.002, 100) + exponential_term(0.001, 100)
        assert total == pytest.approx(expected)

    def test_absent_pollutants_add_nothing(self):
        """Test that coefficients without a concentration are skipped."""
        total = risk_score({"a": 100}, {"a": 0.001, "b": 0.002})
        assert total == pytest.approx(exponential_term(0.001, 100))

    def test_all_zero(self):
        """Test that all-zero concentrations give zero risk."""
        assert risk_score({"a": 0, "b": 0}, {"a": 0.001, "b": 0.002}) == 0

    def test_rejects_negative_concentration(self):
        """Test that negative concentrations are rejected."""
        with pytest.raises(InvalidInput):
            risk_score({"a": -1}, {"a": 0.001})


# =============================================================================
# Numeric Helper Tests
# =============================================================================


class TestNumericHelpers:
    """Tests for rounding, truncation and concentration validation."""

    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3), (3.5, 4), (0.5, 1), (2.4999, 2), (-2.5, -3), (37.5, 38)],
    )
    def test_round_half_away(self, value, expected):
        """Test round-half-away-from-zero."""
        assert round_half_away(value) == expected

    def test_truncate(self):
        """Test that truncation drops digits rather than rounding."""
        assert truncate(9.05, 1) == 9.0
        assert truncate(0.0589, 3) == 0.058
        assert truncate(54.9, 0) == 54.0

    def test_truncate_keeps_exact_decimals(self):
        """Test that exact decimal values are not pushed down a step."""
        assert truncate(0.058, 3) == 0.058

    def test_round_places(self):
        """Test decimal rounding with halves away from zero."""
        assert round_places(16.5, 0) == 17.0
        assert round_places(12.5, 0) == 13.0
        assert round_places(0.125, 2) == 0.13

    def test_check_concentration_accepts_numbers(self):
        """Test that ints and floats pass through as floats."""
        assert check_concentration(0) == 0.0
        assert check_concentration(12.5) == 12.5

    @pytest.mark.parametrize("value", [True, None, "high", "60", b"60", [1], -3])
    def test_check_concentration_rejects(self, value):
        """Test that booleans, strings, non-numbers and negatives are rejected."""
        with pytest.raises(InvalidInput):
            check_concentration(value)

    def test_invalid_input_is_value_error(self):
        """Test that errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            check_concentration(math.nan)


# =============================================================================
# Table Construction Tests
# =============================================================================


class TestTables:
    """Tests for building and validating breakpoint tables."""

    def test_make_table_shares_endpoints(self):
        """Test that neighbouring intervals share both endpoints."""
        assert CAQI_NO2[1] == BreakpointInterval(25, 50, 50, 100)
        assert CAQI_NO2[2] == BreakpointInterval(50, 75, 100, 200)

    def test_make_table_length_mismatch(self):
        """Test that mismatched point lists are rejected."""
        with pytest.raises(ValueError, match="matching"):
            make_table((0, 50), (0, 10, 20))

    def test_make_table_decreasing_concentration(self):
        """Test that decreasing concentrations are rejected."""
        with pytest.raises(ValueError):
            make_table((0, 50, 100), (0, 20, 10))

    def test_validate_table_gap(self):
        """Test that gaps between intervals are rejected."""
        table = (BreakpointInterval(0, 50, 0, 10), BreakpointInterval(50, 100, 11, 20))
        with pytest.raises(ValueError, match="Gap or overlap"):
            validate_table(table)

    def test_validate_table_decreasing_index(self):
        """Test that an index that drops between intervals is rejected."""
        table = (BreakpointInterval(0, 50, 0, 10), BreakpointInterval(40, 100, 10, 20))
        with pytest.raises(ValueError, match="Index decreases"):
            validate_table(table)

    def test_validate_table_empty(self):
        """Test that empty tables are rejected."""
        with pytest.raises(ValueError, match="empty"):
            validate_table(())

    def test_make_stepped_table_bridges_steps(self):
        """Test that a bridging interval joins rows one step apart."""
        table = make_stepped_table([(0.0, 9.0, 0, 50), (9.1, 35.4, 51, 100)])
        assert len(table) == 3
        assert table[1] == BreakpointInterval(50, 51, 9.0, 9.1)
        validate_table(table)

    def test_make_stepped_table_keeps_published_values(self):
        """Test that each published row keeps its own endpoints."""
        table = make_stepped_table([(0, 54, 0, 50), (55, 154, 51, 100)])
        assert interpolate(table, 54) == 50
        assert interpolate(table, 55) == 51
        assert interpolate(table, 154) == 100

    def test_make_stepped_table_contiguous_rows(self):
        """Test that rows which already touch get no bridge."""
        table = make_stepped_table([(0, 50, 0, 25), (50, 100, 25, 50)])
        assert table == make_table((0, 25, 50), (0, 50, 100))

    def test_make_bands(self):
        """Test that bands run from the previous upper bound."""
        table = make_bands((1, 2), (10, 20))
        assert table[0] == BreakpointInterval(1, 1, 0, 10)
        assert table[1] == BreakpointInterval(2, 2, 10, 20)
        assert is_banded(table)
        assert not is_banded(CAQI_NO2)


# =============================================================================
# Unit Conversion Tests
# =============================================================================


class TestUnitConversion:
    """Tests for unit conversion functions."""

    def test_ppb_to_ugm3_no2(self):
        """Test ppb to µg/m³ conversion for NO2."""
        assert ppb_to_ugm3(100, "NO2") == pytest.approx(188.16)

    def test_ppb_to_ugm3_so2(self):
        """Test ppb to µg/m³ conversion for SO2."""
        # SO2: MW = 64.07, 64.07 / 24.45 = 2.6204
        assert ppb_to_ugm3(100, "SO2") == pytest.approx(262.04)

    def test_ppb_to_ugm3_accepts_enum(self):
        """Test that Pollutant members are accepted."""
        assert ppb_to_ugm3(1, Pollutant.O3) == pytest.approx(1.9632)

    def test_ppb_factor_property(self):
        """Test that gases expose their factor and particulates do not."""
        assert Pollutant.CO.ppb_factor == 1.1456
        assert Pollutant.PM10.ppb_factor is None
        assert Pollutant.PB.unit == "µg/m³"

    def test_ppb_to_ugm3_unsupported_pollutant(self):
        """Test error for unsupported pollutant."""
        with pytest.raises(ValueError, match="Cannot convert PM2.5"):
            ppb_to_ugm3(100, "PM2.5")

    def test_ugm3_to_ppb_roundtrip(self):
        """Test that conversion is reversible."""
        back = ugm3_to_ppb(ppb_to_ugm3(100.0, "NO2"), "NO2")
        assert back == pytest.approx(100.0)

    def test_ensure_ugm3_already_correct(self):
        """Test that values already in µg/m³ are unchanged."""
        assert ensure_ugm3(50.0, "PM2.5", "ug/m3", warn=False) == 50.0

    def test_ensure_ugm3_from_ppm_warns(self):
        """Test conversion from ppm (common for CO) with a warning."""
        with pytest.warns(UserWarning, match="Converting"):
            result = ensure_ugm3(1.0, "CO", "ppm")
        assert result == pytest.approx(1145.6)

    def test_ensure_ugm3_from_mgm3(self):
        """Test conversion from mg/m³."""
        assert ensure_ugm3(1.0, "CO", "mg/m3", warn=False) == 1000.0

    def test_ensure_ugm3_unknown_unit(self):
        """Test error for an unknown unit."""
        with pytest.raises(ValueError, match="Unknown unit"):
            ensure_ugm3(1.0, "NO2", "grains per gallon")


# =============================================================================
# Pollutant Standardisation Tests
# =============================================================================


class TestPollutantStandardisation:
    """Tests for pollutant name standardisation."""

    def test_already_standard(self):
        """Test that standard names and members pass through."""
        assert standardise_pollutant("no2") is Pollutant.NO2
        assert standardise_pollutant(Pollutant.PM10) is Pollutant.PM10

    def test_case_variants(self):
        """Test that case is ignored."""
        assert standardise_pollutant("PM10") is Pollutant.PM10
        assert standardise_pollutant("NO2") is Pollutant.NO2

    def test_name_variants(self):
        """Test that common names are recognised."""
        assert standardise_pollutant("PM2.5") is Pollutant.PM2_5
        assert standardise_pollutant("pm25") is Pollutant.PM2_5
        assert standardise_pollutant("Ozone") is Pollutant.O3
        assert standardise_pollutant("Sulphur Dioxide") is Pollutant.SO2
        assert standardise_pollutant("lead") is Pollutant.PB

    def test_unknown_pollutant(self):
        """Test that unknown names return None."""
        assert standardise_pollutant("benzene") is None
