# airindex: national air quality index calculations
# Copyright (C) 2025 Ruaraidh Dobson, South London Scientific

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Base types, constants, and formulas for index calculations.

This module provides the foundation shared by every scale:
pollutant definitions and unit conversion, pollutant name standardisation,
and the three computation strategies (breakpoint interpolation, the NEPM
ratio formula and the exponential health-risk terms used by AQHI scales).
"""

import logging
import math
import warnings
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Iterable, Mapping, NamedTuple, Sequence

from .exceptions import AboveTable, BelowTable, InvalidInput

logger = logging.getLogger(__name__)

# =============================================================================
# Pollutants
# =============================================================================


class Pollutant(str, Enum):
    """Chemical species understood by the index scales."""

    CO = "co"
    NH3 = "nh3"
    NO = "no"
    NO2 = "no2"
    O3 = "o3"
    PB = "pb"
    SO2 = "so2"
    PM10 = "pm10"
    PM2_5 = "pm2_5"

    @property
    def unit(self) -> str:
        """Unit every concentration is supplied in."""
        return "µg/m³"

    @property
    def ppb_factor(self) -> float | None:
        """µg/m³ equivalent of 1 ppb, or None for particulates and lead."""
        return PPB_TO_UGM3.get(self)

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Unit Conversion
# =============================================================================

# Molecular weights for gas pollutants (g/mol)
# Sources:
#   - NIST WebBook: https://webbook.nist.gov/chemistry/
#   - PubChem: https://pubchem.ncbi.nlm.nih.gov/
MOLECULAR_WEIGHTS = {
    Pollutant.CO: 28.01,
    Pollutant.NH3: 17.031,
    Pollutant.NO: 30.006,
    Pollutant.NO2: 46.0055,
    Pollutant.O3: 48.00,
    Pollutant.SO2: 64.07,
}

# Molar volume at 25°C (298.15K), 1 atm, rounded as is usual in air quality
# work. Concentration (µg/m³) = molecular weight * concentration (ppb) / 24.45
MOLAR_VOLUME = 24.45

# 1 ppb expressed in µg/m³ at 25°C, 1 atm. These are fixed constants; the
# published ppm/ppb standards in the scale modules are converted with them.
PPB_TO_UGM3 = {
    Pollutant.CO: 1.1456,
    Pollutant.NH3: 0.6966,
    Pollutant.NO: 1.2274,
    Pollutant.NO2: 1.8816,
    Pollutant.O3: 1.9632,
    Pollutant.SO2: 2.6204,
}

# 1 ppm expressed in µg/m³
PPM_TO_UGM3 = {pollutant: factor * 1000 for pollutant, factor in PPB_TO_UGM3.items()}

_UGM3_UNITS = ("ug/m3", "µg/m³", "ugm3", "µg/m3", "ug/m³")


def _gas(pollutant: "Pollutant | str", direction: str) -> Pollutant:
    standard = standardise_pollutant(pollutant)
    if standard not in PPB_TO_UGM3:
        raise ValueError(
            f"Cannot convert {pollutant} {direction}. "
            f"Supported pollutants: {[p.name for p in PPB_TO_UGM3]}"
        )
    return standard


def ppb_to_ugm3(concentration: float, pollutant: "Pollutant | str") -> float:
    """
    Convert concentration from ppb to µg/m³.

    Example conversion factors (at 25°C, 1 atm):
        - NO2: 1 ppb = 1.8816 µg/m³
        - O3:  1 ppb = 1.9632 µg/m³
        - SO2: 1 ppb = 2.6204 µg/m³
        - CO:  1 ppb = 1.1456 µg/m³

    Raises:
        ValueError: If pollutant is not a gas with a known conversion factor
    """
    gas = _gas(pollutant, "from ppb to µg/m³")
    return concentration * PPB_TO_UGM3[gas]


def ugm3_to_ppb(concentration: float, pollutant: "Pollutant | str") -> float:
    """
    Convert concentration from µg/m³ to ppb.

    Raises:
        ValueError: If pollutant is not a gas with a known conversion factor
    """
    gas = _gas(pollutant, "from µg/m³ to ppb")
    return concentration / PPB_TO_UGM3[gas]


def ensure_ugm3(
    concentration: float,
    pollutant: "Pollutant | str",
    current_unit: str,
    warn: bool = True,
) -> float:
    """
    Ensure concentration is in µg/m³, converting if necessary.

    Args:
        concentration: The concentration value
        pollutant: Pollutant name
        current_unit: Current unit of the concentration
            (µg/m³, ppb, ppm or mg/m³)
        warn: Whether to warn about conversions

    Returns:
        Concentration in µg/m³

    Raises:
        ValueError: If the unit is not recognised
    """
    unit_lower = current_unit.lower().strip()

    if unit_lower in _UGM3_UNITS:
        return concentration

    if unit_lower in ("ppb", "parts per billion"):
        if warn:
            warnings.warn(
                f"Converting {pollutant} from ppb to µg/m³. "
                f"Conversion assumes standard conditions (25°C, 1 atm).",
                UserWarning,
                stacklevel=2,
            )
        return ppb_to_ugm3(concentration, pollutant)

    if unit_lower in ("ppm", "parts per million"):
        if warn:
            warnings.warn(
                f"Converting {pollutant} from ppm to µg/m³. "
                f"Conversion assumes standard conditions (25°C, 1 atm).",
                UserWarning,
                stacklevel=2,
            )
        return ppb_to_ugm3(concentration * 1000, pollutant)

    if unit_lower in ("mg/m3", "mg/m³"):
        return concentration * 1000

    raise ValueError(
        f"Unknown unit '{current_unit}' for {pollutant}. "
        f"Expected one of µg/m³, ppb, ppm or mg/m³."
    )


# =============================================================================
# Pollutant Standardisation
# =============================================================================

# Map common pollutant names to standard forms
POLLUTANT_ALIASES = {
    # PM2.5 variants
    "pm2.5": Pollutant.PM2_5,
    "pm25": Pollutant.PM2_5,
    "pm 2.5": Pollutant.PM2_5,
    "pm2_5": Pollutant.PM2_5,
    "fine particulate": Pollutant.PM2_5,
    "fine particles": Pollutant.PM2_5,
    # PM10 variants
    "pm 10": Pollutant.PM10,
    "coarse particulate": Pollutant.PM10,
    # Ozone variants
    "ozone": Pollutant.O3,
    # Nitrogen oxides
    "nitrogen dioxide": Pollutant.NO2,
    "nitrogen_dioxide": Pollutant.NO2,
    "nitric oxide": Pollutant.NO,
    "nitric_oxide": Pollutant.NO,
    # Sulphur dioxide variants
    "sulfur dioxide": Pollutant.SO2,
    "sulphur dioxide": Pollutant.SO2,
    "sulfur_dioxide": Pollutant.SO2,
    "sulphur_dioxide": Pollutant.SO2,
    # Carbon monoxide variants
    "carbon monoxide": Pollutant.CO,
    "carbon_monoxide": Pollutant.CO,
    # Others
    "ammonia": Pollutant.NH3,
    "lead": Pollutant.PB,
}


def standardise_pollutant(pollutant: "Pollutant | str") -> Pollutant | None:
    """
    Standardise a pollutant name to its canonical form.

    Args:
        pollutant: Pollutant member or name in any common format
            ("PM2.5", "pm25", "Ozone", "NO2", ...)

    Returns:
        Pollutant member, or None if not recognised
    """
    if isinstance(pollutant, Pollutant):
        return pollutant

    name = str(pollutant).strip().lower()
    try:
        return Pollutant(name)
    except ValueError:
        return POLLUTANT_ALIASES.get(name)


# =============================================================================
# Breakpoint Tables
# =============================================================================


class BreakpointInterval(NamedTuple):
    """One linear segment of an index scale."""

    index_low: float
    index_high: float
    conc_low: float  # Shared with conc_high of the previous interval
    conc_high: float  # Inclusive upper bound


def make_table(
    index_points: Sequence[float],
    conc_points: Sequence[float],
) -> tuple[BreakpointInterval, ...]:
    """
    Build a continuous breakpoint table from matching boundary points.

    Neighbouring intervals share both their concentration and index
    endpoints, so the piecewise function has no gaps or jumps.

    Example:
        >>> table = make_table((0, 25, 50), (0, 50, 100))
        >>> table[1]
        BreakpointInterval(index_low=25, index_high=50, conc_low=50, conc_high=100)
    """
    if len(index_points) != len(conc_points) or len(conc_points) < 2:
        raise ValueError("Breakpoint tables need matching index and concentration points")

    table = tuple(
        BreakpointInterval(i_lo, i_hi, c_lo, c_hi)
        for i_lo, i_hi, c_lo, c_hi in zip(
            index_points, index_points[1:], conc_points, conc_points[1:]
        )
    )
    validate_table(table)
    return table


def make_stepped_table(
    rows: Sequence[tuple[float, float, float, float]],
) -> tuple[BreakpointInterval, ...]:
    """
    Build a continuous table from published rows that step between categories.

    Published tables often start each row one unit of precision above the
    previous one (0-9.0 then 9.1-35.4). A bridging interval is inserted
    across each step, from the previous row's top to the next row's bottom,
    so every concentration at the published precision keeps its published
    index and values inside a step interpolate between the two.

    Args:
        rows: (conc_low, conc_high, index_low, index_high) per published row

    Example:
        >>> table = make_stepped_table([(0.0, 9.0, 0, 50), (9.1, 35.4, 51, 100)])
        >>> table[1]
        BreakpointInterval(index_low=50, index_high=51, conc_low=9.0, conc_high=9.1)
    """
    intervals = []
    for conc_low, conc_high, index_low, index_high in rows:
        if intervals and conc_low > intervals[-1].conc_high:
            previous = intervals[-1]
            intervals.append(
                BreakpointInterval(
                    previous.index_high, index_low, previous.conc_high, conc_low
                )
            )
        intervals.append(BreakpointInterval(index_low, index_high, conc_low, conc_high))

    table = tuple(intervals)
    validate_table(table)
    return table


def make_bands(
    levels: Sequence[int],
    upper_bounds: Sequence[float],
    start: float = 0,
) -> tuple[BreakpointInterval, ...]:
    """
    Build a banded (step) table where each interval reports one level.

    Args:
        levels: Index value for each band, ascending
        upper_bounds: Inclusive upper concentration of each band
        start: Lower concentration of the first band
    """
    if len(levels) != len(upper_bounds):
        raise ValueError("Banded tables need one upper bound per level")

    lowers = (start, *upper_bounds[:-1])
    table = tuple(
        BreakpointInterval(level, level, low, high)
        for level, low, high in zip(levels, lowers, upper_bounds)
    )
    validate_table(table)
    return table


def validate_table(table: Sequence[BreakpointInterval]) -> None:
    """
    Check that a table is ordered, contiguous and non-decreasing in index.

    Raises:
        ValueError: If the table violates any of these properties
    """
    if not table:
        raise ValueError("Breakpoint table is empty")

    previous = None
    for interval in table:
        if interval.conc_high < interval.conc_low:
            raise ValueError(f"Interval {interval} has conc_high below conc_low")
        if interval.index_high < interval.index_low:
            raise ValueError(f"Interval {interval} has a decreasing index")
        if previous is not None:
            if interval.conc_low != previous.conc_high:
                raise ValueError(f"Gap or overlap between {previous} and {interval}")
            if interval.index_low < previous.index_high:
                raise ValueError(f"Index decreases between {previous} and {interval}")
        previous = interval


def is_banded(table: Sequence[BreakpointInterval]) -> bool:
    """True when every interval reports a single index value."""
    return all(interval.index_low == interval.index_high for interval in table)


# =============================================================================
# Numeric Helpers
# =============================================================================


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def truncate(value: float, decimal_places: int) -> float:
    """
    Truncate a value to a specified number of decimal places.

    Note: This truncates (floors toward zero), not rounds. The decimal
    representation is used so that 0.058 stays 0.058 rather than 0.057.
    """
    quantum = Decimal(1).scaleb(-decimal_places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_DOWN))


def round_places(value: float, decimal_places: int) -> float:
    """Round to decimal places with halves away from zero (16.5 -> 17.0)."""
    quantum = Decimal(1).scaleb(-decimal_places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def check_concentration(value: object, name: str = "concentration") -> float:
    """
    Validate a physical concentration.

    Strings are rejected even when they hold a number ("60").

    Returns:
        The concentration as a float

    Raises:
        InvalidInput: If the value is not a finite, non-negative number
    """
    if isinstance(value, (bool, str, bytes)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}") from None

    if not math.isfinite(number):
        raise InvalidInput(f"{name} must be finite, got {number}")
    if number < 0:
        raise InvalidInput(f"{name} cannot be negative, got {number}")
    return number


# =============================================================================
# Breakpoint Interpolation
# =============================================================================


def interpolate(
    intervals: Sequence[BreakpointInterval],
    concentration: float,
) -> int:
    """
    Calculate an index value by linear interpolation between breakpoints.

    This is the standard EPA-style calculation used by most AQI systems:

    I = ((I_hi - I_lo) / (C_hi - C_lo)) * (C - C_lo) + I_lo

    The first interval whose upper bound is at or above the concentration is
    used. Tables share index endpoints between neighbours, so a concentration
    sitting exactly on a boundary gives the same value from either side.

    Args:
        intervals: Breakpoint table, sorted by concentration
        concentration: Concentration in the table's units

    Returns:
        Index value rounded half away from zero

    Raises:
        InvalidInput: If the concentration is negative or not finite
        AboveTable: If the concentration exceeds the last upper bound
        BelowTable: If the concentration is below the first lower bound
    """
    concentration = check_concentration(concentration)

    if concentration < intervals[0].conc_low:
        raise BelowTable(concentration, intervals[0].conc_low)

    for interval in intervals:
        if concentration <= interval.conc_high:
            conc_range = interval.conc_high - interval.conc_low
            if conc_range == 0 or interval.index_low == interval.index_high:
                return round_half_away(interval.index_low)

            slope = (interval.index_high - interval.index_low) / conc_range
            return round_half_away(
                slope * (concentration - interval.conc_low) + interval.index_low
            )

    raise AboveTable(concentration, intervals[-1].conc_high)


# =============================================================================
# Ratio (NEPM) Formula
# =============================================================================


def ratio_index(standard: float, concentration: float) -> int:
    """
    Express a concentration as a percentage of a regulatory standard.

    Used by Australia's NEPM-based index, where 100 means "at the standard".
    There is no upper bound.

    Example:
        >>> ratio_index(10310.4, 10310.4)
        100
    """
    standard = check_concentration(standard, "standard")
    if standard == 0:
        raise InvalidInput("standard must be positive")
    concentration = check_concentration(concentration)
    percent = concentration / standard * 100
    if not math.isfinite(percent):
        raise InvalidInput(f"concentration {concentration} is too large to index")
    return round_half_away(percent)


# =============================================================================
# Exponential (AQHI) Risk
# =============================================================================


def exponential_term(coefficient: float, concentration: float) -> float:
    """
    Added health risk (%) for one pollutant: 100 * (exp(beta * c) - 1).

    Returns math.inf when the exponential overflows a float.
    """
    try:
        return 100 * (math.exp(coefficient * concentration) - 1)
    except OverflowError:
        return math.inf


def risk_score(
    concentrations: Mapping[str, float],
    coefficients: Mapping[str, float],
    alternates: Iterable[Iterable[str]] = (),
) -> float:
    """
    Combine per-pollutant exponential terms into a total added risk.

    Independent pollutants are summed. Members of an alternates group
    (e.g. PM10 and PM2.5 standing for one particulate hazard) contribute
    only the largest of their terms.

    Args:
        concentrations: Pollutant key to concentration. Keys without a
            coefficient are ignored; coefficients without a
            concentration contribute nothing.
        coefficients: Pollutant key to positive risk coefficient
        alternates: Groups of keys sharing one risk term

    Returns:
        Total added risk in percent
    """
    terms = {}
    for key, coefficient in coefficients.items():
        if key not in concentrations:
            continue
        if not coefficient > 0:
            raise InvalidInput(f"Risk coefficient for {key} must be positive")
        value = check_concentration(concentrations[key], key)
        terms[key] = exponential_term(coefficient, value)

    total = 0.0
    grouped = set()
    for group in alternates:
        members = [terms[key] for key in group if key in terms]
        grouped.update(group)
        if members:
            total += max(members)

    total += sum(term for key, term in terms.items() if key not in grouped)
    logger.debug("Risk terms %s sum to %.4f", terms, total)
    return total
