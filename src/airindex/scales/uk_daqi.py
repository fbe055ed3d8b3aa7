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
UK Daily Air Quality Index (DAQI) implementation.

The DAQI was introduced by DEFRA in 2012. It uses a 1-10 scale divided into
four bands: Low (1-3), Moderate (4-6), High (7-9), and Very High (10).
Band 10 is open-ended, so the DAQI never reports an above-scale sentinel.

Reference: https://uk-air.defra.gov.uk/air-pollution/daqi

Pollutants and averaging periods:
- O3: 8-hour running mean
- NO2: 1-hour mean
- SO2: 15-minute mean
- PM2.5: 24-hour mean
- PM10: 24-hour mean

All concentrations are in µg/m³ and rounded to the nearest integer before
lookup.
"""

from ..base import Pollutant, make_bands
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

# =============================================================================
# Breakpoints
# =============================================================================
#
# Source: DEFRA "Update on Implementation of the Daily Air Quality Index"
# URL: https://uk-air.defra.gov.uk/assets/documents/reports/cat14/
#      1304251155_Update_on_Implementation_of_the_DAQI_April_2013_Final.pdf
#
# Version: April 2013
# Each tuple lists the top of bands 1-9; band 10 has no upper limit.
# =============================================================================

BANDS = range(1, 11)
OPEN = float("inf")

O3_BREAKPOINTS = make_bands(BANDS, (33, 66, 100, 120, 140, 160, 187, 213, 240, OPEN))
NO2_BREAKPOINTS = make_bands(BANDS, (67, 134, 200, 267, 334, 400, 467, 534, 600, OPEN))
SO2_BREAKPOINTS = make_bands(BANDS, (88, 177, 266, 354, 443, 532, 710, 887, 1064, OPEN))
PM25_BREAKPOINTS = make_bands(BANDS, (11, 23, 35, 41, 47, 53, 58, 64, 70, OPEN))
PM10_BREAKPOINTS = make_bands(BANDS, (16, 33, 50, 58, 66, 75, 83, 91, 100, OPEN))

# Colors from UK-AIR official styling (darkest shade of each band)
DESCRIPTORS = (
    Descriptor(0, 3, "Low", "#31CF00"),
    Descriptor(4, 6, "Moderate", "#FF9A00"),
    Descriptor(7, 9, "High", "#990000"),
    Descriptor(10, 10, "Very High", "#CE30FF"),
)


def _band(key: str, pollutant: Pollutant, averaging: str, table) -> Component:
    return Component(key, pollutant, averaging, table=table, round_to=0)


SCALE = ScaleDefinition(
    scale_id=ScaleId.UNITED_KINGDOM,
    name="UK Daily Air Quality Index",
    short_name="DAQI",
    country="United Kingdom",
    description=(
        "The UK Daily Air Quality Index (DAQI) provides a simple 1-10 scale "
        "to communicate air quality levels. Developed by DEFRA and recommended "
        "by COMEAP, it uses four bands: Low (1-3), Moderate (4-6), High (7-9), "
        "and Very High (10)."
    ),
    url="https://uk-air.defra.gov.uk/air-pollution/daqi",
    strategy=Strategy.BREAKPOINT,
    components=(
        _band("o3", Pollutant.O3, "8h", O3_BREAKPOINTS),
        _band("no2", Pollutant.NO2, "1h", NO2_BREAKPOINTS),
        _band("so2", Pollutant.SO2, "15min", SO2_BREAKPOINTS),
        _band("pm2_5", Pollutant.PM2_5, "24h", PM25_BREAKPOINTS),
        _band("pm10", Pollutant.PM10, "24h", PM10_BREAKPOINTS),
    ),
    descriptors=DESCRIPTORS,
    scale_min=1,
)

register_scale(SCALE)
