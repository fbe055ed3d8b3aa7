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
Common Air Quality Index (CAQI) implementation.

CAQI uses a 0-100 scale in five bands: Very Low (0-25), Low (26-50),
Medium (51-75), High (76-100) and Very High (>100). Values above the top
breakpoint are reported as 101.

This is the hourly background grid: NO2, O3 and PM10 are mandatory,
PM2.5 is auxiliary.

Reference: http://airqualitynow.eu/about_indices_definition.php
All concentrations in µg/m³, hourly averages.
"""

from ..base import Pollutant, make_table
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

# =============================================================================
# Breakpoints
# =============================================================================
#
# Source: CITEAIR Project - Common Air Quality Index
# URL: https://www.europarl.europa.eu/meetdocs/2004_2009/documents/dv/citeair_/citeair_en.pdf
#
# Academic reference:
# Van den Elshout, S., Barber, K., & Léger, K. (2014). "CAQI Common Air Quality
# Index: Update with PM2.5 and sensitivity analysis." Science of The Total
# Environment, 488-489, 461-468. https://doi.org/10.1016/j.scitotenv.2013.10.060
# =============================================================================

INDEX_POINTS = (0, 25, 50, 75, 100)

NO2_BREAKPOINTS = make_table(INDEX_POINTS, (0, 50, 100, 200, 400))
O3_BREAKPOINTS = make_table(INDEX_POINTS, (0, 60, 120, 180, 240))
PM10_BREAKPOINTS = make_table(INDEX_POINTS, (0, 25, 50, 90, 180))
PM25_BREAKPOINTS = make_table(INDEX_POINTS, (0, 15, 30, 55, 110))

DESCRIPTORS = (
    Descriptor(0, 25, "Very Low", "#79BC6A"),
    Descriptor(26, 50, "Low", "#BBCF4C"),
    Descriptor(51, 75, "Medium", "#EEC20B"),
    Descriptor(76, 100, "High", "#F29305"),
    Descriptor(101, 101, "Very High", "#E8416F"),
)

SCALE = ScaleDefinition(
    scale_id=ScaleId.EUROPE,
    name="Common Air Quality Index (hourly, background)",
    short_name="CAQI",
    country="European Union",
    description=(
        "The CITEAIR Common Air Quality Index on a 0-100 scale. The overall "
        "index is the highest sub-index of NO2, O3, PM10 and (if measured) "
        "PM2.5."
    ),
    url="http://airqualitynow.eu/about_indices_definition.php",
    strategy=Strategy.BREAKPOINT,
    components=(
        Component("no2", Pollutant.NO2, "1h", table=NO2_BREAKPOINTS, mandatory=True),
        Component("o3", Pollutant.O3, "1h", table=O3_BREAKPOINTS, mandatory=True),
        Component("pm10", Pollutant.PM10, "1h", table=PM10_BREAKPOINTS, mandatory=True),
        Component("pm2_5", Pollutant.PM2_5, "1h", table=PM25_BREAKPOINTS),
    ),
    descriptors=DESCRIPTORS,
)

register_scale(SCALE)
