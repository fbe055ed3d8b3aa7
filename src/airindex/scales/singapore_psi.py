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
Singapore Pollutant Standards Index (PSI).

The PSI uses a 0-500 scale: Good (0-50), Moderate (51-100),
Unhealthy (101-200), Very Unhealthy (201-300), Hazardous (>300).
PM2.5 was integrated into the index in April 2014.

NO2 only has breakpoints from PSI 200 upwards, so below 1130 µg/m³ it
does not produce a sub-index.

Reference: National Environment Agency, "Computation of the Pollutant
Standards Index (PSI)"
https://www.haze.gov.sg/docs/default-source/faq/computation-of-the-pollutant-standards-index-(psi).pdf
"""

from ..base import Pollutant, make_table
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

INDEX_POINTS = (0, 50, 100, 200, 300, 400, 500)

PM25_BREAKPOINTS = make_table(INDEX_POINTS, (0, 12, 55, 150, 250, 350, 500))
PM10_BREAKPOINTS = make_table(INDEX_POINTS, (0, 50, 150, 350, 420, 500, 600))
SO2_BREAKPOINTS = make_table(INDEX_POINTS, (0, 80, 365, 800, 1600, 2100, 2620))
CO_BREAKPOINTS = make_table(INDEX_POINTS, (0, 5.0, 10.0, 17.0, 34.0, 46.0, 57.5))
O3_BREAKPOINTS = make_table(INDEX_POINTS, (0, 118, 157, 235, 785, 980, 1180))
NO2_BREAKPOINTS = make_table(INDEX_POINTS[3:], (1130, 2260, 3000, 3750))

DESCRIPTORS = (
    Descriptor(0, 50, "Good", "#00A651"),
    Descriptor(51, 100, "Moderate", "#0072BC"),
    Descriptor(101, 200, "Unhealthy", "#FFC20E"),
    Descriptor(201, 300, "Very Unhealthy", "#F26522"),
    Descriptor(301, 500, "Hazardous", "#ED1C24"),
)

SCALE = ScaleDefinition(
    scale_id=ScaleId.SINGAPORE,
    name="Pollutant Standards Index",
    short_name="PSI",
    country="Singapore",
    description=(
        "Singapore's 24-hour PSI on a 0-500 scale. The overall index is the "
        "highest sub-index of PM2.5, PM10, SO2, CO, O3 and NO2."
    ),
    url="https://www.haze.gov.sg/",
    strategy=Strategy.BREAKPOINT,
    components=(
        Component("pm2_5", Pollutant.PM2_5, "24h", table=PM25_BREAKPOINTS),
        Component("pm10", Pollutant.PM10, "24h", table=PM10_BREAKPOINTS),
        Component("so2", Pollutant.SO2, "24h", table=SO2_BREAKPOINTS),
        Component(
            "co", Pollutant.CO, "8h", table=CO_BREAKPOINTS, unit="mg/m³", divisor=1000
        ),
        Component("o3", Pollutant.O3, "8h", table=O3_BREAKPOINTS),
        Component("no2", Pollutant.NO2, "1h", table=NO2_BREAKPOINTS),
    ),
    descriptors=DESCRIPTORS,
)

register_scale(SCALE)
