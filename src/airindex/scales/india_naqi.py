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
India National Air Quality Index (NAQI) implementation.

India's NAQI uses six categories: Good (0-50), Satisfactory (51-100),
Moderately Polluted (101-200), Poor (201-300), Very Poor (301-400) and
Severe (>400). The breakpoints stop at 400; anything above is reported
as 401.

Reference: Central Pollution Control Board (CPCB)
https://cpcb.nic.in/National-Air-Quality-Index/

CPCB only reports an index when at least three pollutants are available,
one of which must be PM10 or PM2.5.

Pollutants (8 total):
- PM2.5, PM10, SO2, NO2, NH3, Pb: 24-hour average (µg/m³)
- CO: 8-hour average (published in mg/m³)
- O3: 8-hour average (µg/m³)
"""

from ..base import Pollutant, make_table
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

INDEX_POINTS = (0, 50, 100, 200, 300, 400)

PM25_BREAKPOINTS = make_table(INDEX_POINTS, (0, 30, 60, 90, 120, 250))
PM10_BREAKPOINTS = make_table(INDEX_POINTS, (0, 50, 100, 250, 350, 430))
SO2_BREAKPOINTS = make_table(INDEX_POINTS, (0, 40, 80, 380, 800, 1600))
NO2_BREAKPOINTS = make_table(INDEX_POINTS, (0, 40, 80, 180, 280, 400))
CO_BREAKPOINTS = make_table(INDEX_POINTS, (0, 1.0, 2.0, 10, 17, 34))  # mg/m³
O3_BREAKPOINTS = make_table(INDEX_POINTS, (0, 50, 100, 168, 208, 748))
NH3_BREAKPOINTS = make_table(INDEX_POINTS, (0, 200, 400, 800, 1200, 1800))
PB_BREAKPOINTS = make_table(INDEX_POINTS, (0, 0.5, 1.0, 2.0, 3.0, 3.5))

DESCRIPTORS = (
    Descriptor(0, 50, "Good", "#009933"),
    Descriptor(51, 100, "Satisfactory", "#58FF09"),
    Descriptor(101, 200, "Moderately Polluted", "#FFFF00"),
    Descriptor(201, 300, "Poor", "#FFA500"),
    Descriptor(301, 400, "Very Poor", "#FF0000"),
    Descriptor(401, 401, "Severe", "#990000"),
)

SCALE = ScaleDefinition(
    scale_id=ScaleId.INDIA,
    name="India National Air Quality Index",
    short_name="NAQI",
    country="India",
    description=(
        "India's National Air Quality Index (NAQI), launched in 2014, covers "
        "eight pollutants. The overall AQI is the maximum sub-index across "
        "at least three measured pollutants including PM10 or PM2.5."
    ),
    url="https://cpcb.nic.in/National-Air-Quality-Index/",
    strategy=Strategy.BREAKPOINT,
    components=(
        Component(
            "co", Pollutant.CO, "8h", table=CO_BREAKPOINTS, unit="mg/m³", divisor=1000
        ),
        Component("nh3", Pollutant.NH3, "24h", table=NH3_BREAKPOINTS),
        Component("no2", Pollutant.NO2, "24h", table=NO2_BREAKPOINTS),
        Component("o3", Pollutant.O3, "8h", table=O3_BREAKPOINTS),
        Component("pb", Pollutant.PB, "24h", table=PB_BREAKPOINTS),
        Component("so2", Pollutant.SO2, "24h", table=SO2_BREAKPOINTS),
        Component("pm10", Pollutant.PM10, "24h", table=PM10_BREAKPOINTS),
        Component("pm2_5", Pollutant.PM2_5, "24h", table=PM25_BREAKPOINTS),
    ),
    descriptors=DESCRIPTORS,
    alternates=(frozenset({"pm10", "pm2_5"}),),
    min_components=3,
)

register_scale(SCALE)
