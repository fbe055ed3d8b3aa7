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
Mainland China Air Quality Index (AQI) implementation.

China's AQI uses a 0-500 scale divided into six categories:
Excellent (0-50), Good (51-100), Lightly Polluted (101-150),
Moderately Polluted (151-200), Heavily Polluted (201-300),
Severely Polluted (301-500).

Reference: HJ 633-2012 Technical Regulation on Ambient Air Quality Index

Inputs (µg/m³):
- co_1h, co_24h: published in mg/m³, converted here
- no2_1h, no2_24h
- o3_1h, o3_8h: 8-hour sub-index only up to 800 µg/m³, above that the
  1-hour value is authoritative
- so2_1h, so2_24h: 1-hour sub-index only up to 800 µg/m³, above that the
  24-hour value is authoritative
- pm10, pm2_5: 24-hour averages
"""

from ..base import Pollutant, make_table
from ..types import (
    Component,
    Descriptor,
    Overflow,
    ScaleDefinition,
    ScaleId,
    Strategy,
)
from . import register_scale

# =============================================================================
# Breakpoints
# =============================================================================
#
# Source: HJ 633-2012, Table 1
# URL: https://web.archive.org/web/20180830110324/http://kjs.mep.gov.cn/hjbhbz/bzwb/jcffbz/201203/W020120410332725219541.pdf
# =============================================================================

INDEX_POINTS = (0, 50, 100, 150, 200, 300, 400, 500)

# CO (mg/m³)
CO_1HR_BREAKPOINTS = make_table(INDEX_POINTS, (0, 5, 10, 35, 60, 90, 120, 150))
CO_24HR_BREAKPOINTS = make_table(INDEX_POINTS, (0, 2, 4, 14, 24, 36, 48, 60))

NO2_1HR_BREAKPOINTS = make_table(
    INDEX_POINTS, (0, 100, 200, 700, 1200, 2340, 3090, 3840)
)
NO2_24HR_BREAKPOINTS = make_table(INDEX_POINTS, (0, 40, 80, 180, 280, 565, 750, 940))

O3_1HR_BREAKPOINTS = make_table(
    INDEX_POINTS, (0, 160, 200, 300, 400, 800, 1000, 1200)
)
# 8-hour O3 is not defined above AQI 300
O3_8HR_BREAKPOINTS = make_table(INDEX_POINTS[:6], (0, 100, 160, 215, 265, 800))

# 1-hour SO2 is not defined above AQI 200
SO2_1HR_BREAKPOINTS = make_table(INDEX_POINTS[:5], (0, 150, 500, 650, 800))
SO2_24HR_BREAKPOINTS = make_table(
    INDEX_POINTS, (0, 50, 150, 475, 800, 1600, 2100, 2620)
)

PM10_BREAKPOINTS = make_table(INDEX_POINTS, (0, 50, 150, 250, 350, 420, 500, 600))
PM25_BREAKPOINTS = make_table(INDEX_POINTS, (0, 35, 75, 115, 150, 250, 350, 500))

DESCRIPTORS = (
    Descriptor(0, 50, "Excellent", "#00E400"),
    Descriptor(51, 100, "Good", "#FFFF00"),
    Descriptor(101, 150, "Lightly Polluted", "#FF7E00"),
    Descriptor(151, 200, "Moderately Polluted", "#FF0000"),
    Descriptor(201, 300, "Heavily Polluted", "#99004C"),
    Descriptor(301, 500, "Severely Polluted", "#7E0023"),
)

SCALE = ScaleDefinition(
    scale_id=ScaleId.MAINLAND_CHINA,
    name="China Air Quality Index",
    short_name="AQI",
    country="China",
    description=(
        "China's Air Quality Index (AQI) uses a 0-500 scale with six categories. "
        "Implemented by the Ministry of Environmental Protection since 2013. "
        "The overall AQI is the maximum sub-index across all pollutants."
    ),
    url="https://en.wikipedia.org/wiki/Air_quality_index#Mainland_China",
    strategy=Strategy.BREAKPOINT,
    components=(
        Component(
            "co_1h", Pollutant.CO, "1h", table=CO_1HR_BREAKPOINTS,
            unit="mg/m³", divisor=1000,
        ),
        Component(
            "co_24h", Pollutant.CO, "24h", table=CO_24HR_BREAKPOINTS,
            unit="mg/m³", divisor=1000,
        ),
        Component("no2_1h", Pollutant.NO2, "1h", table=NO2_1HR_BREAKPOINTS),
        Component("no2_24h", Pollutant.NO2, "24h", table=NO2_24HR_BREAKPOINTS),
        Component("o3_1h", Pollutant.O3, "1h", table=O3_1HR_BREAKPOINTS),
        Component(
            "o3_8h", Pollutant.O3, "8h", table=O3_8HR_BREAKPOINTS,
            overflow=Overflow.SKIP,
        ),
        Component(
            "so2_1h", Pollutant.SO2, "1h", table=SO2_1HR_BREAKPOINTS,
            overflow=Overflow.SKIP,
        ),
        Component("so2_24h", Pollutant.SO2, "24h", table=SO2_24HR_BREAKPOINTS),
        Component("pm10", Pollutant.PM10, "24h", table=PM10_BREAKPOINTS),
        Component("pm2_5", Pollutant.PM2_5, "24h", table=PM25_BREAKPOINTS),
    ),
    descriptors=DESCRIPTORS,
)

register_scale(SCALE)
