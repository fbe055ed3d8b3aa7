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
US EPA Air Quality Index (AQI) implementation.

The US AQI is used by the Environmental Protection Agency and is one of the
most widely recognised air quality indices globally. It uses a 0-500 scale
divided into six categories.

Reference: https://www.airnow.gov/aqi/aqi-basics/
Technical document: https://document.airnow.gov/technical-assistance-document-for-the-reporting-of-daily-air-quailty.pdf

Key features:
- Uses truncation (not rounding) of concentrations before lookup
- PM2.5 breakpoints updated in May 2024
- O3 uses the 8-hour average up to 0.200 ppm and the 1-hour average above
  0.125 ppm; SO2 switches from 1-hour to 24-hour averages above 304 ppb

Published tables are in ppm/ppb for gases; inputs are µg/m³ and are divided
by the fixed conversion factor first. The published tables step by one unit
of precision between categories (0-9.0, 9.1-35.4, ...). make_stepped_table
bridges each step, so a truncated concentration gets its published index
(9.0 gives 50, 9.1 gives 51).
"""

from ..base import PPB_TO_UGM3, PPM_TO_UGM3, Pollutant, make_stepped_table
from ..types import Component, Descriptor, Overflow, ScaleDefinition, ScaleId, Strategy
from . import register_scale

# =============================================================================
# Breakpoints
# =============================================================================
#
# Source: EPA Technical Assistance Document for the Reporting of Daily Air
#         Quality - the Air Quality Index (AQI)
# Document: EPA-454/B-24-002
#
# Version: May 2024 (PM2.5 NAAQS revision)
# =============================================================================

# PM2.5 (µg/m³, 24-hour) - Updated May 2024
PM25_BREAKPOINTS = make_stepped_table(
    [
        (0.0, 9.0, 0, 50),
        (9.1, 35.4, 51, 100),
        (35.5, 55.4, 101, 150),
        (55.5, 125.4, 151, 200),
        (125.5, 225.4, 201, 300),
        (225.5, 325.4, 301, 400),
        (325.5, 500.4, 401, 500),
    ]
)

# PM10 (µg/m³, 24-hour)
PM10_BREAKPOINTS = make_stepped_table(
    [
        (0, 54, 0, 50),
        (55, 154, 51, 100),
        (155, 254, 101, 150),
        (255, 354, 151, 200),
        (355, 424, 201, 300),
        (425, 504, 301, 400),
        (505, 604, 401, 500),
    ]
)

# O3 (ppm, 8-hour) - Only valid for AQI 0-300
O3_8HR_BREAKPOINTS = make_stepped_table(
    [
        (0.000, 0.054, 0, 50),
        (0.055, 0.070, 51, 100),
        (0.071, 0.085, 101, 150),
        (0.086, 0.105, 151, 200),
        (0.106, 0.200, 201, 300),
    ]
)

# O3 (ppm, 1-hour) - Only valid for AQI 101-500
O3_1HR_BREAKPOINTS = make_stepped_table(
    [
        (0.125, 0.164, 101, 150),
        (0.165, 0.204, 151, 200),
        (0.205, 0.404, 201, 300),
        (0.405, 0.504, 301, 400),
        (0.505, 0.604, 401, 500),
    ]
)

# CO (ppm, 8-hour)
CO_BREAKPOINTS = make_stepped_table(
    [
        (0.0, 4.4, 0, 50),
        (4.5, 9.4, 51, 100),
        (9.5, 12.4, 101, 150),
        (12.5, 15.4, 151, 200),
        (15.5, 30.4, 201, 300),
        (30.5, 40.4, 301, 400),
        (40.5, 50.4, 401, 500),
    ]
)

# SO2 (ppb, 1-hour) - Only valid for AQI 0-200
SO2_1HR_BREAKPOINTS = make_stepped_table(
    [
        (0, 35, 0, 50),
        (36, 75, 51, 100),
        (76, 185, 101, 150),
        (186, 304, 151, 200),
    ]
)

# SO2 (ppb, 24-hour) - Only valid for AQI 201-500
SO2_24HR_BREAKPOINTS = make_stepped_table(
    [
        (305, 604, 201, 300),
        (605, 804, 301, 400),
        (805, 1004, 401, 500),
    ]
)

# NO2 (ppb, 1-hour)
NO2_BREAKPOINTS = make_stepped_table(
    [
        (0, 53, 0, 50),
        (54, 100, 51, 100),
        (101, 360, 101, 150),
        (361, 649, 151, 200),
        (650, 1249, 201, 300),
        (1250, 1649, 301, 400),
        (1650, 2049, 401, 500),
    ]
)

DESCRIPTORS = (
    Descriptor(0, 50, "Good", "#00E400"),
    Descriptor(51, 100, "Moderate", "#FFFF00"),
    Descriptor(101, 150, "Unhealthy for Sensitive Groups", "#FF7E00"),
    Descriptor(151, 200, "Unhealthy", "#FF0000"),
    Descriptor(201, 300, "Very Unhealthy", "#8F3F97"),
    Descriptor(301, 500, "Hazardous", "#7E0023"),
)

SCALE = ScaleDefinition(
    scale_id=ScaleId.UNITED_STATES,
    name="US EPA Air Quality Index",
    short_name="AQI",
    country="United States",
    description=(
        "The US EPA Air Quality Index (AQI) is used to communicate air quality "
        "to the public. It uses a 0-500 scale with six categories from Good "
        "to Hazardous, based on the pollutant with the highest sub-index."
    ),
    url="https://www.airnow.gov/aqi/aqi-basics/",
    strategy=Strategy.BREAKPOINT,
    components=(
        Component("pm2_5", Pollutant.PM2_5, "24h", table=PM25_BREAKPOINTS, truncate_to=1),
        Component("pm10", Pollutant.PM10, "24h", table=PM10_BREAKPOINTS, truncate_to=0),
        Component(
            "o3_8h",
            Pollutant.O3,
            "8h",
            table=O3_8HR_BREAKPOINTS,
            overflow=Overflow.SKIP,
            unit="ppm",
            divisor=PPM_TO_UGM3[Pollutant.O3],
            truncate_to=3,
        ),
        Component(
            "o3_1h",
            Pollutant.O3,
            "1h",
            table=O3_1HR_BREAKPOINTS,
            unit="ppm",
            divisor=PPM_TO_UGM3[Pollutant.O3],
            truncate_to=3,
        ),
        Component(
            "co",
            Pollutant.CO,
            "8h",
            table=CO_BREAKPOINTS,
            unit="ppm",
            divisor=PPM_TO_UGM3[Pollutant.CO],
            truncate_to=1,
        ),
        Component(
            "so2_1h",
            Pollutant.SO2,
            "1h",
            table=SO2_1HR_BREAKPOINTS,
            overflow=Overflow.SKIP,
            unit="ppb",
            divisor=PPB_TO_UGM3[Pollutant.SO2],
            truncate_to=0,
        ),
        Component(
            "so2_24h",
            Pollutant.SO2,
            "24h",
            table=SO2_24HR_BREAKPOINTS,
            unit="ppb",
            divisor=PPB_TO_UGM3[Pollutant.SO2],
            truncate_to=0,
        ),
        Component(
            "no2",
            Pollutant.NO2,
            "1h",
            table=NO2_BREAKPOINTS,
            unit="ppb",
            divisor=PPB_TO_UGM3[Pollutant.NO2],
            truncate_to=0,
        ),
    ),
    descriptors=DESCRIPTORS,
)

register_scale(SCALE)
