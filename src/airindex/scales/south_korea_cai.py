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
South Korea Comprehensive Air-quality Index (CAI).

The CAI uses a 0-500 scale in four bands: Good (0-50), Moderate (51-100),
Unhealthy (101-250) and Very Unhealthy (251-500).

Gas breakpoints are published in ppm and particulates in µg/m³. Inputs are
µg/m³ throughout; gases are converted with the fixed ppm factors.

Reference: https://www.airkorea.or.kr/eng/khaiInfo
"""

from ..base import PPM_TO_UGM3, Pollutant, make_table
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

INDEX_POINTS = (0, 50, 100, 250, 500)

# Gases (ppm)
SO2_BREAKPOINTS = make_table(INDEX_POINTS, (0, 0.02, 0.05, 0.15, 1.0))
CO_BREAKPOINTS = make_table(INDEX_POINTS, (0, 2, 9, 15, 50))
O3_BREAKPOINTS = make_table(INDEX_POINTS, (0, 0.03, 0.09, 0.15, 0.6))
NO2_BREAKPOINTS = make_table(INDEX_POINTS, (0, 0.03, 0.06, 0.2, 2.0))

# Particulates (µg/m³, 24-hour)
PM10_BREAKPOINTS = make_table(INDEX_POINTS, (0, 30, 80, 150, 600))
PM25_BREAKPOINTS = make_table(INDEX_POINTS, (0, 15, 35, 75, 500))

DESCRIPTORS = (
    Descriptor(0, 50, "Good", "#1C87FF"),
    Descriptor(51, 100, "Moderate", "#00C73C"),
    Descriptor(101, 250, "Unhealthy", "#FFD200"),
    Descriptor(251, 500, "Very Unhealthy", "#FF5A5A"),
)


def _gas(key: str, pollutant: Pollutant, table) -> Component:
    return Component(
        key, pollutant, "1h", table=table, unit="ppm", divisor=PPM_TO_UGM3[pollutant]
    )


SCALE = ScaleDefinition(
    scale_id=ScaleId.SOUTH_KOREA,
    name="Comprehensive Air-quality Index",
    short_name="CAI",
    country="South Korea",
    description=(
        "South Korea's CAI on a 0-500 scale with four bands. The overall "
        "index is the highest sub-index of the six criteria pollutants."
    ),
    url="https://www.airkorea.or.kr/eng/khaiInfo",
    strategy=Strategy.BREAKPOINT,
    components=(
        _gas("so2", Pollutant.SO2, SO2_BREAKPOINTS),
        _gas("co", Pollutant.CO, CO_BREAKPOINTS),
        _gas("o3", Pollutant.O3, O3_BREAKPOINTS),
        _gas("no2", Pollutant.NO2, NO2_BREAKPOINTS),
        Component("pm10", Pollutant.PM10, "24h", table=PM10_BREAKPOINTS),
        Component("pm2_5", Pollutant.PM2_5, "24h", table=PM25_BREAKPOINTS),
    ),
    descriptors=DESCRIPTORS,
)

register_scale(SCALE)
