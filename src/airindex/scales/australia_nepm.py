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
Australian Air Quality Index (NEPM ratio method).

Each pollutant's sub-index is its concentration as a percentage of the
National Environment Protection Measure standard, so 100 means "at the
standard". There is no table and no upper bound; 200 and above is the
Hazardous category.

Reference:
https://www.environment.nsw.gov.au/topics/air/understanding-air-quality-data/air-quality-categories/history-of-air-quality-reporting/about-the-air-quality-index
"""

from ..base import PPM_TO_UGM3, Pollutant
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

# =============================================================================
# NEPM Standards (µg/m³)
# =============================================================================

STANDARDS = {
    "co": 9.0 * PPM_TO_UGM3[Pollutant.CO],  # 9.0 ppm, 8-hour = 10310.4
    "no2": 0.12 * PPM_TO_UGM3[Pollutant.NO2],  # 0.12 ppm, 1-hour = 225.792
    "o3_1h": 0.10 * PPM_TO_UGM3[Pollutant.O3],  # 0.10 ppm, 1-hour = 196.32
    "o3_4h": 0.08 * PPM_TO_UGM3[Pollutant.O3],  # 0.08 ppm, 4-hour = 157.056
    "so2": 0.20 * PPM_TO_UGM3[Pollutant.SO2],  # 0.20 ppm, 1-hour = 524.08
    "pm10": 50.0,  # 24-hour
    "pm2_5": 25.0,  # 24-hour
}

DESCRIPTORS = (
    Descriptor(0, 33, "Very Good", "#31ADD3"),
    Descriptor(34, 66, "Good", "#99B964"),
    Descriptor(67, 99, "Fair", "#FFD236"),
    Descriptor(100, 149, "Poor", "#EC783A"),
    Descriptor(150, 199, "Very Poor", "#782D49"),
    Descriptor(200, 200, "Hazardous", "#D04730"),
)


def _ratio(key: str, pollutant: Pollutant, averaging: str) -> Component:
    return Component(
        key, pollutant, averaging, strategy=Strategy.RATIO, standard=STANDARDS[key]
    )


SCALE = ScaleDefinition(
    scale_id=ScaleId.AUSTRALIA,
    name="Australian Air Quality Index (NEPM)",
    short_name="AQI",
    country="Australia",
    description=(
        "Concentration as a percentage of the NEPM ambient standard for each "
        "pollutant. The overall index is the highest percentage."
    ),
    url=(
        "https://www.environment.nsw.gov.au/topics/air/understanding-air-quality-data/"
        "air-quality-categories/history-of-air-quality-reporting/about-the-air-quality-index"
    ),
    strategy=Strategy.RATIO,
    components=(
        _ratio("co", Pollutant.CO, "8h"),
        _ratio("no2", Pollutant.NO2, "1h"),
        _ratio("o3_1h", Pollutant.O3, "1h"),
        _ratio("o3_4h", Pollutant.O3, "4h"),
        _ratio("so2", Pollutant.SO2, "1h"),
        _ratio("pm10", Pollutant.PM10, "24h"),
        _ratio("pm2_5", Pollutant.PM2_5, "24h"),
    ),
    descriptors=DESCRIPTORS,
)

register_scale(SCALE)
