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
Canadian Air Quality Health Index (AQHI).

AQHI = (10 / 10.4) * 100 * sum(exp(beta * c) - 1) over NO2, O3 and PM2.5
(3-hour averages), reported on a 1-10 scale with 10+ above the top.

The published coefficients are per ppb for the gases; they are divided by
the ppb-to-µg/m³ factor so that inputs stay in µg/m³:
  O3:  0.000537 / 1.9632 = 0.000273533
  NO2: 0.000871 / 1.8816 = 0.000462904

Reference: https://en.wikipedia.org/wiki/Air_Quality_Health_Index_(Canada)
"""

from ..base import Pollutant, make_table
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

COEFFICIENTS = {
    "no2": 0.000462904,
    "o3": 0.000273533,
    "pm2_5": 0.000487,
}

# Total added risk of 10.4% corresponds to AQHI 10
RISK_TABLE = make_table((0, 10), (0, 10.4))

DESCRIPTORS = (
    Descriptor(0, 3, "Low Risk", "#00CCFF"),
    Descriptor(4, 6, "Moderate Risk", "#FFFF00"),
    Descriptor(7, 10, "High Risk", "#FF7E00"),
    Descriptor(11, 11, "Very High Risk", "#FF0000"),
)


def _risk(key: str, pollutant: Pollutant) -> Component:
    return Component(
        key,
        pollutant,
        "3h",
        strategy=Strategy.EXPONENTIAL,
        coefficient=COEFFICIENTS[key],
        mandatory=True,
    )


SCALE = ScaleDefinition(
    scale_id=ScaleId.CANADA,
    name="Air Quality Health Index (Canada)",
    short_name="AQHI",
    country="Canada",
    description=(
        "Health-risk index built from the combined short-term mortality risk "
        "of NO2, O3 and PM2.5. Reported 1-10, with 10+ for very high risk."
    ),
    url="https://en.wikipedia.org/wiki/Air_Quality_Health_Index_(Canada)",
    strategy=Strategy.EXPONENTIAL,
    components=(
        _risk("no2", Pollutant.NO2),
        _risk("o3", Pollutant.O3),
        _risk("pm2_5", Pollutant.PM2_5),
    ),
    descriptors=DESCRIPTORS,
    scale_min=1,
    risk_table=RISK_TABLE,
)

register_scale(SCALE)
