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
Hong Kong Air Quality Health Index (AQHI).

The added health risk is the sum of 100 * (exp(beta * c) - 1) for NO2, SO2
and O3, plus the larger of the PM10 and PM2.5 terms. The total is banded
into 1-10, with 10+ (reported as 11) above the top band.

References:
  https://www.aqhi.gov.hk/en/what-is-aqhi/faqs.html
  https://aqicn.org/faq/2015-06-03/overview-of-hong-kongs-air-quality-health-index/
"""

from ..base import Pollutant, make_bands
from ..types import Component, Descriptor, ScaleDefinition, ScaleId, Strategy
from . import register_scale

# Risk coefficients per µg/m³, 3-hour moving averages
COEFFICIENTS = {
    "no2": 0.0004462559,
    "so2": 0.0001393235,
    "o3": 0.0005116328,
    "pm10": 0.0002821751,
    "pm2_5": 0.0002180567,
}

# Upper bound (inclusive) of total added risk (%) for AQHI 1..10
RISK_TABLE = make_bands(
    range(1, 11),
    (1.88, 3.76, 5.64, 7.52, 9.41, 11.29, 12.91, 15.07, 17.22, 19.37),
)

DESCRIPTORS = (
    Descriptor(0, 3, "Low", "#4DB848"),
    Descriptor(4, 6, "Moderate", "#F7941D"),
    Descriptor(7, 7, "High", "#ED1C24"),
    Descriptor(8, 10, "Very High", "#8B4513"),
    Descriptor(11, 11, "Serious", "#000000"),
)


def _risk(key: str, pollutant: Pollutant, mandatory: bool = True) -> Component:
    return Component(
        key,
        pollutant,
        "3h",
        strategy=Strategy.EXPONENTIAL,
        coefficient=COEFFICIENTS[key],
        mandatory=mandatory,
    )


SCALE = ScaleDefinition(
    scale_id=ScaleId.HONG_KONG,
    name="Air Quality Health Index (Hong Kong)",
    short_name="AQHI",
    country="Hong Kong",
    description=(
        "Health-risk index from the combined added risk of NO2, SO2, O3 and "
        "the worse of PM10 and PM2.5. Reported 1-10 and 10+."
    ),
    url="https://www.aqhi.gov.hk/en/what-is-aqhi/faqs.html",
    strategy=Strategy.EXPONENTIAL,
    components=(
        _risk("no2", Pollutant.NO2),
        _risk("so2", Pollutant.SO2),
        _risk("o3", Pollutant.O3),
        _risk("pm10", Pollutant.PM10, mandatory=False),
        _risk("pm2_5", Pollutant.PM2_5, mandatory=False),
    ),
    descriptors=DESCRIPTORS,
    scale_min=1,
    risk_table=RISK_TABLE,
    alternates=(frozenset({"pm10", "pm2_5"}),),
)

register_scale(SCALE)
