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
Air Quality Index calculations for ten national and regional scales.

Supported Scales:
    - AUSTRALIA: NEPM ratio index (100 = at the standard)
    - CANADA: Air Quality Health Index (1-10, 10+)
    - EUROPE: Common Air Quality Index, hourly background grid (0-100)
    - HONG_KONG: Air Quality Health Index (1-10, 10+)
    - INDIA: National Air Quality Index (0-400, Severe above)
    - MAINLAND_CHINA: HJ 633-2012 AQI (0-500)
    - SINGAPORE: Pollutant Standards Index (0-500)
    - SOUTH_KOREA: Comprehensive Air-quality Index (0-500)
    - UNITED_KINGDOM: Daily Air Quality Index (1-10)
    - UNITED_STATES: EPA AQI (0-500)

All concentrations are µg/m³, already averaged over the window each input
names. A result of scale_max(scale) + 1 means "above the top of the scale".
"""

from .api import (
    aqi_frame,
    compute_aqi,
    compute_aqi_detailed,
    default_scale,
    describe_aqi,
    get_scale_info,
    list_scales,
    required_inputs,
    scale_max,
)
from .base import (
    Pollutant,
    ensure_ugm3,
    interpolate,
    ppb_to_ugm3,
    ratio_index,
    risk_score,
    standardise_pollutant,
    ugm3_to_ppb,
)
from .exceptions import (
    AQIError,
    InsufficientData,
    InvalidAqi,
    InvalidInput,
    MissingPollutant,
    UnsupportedScale,
)
from .types import NOT_SUPPLIED, SCALE_MAX, IndexInfo, IndexResult, ScaleId

__version__ = "0.1.0"

__all__ = [
    # Calculations
    "compute_aqi",
    "compute_aqi_detailed",
    "describe_aqi",
    "aqi_frame",
    # Scales
    "ScaleId",
    "SCALE_MAX",
    "scale_max",
    "list_scales",
    "get_scale_info",
    "required_inputs",
    "default_scale",
    # Inputs
    "NOT_SUPPLIED",
    "Pollutant",
    "standardise_pollutant",
    "ppb_to_ugm3",
    "ugm3_to_ppb",
    "ensure_ugm3",
    # Formulas
    "interpolate",
    "ratio_index",
    "risk_score",
    # Types
    "IndexInfo",
    "IndexResult",
    # Errors
    "AQIError",
    "InvalidInput",
    "MissingPollutant",
    "InsufficientData",
    "InvalidAqi",
    "UnsupportedScale",
]
