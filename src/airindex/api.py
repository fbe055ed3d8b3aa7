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
Public API for index calculations.

Quick Start:
    >>> import airindex
    >>>
    >>> # One set of readings (µg/m³)
    >>> airindex.compute_aqi("EUROPE", {"no2": 60, "o3": 90, "pm10": 40})
    40
    >>> airindex.describe_aqi("EUROPE", 40)
    'Low'
    >>>
    >>> # Full breakdown
    >>> result = airindex.compute_aqi_detailed("UNITED_STATES", {"pm2_5": 4.5})
    >>> result.dominant, result.category
    ('pm2_5', 'Good')
    >>>
    >>> # A DataFrame with one column per pollutant
    >>> scored = airindex.aqi_frame(df, scale="UNITED_KINGDOM")
"""

import os

import pandas as pd

from .decorators import with_logging
from .evaluator import describe, evaluate, evaluate_detailed, normalise_key
from .exceptions import AQIError, InsufficientData, InvalidInput, UnsupportedScale
from .scales import get_scale
from .scales import list_scales as _list_scales
from .types import SCALE_MAX, IndexInfo, IndexResult, ScaleDefinition, ScaleId

__all__ = [
    # Main API functions
    "compute_aqi",
    "compute_aqi_detailed",
    "describe_aqi",
    "scale_max",
    "list_scales",
    "get_scale_info",
    "required_inputs",
    "default_scale",
    "aqi_frame",
]

DEFAULT_SCALE_ENV = "AIRINDEX_DEFAULT_SCALE"

OUTPUT_COLUMNS = ["aqi_value", "aqi_category", "dominant_pollutant", "aqi_error"]

ScaleLike = ScaleId | str | ScaleDefinition


# =============================================================================
# Single Readings
# =============================================================================


def compute_aqi(scale: ScaleLike, concentrations: dict) -> int:
    """
    Calculate the index value of one set of concentrations.

    Args:
        scale: Scale to use (e.g. ScaleId.EUROPE or "europe")
        concentrations: Input key to concentration in µg/m³, averaged over
            the window each input names. None marks an input as not supplied.

    Returns:
        int: Index value. scale_max(scale) + 1 means above the top of the scale.

    Raises:
        UnsupportedScale, InvalidInput, MissingPollutant, InsufficientData
    """
    return evaluate(scale, concentrations)


def compute_aqi_detailed(scale: ScaleLike, concentrations: dict) -> IndexResult:
    """
    Calculate the index value with its category and per-pollutant breakdown.

    Example:
        >>> result = compute_aqi_detailed("INDIA", {"pm10": 80, "no2": 30, "so2": 10})
        >>> result.value, result.dominant
        (80, 'pm10')
    """
    return evaluate_detailed(scale, concentrations)


def describe_aqi(scale: ScaleLike, aqi: int) -> str:
    """
    Get the category label for an index value on a scale.

    Raises:
        InvalidAqi: If aqi is negative or not an integer
    """
    return describe(scale, aqi)


def scale_max(scale: ScaleLike) -> int:
    """Highest defined index value of a scale."""
    if isinstance(scale, ScaleDefinition):
        return scale.scale_max
    return SCALE_MAX[ScaleId.parse(scale)]


# =============================================================================
# Scale Metadata
# =============================================================================


def list_scales() -> list[str]:
    """
    List all available scales.

    Returns:
        List of scale names (e.g., ["AUSTRALIA", "CANADA", ...])
    """
    return _list_scales()


def get_scale_info(scale: ScaleLike) -> IndexInfo | None:
    """
    Get detailed information about a scale.

    Args:
        scale: Scale name or ScaleId

    Returns:
        IndexInfo dict with name, country, scale range, inputs, description
        and url, or None if the scale is not found

    Example:
        >>> info = get_scale_info("UNITED_KINGDOM")
        >>> info["name"]
        'UK Daily Air Quality Index'
    """
    try:
        return get_scale(scale).info()
    except UnsupportedScale:
        return None


def required_inputs(scale: ScaleLike) -> dict[str, list]:
    """
    Describe which inputs a scale needs.

    Returns:
        dict with "mandatory" (keys that must be supplied), "one_of"
        (groups of which at least one key must be supplied), "optional"
        and "min_components"

    Example:
        >>> required_inputs("HONG_KONG")["one_of"]
        [['pm10', 'pm2_5']]
    """
    definition = get_scale(scale)
    mandatory = list(definition.mandatory_keys)
    return {
        "mandatory": mandatory,
        "one_of": [sorted(group) for group in definition.alternates],
        "optional": [key for key in definition.keys if key not in mandatory],
        "min_components": definition.min_components,
    }


def default_scale() -> ScaleId:
    """
    Scale used when none is given.

    Read from the AIRINDEX_DEFAULT_SCALE environment variable; defaults to
    UNITED_STATES.

    Raises:
        UnsupportedScale: If the variable names an unknown scale
    """
    return ScaleId.parse(os.getenv(DEFAULT_SCALE_ENV, ScaleId.UNITED_STATES.value))


# =============================================================================
# DataFrames
# =============================================================================


@with_logging()
def aqi_frame(data: pd.DataFrame, scale: ScaleLike | None = None) -> pd.DataFrame:
    """
    Calculate the index for every row of a wide DataFrame.

    Each row is one set of readings; columns are input keys in any form
    normalise_key accepts ("PM2.5", "o3_8h", "Nitrogen Dioxide"). Columns
    that are not inputs of the scale (site codes, timestamps) are carried
    through untouched. Missing values count as not supplied.

    Args:
        data: DataFrame with one column per pollutant (µg/m³)
        scale: Scale to use. Defaults to default_scale().

    Returns:
        pd.DataFrame: Copy of data with added columns:
            - aqi_value: Index value (nullable integer)
            - aqi_category: Category label
            - dominant_pollutant: Worst input key (None for AQHI scales)
            - aqi_error: "ErrorType: message" for rows that could not be
              evaluated, otherwise None

    Raises:
        UnsupportedScale: If the scale is unknown
        InvalidInput: If two columns map to the same input
        InsufficientData: If no column is an input of the scale
    """
    definition = get_scale(scale if scale is not None else default_scale())

    columns = {}
    for column in data.columns:
        key = normalise_key(definition, column)
        if key is None:
            continue
        if key in columns.values():
            raise InvalidInput(f"Column '{column}' duplicates input {key}")
        columns[column] = key

    if not columns:
        raise InsufficientData(
            f"No columns match inputs of {definition.scale_id}. "
            f"Expected some of {list(definition.keys)}"
        )

    inputs = data[list(columns)].rename(columns=columns)

    values, categories, dominants, errors = [], [], [], []
    for record in inputs.to_dict("records"):
        # Missing cells (NaN, None, pd.NA) mean "not measured"
        row = {key: None if pd.isna(value) else value for key, value in record.items()}
        try:
            result = evaluate_detailed(definition, row)
        except AQIError as e:
            values.append(pd.NA)
            categories.append(None)
            dominants.append(None)
            errors.append(f"{type(e).__name__}: {e}")
            continue
        values.append(result.value)
        categories.append(result.category)
        dominants.append(result.dominant)
        errors.append(None)

    output = data.copy()
    output["aqi_value"] = pd.array(values, dtype="Int64")
    output["aqi_category"] = categories
    output["dominant_pollutant"] = dominants
    output["aqi_error"] = errors
    return output
