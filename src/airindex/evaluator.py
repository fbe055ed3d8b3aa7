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
Generic scale evaluator and descriptor mapper.

Every scale is evaluated by the same code path: inputs are matched to the
scale's components, each component is turned into a sub-index by its
strategy, and the sub-indices are aggregated. Breakpoint and ratio scales
report the highest sub-index; AQHI-style scales add up exponential risk
terms and look the total up in a final table.
"""

import inspect
import logging
import math
import numbers
import os
import re
import warnings
from typing import Mapping

from .base import (
    Pollutant,
    check_concentration,
    interpolate,
    ratio_index,
    risk_score,
    standardise_pollutant,
)
from .exceptions import (
    AboveTable,
    BelowTable,
    InsufficientData,
    InvalidAqi,
    InvalidInput,
    MissingPollutant,
)
from .scales import get_scale
from .types import (
    NOT_SUPPLIED,
    Component,
    Descriptor,
    IndexResult,
    Overflow,
    ScaleDefinition,
    ScaleId,
    Strategy,
)

logger = logging.getLogger(__name__)

# "o3_8h", "SO2 24hr", "so2_15min"
_WINDOW_SUFFIX = re.compile(r"^(?P<base>.+?)[_ ](?P<hours>\d+)\s*(?P<unit>hr|h|min)$")

ScaleLike = ScaleId | str | ScaleDefinition

_PACKAGE_DIR = os.path.dirname(__file__)


def _find_stack_level() -> int:
    """Number of frames up to the first caller outside this package."""
    frame = inspect.currentframe()
    level = 0
    try:
        while frame is not None and inspect.getfile(frame).startswith(_PACKAGE_DIR):
            frame = frame.f_back
            level += 1
    finally:
        del frame
    return level


# =============================================================================
# Input Keys
# =============================================================================


def normalise_key(scale: ScaleLike, key: "Pollutant | str") -> str | None:
    """
    Match a caller's input key to one of the scale's component keys.

    Pollutant members, case-insensitive names and common aliases are
    accepted ("PM2.5", "ozone", "Nitrogen Dioxide"). An averaging window
    can be appended ("o3_8h", "SO2 24hr"); when the scale has a single
    component for that pollutant with the same window the plain key is
    used.

    Returns:
        The component key, or None if the scale has no such input
    """
    definition = get_scale(scale)

    window = None
    if isinstance(key, Pollutant):
        base = key
    else:
        name = str(key).strip().lower()
        match = _WINDOW_SUFFIX.match(name)
        if match and standardise_pollutant(match["base"]) is not None:
            unit = "h" if match["unit"] == "hr" else match["unit"]
            window = f"{int(match['hours'])}{unit}"
            name = match["base"]
        base = standardise_pollutant(name)

    if base is None:
        return None

    if window is None:
        return base.value if definition.component(base.value) else None

    windowed = f"{base.value}_{window}"
    if definition.component(windowed):
        return windowed
    component = definition.component(base.value)
    if component is not None and component.averaging == window:
        return base.value
    return None


def _collect(
    definition: ScaleDefinition,
    concentrations: Mapping["Pollutant | str", float | None],
) -> dict[str, float]:
    """Normalise keys, drop absent inputs and validate the rest."""
    present = {}
    seen = set()
    for raw_key, value in concentrations.items():
        key = normalise_key(definition, raw_key)
        if key is None:
            warnings.warn(
                f"Ignoring '{raw_key}': not an input of {definition.scale_id}. "
                f"Accepted inputs: {list(definition.keys)}",
                UserWarning,
                stacklevel=_find_stack_level(),
            )
            continue
        if key in seen:
            raise InvalidInput(f"'{raw_key}' supplies {key} more than once")
        seen.add(key)

        if value is NOT_SUPPLIED:
            continue
        present[key] = check_concentration(value, key)
    return present


def _check_required(definition: ScaleDefinition, present: Mapping[str, float]) -> None:
    missing = [key for key in definition.mandatory_keys if key not in present]
    if missing:
        raise MissingPollutant(
            f"{definition.scale_id} requires {missing}; supplied {list(present)}"
        )
    for group in definition.alternates:
        if not any(key in present for key in group):
            raise MissingPollutant(
                f"{definition.scale_id} requires one of {sorted(group)}"
            )


# =============================================================================
# Sub-indices
# =============================================================================


def sub_index(
    definition: ScaleDefinition,
    component: Component,
    concentration: float,
) -> int | None:
    """
    Calculate one component's sub-index.

    Returns:
        The sub-index, the scale's sentinel when the concentration is above
        the table, or None when the component does not report at this
        concentration (below a threshold table, or above a table whose
        overflow policy is SKIP)
    """
    if component.strategy is Strategy.RATIO:
        return ratio_index(component.standard, concentration)

    value = component.to_table_units(concentration)
    try:
        return interpolate(component.table, value)
    except BelowTable:
        logger.debug(
            "%s: %s %s is below the table, no sub-index",
            definition.scale_id,
            component.key,
            value,
        )
        return None
    except AboveTable:
        if component.overflow is Overflow.SKIP:
            logger.debug(
                "%s: %s %s is above the table, skipped",
                definition.scale_id,
                component.key,
                value,
            )
            return None
        logger.debug(
            "%s: %s %s is above the table, reporting %d",
            definition.scale_id,
            component.key,
            value,
            definition.sentinel,
        )
        return definition.sentinel


def _evaluate_breakpoints(
    definition: ScaleDefinition,
    present: Mapping[str, float],
) -> tuple[int, str, dict[str, int]]:
    sub_indices = {}
    for component in definition.components:
        if component.key not in present:
            continue
        value = sub_index(definition, component, present[component.key])
        logger.debug(
            "%s: %s=%s -> %s",
            definition.scale_id,
            component.key,
            present[component.key],
            value,
        )
        if value is not None:
            sub_indices[component.key] = value

    if not sub_indices:
        raise InsufficientData(
            f"No sub-index could be calculated for {definition.scale_id} "
            f"from {list(present)}"
        )
    if len(sub_indices) < definition.min_components:
        raise InsufficientData(
            f"{definition.scale_id} needs at least {definition.min_components} "
            f"sub-indices, got {list(sub_indices)}"
        )

    # First component in declaration order wins ties
    dominant = max(sub_indices, key=sub_indices.get)
    return sub_indices[dominant], dominant, sub_indices


def _evaluate_risk(
    definition: ScaleDefinition,
    present: Mapping[str, float],
) -> tuple[int, float]:
    if not present:
        raise InsufficientData(f"No inputs supplied for {definition.scale_id}")

    coefficients = {c.key: c.coefficient for c in definition.components}
    risk = risk_score(present, coefficients, definition.alternates)
    if not math.isfinite(risk):
        return definition.sentinel, risk
    try:
        value = interpolate(definition.risk_table, max(risk, 0.0))
    except AboveTable:
        value = definition.sentinel
    return max(definition.scale_min, value), risk


# =============================================================================
# Evaluation
# =============================================================================


def evaluate_detailed(
    scale: ScaleLike,
    concentrations: Mapping["Pollutant | str", float | None],
) -> IndexResult:
    """
    Evaluate a scale and report the full breakdown.

    Args:
        scale: ScaleId, case-insensitive scale name, or a definition
        concentrations: Input key to concentration in µg/m³. None (or a
            missing key) marks an optional input as not supplied.

    Raises:
        UnsupportedScale: If the scale has no registered definition
        InvalidInput: If a concentration is negative, non-finite or not a
            number, or one input is supplied twice
        MissingPollutant: If a mandatory input is absent
        InsufficientData: If too few sub-indices can be calculated
    """
    definition = get_scale(scale)
    present = _collect(definition, concentrations)
    _check_required(definition, present)

    if definition.strategy is Strategy.EXPONENTIAL:
        value, risk = _evaluate_risk(definition, present)
        dominant, sub_indices = None, {}
    else:
        value, dominant, sub_indices = _evaluate_breakpoints(definition, present)
        risk = None

    descriptor = _descriptor(definition, value)
    logger.debug("%s index %d (%s)", definition.scale_id, value, descriptor.label)
    return IndexResult(
        scale=definition.scale_id,
        value=value,
        category=descriptor.label,
        color=descriptor.color,
        dominant=dominant,
        sub_indices=sub_indices,
        risk=risk,
    )


def evaluate(
    scale: ScaleLike,
    concentrations: Mapping["Pollutant | str", float | None],
) -> int:
    """
    Evaluate a scale to a single integer index.

    Example:
        >>> evaluate("EUROPE", {"no2": 60, "o3": 90, "pm10": 40, "pm2_5": 20})
        40
    """
    return evaluate_detailed(scale, concentrations).value


# =============================================================================
# Descriptors
# =============================================================================


def _descriptor(definition: ScaleDefinition, aqi: int) -> Descriptor:
    if isinstance(aqi, bool) or not isinstance(aqi, numbers.Integral):
        raise InvalidAqi(f"Index value must be an integer, got {aqi!r}")
    if aqi < 0:
        raise InvalidAqi(f"Index value cannot be negative, got {aqi}")

    for descriptor in definition.descriptors:
        if descriptor.index_low <= aqi <= descriptor.index_high:
            return descriptor
    return definition.descriptors[-1]


def describe(scale: ScaleLike, aqi: int) -> str:
    """
    Get the category label for an index value.

    Values above the top descriptor (including the above-scale sentinel)
    get the last label.

    Raises:
        InvalidAqi: If aqi is negative or not an integer
    """
    return _descriptor(get_scale(scale), aqi).label
