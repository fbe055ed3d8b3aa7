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
Scale definitions and their registry.

Each scale module builds one ScaleDefinition (SCALE) from its published
breakpoints and registers it on import. The registry is just a dictionary
keyed by ScaleId; it is filled once at import time and only read after that.

Example:
    >>> from airindex.scales import get_scale
    >>> scale = get_scale("europe")
    >>> scale.keys
    ('no2', 'o3', 'pm10', 'pm2_5')
"""

import warnings

from ..exceptions import UnsupportedScale
from ..types import ScaleDefinition, ScaleId

_SCALES: dict[ScaleId, ScaleDefinition] = {}


def register_scale(definition: ScaleDefinition) -> None:
    """
    Register a scale definition.

    If the scale is already registered it is replaced with a warning.
    """
    if definition.scale_id in _SCALES:
        warnings.warn(
            f"Scale '{definition.scale_id}' is already registered and will be replaced",
            UserWarning,
            stacklevel=2,
        )
    _SCALES[definition.scale_id] = definition


def unregister_scale(scale: ScaleId | str) -> bool:
    """
    Remove a scale from the registry.

    Returns:
        bool: True if the scale was removed, False if it wasn't registered
    """
    return _SCALES.pop(ScaleId.parse(scale), None) is not None


def get_scale(scale: ScaleId | str | ScaleDefinition) -> ScaleDefinition:
    """
    Resolve a scale to its definition.

    Args:
        scale: ScaleId member, case-insensitive name, or a definition

    Raises:
        UnsupportedScale: If the scale is unknown or has no definition
    """
    if isinstance(scale, ScaleDefinition):
        return scale

    scale_id = ScaleId.parse(scale)
    definition = _SCALES.get(scale_id)
    if definition is None:
        raise UnsupportedScale(f"Scale '{scale_id}' has no registered definition")
    return definition


def list_scales() -> list[str]:
    """List registered scale names in declaration order."""
    return [scale.value for scale in ScaleId if scale in _SCALES]


# Import scales to trigger registration
from . import (  # noqa: E402, F401
    australia_nepm,
    canada_aqhi,
    china,
    eu_caqi,
    hong_kong_aqhi,
    india_naqi,
    singapore_psi,
    south_korea_cai,
    uk_daqi,
    us_epa,
)
