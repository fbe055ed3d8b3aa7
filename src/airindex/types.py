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
Core type definitions for airindex.

A scale is described declaratively: a ScaleDefinition lists its
Components (one per accepted input), the strategy that turns each input
into a sub-index, and the Descriptor table used to label results. The
evaluator consumes these records generically; no scale has its own
calculation code.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, TypedDict

from .base import BreakpointInterval, Pollutant, is_banded, round_places, truncate
from .exceptions import UnsupportedScale

# Marks an optional input as not measured. Omitting the key is equivalent.
# Zero is a valid reading and is never treated as "not supplied".
NOT_SUPPLIED = None


class ScaleId(str, Enum):
    """The national and regional index standards."""

    AUSTRALIA = "AUSTRALIA"
    CANADA = "CANADA"
    EUROPE = "EUROPE"
    HONG_KONG = "HONG_KONG"
    INDIA = "INDIA"
    MAINLAND_CHINA = "MAINLAND_CHINA"
    SINGAPORE = "SINGAPORE"
    SOUTH_KOREA = "SOUTH_KOREA"
    UNITED_KINGDOM = "UNITED_KINGDOM"
    UNITED_STATES = "UNITED_STATES"

    @classmethod
    def parse(cls, value: "ScaleId | str") -> "ScaleId":
        """
        Resolve a scale from a member or a case-insensitive name.

        Raises:
            UnsupportedScale: If the name is not a known scale
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedScale(
                f"Unknown scale '{value}'. Available: {[s.value for s in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value


# Highest defined index value of each scale. A result of SCALE_MAX + 1 means
# "above the top of the scale". Australia's ratio index has no sentinel;
# 200 is the documented top of its Hazardous band.
SCALE_MAX = MappingProxyType(
    {
        ScaleId.AUSTRALIA: 200,
        ScaleId.CANADA: 10,
        ScaleId.EUROPE: 100,
        ScaleId.HONG_KONG: 10,
        ScaleId.INDIA: 400,
        ScaleId.MAINLAND_CHINA: 500,
        ScaleId.SINGAPORE: 500,
        ScaleId.SOUTH_KOREA: 500,
        ScaleId.UNITED_KINGDOM: 10,
        ScaleId.UNITED_STATES: 500,
    }
)


class Strategy(str, Enum):
    """How a component (or a whole scale) turns concentrations into an index."""

    BREAKPOINT = "breakpoint"
    RATIO = "ratio"
    EXPONENTIAL = "exponential"


class Overflow(str, Enum):
    """What happens when a concentration is above a component's table."""

    SENTINEL = "sentinel"  # Report the scale's ceiling + 1
    SKIP = "skip"  # Produce no sub-index; another averaging window takes over


class Descriptor(NamedTuple):
    """One category of a scale's descriptor table."""

    index_low: int
    index_high: int
    label: str
    color: str


@dataclass(frozen=True)
class Component:
    """
    One input of a scale: a pollutant over an averaging window.

    Attributes:
        key: Input key callers use (e.g. "no2", "o3_8h")
        pollutant: Pollutant measured
        averaging: Averaging window label (e.g. "1h", "24h")
        strategy: BREAKPOINT, RATIO or EXPONENTIAL
        table: Breakpoint table (BREAKPOINT only), in ``unit``
        standard: Regulatory limit in µg/m³ (RATIO only)
        coefficient: Risk coefficient per µg/m³ (EXPONENTIAL only)
        mandatory: Whether the scale cannot be evaluated without it
        overflow: Behaviour above the top of the table
        unit: Unit the published table is expressed in
        divisor: µg/m³ per table unit (1000 for mg/m³, 1963.2 for O3 ppm)
        truncate_to: Decimal places to truncate to before lookup
        round_to: Decimal places to round to before lookup
    """

    key: str
    pollutant: Pollutant
    averaging: str
    strategy: Strategy = Strategy.BREAKPOINT
    table: tuple[BreakpointInterval, ...] = ()
    standard: float | None = None
    coefficient: float | None = None
    mandatory: bool = False
    overflow: Overflow = Overflow.SENTINEL
    unit: str = "µg/m³"
    divisor: float = 1.0
    truncate_to: int | None = None
    round_to: int | None = None

    def __post_init__(self):
        if self.strategy is Strategy.BREAKPOINT and not self.table:
            raise ValueError(f"Component {self.key} needs a breakpoint table")
        if self.strategy is Strategy.RATIO and not (self.standard or 0) > 0:
            raise ValueError(f"Component {self.key} needs a positive standard")
        if self.strategy is Strategy.EXPONENTIAL and not (self.coefficient or 0) > 0:
            raise ValueError(f"Component {self.key} needs a positive coefficient")
        if self.divisor <= 0:
            raise ValueError(f"Component {self.key} needs a positive divisor")

    @property
    def banded(self) -> bool:
        """True when the table reports discrete bands rather than a line."""
        return bool(self.table) and is_banded(self.table)

    def to_table_units(self, concentration: float) -> float:
        """Convert a µg/m³ concentration into the table's unit and precision."""
        value = concentration / self.divisor
        if self.truncate_to is not None:
            # Division leaves 0.0699999... for 0.070 ppm; settle it first
            value = truncate(round(value, 9), self.truncate_to)
        if self.round_to is not None:
            value = round_places(value, self.round_to)
        return value


class IndexInfo(TypedDict):
    """Metadata about a scale."""

    name: str  # Full name of the index
    short_name: str  # Abbreviated name
    country: str  # Country or region
    scale_min: int  # Minimum possible value
    scale_max: int  # Maximum defined value
    strategy: str  # breakpoint, ratio or exponential
    inputs: list[str]  # Accepted input keys
    mandatory: list[str]  # Input keys that must be supplied
    description: str  # Brief description
    url: str  # Reference URL


@dataclass(frozen=True)
class ScaleDefinition:
    """
    Declarative description of one national index.

    The scale's strategy tag decides aggregation: BREAKPOINT and RATIO
    scales report the maximum sub-index, EXPONENTIAL scales sum the risk
    terms of all components and look the total up in ``risk_table``.
    """

    scale_id: ScaleId
    name: str
    short_name: str
    country: str
    description: str
    url: str
    strategy: Strategy
    components: tuple[Component, ...]
    descriptors: tuple[Descriptor, ...]
    scale_min: int = 0
    risk_table: tuple[BreakpointInterval, ...] = ()
    # Groups of keys of which at least one must be supplied. On exponential
    # scales the members of a group also share one risk term.
    alternates: tuple[frozenset[str], ...] = ()
    min_components: int = 1
    _by_key: MappingProxyType = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_key = {component.key: component for component in self.components}
        if len(by_key) != len(self.components):
            raise ValueError(f"{self.scale_id} has duplicate component keys")
        object.__setattr__(self, "_by_key", MappingProxyType(by_key))

        exponential = self.strategy is Strategy.EXPONENTIAL
        for component in self.components:
            if (component.strategy is Strategy.EXPONENTIAL) != exponential:
                raise ValueError(
                    f"{self.scale_id}: component {component.key} does not match "
                    f"the scale strategy {self.strategy.value}"
                )
        if exponential and not self.risk_table:
            raise ValueError(f"{self.scale_id} needs a risk table")
        for group in self.alternates:
            unknown = set(group) - set(by_key)
            if unknown:
                raise ValueError(f"{self.scale_id}: unknown alternates {unknown}")
        if not self.descriptors:
            raise ValueError(f"{self.scale_id} needs a descriptor table")

    @property
    def scale_max(self) -> int:
        return SCALE_MAX[self.scale_id]

    @property
    def sentinel(self) -> int:
        """Value reported for concentrations above the top of the scale."""
        return self.scale_max + 1

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._by_key)

    @property
    def mandatory_keys(self) -> tuple[str, ...]:
        return tuple(c.key for c in self.components if c.mandatory)

    def component(self, key: str) -> Component | None:
        return self._by_key.get(key)

    def info(self) -> IndexInfo:
        return IndexInfo(
            name=self.name,
            short_name=self.short_name,
            country=self.country,
            scale_min=self.scale_min,
            scale_max=self.scale_max,
            strategy=self.strategy.value,
            inputs=list(self.keys),
            mandatory=list(self.mandatory_keys),
            description=self.description,
            url=self.url,
        )


@dataclass(frozen=True)
class IndexResult:
    """Result of evaluating one scale."""

    scale: ScaleId
    value: int  # Aggregated index value
    category: str  # Descriptor label for value
    dominant: str | None  # Key of the worst component (None for AQHI scales)
    color: str  # Hex colour of the category
    sub_indices: dict[str, int] = field(default_factory=dict)
    risk: float | None = None  # Total added risk (AQHI scales only)
