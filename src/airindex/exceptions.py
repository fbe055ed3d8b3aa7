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
Exceptions raised by index calculations.

Every caller-facing error derives from AQIError, which is itself a
ValueError, so code that already guards calculations with
``except ValueError`` keeps working.

AboveTable and BelowTable are lookup signals from the breakpoint
interpolator. The evaluator translates them into a ceiling sentinel or a
skipped sub-index; they only escape when interpolate() is called directly.
"""


class AQIError(ValueError):
    """Base class for all index calculation errors."""


class InvalidInput(AQIError):
    """A concentration (or standard) is negative, non-finite or not a number."""


class MissingPollutant(AQIError):
    """A mandatory pollutant was not supplied for the chosen scale."""


class InsufficientData(AQIError):
    """No sub-index (or too few sub-indices) could be produced."""


class InvalidAqi(AQIError):
    """A negative or non-integer index was passed to the descriptor mapper."""


class UnsupportedScale(AQIError):
    """The requested scale is unknown or has no registered definition."""


class OutOfTable(LookupError):
    """A concentration falls outside a breakpoint table."""

    def __init__(self, concentration: float, bound: float):
        self.concentration = concentration
        self.bound = bound
        super().__init__(f"Concentration {concentration} is outside the table ({bound})")


class AboveTable(OutOfTable):
    """Concentration exceeds the last interval's upper bound."""


class BelowTable(OutOfTable):
    """Concentration is below the first interval's lower bound."""
