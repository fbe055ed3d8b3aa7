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
Function decorators for cross-cutting concerns.

Index calculations themselves are pure and do not log above DEBUG. The
batch entry points are wrapped with with_logging so that long runs over
DataFrames are visible at INFO level.
"""

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

# Type variable for generic function signatures
F = TypeVar("F", bound=Callable)


def with_logging(
    logger_name: str | None = None,
    level: int = logging.INFO,
) -> Callable[[F], F]:
    """
    Decorator to add logging to function entry and exit.

    Logs function calls at the given level with the argument count and
    elapsed time. Errors are logged at ERROR level before being re-raised.

    Args:
        logger_name: Name of logger to use. If None, uses the module name.
        level: Level for the entry and exit messages (default: INFO)

    Returns:
        Callable: Decorated function with logging

    Example:
        >>> @with_logging("airindex.batch")
        ... def score_rows(data, scale):
        ...     return aqi_frame(data, scale)
    """

    def decorator(func: F) -> F:
        func_logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            func_logger.log(
                level,
                f"Calling {func.__name__}",
                extra={
                    "function": func.__name__,
                    "args_count": len(args),
                    "kwargs_keys": list(kwargs.keys()),
                },
            )
            start = time.perf_counter()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                func_logger.error(
                    f"Error in {func.__name__}: {e}",
                    extra={
                        "function": func.__name__,
                        "error_type": type(e).__name__,
                        "error_message": str(e),
                    },
                    exc_info=True,
                )
                raise

            elapsed = time.perf_counter() - start
            func_logger.log(
                level,
                f"Completed {func.__name__} in {elapsed:.3f}s",
                extra={"function": func.__name__, "elapsed": elapsed},
            )
            return result

        return wrapper

    return decorator
