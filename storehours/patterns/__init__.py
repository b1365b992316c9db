from .patterns import (
    RANGE_SEPARATOR,
    CLOCK_SEPARATOR,
    CLOCK_COMPONENT,
    PERIOD_SEPARATOR,
)

__all__ = [
    "RANGE_SEPARATOR",
    "CLOCK_SEPARATOR",
    "CLOCK_COMPONENT",
    "PERIOD_SEPARATOR",
]
