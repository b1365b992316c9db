#storehours\utils\__init__.py

from .daynames import UNKNOWN_DAY, DayResolver
from .timeparse import TimeParser

__all__ = [
    "DayResolver",
    "TimeParser",
    "UNKNOWN_DAY",
]
