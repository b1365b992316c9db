#storehours\infra\__init__.py

from .constants import (CONSTANTS, DAY_INDEX, DAY_LABELS, SCHEDULE_KEYS,
                        STATUS_CLOSED, STATUS_OPEN)
from .logger import LoggerFactory

__all__ = [
    "LoggerFactory",
    "CONSTANTS",
    "DAY_INDEX",
    "DAY_LABELS",
    "SCHEDULE_KEYS",
    "STATUS_OPEN",
    "STATUS_CLOSED",
]
