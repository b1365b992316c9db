#storehours\__init__.py

import logging

from .core.evaluator import ScheduleEvaluator, is_open_now
from .core.schedule import ScheduleEntry
from .policies.policies import Policies
from .utils.daynames import UNKNOWN_DAY, DayResolver
from .utils.timeparse import TimeParser

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "is_open_now",
    "ScheduleEvaluator",
    "ScheduleEntry",
    "Policies",
    "DayResolver",
    "TimeParser",
    "UNKNOWN_DAY",
]
