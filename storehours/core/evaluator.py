"""
core/evaluator.py

ScheduleEvaluator: decides whether a store is open at a given instant.
- Finds the entry governing the instant's weekday (first match wins)
- Splits its hours into periods ("08:00-12:00 / 14:00-18:00")
- Reports open if any period contains the instant's wall-clock time

An empty schedule means "always open"; an unknown day, a closed entry or an
unparseable period all count as closed. Nothing here raises on bad text.
"""

import logging
from datetime import datetime

from storehours.core.schedule import ScheduleEntry
from storehours.patterns.patterns import PERIOD_SEPARATOR
from storehours.policies.policies import Policies
from storehours.utils.daynames import DayResolver
from storehours.utils.timeparse import TimeParser

log = logging.getLogger(__name__)


class ScheduleEvaluator:
    """Stateless open/closed evaluation over a weekly schedule."""

    def __init__(self, policies=None):
        self.policies = policies if policies else Policies()

    def entry_for(self, schedule, now):
        """Return the ScheduleEntry governing now's weekday, or None."""
        today = DayResolver.weekday_index(now)
        candidates = (
            entry
            for entry in map(ScheduleEntry.coerce, schedule or ())
            if DayResolver.resolve(entry.day) == today
        )
        return self.policies.pick_entry(candidates)

    @staticmethod
    def periods(entry):
        """Trimmed, non-empty periods of an entry's hours."""
        return [p.strip() for p in entry.hours.split(PERIOD_SEPARATOR) if p.strip()]

    def is_open(self, schedule, now):
        if not schedule:
            return self.policies.status_without_schedule()

        entry = self.entry_for(schedule, now)
        if entry is None:
            log.debug("No schedule entry for weekday %d", DayResolver.weekday_index(now))
            return False
        if not entry.is_open:
            return False

        return any(TimeParser.is_within_range(now, period) for period in self.periods(entry))


def current_time(tz=None):
    """Read the clock once; local wall time when tz is None."""
    return datetime.now(tz)


def is_open_now(schedule, now=None, tz=None, policies=None):
    """
    True if the store is open at `now` (default: the current time).

    `tz` fixes the wall clock to a zone: the clock is read in it, and an aware
    `now` is converted into it. A naive `now` is taken as already local.
    """
    if now is None:
        now = current_time(tz)
    elif tz is not None and now.tzinfo is not None:
        now = now.astimezone(tz)
    return ScheduleEvaluator(policies).is_open(schedule, now)
