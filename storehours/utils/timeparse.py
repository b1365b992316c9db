#storehours\utils\timeparse.py
"""
Time parsing utilities implemented as a class.
- TimeParser.parse_clock(token)
- TimeParser.parse_range(text)
- TimeParser.is_within_range(now, text)
"""

import logging

from storehours.patterns.patterns import (CLOCK_COMPONENT, CLOCK_SEPARATOR,
                                          RANGE_SEPARATOR)

log = logging.getLogger(__name__)


class TimeParser:
    """Clock token -> minutes after midnight, and range membership."""

    @staticmethod
    def parse_clock(tok):
        """
        Convert "HH:MM" into minutes after midnight.

        A missing or empty minute component counts as 0 ("8", "8:").
        Returns None when the hour is missing or any component is not numeric.
        Components are not range-checked: "25:00" is 1500.
        """
        parts = [p.strip() for p in tok.strip().split(CLOCK_SEPARATOR)]
        hour_tok = parts[0]
        minute_tok = parts[1] if len(parts) > 1 else ""

        if not CLOCK_COMPONENT.fullmatch(hour_tok):
            return None
        if minute_tok and not CLOCK_COMPONENT.fullmatch(minute_tok):
            return None

        minute = int(minute_tok) if minute_tok else 0
        return int(hour_tok) * 60 + minute

    @classmethod
    def parse_range(cls, text):
        """
        Parse a range such as "08:00 - 18:00" or "08:00 às 18:00".
        Returns (start_minutes, end_minutes) or None.
        """
        if not text:
            return None
        pieces = [p for p in RANGE_SEPARATOR.split(text.strip()) if p]
        if len(pieces) < 2:
            return None

        start = cls.parse_clock(pieces[0])
        end = cls.parse_clock(pieces[1])
        if start is None or end is None:
            return None
        return start, end

    @classmethod
    def is_within_range(cls, now, text):
        """
        True if the wall-clock time of `now` falls inside the range.

        Bounds are inclusive. When end <= start the range wraps past midnight,
        so a zero-length range ("10:00-10:00") matches the whole day.
        Malformed text never raises; it is simply not in range.
        """
        bounds = cls.parse_range(text)
        if bounds is None:
            log.debug("Unparseable time range: %r", text)
            return False

        start, end = bounds
        now_minutes = now.hour * 60 + now.minute

        # overnight span
        if end <= start:
            return now_minutes >= start or now_minutes <= end
        return start <= now_minutes <= end
