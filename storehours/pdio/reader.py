#storehours\pdio\reader.py
"""
JSON reader for store schedules.

Accepts either a bare list of entries or a store settings record holding the
list under "openingHours" / "opening_hours". Returns ScheduleEntry objects.
"""

import json
from pathlib import Path

from storehours.core.schedule import ScheduleEntry
from storehours.infra.constants import SCHEDULE_KEYS


class ScheduleFormatError(ValueError):
    """Schedule document is not valid JSON or not shaped like a schedule."""


class ScheduleReader:
    """Loads schedules from JSON files or text."""

    def __init__(self, encoding="utf-8"):
        self.encoding = encoding

    def read(self, path):
        """Read and parse a schedule file. Raises FileNotFoundError if missing."""
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Schedule file not found: {p}")
        return self.parse(p.read_text(encoding=self.encoding))

    def parse(self, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ScheduleFormatError(f"Invalid schedule JSON: {e}") from e

        if isinstance(data, dict):
            data = self._unwrap_record(data)
        if not isinstance(data, list):
            raise ScheduleFormatError("Schedule must be a list of entries")

        entries = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise ScheduleFormatError(f"Entry {i} is not an object: {item!r}")
            entries.append(ScheduleEntry.from_dict(item))
        return entries

    @staticmethod
    def _unwrap_record(record):
        for key in SCHEDULE_KEYS:
            if key in record:
                # null schedule on a settings record means "not configured"
                return record[key] if record[key] is not None else []
        raise ScheduleFormatError(
            "Store record has no schedule (expected one of: %s)" % ", ".join(SCHEDULE_KEYS)
        )
