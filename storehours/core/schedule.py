"""
core/schedule.py

ScheduleEntry: one row of a store's weekly opening hours.
Built directly or from the storefront's settings record:
    {"day": "segunda-feira", "hours": "08:00-12:00 / 14:00-18:00", "isOpen": true}
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleEntry:
    day: str
    hours: str = ""
    is_open: bool = True

    @classmethod
    def from_dict(cls, data):
        """Accept camelCase `isOpen` or snake_case `is_open`; open by default."""
        if "isOpen" in data:
            is_open = data["isOpen"]
        else:
            is_open = data.get("is_open", True)
        return cls(
            day=str(data.get("day") or ""),
            hours=str(data.get("hours") or ""),
            is_open=bool(is_open),
        )

    @classmethod
    def coerce(cls, item):
        """Return item as a ScheduleEntry (passes entries through, converts mappings)."""
        if isinstance(item, cls):
            return item
        return cls.from_dict(item)
