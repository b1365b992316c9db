#storehours\utils\daynames.py

from storehours.infra.constants import DAY_INDEX

UNKNOWN_DAY = None


class DayResolver:
    """pt-BR weekday label -> index (0 = domingo .. 6 = sábado)."""

    @staticmethod
    def resolve(label):
        """Return the weekday index for label, or UNKNOWN_DAY if not in the table."""
        if label is None:
            return UNKNOWN_DAY
        return DAY_INDEX.get(str(label).lower().strip(), UNKNOWN_DAY)

    @staticmethod
    def weekday_index(moment):
        """Weekday of a date/datetime using the same Sunday-first numbering."""
        return moment.isoweekday() % 7
