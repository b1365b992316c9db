#storehours\infra\constants.py

"""
infra/constants.py

Immutable project-wide constants in a frozen dataclass.
Provides a singleton `CONSTANTS` plus module-level re-exports.
"""

from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Constants:
    """Immutable container for shared constants (no imports, no side effects)."""

    # pt-BR weekday labels -> index (0 = domingo .. 6 = sábado)
    day_index: MappingProxyType = field(default_factory=lambda: MappingProxyType({
        "domingo": 0,
        "segunda": 1, "segunda-feira": 1,
        "terça": 2, "terça-feira": 2, "terca": 2, "terca-feira": 2,
        "quarta": 3, "quarta-feira": 3,
        "quinta": 4, "quinta-feira": 4,
        "sexta": 5, "sexta-feira": 5,
        "sábado": 6, "sabado": 6,
    }))

    # Display names, indexed like day_index
    day_labels: tuple = (
        "domingo", "segunda-feira", "terça-feira", "quarta-feira",
        "quinta-feira", "sexta-feira", "sábado",
    )

    # Keys a store settings record may hold its schedule under
    schedule_keys: tuple = ("openingHours", "opening_hours")

    status_open: str = "aberta"
    status_closed: str = "fechada"


# Singleton instance
CONSTANTS = Constants()

# Convenience re-exports
DAY_INDEX = CONSTANTS.day_index
DAY_LABELS = CONSTANTS.day_labels
SCHEDULE_KEYS = CONSTANTS.schedule_keys
STATUS_OPEN = CONSTANTS.status_open
STATUS_CLOSED = CONSTANTS.status_closed
