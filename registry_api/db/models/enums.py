from __future__ import annotations

import enum


class BusyLevel(str, enum.Enum):
    """Workshop operating intensity; persisted as its numeric label."""
    CONTINUOUS = "1"
    NORMAL = "2"
    INTERMITTENT = "3"
    IDLE = "4"


class ImportanceLevel(str, enum.Enum):
    """Component importance: A core, B normal, C unimportant."""
    A = "A"
    B = "B"
    C = "C"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values (not member names) in the database."""
    return [member.value for member in enum_cls]
