# File: raiderplanner/models/enums.py

from enum import Enum
from typing import List


class QuantityType(Enum):
    """Units an Activity's quantity can be counted in."""
    PAGES = "Pages"
    CHAPTERS = "Chapters"
    WORDS = "Words"
    PROBLEMS = "Problems"
    EXERCISES = "Exercises"
    REPS = "Reps"
    SETS = "Sets"
    LECTURES = "Lectures"
    VIDEOS = "Videos"
    SESSIONS = "Sessions"
    MINUTES = "Minutes"
    HOURS = "Hours"
    ITEMS = "Items"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def list_of_names(cls) -> List[str]:
        """Display names in declaration order, for the selection list."""
        return [q.value for q in cls]

    @classmethod
    def from_name(cls, name: str) -> 'QuantityType':
        """Resolve a display name (or member name) to its enum value."""
        if isinstance(name, cls):
            return name
        clean = str(name or '').strip().lower()
        for q in cls:
            if clean in (q.value.lower(), q.name.lower()):
                return q
        raise ValueError(f"Unknown quantity type: {name!r}")


class ErrorKind(Enum):
    """Field-level validation outcomes."""
    NOT_NUMERIC = "NotNumeric"
    NOT_INTEGER = "NotInteger"
    NEGATIVE = "Negative"
    DATE_IN_PAST = "DateInPast"
    NO_TASK_SELECTED = "NoTaskSelected"
    NO_QUANTITY_TYPE = "NoQuantityType"
    NAME_EMPTY = "NameEmpty"
    TOO_LONG = "TooLong"


class FormState(Enum):
    """Lifecycle of an activity draft."""
    EDITING = "editing"
    READY = "ready"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (FormState.SUBMITTED, FormState.CANCELLED)
