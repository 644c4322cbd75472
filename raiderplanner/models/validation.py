# File: raiderplanner/models/validation.py
"""
Result types for form validation.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .enums import ErrorKind


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating a single field."""
    field: str
    valid: bool
    reason: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, field_name: str) -> 'FieldResult':
        return cls(field_name, True)

    @classmethod
    def fail(cls, field_name: str, reason: ErrorKind) -> 'FieldResult':
        return cls(field_name, False, reason)

    def __str__(self) -> str:
        if self.valid:
            return f"{self.field}: ok"
        return f"{self.field}: {self.reason.value}"


@dataclass
class FormReport:
    """Per-field results plus the aggregate submit flag."""
    fields: Dict[str, FieldResult] = field(default_factory=dict)
    can_submit: bool = False

    def __getitem__(self, field_name: str) -> FieldResult:
        return self.fields[field_name]

    @property
    def errors(self) -> List[FieldResult]:
        return [r for r in self.fields.values() if not r.valid]


class InvalidDraftState(RuntimeError):
    """A draft was used in a way its current state does not allow."""

    def __init__(self, message: str, errors: Optional[List[FieldResult]] = None):
        self.errors = list(errors or [])
        if self.errors:
            message = f"{message} ({', '.join(str(e) for e in self.errors)})"
        super().__init__(message)
