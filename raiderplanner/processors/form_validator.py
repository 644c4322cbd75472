# File: raiderplanner/processors/form_validator.py
"""
Form validation module for Raider Planner.
Pure checks over raw field values of an activity draft.
"""

from dataclasses import dataclass, field
import datetime
from typing import Dict, List, Optional, Union

from raiderplanner.core.config_manager import Config
from raiderplanner.utils.logger import setup_logger
from raiderplanner.models import (
    ErrorKind, FieldResult, FormReport, QuantityType, Task, local_today, parse_date
)

logger = setup_logger(__name__)

FIELD_HINTS: Dict[str, str] = {
    'heading': ("An Activity is something that you need to do and\n"
                "features a duration, activity type, date, and tasks."),
    'name': "Enter the name for your new activity.",
    'details': "Enter any additional information for this activity.",
    'duration': "Enter how long this Activity will take you to complete.",
    'quantity': "Enter how many times this activity needs to be completed.",
    'date': "Enter the date to complete this activity.",
    'tasks': "Add tasks to your activity to help stay organized and efficient.",
}

_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.NOT_NUMERIC: "{label} must be numeric",
    ErrorKind.NOT_INTEGER: "{label} must be a whole number",
    ErrorKind.NEGATIVE: "{label} can not be negative",
    ErrorKind.DATE_IN_PAST: "{label} can not be in the past",
    ErrorKind.NO_TASK_SELECTED: "Add at least one task",
    ErrorKind.NO_QUANTITY_TYPE: "Select a quantity type",
    ErrorKind.NAME_EMPTY: "{label} can not be empty",
    ErrorKind.TOO_LONG: "{label} can not be longer than {limit} characters",
}


@dataclass
class ActivityFields:
    """Raw values of the activity form, exactly as the user typed them."""
    name: str = ""
    details: str = ""
    quantity: str = ""
    duration: str = ""
    date: Union[datetime.date, str, None] = None
    quantity_type: Optional[str] = None
    tasks: List[Task] = field(default_factory=list)


def describe_error(field_name: str, kind: Optional[ErrorKind]) -> Optional[str]:
    """User-facing text for a field error, or None when there is none."""
    if kind is None:
        return None
    return _MESSAGES[kind].format(
        label=field_name.replace('_', ' ').capitalize(),
        limit=Config.max_length(field_name),
    )


def accepts_length(field_name: str, text: Optional[str]) -> bool:
    """Whether text fits the field's character limit."""
    limit = Config.max_length(field_name)
    return limit is None or len(text or "") <= limit


def _is_numeric(text: str) -> bool:
    return bool(Config.NUMBER_PATTERN.match(text))


def _validate_whole_number(field_name: str, text: Optional[str]) -> FieldResult:
    clean = "" if text is None else str(text).strip()
    if not _is_numeric(clean):
        return FieldResult.fail(field_name, ErrorKind.NOT_NUMERIC)
    if not Config.INTEGER_PATTERN.match(clean):
        return FieldResult.fail(field_name, ErrorKind.NOT_INTEGER)
    if int(clean) < 0:
        return FieldResult.fail(field_name, ErrorKind.NEGATIVE)
    return FieldResult.ok(field_name)


def validate_quantity(text: Union[str, int, None]) -> FieldResult:
    """
    Check the quantity field.

    Fails with NOT_NUMERIC when the text is not a number, NOT_INTEGER when
    it is not a whole number ("3.5", "3.0") and NEGATIVE below zero.
    """
    return _validate_whole_number('quantity', text)


def validate_duration(text: Union[str, int, None]) -> FieldResult:
    """Check the duration field; same rules as quantity."""
    return _validate_whole_number('duration', text)


def validate_date(value: Union[datetime.date, datetime.datetime, str, None],
                  today: Optional[datetime.date] = None) -> FieldResult:
    """
    Check the target date against the current calendar date.

    Today and any later date pass. A missing or unparseable date is
    reported as DATE_IN_PAST since it can never be scheduled.
    """
    today = today or local_today()
    parsed = parse_date(value)
    if parsed is None or parsed < today:
        return FieldResult.fail('date', ErrorKind.DATE_IN_PAST)
    return FieldResult.ok('date')


def validate_name(text: Optional[str]) -> FieldResult:
    """Name must be non-blank and within the length limit."""
    if not (text or "").strip():
        return FieldResult.fail('name', ErrorKind.NAME_EMPTY)
    if not accepts_length('name', text):
        return FieldResult.fail('name', ErrorKind.TOO_LONG)
    return FieldResult.ok('name')


def validate_details(text: Optional[str]) -> FieldResult:
    """Details are optional but limited in length."""
    if not accepts_length('details', text):
        return FieldResult.fail('details', ErrorKind.TOO_LONG)
    return FieldResult.ok('details')


def validate_quantity_type(name: Optional[str]) -> FieldResult:
    """A known quantity type must be selected."""
    if name is None or not str(getattr(name, 'value', name)).strip():
        return FieldResult.fail('quantity_type', ErrorKind.NO_QUANTITY_TYPE)
    try:
        QuantityType.from_name(name)
    except ValueError:
        return FieldResult.fail('quantity_type', ErrorKind.NO_QUANTITY_TYPE)
    return FieldResult.ok('quantity_type')


def validate_tasks(tasks: Optional[List[Task]]) -> FieldResult:
    """At least one task must be attached."""
    if not tasks:
        return FieldResult.fail('tasks', ErrorKind.NO_TASK_SELECTED)
    return FieldResult.ok('tasks')


def validate_form(fields: ActivityFields, editing: bool = False,
                  today: Optional[datetime.date] = None) -> FormReport:
    """
    Validate every field independently and derive the submit flag.

    The submit flag is a strict conjunction of every field. When editing an
    existing Activity, Config.REQUIRE_TASKS_WHEN_EDITING decides whether an
    empty task list still blocks submission.
    """
    results = [
        validate_name(fields.name),
        validate_details(fields.details),
        validate_quantity(fields.quantity),
        validate_duration(fields.duration),
        validate_date(fields.date, today=today),
        validate_quantity_type(fields.quantity_type),
        validate_tasks(fields.tasks),
    ]
    report = FormReport(fields={r.field: r for r in results})

    tasks_optional = editing and not Config.REQUIRE_TASKS_WHEN_EDITING
    report.can_submit = all(
        r.valid or (r.field == 'tasks' and tasks_optional) for r in results
    )

    if report.errors:
        logger.debug(f"Draft has {len(report.errors)} invalid field(s): "
                     f"{', '.join(str(e) for e in report.errors)}")
    return report


def compute_readiness(fields: ActivityFields, editing: bool = False,
                      today: Optional[datetime.date] = None) -> bool:
    """True iff the draft may be submitted."""
    return validate_form(fields, editing=editing, today=today).can_submit
