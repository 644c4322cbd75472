# File: raiderplanner/processors/materializer.py
"""
Turns a validated activity draft into an Activity.
"""

import datetime
from typing import Iterable, Optional, Union

from raiderplanner.utils.logger import setup_logger
from raiderplanner.models import Activity, InvalidDraftState, QuantityType, Task, parse_date
from raiderplanner.processors.form_validator import ActivityFields, validate_form

logger = setup_logger(__name__)


def materialize(name: str,
                details: Optional[str],
                date: Union[datetime.date, str],
                duration: Union[str, int],
                quantity: Union[str, int],
                quantity_type_name: str,
                tasks: Iterable[Task],
                today: Optional[datetime.date] = None) -> Activity:
    """
    Build a new Activity from draft values.

    The values are re-validated first; a draft that would not pass the
    form's readiness check raises InvalidDraftState. Each call creates a
    distinct Activity with its own task list.
    """
    task_list = list(tasks)
    fields = ActivityFields(
        name=name,
        details=details or "",
        quantity=str(quantity),
        duration=str(duration),
        date=date,
        quantity_type=quantity_type_name,
        tasks=task_list,
    )
    report = validate_form(fields, today=today)
    if not report.can_submit:
        logger.error(f"Refusing to materialize invalid draft '{name}'")
        raise InvalidDraftState("Activity draft is not ready to submit", report.errors)

    activity = Activity(
        name=fields.name.strip(),
        details=fields.details.strip(),
        date=parse_date(date),
        duration=int(fields.duration.strip()),
        quantity=int(fields.quantity.strip()),
        quantity_type=QuantityType.from_name(quantity_type_name),
        tasks=task_list,
    )
    logger.info(f"Created activity '{activity.name}' due {activity.date_str} "
                f"with {len(activity.tasks)} task(s)")
    return activity
