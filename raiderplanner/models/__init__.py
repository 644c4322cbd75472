from .enums import QuantityType, ErrorKind, FormState
from .common import local_today, parse_date
from .tasks import Task, task_from_dict, tasks_from_dicts
from .activity import Activity
from .validation import FieldResult, FormReport, InvalidDraftState

__all__ = [
    "QuantityType",
    "ErrorKind",
    "FormState",
    "local_today",
    "parse_date",
    "Task",
    "task_from_dict",
    "tasks_from_dicts",
    "Activity",
    "FieldResult",
    "FormReport",
    "InvalidDraftState",
]
