# File: raiderplanner/models/activity.py

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List

from raiderplanner.core.config_manager import Config
from .enums import QuantityType
from .tasks import Task


@dataclass(frozen=True, eq=False)
class Activity:
    """
    Schedulable unit of work with a target date, duration and quantity.

    Scalar fields are fixed once created; only the task list changes.
    """
    name: str
    details: str
    date: date
    duration: int
    quantity: int
    quantity_type: QuantityType
    tasks: List[Task] = field(default_factory=list)

    def __post_init__(self):
        """Validate activity data and auto-convert types."""
        if isinstance(self.quantity_type, str):
            object.__setattr__(self, 'quantity_type', QuantityType.from_name(self.quantity_type))
        # Own copy so callers cannot share the list by accident
        object.__setattr__(self, 'tasks', list(self.tasks))

        if not self.name.strip():
            raise ValueError("Activity name cannot be empty")
        if len(self.name) > Config.NAME_MAX_LENGTH:
            raise ValueError(f"Activity name longer than {Config.NAME_MAX_LENGTH} characters")
        if len(self.details) > Config.DETAILS_MAX_LENGTH:
            raise ValueError(f"Activity details longer than {Config.DETAILS_MAX_LENGTH} characters")
        if self.duration < 0:
            raise ValueError(f"Duration cannot be negative: {self.name}")
        if self.quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {self.name}")

    @property
    def date_str(self) -> str:
        return self.date.strftime("%Y-%m-%d")

    def has_task(self, task: Task) -> bool:
        return any(t is task for t in self.tasks)

    def add_task(self, task: Task) -> bool:
        """Attach a task; returns False when it is already attached."""
        if self.has_task(task):
            return False
        self.tasks.append(task)
        return True

    def add_tasks(self, tasks: Iterable[Task]) -> int:
        return sum(1 for t in tasks if self.add_task(t))

    def remove_task(self, task: Task) -> bool:
        for i, t in enumerate(self.tasks):
            if t is task:
                del self.tasks[i]
                return True
        return False

    def completed_tasks(self) -> List[Task]:
        return [t for t in self.tasks if t.checked_complete]

    def to_dict(self) -> dict:
        """Convert to dictionary for handing off to a collection owner."""
        return {
            'name': self.name,
            'details': self.details,
            'date': self.date.isoformat(),
            'duration': self.duration,
            'quantity': self.quantity,
            'quantity_type': self.quantity_type.value,
            'tasks': [t.id for t in self.tasks],
        }
