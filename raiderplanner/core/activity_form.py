# File: raiderplanner/core/activity_form.py
"""
Activity form session for Raider Planner.

Holds the draft of one Activity being created (or the view of one being
edited), re-validates it on every change and hands the finished Activity
back on submit. Presentation is left to the caller: it receives
FieldResult/ErrorKind values and the can_submit flag, and supplies the
task-selection and confirmation collaborators.
"""

from datetime import date
from typing import Callable, Iterable, List, Optional

from raiderplanner.core.config_manager import Config
from raiderplanner.utils.logger import LoggerMixin
from raiderplanner.models import (
    Activity, FormReport, FormState, InvalidDraftState, Task, local_today
)
from raiderplanner.processors.form_validator import ActivityFields, accepts_length, validate_form
from raiderplanner.processors.task_filter import selectable
from raiderplanner.processors.materializer import materialize

TaskSelector = Callable[[List[Task]], Iterable[Task]]
Confirm = Callable[[str], bool]

SCALAR_FIELDS = ('name', 'details', 'quantity', 'duration', 'date', 'quantity_type')


class ActivityForm(LoggerMixin):
    """
    Draft/form session for a single Activity.
    
    State moves between EDITING and READY as fields change, and ends in
    SUBMITTED or CANCELLED.
    """
    
    def __init__(
        self,
        task_pool: Callable[[], Iterable[Task]],
        activity: Optional[Activity] = None,
        select_tasks: Optional[TaskSelector] = None,
        confirm: Optional[Confirm] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Initialize a form session.
        
        Args:
            task_pool: Returns all currently known tasks
            activity: Existing Activity to view; None to draft a new one
            select_tasks: Lets the user pick from the offered tasks
            confirm: Asks the user a yes/no question
            today: Clock for the date check (defaults to local_today)
        """
        self._task_pool = task_pool
        self._activity = activity
        self._editing_existing = activity is not None
        self._select_tasks = select_tasks
        self._confirm = confirm
        self._today = today or local_today
        self._success = False
        self._state = FormState.EDITING
        
        if activity is not None:
            self._fields = ActivityFields(
                name=activity.name,
                details=activity.details,
                quantity=str(activity.quantity),
                duration=str(activity.duration),
                date=activity.date,
                quantity_type=activity.quantity_type.value,
                tasks=list(activity.tasks),
            )
            self.logger.info(f"Viewing activity '{activity.name}'")
        else:
            self._fields = ActivityFields(date=self._today())
            self.logger.debug("Started new activity draft")
        
        self._report = self._evaluate()
    
    # ==================== State ====================
    
    @property
    def activity(self) -> Optional[Activity]:
        """The bound or newly created Activity, if any."""
        return self._activity
    
    @property
    def is_editing_existing(self) -> bool:
        return self._editing_existing
    
    @property
    def success(self) -> bool:
        """True if the last submit succeeded."""
        return self._success
    
    @property
    def state(self) -> FormState:
        return self._state
    
    @property
    def fields(self) -> ActivityFields:
        return self._fields
    
    @property
    def tasks(self) -> List[Task]:
        return list(self._fields.tasks)
    
    @property
    def report(self) -> FormReport:
        return self._report
    
    @property
    def can_submit(self) -> bool:
        return self._state == FormState.READY
    
    # ==================== Field changes ====================
    
    def set_field(self, field_name: str, value) -> bool:
        """
        Apply a change to one scalar field and re-validate.
        
        Returns False (and keeps the old value) when the new text is longer
        than the field allows.
        """
        self._require_open()
        if field_name not in SCALAR_FIELDS:
            raise KeyError(f"Unknown field: {field_name}")
        if self._editing_existing:
            raise InvalidDraftState(f"Field '{field_name}' is read-only for an existing activity")
        if isinstance(value, str) and not accepts_length(field_name, value):
            self.logger.debug(f"Rejected {field_name} change over {Config.max_length(field_name)} chars")
            return False
        
        setattr(self._fields, field_name, value)
        self._changed()
        return True
    
    def selectable_tasks(self) -> List[Task]:
        """Tasks from the pool that may still be attached."""
        on_activity = self._activity.tasks if self._activity is not None else None
        return selectable(self._task_pool(), self._fields.tasks, on_activity)
    
    def add_tasks(self, select_tasks: Optional[TaskSelector] = None) -> List[Task]:
        """
        Offer the selectable tasks to the selector and attach its choice.
        
        Returns the tasks actually attached. Anything the selector returns
        that was not offered is ignored.
        """
        self._require_open()
        chooser = select_tasks or self._select_tasks
        if chooser is None:
            raise InvalidDraftState("No task selector available")
        
        offered = self.selectable_tasks()
        offered_ids = {id(t) for t in offered}
        added: List[Task] = []
        for task in chooser(offered) or []:
            if id(task) not in offered_ids or any(t is task for t in added):
                self.logger.warning(f"Ignoring task that was not offered: {task}")
                continue
            added.append(task)
        
        if added:
            self._fields.tasks.extend(added)
            if self._activity is not None:
                self._activity.add_tasks(added)
            self.logger.info(f"Attached {len(added)} task(s)")
            self._changed()
        return added
    
    def can_remove_task(self, selected: Optional[Task]) -> bool:
        """Removal is possible only for a selected task that is on the list."""
        if self._state.is_terminal or selected is None:
            return False
        return any(t is selected for t in self._fields.tasks)
    
    def remove_task(self, task: Task, confirm: Optional[Confirm] = None) -> bool:
        """
        Remove a task after the user confirms.
        
        Returns True if the task was removed.
        """
        self._require_open()
        if not self.can_remove_task(task):
            return False
        ask = confirm or self._confirm
        if ask is None:
            raise InvalidDraftState("No confirmation handler available")
        if not ask(Config.REMOVE_TASK_PROMPT):
            self.logger.debug(f"Removal of '{task}' declined")
            return False
        
        self._fields.tasks = [t for t in self._fields.tasks if t is not task]
        if self._activity is not None:
            self._activity.remove_task(task)
        self.logger.info(f"Removed task '{task}'")
        self._changed()
        return True
    
    # ==================== Submit / cancel ====================
    
    def submit(self) -> Activity:
        """
        Finish the session and return the Activity.
        
        A new draft is materialized exactly once; an existing Activity is
        returned as-is with its updated task list.
        """
        if self._state != FormState.READY:
            self.logger.error(f"Submit attempted in state {self._state.value}")
            raise InvalidDraftState(
                f"Cannot submit a draft in state '{self._state.value}'",
                self._report.errors,
            )
        
        if self._activity is None:
            f = self._fields
            self._activity = materialize(
                f.name, f.details, f.date, f.duration, f.quantity,
                f.quantity_type, f.tasks, today=self._today(),
            )
        
        self._success = True
        self._state = FormState.SUBMITTED
        self.logger.info(f"Submitted activity '{self._activity.name}'")
        return self._activity
    
    def cancel(self) -> None:
        """Abort the session without producing an Activity."""
        self._require_open()
        self._state = FormState.CANCELLED
        self.logger.info("Activity form cancelled")
    
    # ==================== Internal ====================
    
    def _require_open(self) -> None:
        if self._state.is_terminal:
            raise InvalidDraftState(f"Form is already {self._state.value}")
    
    def _evaluate(self) -> FormReport:
        report = validate_form(
            self._fields,
            editing=self._editing_existing,
            today=self._today(),
        )
        self._state = FormState.READY if report.can_submit else FormState.EDITING
        return report
    
    def _changed(self) -> None:
        previous = self._state
        self._report = self._evaluate()
        if previous != self._state:
            self.logger.debug(f"Form state {previous.value} -> {self._state.value}")
