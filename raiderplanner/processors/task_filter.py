# File: raiderplanner/processors/task_filter.py
"""
Task selection module for Raider Planner.
Decides which tasks from the pool can still be attached to an activity.
"""

from typing import Iterable, List, Optional

from raiderplanner.utils.logger import setup_logger
from raiderplanner.models import Task

logger = setup_logger(__name__)


def dependencies_complete(task: Task) -> bool:
    """True iff every dependency of the task is checked complete."""
    return all(dep.checked_complete for dep in task.dependencies)


def selectable(all_tasks: Iterable[Task],
               already_in_draft: Iterable[Task] = (),
               already_on_activity: Optional[Iterable[Task]] = None) -> List[Task]:
    """
    Filters the task pool down to tasks that can be attached.
    
    A task is dropped when:
    - it is already staged in the current draft
    - it is already on the Activity being edited
    - any of its dependencies is not complete yet
    
    Args:
        all_tasks: Full task pool, in display order
        already_in_draft: Tasks staged in the current form session
        already_on_activity: Tasks on the Activity being edited (None for new)
    
    Returns:
        Eligible tasks in pool order
    """
    taken = {id(t) for t in already_in_draft}
    taken.update(id(t) for t in already_on_activity or ())
    
    eligible = []
    blocked_count = 0
    
    for task in all_tasks:
        if id(task) in taken:
            continue
        if not dependencies_complete(task):
            blocked_count += 1
            logger.debug(f"Skipping task with open dependencies: {task.name}")
            continue
        eligible.append(task)
    
    logger.debug(f"{len(eligible)} selectable task(s), {blocked_count} blocked by dependencies")
    return eligible
