# File: raiderplanner/models/tasks.py

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass(eq=False)
class Task:
    """A unit of work that may depend on other tasks being finished first."""
    id: str
    name: str
    checked_complete: bool = False
    dependencies: List['Task'] = field(default_factory=list)
    details: Optional[str] = None

    def __post_init__(self):
        """Validate task data."""
        if not str(self.name).strip():
            raise ValueError(f"Task name cannot be empty: {self.id}")
        if any(dep is self for dep in self.dependencies):
            raise ValueError(f"Task cannot depend on itself: {self.name}")

    @property
    def is_checked_complete(self) -> bool:
        return self.checked_complete

    def dependencies_complete(self) -> bool:
        """True when every dependency is marked complete."""
        return all(dep.checked_complete for dep in self.dependencies)

    def add_dependency(self, task: 'Task') -> None:
        if task is self:
            raise ValueError(f"Task cannot depend on itself: {self.name}")
        if task not in self.dependencies:
            self.dependencies.append(task)

    def toggle_complete(self) -> None:
        self.checked_complete = not self.checked_complete

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Task(id={self.id!r}, name={self.name!r}, checked_complete={self.checked_complete})"

    def to_dict(self) -> dict:
        """Convert to dictionary, dependencies by id."""
        return {
            'id': self.id,
            'name': self.name,
            'checked_complete': self.checked_complete,
            'dependencies': [dep.id for dep in self.dependencies],
            'details': self.details,
        }


def task_from_dict(data: dict, known_tasks: Optional[Dict[str, Task]] = None) -> Task:
    """Create Task from dictionary; dependency ids resolve through known_tasks."""
    known_tasks = known_tasks or {}

    raw_complete = str(data.get('checked_complete', False)).strip().lower()
    is_complete = raw_complete in ['yes', 'true', '1', 'y', 't', 'done']

    dependencies: List[Task] = []
    for dep_id in data.get('dependencies') or []:
        dep = known_tasks.get(str(dep_id))
        if dep is None:
            raise ValueError(f"Unknown dependency '{dep_id}' for task {data.get('id')}")
        dependencies.append(dep)

    return Task(
        id=str(data.get('id', '')),
        name=str(data.get('name', 'Untitled Task')),
        checked_complete=is_complete,
        dependencies=dependencies,
        details=data.get('details'),
    )


def tasks_from_dicts(rows: Iterable[dict]) -> List[Task]:
    """Build a task pool; a row may only depend on rows listed before it."""
    known: Dict[str, Task] = {}
    pool: List[Task] = []
    for row in rows:
        task = task_from_dict(row, known)
        known[task.id] = task
        pool.append(task)
    return pool
