# File: tests/unit/test_materializer.py
"""
Unit tests for turning a draft into an Activity.
"""

import pytest
from datetime import date

from raiderplanner.models import Activity, ErrorKind, InvalidDraftState, QuantityType, Task
from raiderplanner.processors.materializer import materialize


@pytest.fixture
def draft_args(tomorrow, task_a):
    """Positional arguments of a valid draft."""
    return ("  Read chapter 3 ", " Seminar prep ", tomorrow, "30", "12", "Pages", [task_a])


class TestMaterialize:
    """Tests for materialize."""
    
    def test_builds_activity(self, draft_args, tomorrow, task_a):
        activity = materialize(*draft_args)
        
        assert isinstance(activity, Activity)
        assert activity.name == "Read chapter 3"
        assert activity.details == "Seminar prep"
        assert activity.date == tomorrow
        assert activity.duration == 30
        assert activity.quantity == 12
        assert activity.quantity_type is QuantityType.PAGES
        assert activity.tasks == [task_a]
    
    def test_numbers_are_stored_as_integers(self, draft_args):
        activity = materialize(*draft_args)
        
        assert type(activity.duration) is int
        assert type(activity.quantity) is int
    
    def test_accepts_integer_inputs(self, tomorrow, task_a):
        activity = materialize("Squats", "", tomorrow, 20, 50, "Reps", [task_a])
        
        assert activity.quantity == 50
        assert activity.quantity_type is QuantityType.REPS
    
    def test_two_calls_give_independent_activities(self, draft_args):
        first = materialize(*draft_args)
        second = materialize(*draft_args)
        
        assert first is not second
        assert first.tasks is not second.tasks
        
        first.add_task(Task("extra", "Extra"))
        
        assert len(first.tasks) == 2
        assert len(second.tasks) == 1
    
    def test_caller_list_is_not_shared(self, tomorrow, task_a):
        tasks = [task_a]
        activity = materialize("Name", "", tomorrow, "1", "1", "Pages", tasks)
        
        tasks.clear()
        
        assert activity.tasks == [task_a]
    
    def test_invalid_draft_raises(self, tomorrow):
        with pytest.raises(InvalidDraftState) as excinfo:
            materialize("Name", "", tomorrow, "1", "1", "Pages", [])
        
        assert [e.reason for e in excinfo.value.errors] == [ErrorKind.NO_TASK_SELECTED]
    
    def test_bad_number_raises(self, tomorrow, task_a):
        with pytest.raises(InvalidDraftState, match="quantity: NotInteger"):
            materialize("Name", "", tomorrow, "1", "2.5", "Pages", [task_a])
    
    def test_past_date_raises(self, task_a):
        with pytest.raises(InvalidDraftState, match="date: DateInPast"):
            materialize("Name", "", date(2030, 1, 1), "1", "1", "Pages", [task_a],
                        today=date(2030, 1, 2))
    
    def test_unknown_quantity_type_raises(self, tomorrow, task_a):
        with pytest.raises(InvalidDraftState, match="NoQuantityType"):
            materialize("Name", "", tomorrow, "1", "1", "Parsecs", [task_a])
