# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable tasks, dates and collaborator mocks for all tests.
"""

import pytest
from datetime import timedelta
from pathlib import Path
from unittest.mock import Mock
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from raiderplanner.models import Task, QuantityType, local_today
from raiderplanner.processors.form_validator import ActivityFields


# ==================== Date Fixtures ====================

@pytest.fixture
def today():
    """Get today's date."""
    return local_today()


@pytest.fixture
def tomorrow(today):
    """Get tomorrow's date."""
    return today + timedelta(days=1)


@pytest.fixture
def yesterday(today):
    """Get yesterday's date."""
    return today - timedelta(days=1)


# ==================== Task Fixtures ====================

@pytest.fixture
def task_a():
    """Task with no dependencies."""
    return Task(id="A", name="Outline notes")


@pytest.fixture
def task_b():
    """Second free task."""
    return Task(id="B", name="Read sources")


@pytest.fixture
def open_dependency():
    """Task that is not finished yet."""
    return Task(id="D", name="Buy textbook", checked_complete=False)


@pytest.fixture
def done_dependency():
    """Task that is already finished."""
    return Task(id="E", name="Find library card", checked_complete=True)


@pytest.fixture
def blocked_task(open_dependency):
    """Task waiting on an unfinished dependency."""
    return Task(id="C", name="Summarize chapter", dependencies=[open_dependency])


@pytest.fixture
def unblocked_task(done_dependency):
    """Task whose only dependency is done."""
    return Task(id="F", name="Borrow book", dependencies=[done_dependency])


@pytest.fixture
def task_pool(task_a, task_b, blocked_task, unblocked_task):
    """Pool of known tasks in display order."""
    return [task_a, task_b, blocked_task, unblocked_task]


# ==================== Form Fixtures ====================

@pytest.fixture
def valid_fields(tomorrow, task_a):
    """A draft that passes every check."""
    return ActivityFields(
        name="Read chapter 3",
        details="Before Thursday's seminar",
        quantity="1",
        duration="30",
        date=tomorrow,
        quantity_type=QuantityType.PAGES.value,
        tasks=[task_a],
    )


@pytest.fixture
def confirm_yes():
    """Confirmation collaborator that always agrees."""
    return Mock(return_value=True)


@pytest.fixture
def confirm_no():
    """Confirmation collaborator that always declines."""
    return Mock(return_value=False)


@pytest.fixture
def select_all():
    """Task selector that picks everything offered."""
    return Mock(side_effect=lambda offered: list(offered))


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# ==================== Auto-use Fixtures ====================

@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test."""
    monkeypatch.delenv("TIMEZONE", raising=False)
    monkeypatch.delenv("REQUIRE_TASKS_WHEN_EDITING", raising=False)
