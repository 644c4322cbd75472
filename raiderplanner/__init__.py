"""
Raider Planner core: activity drafts, validation and task selection.
"""

__version__ = "0.1.0"
