# File: raiderplanner/core/config_manager.py
"""
Centralized configuration management for Raider Planner.
Loads settings from environment variables and the optional .env file.
"""

import os
import re
from typing import List, Optional, Tuple

import pytz
from dotenv import load_dotenv

from raiderplanner.utils.logger import setup_logger

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ['yes', 'true', '1', 'on', 'y']


class Config:
    """Application configuration singleton."""
    
    # IANA zone for "today"; None means the system's local date
    TIMEZONE: Optional[str] = os.getenv("TIMEZONE") or None
    
    # Form input limits
    NAME_MAX_LENGTH = 100
    DETAILS_MAX_LENGTH = 400
    NUMBER_MAX_LENGTH = 50
    
    # An existing Activity still needs at least one Task to be submitted
    REQUIRE_TASKS_WHEN_EDITING = _env_flag("REQUIRE_TASKS_WHEN_EDITING", "true")
    
    REMOVE_TASK_PROMPT = "Are you sure you want to remove this Task from the list?"
    
    NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
    INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
    
    DATE_PATTERNS: List[Tuple[str, re.Pattern]] = [
        ("%Y-%m-%d", re.compile(r"^\d{4}-\d{2}-\d{2}$")),  # 2026-11-18
        ("%d-%m-%Y", re.compile(r"^\d{2}-\d{2}-\d{4}$")),  # 18-11-2026
        ("%m/%d/%Y", re.compile(r"^\d{2}/\d{2}/\d{4}$")),  # 11/18/2026 (US format)
        ("%Y/%m/%d", re.compile(r"^\d{4}/\d{2}/\d{2}$")),  # 2026/11/18
        ("%d.%m.%Y", re.compile(r"^\d{2}\.\d{2}\.\d{4}$")),  # 18.11.2026
    ]
    
    @classmethod
    def max_length(cls, field_name: str) -> Optional[int]:
        """Character limit for a text field, or None when unbounded."""
        return {
            'name': cls.NAME_MAX_LENGTH,
            'details': cls.DETAILS_MAX_LENGTH,
            'quantity': cls.NUMBER_MAX_LENGTH,
            'duration': cls.NUMBER_MAX_LENGTH,
        }.get(field_name)
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        logger = setup_logger(__name__)
        
        errors = []
        
        if cls.TIMEZONE and cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown TIMEZONE '{cls.TIMEZONE}'")
        
        for name in ('NAME_MAX_LENGTH', 'DETAILS_MAX_LENGTH', 'NUMBER_MAX_LENGTH'):
            if getattr(cls, name) <= 0:
                errors.append(f"{name} must be positive")
        
        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False
        
        return True
