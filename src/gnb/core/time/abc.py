"""Time operations abstraction for testing.

This module provides an ABC for clock reads so that date-stamped branch names
can be tested against a fixed moment instead of the real clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current local date and time.

        Returns:
            Naive datetime in the local timezone
        """
        ...
