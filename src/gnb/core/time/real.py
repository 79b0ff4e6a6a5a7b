"""Real time implementation using the system clock."""

from datetime import datetime

from gnb.core.time.abc import Time


class RealTime(Time):
    """Production implementation using datetime.now()."""

    def now(self) -> datetime:
        """Get the current local date and time from the system clock."""
        return datetime.now()
