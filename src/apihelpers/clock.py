"""Time sources for condition timestamps."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from typing_extensions import Protocol


class Clock(Protocol):
    """Anything that can tell the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time in UTC, truncated to whole seconds.

    Matches the precision Kubernetes serialises condition timestamps with.
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc).replace(microsecond=0)


class FakeClock:
    """Settable clock for tests and dry runs."""

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime(2018, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime):
        self._now = instant

    def step(self, delta: timedelta = timedelta(seconds=1)) -> datetime:
        """Advance the clock and return the new instant."""
        self._now = self._now + delta
        return self._now


DEFAULT_CLOCK = SystemClock()
