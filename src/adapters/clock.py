"""UTC wall clock stamping added and edited dates."""

from datetime import UTC, datetime


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)
