from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo


@dataclass(frozen=True, slots=True)
class CheckinDayPolicy:
    """Defines which calendar day a check-in belongs to.

    A dog is checked in at most once per dogrun per day, where "day" is the
    local date in ``timezone`` (dogruns are visited in local time, so a UTC
    date would split an evening visit across two days).
    """

    timezone: str

    def day_of(self, moment: datetime) -> date:
        if moment.tzinfo is None:
            raise ValueError("moment must be timezone-aware")
        return moment.astimezone(ZoneInfo(self.timezone)).date()

    def today(self) -> date:
        return datetime.now(ZoneInfo(self.timezone)).date()
