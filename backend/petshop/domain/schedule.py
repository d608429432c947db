"""
Business hours and appointment slot validation.

This is the only place that knows when the shop is open. Bounds are exclusive
on both sides (a slot on Saturday must be after 08:59 and before 13:01), which
makes 09:00 and 13:00 the first and last bookable minutes.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional

from petshop.core.exceptions import ClosedSlotError, PastSlotError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


@dataclass(frozen=True)
class OpeningHours:
    """Exclusive bounds of the bookable interval for one weekday."""

    after: time
    before: time

    def admits(self, slot_time: time) -> bool:
        return self.after < slot_time < self.before

    @property
    def label(self) -> str:
        """Inclusive range as shown to customers, e.g. 08:00-18:00."""
        one_minute = timedelta(minutes=1)
        first = datetime.combine(date.min, self.after) + one_minute
        last = datetime.combine(date.min, self.before) - one_minute
        return f"{first:%H:%M}-{last:%H:%M}"


_WEEKDAY_HOURS = OpeningHours(after=time(7, 59), before=time(18, 1))
_SATURDAY_HOURS = OpeningHours(after=time(8, 59), before=time(13, 1))

# Sunday is absent: closed all day
BUSINESS_HOURS: Dict[int, OpeningHours] = {
    MONDAY: _WEEKDAY_HOURS,
    TUESDAY: _WEEKDAY_HOURS,
    WEDNESDAY: _WEEKDAY_HOURS,
    THURSDAY: _WEEKDAY_HOURS,
    FRIDAY: _WEEKDAY_HOURS,
    SATURDAY: _SATURDAY_HOURS,
}

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def opening_hours(weekday: int) -> Optional[OpeningHours]:
    """Opening hours for ``weekday`` (0 = Monday), None when closed."""
    return BUSINESS_HOURS.get(weekday)


def is_in_past(slot_date: date, slot_time: time, now: datetime) -> bool:
    today = now.date()
    if slot_date < today:
        return True
    return slot_date == today and slot_time < now.time().replace(tzinfo=None)


def is_open(slot_date: date, slot_time: time) -> bool:
    hours = opening_hours(slot_date.weekday())
    return hours is not None and hours.admits(slot_time)


def check_slot(slot_date: date, slot_time: time, now: datetime) -> None:
    """
    Refuse a slot that is in the past or outside business hours.

    Raises:
        PastSlotError: The slot is before ``now``
        ClosedSlotError: The shop is closed at that time
    """
    if is_in_past(slot_date, slot_time, now):
        raise PastSlotError("The appointment date and time must not be in the past.")

    if not is_open(slot_date, slot_time):
        weekday = WEEKDAY_NAMES[slot_date.weekday()]
        hours = opening_hours(slot_date.weekday())
        detail = f"open {hours.label}" if hours else "closed all day"
        raise ClosedSlotError(
            f"Invalid appointment time. The shop is closed then ({weekday}: {detail})."
        )


def is_valid_slot(slot_date: date, slot_time: time, now: datetime) -> bool:
    """True when the slot is neither in the past nor outside business hours."""
    return not is_in_past(slot_date, slot_time, now) and is_open(slot_date, slot_time)
