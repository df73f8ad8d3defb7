"""Text forms of a date and time as shown by the tracker."""

from __future__ import annotations

from datetime import datetime

# Sunday has no name here: it is left blank.
_DAY_NAMES = ("MON", "TUES", "WED", "THUR", "FRI", "SAT", "")
_MONTH_NAMES = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEPT", "OCT", "NOV", "DEC",
)


def _now(moment: datetime | None) -> datetime:
    return datetime.now() if moment is None else moment


def read_date(moment: datetime | None = None) -> str:
    """Return ``year/month/day`` without zero padding."""
    moment = _now(moment)
    return f"{moment.year}/{moment.month}/{moment.day}"


def day_of_week(moment: datetime | None = None) -> str:
    """Return the short name of the weekday."""
    return _DAY_NAMES[_now(moment).weekday()]


def month_abbrev(moment: datetime | None = None) -> str:
    """Return the short name of the month."""
    return _MONTH_NAMES[_now(moment).month - 1]


def read_time(moment: datetime | None = None) -> str:
    """Return ``hour:minute:second`` without zero padding."""
    moment = _now(moment)
    return f"{moment.hour}:{moment.minute}:{moment.second}"


def read_all(moment: datetime | None = None) -> str:
    """Return weekday, month, day, time and year in one line."""
    moment = _now(moment)
    return (
        f"{day_of_week(moment)} {month_abbrev(moment)} {moment.day} "
        f"{read_time(moment)} {moment.year}"
    )