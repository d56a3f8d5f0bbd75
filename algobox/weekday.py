"""Date validation and day-of-week lookup."""

from __future__ import annotations

from algobox.arithmetic import is_leap_year

__all__ = [
    "InvalidDateError",
    "DAY_NAMES",
    "validate_date",
    "weekday_number",
    "weekday_name",
]

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

MIN_YEAR = 1800
MAX_YEAR = 2999

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class InvalidDateError(ValueError):
    """Raised when a day, month and year do not form a supported date."""


def validate_date(day: int, month: int, year: int) -> None:
    """Raise InvalidDateError unless the date exists and its year is 1800-2999."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDateError(f"year must be from {MIN_YEAR} to {MAX_YEAR}, got {year}")
    if not 1 <= month <= 12:
        raise InvalidDateError(f"there are only 12 months, got month {month}")
    if not 1 <= day <= 31:
        raise InvalidDateError(f"no month has a day {day}")
    length = _MONTH_LENGTHS[month - 1]
    if month == 2 and is_leap_year(year):
        length += 1
    if day > length:
        raise InvalidDateError(f"month {month} of {year} has no day {day}")


def weekday_number(year: int, month: int, day: int) -> int:
    """Return the day of the week, 0 for Monday through 6 for Sunday."""
    shift = (14 - month) // 12
    shifted_year = year + 4800 - shift
    shifted_month = month + 12 * shift - 3
    julian_day = (
        day
        + (153 * shifted_month + 2) // 5
        + 365 * shifted_year
        + shifted_year // 4
        - shifted_year // 100
        + shifted_year // 400
        - 32045
    )
    return julian_day % 7


def weekday_name(day: int, month: int, year: int) -> str:
    """Validate the date and return the English name of its day of the week."""
    validate_date(day, month, year)
    return DAY_NAMES[weekday_number(year, month, day)]