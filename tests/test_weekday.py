import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.weekday import (
    DAY_NAMES,
    InvalidDateError,
    validate_date,
    weekday_name,
    weekday_number,
)

dates = st.dates(min_value=datetime.date(1800, 1, 1), max_value=datetime.date(2999, 12, 31))


@given(dates)
def test_weekday_number_matches_calendar(date):
    assert weekday_number(date.year, date.month, date.day) == date.weekday()


@given(dates)
def test_every_real_date_is_valid(date):
    assert weekday_name(date.day, date.month, date.year) == DAY_NAMES[date.weekday()]


def test_known_date():
    assert weekday_name(1, 1, 2000) == "Saturday"


def test_leap_day_accepted_in_leap_year():
    assert weekday_name(29, 2, 2024) == DAY_NAMES[datetime.date(2024, 2, 29).weekday()]


@pytest.mark.parametrize(
    "day, month, year",
    [
        (29, 2, 2023),
        (29, 2, 1900),
        (31, 4, 2020),
        (32, 1, 2020),
        (0, 1, 2020),
        (1, 13, 2020),
        (1, 0, 2020),
        (1, 1, 1799),
        (1, 1, 3000),
    ],
)
def test_invalid_dates_rejected(day, month, year):
    with pytest.raises(InvalidDateError):
        validate_date(day, month, year)


def test_invalid_date_error_is_value_error():
    with pytest.raises(ValueError):
        weekday_name(30, 2, 2000)