#!/usr/bin/env python3
"""
Test script for rent date and finance helpers
"""

import sys
from datetime import date

import pytest

from storage_rent.rent_accounting.core.errors import InvalidDate
from storage_rent.rent_accounting.utils import (
    apply_rate_change,
    calculate_due_date,
    is_leap_year,
    iter_month_starts,
    last_day_of_month,
    months_spanned,
    prorate_rent,
    proration_fraction,
    round_currency,
    to_calendar_date,
)


@pytest.mark.parametrize('year,expected', [
    (2023, False),
    (2024, True),
    (1900, False),
    (2000, False),
    (2100, False),
])
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_last_day_of_month():
    assert [last_day_of_month(2023, m) for m in range(1, 13)] == \
        [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    assert last_day_of_month(2024, 2) == 29


def test_calculate_due_date_clamps():
    assert calculate_due_date(2023, 6, 31) == date(2023, 6, 30)
    assert calculate_due_date(2023, 2, 30) == date(2023, 2, 28)
    assert calculate_due_date(2024, 2, 31) == date(2024, 2, 29)
    assert calculate_due_date(2023, 7, 15) == date(2023, 7, 15)


def test_iter_month_starts_crosses_year_end():
    months = list(iter_month_starts(date(2022, 11, 30), date(2023, 2, 1)))

    assert months == [date(2022, 11, 1), date(2022, 12, 1), date(2023, 1, 1), date(2023, 2, 1)]


def test_iter_month_starts_stops_at_year_9999():
    months = list(iter_month_starts(date(9999, 11, 15), date(9999, 12, 31)))

    assert months == [date(9999, 11, 1), date(9999, 12, 1)]


def test_months_spanned():
    assert months_spanned(date(2023, 1, 31), date(2023, 1, 31)) == 1
    assert months_spanned(date(2022, 12, 31), date(2023, 1, 1)) == 2
    assert months_spanned(date(2023, 3, 1), date(2023, 1, 1)) == 0


def test_to_calendar_date_drops_time_and_normalizes_to_utc():
    assert to_calendar_date('2023-02-01', 'leaseStartDate') == date(2023, 2, 1)
    assert to_calendar_date('2023-02-01T23:59:59', 'leaseStartDate') == date(2023, 2, 1)
    assert to_calendar_date('2023-02-01T22:00:00-05:00', 'leaseStartDate') == date(2023, 2, 2)
    assert to_calendar_date(date(2023, 2, 1), 'leaseStartDate') == date(2023, 2, 1)


@pytest.mark.parametrize('value', ['', '   ', 'yesterday', '2023-02-29', 20230201, None])
def test_to_calendar_date_rejects_garbage(value):
    with pytest.raises(InvalidDate, match='windowStartDate is invalid'):
        to_calendar_date(value, 'windowStartDate')


def test_round_currency():
    assert round_currency(1.005) == 1.0  # binary value is just below 1.005
    assert round_currency(2.675) == 2.67
    assert round_currency(0.125) == 0.13
    assert round_currency(-0.125) == -0.13
    assert round_currency(159.99999999999997) == 160.0


def test_apply_rate_change():
    assert apply_rate_change(100.0, 0.1) == 110.0
    assert apply_rate_change(100.0, -0.05) == 95.0
    assert apply_rate_change(333.33, 0.03) == 343.33


@pytest.mark.parametrize('start_day,due_day,expected', [
    (1, 1, 1.0),
    (5, 20, 15 / 30),
    (15, 1, 16 / 30),
    (28, 5, 7 / 30),
    (31, 1, 1 / 30),
])
def test_proration_fraction(start_day, due_day, expected):
    assert proration_fraction(start_day, due_day) == pytest.approx(expected)


def test_prorate_rent():
    assert prorate_rent(300.0, 15, 1) == 160.0
    assert prorate_rent(300.0, 10, 10) == 300.0
    assert prorate_rent(90.0, 31, 1) == 3.0


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
