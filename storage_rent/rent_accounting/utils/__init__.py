"""
Utility functions for rent accounting
"""

from .date_utils import (
    is_leap_year,
    last_day_of_month,
    calculate_due_date,
    to_calendar_date,
    iter_month_starts,
    months_spanned,
)

from .finance import (
    round_currency,
    apply_rate_change,
    proration_fraction,
    prorate_rent,
)

__all__ = [
    # Date utilities
    'is_leap_year',
    'last_day_of_month',
    'calculate_due_date',
    'to_calendar_date',
    'iter_month_starts',
    'months_spanned',

    # Finance utilities
    'round_currency',
    'apply_rate_change',
    'proration_fraction',
    'prorate_rent',
]
