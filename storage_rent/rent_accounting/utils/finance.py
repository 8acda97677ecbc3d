"""
Financial calculation utilities
Rounding, rate changes and first-month proration for storage rent
"""

from decimal import Decimal, ROUND_HALF_UP

# Proration always assumes a 30-day month, whatever the calendar says
PRORATION_MONTH_DAYS = 30

_CENTS = Decimal('0.01')


def round_currency(amount: float) -> float:
    """
    Round to 2 decimal places, halves away from zero

    The float is converted exactly (not via its repr) so ties are only the
    values that are true binary ties.
    """
    return float(Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP))


def apply_rate_change(current_rent: float, rent_change_rate: float) -> float:
    """
    Calculates the new monthly rent

    Args:
        current_rent: Rent before the change
        rent_change_rate: Decimal fraction, positive for increase, negative for decrease
    Returns:
        New rent rounded to cents
    """
    return round_currency(current_rent * (1 + rent_change_rate))


def proration_fraction(start_day: int, due_day: int) -> float:
    """
    Share of a month's rent owed for the first active month

    Args:
        start_day: Day of month the lease starts
        due_day: Day of month rent is due
    Returns:
        Fraction of the base rent (1.0 when the lease starts on the due day)
    """
    if start_day == due_day:
        return 1.0
    if start_day < due_day:
        return (due_day - start_day) / PRORATION_MONTH_DAYS

    days = (PRORATION_MONTH_DAYS - start_day + due_day + PRORATION_MONTH_DAYS) % PRORATION_MONTH_DAYS
    # Wrap-around can land on 0 (e.g. day 31 due on day 1); bill at least one day
    return (days or 1) / PRORATION_MONTH_DAYS


def prorate_rent(base_monthly_rent: float, start_day: int, due_day: int) -> float:
    """
    Prorated first-month rent, always computed from the base rent
    """
    if start_day == due_day:
        return base_monthly_rent
    return round_currency(base_monthly_rent * proration_fraction(start_day, due_day))
