"""
Monthly rent schedule generator for a storage unit

Walks the reporting window one calendar month at a time and produces a
MonthlyRentRecord per month:
  - months before the lease month are vacancies
  - the lease month is prorated from the base rent
  - the carried rent is escalated (after lease start, positive rates) or
    reduced (before lease start, negative rates) every N elapsed months
  - the due date is the configured day, clamped to the month length
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List

from ..core.errors import InvalidWindow, LeaseOutsideWindow, RentValidationError
from ..core.models import MonthlyRentRecord, RentScheduleRequest, RentScheduleResult
from ..utils.date_utils import (
    DateLike,
    calculate_due_date,
    iter_month_starts,
    months_spanned,
    same_month,
    to_calendar_date,
)
from ..utils.finance import apply_rate_change, prorate_rent

logger = logging.getLogger(__name__)


@dataclass
class _ScheduleState:
    """Loop state local to one calculation"""
    carried_rent: float
    elapsed_months: int = 0


def validate_dates(lease_start_date: DateLike,
                   window_start_date: DateLike,
                   window_end_date: DateLike):
    """
    Parse and check the three schedule dates

    Returns:
        (lease_start, window_start, window_end) as calendar dates
    Raises:
        InvalidDate, InvalidWindow, LeaseOutsideWindow
    """
    window_start = to_calendar_date(window_start_date, 'windowStartDate')
    window_end = to_calendar_date(window_end_date, 'windowEndDate')
    lease_start = to_calendar_date(lease_start_date, 'leaseStartDate')

    if window_start > window_end:
        raise InvalidWindow("windowStartDate cannot be later than windowEndDate.")

    if lease_start > window_end:
        raise LeaseOutsideWindow("leaseStartDate cannot be later than windowEndDate.")

    if lease_start < window_start:
        raise LeaseOutsideWindow("leaseStartDate cannot be earlier than windowStartDate.")

    return lease_start, window_start, window_end


def _adjust_rent(state: _ScheduleState, cursor: date, lease_start: date,
                 frequency: int, rate: float) -> None:
    """
    Apply the rate change when the elapsed months reach the frequency

    Increases only apply from lease start onward; decreases only apply to the
    vacancy months before it.
    """
    if state.elapsed_months != frequency:
        return

    if (cursor >= lease_start and rate > 0) or (cursor < lease_start and rate < 0):
        previous = state.carried_rent
        state.carried_rent = apply_rate_change(previous, rate)
        state.elapsed_months = 0
        logger.debug(f"📈 {cursor:%Y-%m}: rent changed {previous:.2f} -> {state.carried_rent:.2f}")


def calculate_monthly_rent(
    base_monthly_rent: float,
    lease_start_date: DateLike,
    window_start_date: DateLike,
    window_end_date: DateLike,
    day_of_month_rent_due: int,
    rent_rate_change_frequency: int,
    rent_change_rate: float,
) -> List[MonthlyRentRecord]:
    """
    Determines the vacancy, rent amount and due date for each month in a window

    Args:
        base_monthly_rent: The base or starting monthly rent for the unit
        lease_start_date: The date that the tenant's lease starts
        window_start_date: The first date of the reporting window
        window_end_date: The last date of the reporting window
        day_of_month_rent_due: The day of each month on which rent is due
        rent_rate_change_frequency: How often, in months, the rent changes
        rent_change_rate: Decimal rate (not %), positive to increase, negative to decrease
    Returns:
        One MonthlyRentRecord per calendar month of the window, oldest first
    Raises:
        RentValidationError: InvalidDate, InvalidWindow or LeaseOutsideWindow
    """
    lease_start, window_start, window_end = validate_dates(
        lease_start_date, window_start_date, window_end_date
    )
    logger.info(f"📅 Calculating storage rent {window_start} -> {window_end} "
                f"({months_spanned(window_start, window_end)} months), lease start {lease_start}")

    state = _ScheduleState(carried_rent=base_monthly_rent)
    records: List[MonthlyRentRecord] = []

    for cursor in iter_month_starts(window_start, window_end):
        is_first_month = same_month(cursor, lease_start)
        if is_first_month:
            state.elapsed_months = 0

        _adjust_rent(state, cursor, lease_start, rent_rate_change_frequency, rent_change_rate)

        rent_amount = state.carried_rent
        if is_first_month:
            rent_amount = prorate_rent(base_monthly_rent, lease_start.day, day_of_month_rent_due)
            logger.debug(f"🔹 {cursor:%Y-%m}: first active month, prorated rent {rent_amount:.2f}")
            state.carried_rent = base_monthly_rent

        records.append(MonthlyRentRecord(
            vacancy=not is_first_month and cursor < lease_start,
            rent_amount=rent_amount,
            rent_due_date=calculate_due_date(cursor.year, cursor.month, day_of_month_rent_due),
        ))

        state.elapsed_months += 1

    logger.info(f"✅ Generated {len(records)} monthly rent records")
    return records


def compute_rent_schedule(request: RentScheduleRequest) -> RentScheduleResult:
    """
    Run the calculation, returning validation failures as a value

    Only RentValidationError is captured; anything else propagates as an
    internal error.
    """
    try:
        records = calculate_monthly_rent(
            request.base_monthly_rent,
            request.lease_start_date,
            request.window_start_date,
            request.window_end_date,
            request.day_of_month_rent_due,
            request.rent_rate_change_frequency,
            request.rent_change_rate,
        )
    except RentValidationError as e:
        logger.warning(f"⚠️  Rent schedule rejected ({e.error_type}): {e.message}")
        return RentScheduleResult(error=e)
    return RentScheduleResult(records=records)
