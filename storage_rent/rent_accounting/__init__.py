"""
Rent accounting core: schedule generation, models and helpers
"""

from .core.errors import (
    RentValidationError,
    InvalidDate,
    InvalidWindow,
    LeaseOutsideWindow,
    InvalidParameter,
)
from .core.models import MonthlyRentRecord, RentScheduleRequest, RentScheduleResult
from .schedule.generator import calculate_monthly_rent, compute_rent_schedule

__all__ = [
    'RentValidationError',
    'InvalidDate',
    'InvalidWindow',
    'LeaseOutsideWindow',
    'InvalidParameter',
    'MonthlyRentRecord',
    'RentScheduleRequest',
    'RentScheduleResult',
    'calculate_monthly_rent',
    'compute_rent_schedule',
]
