"""
Data models for the storage rent schedule
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from .errors import RentValidationError
from ..utils.date_utils import DateLike


@dataclass(frozen=True)
class MonthlyRentRecord:
    """Rent position of the unit for one calendar month"""
    vacancy: bool
    rent_amount: float
    rent_due_date: date

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'vacancy': self.vacancy,
            'rentAmount': self.rent_amount,
            # Due dates are UTC calendar dates, serialized at midnight
            'rentDueDate': f"{self.rent_due_date.isoformat()}T00:00:00.000Z",
        }


@dataclass
class RentScheduleRequest:
    """Inputs of a single rent schedule calculation"""
    base_monthly_rent: float
    lease_start_date: DateLike
    window_start_date: DateLike
    window_end_date: DateLike
    day_of_month_rent_due: int
    rent_rate_change_frequency: int
    rent_change_rate: float


@dataclass
class RentScheduleResult:
    """Outcome of a calculation: either records or the validation error"""
    records: List[MonthlyRentRecord] = field(default_factory=list)
    error: Optional[RentValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
