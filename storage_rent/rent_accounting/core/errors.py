"""
Validation errors raised by the rent schedule calculator
"""

from typing import Any, Dict


class RentValidationError(Exception):
    """Bad input supplied by the caller - maps to an HTTP 400"""
    status_code = 400
    client_error = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses"""
        return {
            'success': False,
            'error': self.message,
            'error_type': self.error_type,
            'client_error': self.client_error,
        }


class InvalidDate(RentValidationError):
    """A supplied value is not a real calendar date"""


class InvalidWindow(RentValidationError):
    """Reporting window starts after it ends"""


class LeaseOutsideWindow(RentValidationError):
    """Lease start falls outside the reporting window"""


class InvalidParameter(RentValidationError):
    """A numeric request field is missing, non-numeric or out of range"""
