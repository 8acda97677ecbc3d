"""
Storage Rent Backend API
Handles monthly rent schedule requests and returns one record per month
"""

from flask import Blueprint, request, jsonify
import logging
import math
from typing import Any, Optional

from storage_rent.rent_accounting.core.errors import InvalidParameter
from storage_rent.rent_accounting.core.models import RentScheduleRequest
from storage_rent.rent_accounting.schedule.generator import compute_rent_schedule

# Create blueprint
rent_bp = Blueprint('rent', __name__)

logger = logging.getLogger(__name__)


def _parse_number(data: dict, key: str) -> float:
    """Parse a required numeric field from the request body"""
    value = data.get(key)
    if value is None or value == '':
        raise InvalidParameter(f"{key} is required.")
    if isinstance(value, bool):
        raise InvalidParameter(f"{key} must be a number.")
    try:
        number = float(value)
    except (ValueError, TypeError):
        raise InvalidParameter(f"{key} must be a number.")
    if not math.isfinite(number):
        raise InvalidParameter(f"{key} must be a finite number.")
    return number


def _parse_int(data: dict, key: str, minimum: int, maximum: Optional[int] = None) -> int:
    """Parse a required whole-number field and check its range"""
    number = _parse_number(data, key)
    if not number.is_integer():
        raise InvalidParameter(f"{key} must be a whole number.")
    number = int(number)
    if number < minimum or (maximum is not None and number > maximum):
        bounds = f"between {minimum} and {maximum}" if maximum is not None else f"at least {minimum}"
        raise InvalidParameter(f"{key} must be {bounds}.")
    return number


def _parse_rent_request(data: Any) -> RentScheduleRequest:
    """Map the JSON body to a RentScheduleRequest; dates are validated by the calculator"""
    if not isinstance(data, dict):
        raise InvalidParameter("Request body must be a JSON object.")

    return RentScheduleRequest(
        base_monthly_rent=_parse_number(data, 'baseMonthlyRent'),
        lease_start_date=data.get('leaseStartDate'),
        window_start_date=data.get('windowStartDate'),
        window_end_date=data.get('windowEndDate'),
        day_of_month_rent_due=_parse_int(data, 'dayOfMonthRentDue', 1, 31),
        rent_rate_change_frequency=_parse_int(data, 'rentRateChangeFrequency', 1),
        rent_change_rate=_parse_number(data, 'rentChangeRate'),
    )


@rent_bp.route('/storage-rent', methods=['POST'])
def get_monthly_rent():
    """
    Main endpoint for the storage rent schedule
    Returns vacancy, rent amount and due date for each month of the window
    """
    try:
        data = request.get_json(silent=True)
        logger.info("📥 POST /storage-rent - rent schedule request")

        try:
            rent_request = _parse_rent_request(data)
        except InvalidParameter as e:
            logger.warning(f"⚠️  Rent schedule rejected ({e.error_type}): {e.message}")
            return jsonify(e.to_dict()), e.status_code

        logger.info(f"   lease_start: {rent_request.lease_start_date}, "
                    f"window: {rent_request.window_start_date} -> {rent_request.window_end_date}")

        result = compute_rent_schedule(rent_request)
        if not result.ok:
            return jsonify(result.error.to_dict()), result.error.status_code

        return jsonify([record.to_dict() for record in result.records])

    except Exception as e:
        logger.error(f"❌ Error in get_monthly_rent: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e),
            'error_type': 'InternalError',
            'client_error': False,
        }), 500


@rent_bp.route('/health', methods=['GET'])
def health():
    """Liveness probe"""
    return jsonify({'status': 'ok'})
