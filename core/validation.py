"""
Validation of user-entered search criteria.

A search is only dispatched when these checks pass; the query formatter
and the client assume valid input.
"""

import re
from datetime import date
from typing import Dict, Optional

from core.exceptions import CriteriaValidationError
from core.models import SearchCriteria

# Finnish business ID (Y-tunnus): 7 digits, hyphen, check digit
BUSINESS_ID_PATTERN = re.compile(r"^\d{7}-\d$")
# A town name must contain at least one letter
TOWN_NAME_PATTERN = re.compile(r"[a-zA-Z]")

BUSINESS_ID_ERROR = "Invalid business ID format. Expected: 1234567-8"
LOCATION_ERROR = "Please enter a valid town name (must contain letters)"
DATE_RANGE_ERROR = "Start date must be before or equal to end date"
NO_CRITERIA_ERROR = "Please provide at least one search criteria"


def validate_business_id(business_id: Optional[str]) -> bool:
    if not business_id:
        return True
    return bool(BUSINESS_ID_PATTERN.match(business_id))


def validate_location(location: Optional[str]) -> bool:
    if not location:
        return True
    return bool(TOWN_NAME_PATTERN.search(location)) and bool(location.strip())


def validate_date_range(start: Optional[date], end: Optional[date]) -> bool:
    if not start or not end:
        return True
    return start <= end


def validate_criteria(
    business_id: Optional[str] = None,
    location: Optional[str] = None,
    registration_date_start: Optional[date] = None,
    registration_date_end: Optional[date] = None,
) -> Dict[str, str]:
    """Return {field: message} for every failed check; empty when valid."""
    errors: Dict[str, str] = {}

    if business_id and not validate_business_id(business_id):
        errors["business_id"] = BUSINESS_ID_ERROR

    if location and not validate_location(location):
        errors["location"] = LOCATION_ERROR

    if not validate_date_range(registration_date_start, registration_date_end):
        errors["date_range"] = DATE_RANGE_ERROR

    has_criteria = (
        (business_id or "").strip()
        or (location or "").strip()
        or registration_date_start
        or registration_date_end
    )
    if not has_criteria:
        errors["form"] = NO_CRITERIA_ERROR

    return errors


def build_criteria(
    business_id: Optional[str] = None,
    location: Optional[str] = None,
    registration_date_start: Optional[date] = None,
    registration_date_end: Optional[date] = None,
) -> SearchCriteria:
    """Validate raw form input and build criteria for the first page.

    Raises CriteriaValidationError listing every failed check.
    """
    errors = validate_criteria(
        business_id, location, registration_date_start, registration_date_end
    )
    if errors:
        raise CriteriaValidationError(errors)

    return SearchCriteria(
        business_id=(business_id or "").strip() or None,
        location=(location or "").strip() or None,
        registration_date_start=registration_date_start,
        registration_date_end=registration_date_end,
        page=0,
    )
