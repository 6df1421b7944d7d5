"""
Maps SearchCriteria onto the PRH /companies query parameters.
"""

from datetime import date
from typing import Dict, Optional, Union

from core.models import SearchCriteria


def _format_date(value: Optional[Union[date, str]]) -> str:
    if not value:
        return ""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def format_search_params(criteria: SearchCriteria) -> Dict[str, str]:
    """Return only the parameters that are set, plus totalResults and page.

    PRH pages are 1-indexed while SearchCriteria.page is 0-indexed.
    No validation happens here; callers validate first.
    """
    params: Dict[str, str] = {}

    if criteria.business_id:
        params["businessId"] = criteria.business_id
    if criteria.location:
        params["location"] = criteria.location

    start = _format_date(criteria.registration_date_start)
    if start:
        params["registrationDateStart"] = start
    end = _format_date(criteria.registration_date_end)
    if end:
        params["registrationDateEnd"] = end

    params["totalResults"] = "true"
    params["page"] = str((criteria.page or 0) + 1)
    return params
