"""
Core modules for the Finnish Company Search.

Submodules:
    core.models      - SearchCriteria, CompanyRecord, ResultPage dataclasses
    core.query       - SearchCriteria -> PRH query parameters
    core.normalize   - PRH JSON -> ResultPage, tolerant of odd field shapes
    core.client      - HTTP client for the PRH YTJ v3 API
    core.validation  - Checks on user-entered criteria
    core.exceptions  - Error types
"""

from core.client import PRHClient, fetch_companies
from core.exceptions import CriteriaValidationError, PRHAPIError, PRHSearchError
from core.models import CompanyRecord, ResultPage, SearchCriteria
from core.normalize import transform_response
from core.query import format_search_params
from core.validation import build_criteria, validate_criteria

__all__ = [
    "CompanyRecord",
    "CriteriaValidationError",
    "PRHAPIError",
    "PRHClient",
    "PRHSearchError",
    "ResultPage",
    "SearchCriteria",
    "build_criteria",
    "fetch_companies",
    "format_search_params",
    "transform_response",
    "validate_criteria",
]
