"""
Exceptions raised inside the search pipeline.

Only PRHClient.request_companies and build_criteria raise these; the
fail-soft entry points convert them to empty result pages.
"""

from typing import Dict, Optional


class PRHSearchError(Exception):
    """Base class for company search errors."""


class PRHAPIError(PRHSearchError):
    """The PRH API could not be reached or returned an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CriteriaValidationError(PRHSearchError, ValueError):
    """Search criteria failed validation. ``errors`` maps field -> message."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(errors.values()))
        self.errors = dict(errors)
