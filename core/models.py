"""
Shared data models for the Finnish Company Search.
"""

import json
import math
from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional

PAGE_SIZE = 100


@dataclass(frozen=True)
class SearchCriteria:
    """Filter set for one search request.

    Frozen so identical criteria hash equally and can key the result cache.
    ``page`` is zero-based; the API itself is one-based.
    """
    business_id: Optional[str] = None           # Y-tunnus, NNNNNNN-N
    location: Optional[str] = None              # Town name
    registration_date_start: Optional[date] = None
    registration_date_end: Optional[date] = None
    page: int = 0

    def has_criteria(self) -> bool:
        return bool(
            (self.business_id or "").strip()
            or (self.location or "").strip()
            or self.registration_date_start
            or self.registration_date_end
        )

    def for_page(self, page: int) -> "SearchCriteria":
        """Return a copy of these criteria pointing at another page."""
        return replace(self, page=max(page, 0))


@dataclass
class CompanyRecord:
    """A single company, normalized from the PRH response.

    Every field is a best-effort string; missing data stays empty.
    """
    business_id: str = ""
    name: str = ""
    registration_date: str = ""     # YYYY-MM-DD as delivered by PRH
    end_date: str = ""              # Empty while the company is active
    company_form: str = ""
    location: str = ""              # "<postCode> <city>"
    details_uri: str = ""

    @property
    def is_active(self) -> bool:
        return not self.end_date

    def to_dict(self) -> dict:
        return {
            "businessId": self.business_id,
            "name": self.name,
            "registrationDate": self.registration_date,
            "endDate": self.end_date,
            "companyForm": self.company_form,
            "location": self.location,
            "detailsUri": self.details_uri,
        }


@dataclass
class ResultPage:
    """One page of normalized companies plus pagination metadata."""
    results: List[CompanyRecord] = field(default_factory=list)
    total_results: int = 0
    current_page: int = 0
    total_pages: int = 0

    @classmethod
    def empty(cls, page: int = 0) -> "ResultPage":
        return cls(results=[], total_results=0, current_page=page, total_pages=0)

    @staticmethod
    def count_pages(total_results: int, page_size: int = PAGE_SIZE) -> int:
        if page_size <= 0:
            return 0
        return math.ceil(total_results / page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 0

    @property
    def has_next(self) -> bool:
        return self.current_page + 1 < self.total_pages

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "totalResults": self.total_results,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
