"""Tests for core/query.py — SearchCriteria to PRH query parameters."""

from datetime import date

import pytest

from core.models import SearchCriteria
from core.query import format_search_params


OPTIONAL_KEYS = {"businessId", "location", "registrationDateStart", "registrationDateEnd"}


@pytest.mark.parametrize("page", [0, 1, 4, 99])
def test_page_only_translates_to_one_indexed(page):
    params = format_search_params(SearchCriteria(page=page))
    assert params["page"] == str(page + 1)
    assert params["totalResults"] == "true"
    assert not OPTIONAL_KEYS & set(params)


def test_all_criteria_mapped():
    criteria = SearchCriteria(
        business_id="1234567-8",
        location="Helsinki",
        registration_date_start=date(2024, 1, 1),
        registration_date_end=date(2024, 1, 31),
        page=2,
    )
    assert format_search_params(criteria) == {
        "businessId": "1234567-8",
        "location": "Helsinki",
        "registrationDateStart": "2024-01-01",
        "registrationDateEnd": "2024-01-31",
        "totalResults": "true",
        "page": "3",
    }


def test_unset_fields_are_omitted():
    params = format_search_params(SearchCriteria(location="Oulu"))
    assert params == {"location": "Oulu", "totalResults": "true", "page": "1"}


def test_empty_strings_are_omitted():
    params = format_search_params(SearchCriteria(business_id="", location=""))
    assert "businessId" not in params
    assert "location" not in params


def test_string_dates_passed_through():
    """Dates already formatted by the caller are sent unchanged."""
    criteria = SearchCriteria(registration_date_start="2023-05-01")
    assert format_search_params(criteria)["registrationDateStart"] == "2023-05-01"


def test_no_validation_performed():
    """Invalid input is passed through; validation is the caller's job."""
    params = format_search_params(SearchCriteria(business_id="not-an-id"))
    assert params["businessId"] == "not-an-id"
