"""Tests for core/validation.py — search form checks."""

from datetime import date

import pytest

from core.exceptions import CriteriaValidationError
from core.models import SearchCriteria
from core.validation import (
    BUSINESS_ID_ERROR,
    DATE_RANGE_ERROR,
    LOCATION_ERROR,
    NO_CRITERIA_ERROR,
    build_criteria,
    validate_business_id,
    validate_criteria,
    validate_date_range,
    validate_location,
)


class TestFieldValidators:

    @pytest.mark.parametrize("value", ["", None, "1234567-8", "0112038-9"])
    def test_valid_business_ids(self, value):
        assert validate_business_id(value) is True

    @pytest.mark.parametrize("value", ["1234567", "12345678", "123456-78", "1234567-89", "abcdefg-h", " 1234567-8"])
    def test_invalid_business_ids(self, value):
        assert validate_business_id(value) is False

    @pytest.mark.parametrize("value", ["", None, "Helsinki", "Lahti 2", "oulu"])
    def test_valid_locations(self, value):
        assert validate_location(value) is True

    @pytest.mark.parametrize("value", ["00100", "   ", "123-456"])
    def test_invalid_locations(self, value):
        assert validate_location(value) is False

    def test_date_range(self):
        assert validate_date_range(date(2024, 1, 1), date(2024, 1, 31))
        assert validate_date_range(date(2024, 1, 1), date(2024, 1, 1))
        assert validate_date_range(date(2024, 1, 1), None)
        assert not validate_date_range(date(2024, 2, 1), date(2024, 1, 1))


class TestValidateCriteria:

    def test_valid_single_criterion(self):
        assert validate_criteria(location="Helsinki") == {}
        assert validate_criteria(registration_date_end=date(2024, 1, 1)) == {}

    def test_no_criteria(self):
        assert validate_criteria() == {"form": NO_CRITERIA_ERROR}

    def test_whitespace_only_is_no_criteria(self):
        assert validate_criteria(business_id="  ", location="   ") == {
            "business_id": BUSINESS_ID_ERROR,
            "location": LOCATION_ERROR,
            "form": NO_CRITERIA_ERROR,
        }

    def test_all_errors_reported(self):
        errors = validate_criteria(
            business_id="123",
            location="00100",
            registration_date_start=date(2024, 5, 1),
            registration_date_end=date(2024, 1, 1),
        )
        assert errors == {
            "business_id": BUSINESS_ID_ERROR,
            "location": LOCATION_ERROR,
            "date_range": DATE_RANGE_ERROR,
        }


class TestBuildCriteria:

    def test_builds_first_page_with_trimmed_fields(self):
        criteria = build_criteria(business_id="1234567-8", location="  Espoo ")
        assert criteria == SearchCriteria(business_id="1234567-8", location="Espoo", page=0)

    def test_blank_fields_become_none(self):
        criteria = build_criteria(location="Turku", business_id="")
        assert criteria.business_id is None
        assert criteria.has_criteria()

    def test_raises_with_errors(self):
        with pytest.raises(CriteriaValidationError) as exc_info:
            build_criteria(business_id="bad")
        assert exc_info.value.errors == {"business_id": BUSINESS_ID_ERROR}
        assert isinstance(exc_info.value, ValueError)

    def test_for_page_keeps_filters(self):
        criteria = build_criteria(location="Vantaa")
        next_page = criteria.for_page(1)
        assert next_page.page == 1
        assert next_page.location == "Vantaa"
        assert criteria.page == 0
        assert criteria.for_page(-3).page == 0
