"""Tests for dashboard.py — Streamlit search app."""

import re
from pathlib import Path


DASHBOARD_SRC = Path(__file__).parent.parent / "dashboard.py"


# ---- Read-only against the registry ----

def test_no_write_requests():
    """The app never issues POST/PUT/PATCH/DELETE requests."""
    content = DASHBOARD_SRC.read_text()
    for verb in ("post", "put", "patch", "delete"):
        assert not re.search(rf"requests\.{verb}\(|session\.{verb}\(", content), (
            f"Dashboard must not call {verb.upper()} against the registry"
        )


def test_no_direct_http_calls():
    """All HTTP goes through the cached search function, not requests directly."""
    content = DASHBOARD_SRC.read_text()
    assert "import requests" not in content
    assert "page = search_companies(criteria)" in content


# ---- Validation before dispatch ----

def test_search_uses_build_criteria():
    """Form input is validated by build_criteria before any search runs."""
    content = DASHBOARD_SRC.read_text()
    assert "build_criteria(" in content
    assert "except CriteriaValidationError" in content


def test_stops_without_criteria():
    content = DASHBOARD_SRC.read_text()
    assert re.search(r"if criteria is None:\s+.*\n\s+st\.stop\(\)", content)


# ---- Error signal and empty results ----

def test_api_error_sets_error_flag():
    """A PRHAPIError from the search shows the banner over an empty page."""
    content = DASHBOARD_SRC.read_text()
    assert re.search(
        r"except PRHAPIError:\s+is_error = True\s+page = ResultPage\.empty\(criteria\.page\)", content
    )
    assert "if is_error:" in content
    assert "st.error(ERROR_MESSAGE)" in content


def test_no_results_message_only_without_error():
    content = DASHBOARD_SRC.read_text()
    assert re.search(r"if not is_error:\s+st\.info\(NO_RESULTS_MESSAGE\)", content)


# ---- Pagination and caching ----

def test_pagination_uses_for_page():
    content = DASHBOARD_SRC.read_text()
    assert "criteria.for_page(criteria.page - 1)" in content
    assert "criteria.for_page(criteria.page + 1)" in content


def test_results_cached_for_freshness_window():
    """Search results are memoized with st.cache_data for CACHE_TTL_SECONDS."""
    content = DASHBOARD_SRC.read_text()
    assert re.search(
        r"@st\.cache_data\(ttl=SETTINGS\.cache_ttl_seconds, show_spinner=False\)\s+"
        r"def search_companies\(criteria: SearchCriteria\)",
        content,
    )
    assert "client.request_companies(criteria)" in content


def test_failed_search_not_swallowed_inside_cached_function():
    """Errors must escape the cached function so they are never cached."""
    content = DASHBOARD_SRC.read_text()
    body = content.split("def search_companies", 1)[1].split("\n\n\n", 1)[0]
    assert "except" not in body
    assert "fetch_companies" not in body


def test_detail_view_lists_all_fields():
    content = DASHBOARD_SRC.read_text()
    for label in ("Business ID", "Name", "Registration Date", "End Date", "Company Form", "Location"):
        assert f'detail_field("{label}"' in content
