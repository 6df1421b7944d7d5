"""
Normalization of PRH /companies responses.

The YTJ v3 API is not consistent about field shapes: ``businessId`` and
``registrationDate`` usually arrive as plain strings but have been seen as
objects (``{"value": ...}``), and ``companyForms`` entries may be strings
or objects.  Every field is read the same way: plain string first, then
a short list of known object keys, then a textual fallback.  Nothing here
raises; unusable data turns into empty strings or placeholder ids.
"""

import json
import logging
from typing import Any, Iterable, List, Optional

from config.settings import DEFAULT_API_BASE
from core.models import PAGE_SIZE, CompanyRecord, ResultPage

logger = logging.getLogger(__name__)

FINNISH_LANGUAGE = "FI"
ERROR_NAME = "Error processing data"

# Strings produced when an object is serialized without a usable value
_EMPTY_MARKERS = ("{}",)
_OBJECT_PLACEHOLDER = "[object Object]"


def _first_string(value: dict, keys: Iterable[str]) -> Optional[str]:
    """Return the first non-empty plain-string value among *keys*."""
    for key in keys:
        candidate = value.get(key)
        if candidate and isinstance(candidate, str):
            return candidate
    return None


def _to_text(value: Any) -> str:
    """Serialize *value* as JSON text.  Returns "" if it can't be serialized."""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        logger.debug("[PRH] Could not serialize %r: %s", value, exc)
        return ""


def resolve_name(company: dict) -> str:
    """Current Finnish name, else the first name listed, else ""."""
    names = company.get("names") or []
    current_fi = next(
        (
            entry for entry in names
            if isinstance(entry, dict)
            and entry.get("language") == FINNISH_LANGUAGE
            and not entry.get("endDate")
        ),
        None,
    )
    if current_fi and current_fi.get("name"):
        return str(current_fi["name"])

    if names:
        first = names[0]
        if isinstance(first, dict):
            return str(first.get("name") or "")
    return ""


def resolve_business_id(value: Any, index: int) -> str:
    """Business ID as a string.

    Objects are searched for ``value`` then ``id``; when nothing usable is
    found a ``company-<index>`` placeholder keeps ids unique within a page.
    """
    if isinstance(value, str):
        return value
    if not value:
        return f"company-{index}"
    if isinstance(value, dict):
        return _first_string(value, ("value", "id")) or f"company-{index}"
    if isinstance(value, (list, tuple)):
        return f"company-{index}"
    return str(value)


def resolve_registration_date(value: Any) -> str:
    if isinstance(value, str):
        return value
    if not value:
        return ""
    if isinstance(value, dict):
        found = _first_string(value, ("value", "registrationDate"))
        if found:
            return found

    # Best effort: keep the raw text unless it carries no information
    text = _to_text(value)
    if text in _EMPTY_MARKERS or _OBJECT_PLACEHOLDER in text:
        return ""
    return text


def resolve_company_form(forms: Any) -> str:
    """Label of the first entry in ``companyForms``; "" unless it is a list."""
    if not forms or not isinstance(forms, (list, tuple)):
        return ""
    form = forms[0]
    if isinstance(form, str):
        return form
    if isinstance(form, dict) and isinstance(form.get("name"), str):
        return form["name"]
    if form is not None:
        return _to_text(form)
    return ""


def resolve_location(addresses: Any) -> str:
    """"<postCode> <city>" of the first address without an end date."""
    current = None
    for address in addresses or []:
        if isinstance(address, dict) and not address.get("endDate"):
            current = address
            break
    if current is None:
        return ""

    post_offices = current.get("postOffices") or []
    city = ""
    if post_offices and isinstance(post_offices[0], dict):
        city = post_offices[0].get("city") or ""
    return f"{current.get('postCode') or ''} {city}".strip()


def detail_uri(business_id: str, base_url: str = DEFAULT_API_BASE) -> str:
    return f"{base_url.rstrip('/')}/companies/{business_id}"


def error_record(index: int) -> CompanyRecord:
    return CompanyRecord(business_id=f"error-{index}", name=ERROR_NAME)


def normalize_company(
    company: dict, index: int, base_url: str = DEFAULT_API_BASE
) -> CompanyRecord:
    """Map one PRH company object to a CompanyRecord.

    Raises on structurally broken input (e.g. a non-dict); transform_response
    turns that into an error record.
    """
    business_id = resolve_business_id(company.get("businessId"), index)
    end_date = company.get("endDate")

    return CompanyRecord(
        business_id=business_id,
        name=resolve_name(company),
        registration_date=resolve_registration_date(company.get("registrationDate")),
        end_date=str(end_date) if end_date else "",
        company_form=resolve_company_form(company.get("companyForms")),
        location=resolve_location(company.get("addresses")),
        details_uri=detail_uri(business_id, base_url),
    )


def transform_response(
    data: Any,
    page: int = 0,
    max_results: int = PAGE_SIZE,
    base_url: str = DEFAULT_API_BASE,
) -> ResultPage:
    """Convert a PRH /companies payload into a ResultPage.

    Each company is normalized in isolation: one broken entry becomes an
    ``error-<index>`` record and the rest of the page is kept.
    """
    companies = data.get("companies") if isinstance(data, dict) else None
    if not isinstance(companies, list):
        logger.error("[PRH] Invalid API response: %r", data)
        return ResultPage.empty(page)

    records: List[CompanyRecord] = []
    for index, company in enumerate(companies):
        try:
            records.append(normalize_company(company, index, base_url))
        except Exception as exc:
            logger.error(
                "[PRH] Error transforming company at index %d: %s (%r)",
                index, exc, company,
            )
            records.append(error_record(index))

    total = data.get("totalResults") or len(records)
    try:
        total = int(total)
    except (TypeError, ValueError):
        logger.warning("[PRH] Unusable totalResults %r, counting records", total)
        total = len(records)

    return ResultPage(
        results=records,
        total_results=total,
        current_page=page,
        total_pages=ResultPage.count_pages(total, max_results),
    )
