"""
HTTP client for the PRH (Patentti- ja rekisterihallitus) / YTJ Open Data API v3.

Base URL: https://avoindata.prh.fi/opendata-ytj-api/v3
    - /companies              search by businessId, location, registration date range
    - /companies/{businessId} single-company detail (only linked, never fetched here)

No authentication required; free under CC BY 4.0.  Rate limit: 300
queries / minute shared across all users.  Results come in fixed pages of
100 companies and the ``page`` parameter is 1-indexed.
"""

import logging
from typing import Optional

import requests

from config.settings import Settings
from core.exceptions import PRHAPIError
from core.models import PAGE_SIZE, ResultPage, SearchCriteria
from core.normalize import detail_uri, transform_response
from core.query import format_search_params

logger = logging.getLogger(__name__)


def _get_session(settings: Settings) -> requests.Session:
    """Create a requests session with standard headers."""
    session = requests.Session()
    session.headers.update({
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9,fi;q=0.8",
    })
    return session


class PRHClient:
    """Searches companies in the PRH registry.

    ``request_companies`` raises PRHAPIError on any transport, HTTP or JSON
    failure.  ``fetch_companies`` never raises: failures come back as an
    empty ResultPage for the requested page.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.session = session or _get_session(self.settings)

    def detail_uri(self, business_id: str) -> str:
        return detail_uri(business_id, self.settings.api_base_url)

    def request_companies(self, criteria: SearchCriteria) -> ResultPage:
        params = format_search_params(criteria)
        url = self.settings.companies_url
        logger.debug("[PRH] GET %s params=%s", url, params)

        try:
            resp = self.session.get(url, params=params, timeout=self.settings.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.warning("[PRH] API HTTP error: %s", exc)
            raise PRHAPIError(f"PRH API error: {status}", status_code=status) from exc
        except requests.exceptions.ConnectionError as exc:
            logger.warning("[PRH] API connection error: %s", exc)
            raise PRHAPIError(f"PRH API connection error: {exc}") from exc
        except requests.exceptions.Timeout as exc:
            logger.warning("[PRH] API request timed out")
            raise PRHAPIError("PRH API request timed out") from exc
        except requests.exceptions.JSONDecodeError as exc:
            # Must precede RequestException, which it subclasses
            logger.warning("[PRH] API returned invalid JSON: %s", exc)
            raise PRHAPIError(f"PRH API returned invalid JSON: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("[PRH] API request failed: %s", exc)
            raise PRHAPIError(f"PRH API request failed: {exc}") from exc

        page = transform_response(
            data,
            page=criteria.page,
            max_results=PAGE_SIZE,
            base_url=self.settings.api_base_url,
        )
        logger.info(
            "[PRH] Page %d/%d: %d companies (%d total)",
            page.current_page + 1, page.total_pages,
            len(page.results), page.total_results,
        )
        return page

    def fetch_companies(self, criteria: SearchCriteria) -> ResultPage:
        """Search companies; returns an empty page instead of raising."""
        try:
            return self.request_companies(criteria)
        except PRHAPIError as exc:
            logger.error("[PRH] Error searching companies: %s", exc)
        except Exception as exc:
            logger.error("[PRH] Unexpected error searching companies: %s", exc, exc_info=True)
        return ResultPage.empty(criteria.page)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PRHClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def fetch_companies(
    criteria: SearchCriteria, settings: Optional[Settings] = None
) -> ResultPage:
    """One-shot search with a throwaway session.  Never raises."""
    with PRHClient(settings) as client:
        return client.fetch_companies(criteria)
