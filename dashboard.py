#!/usr/bin/env python3
"""
Finnish Company Search — Streamlit App

Search form, paginated results table and a company detail view over the
PRH / YTJ open data API.  Read-only: nothing is written anywhere.
Run: streamlit run dashboard.py
"""

from html import escape

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from config import Settings
from core import (
    CompanyRecord,
    CriteriaValidationError,
    PRHAPIError,
    PRHClient,
    ResultPage,
    SearchCriteria,
    build_criteria,
)

load_dotenv()
SETTINGS = Settings.from_env()

ERROR_MESSAGE = "An error occurred while fetching data. Please try again."
NO_RESULTS_MESSAGE = "No companies found. Try adjusting your search criteria."

COLUMN_LABELS = {
    "business_id": "Business ID",
    "name": "Name",
    "registration_date": "Registration Date",
    "end_date": "End Date",
    "location": "Location",
}


@st.cache_data(ttl=SETTINGS.cache_ttl_seconds, show_spinner=False)
def search_companies(criteria: SearchCriteria) -> ResultPage:
    """One page of results, fresh for CACHE_TTL_SECONDS.

    PRHAPIError propagates and is not cached, so a failed page is retried
    on the next rerun.
    """
    with PRHClient(SETTINGS) as client:
        return client.request_companies(criteria)


def results_df(records) -> pd.DataFrame:
    """Table rows for a page of companies, in API order."""
    rows = [
        {
            "business_id": r.business_id,
            "name": r.name,
            "registration_date": r.registration_date,
            "end_date": r.end_date or "N/A",
            "location": r.location or "N/A",
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=list(COLUMN_LABELS))


def detail_field(label, value):
    return f"""
    <div class="detail-field">
        <div class="detail-label">{escape(label)}</div>
        <div class="detail-value">{escape(value or "N/A")}</div>
    </div>"""


@st.dialog("Company Details")
def show_details(company: CompanyRecord):
    col_left, col_right = st.columns(2)
    col_left.markdown(detail_field("Business ID", company.business_id), unsafe_allow_html=True)
    col_right.markdown(detail_field("Name", company.name), unsafe_allow_html=True)
    col_left.markdown(detail_field("Registration Date", company.registration_date), unsafe_allow_html=True)
    col_right.markdown(detail_field("End Date", company.end_date), unsafe_allow_html=True)
    col_left.markdown(detail_field("Company Form", company.company_form), unsafe_allow_html=True)
    col_right.markdown(detail_field("Location", company.location), unsafe_allow_html=True)
    if company.details_uri:
        st.markdown(f"[Open in PRH API]({company.details_uri})")
    if st.button("Close"):
        st.rerun()


# ---------------------------------------------------------------------------
# Page config & global styles
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Finnish Company Search", layout="wide", page_icon="🔍")

st.markdown("""
<style>
[data-testid="block-container"] { padding: 2rem 2.5rem 3rem; }
h1, h2, h3 { letter-spacing: -0.02em; color: var(--text-color); }
h1 { font-weight: 700; font-size: 1.75rem; margin-bottom: 0; }

.detail-field { margin-bottom: 0.9rem; }
.detail-label {
    font-size: 0.7rem;
    font-weight: 600;
    text-transform: uppercase;
    letter-spacing: 0.08em;
    color: var(--text-color);
    opacity: 0.45;
}
.detail-value { font-size: 0.95rem; color: var(--text-color); }

.section-header {
    font-size: 0.7rem; font-weight: 600; text-transform: uppercase;
    letter-spacing: 0.08em; color: var(--text-color); opacity: 0.4;
    padding-bottom: 0.5rem; border-bottom: 1px solid rgba(128,128,128,0.18); margin-bottom: 1rem;
}
.status-neutral { color: var(--text-color); opacity: 0.55; font-size: 0.82rem; }
</style>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.markdown("<h1>Finnish Company Search</h1>", unsafe_allow_html=True)
st.caption("Search for companies in Finland using PRH API")

if "criteria" not in st.session_state:
    st.session_state.criteria = None

# ---------------------------------------------------------------------------
# Search form
# ---------------------------------------------------------------------------
with st.form("search"):
    st.markdown('<div class="section-header">Search Companies</div>', unsafe_allow_html=True)
    col_loc, col_bid = st.columns(2)
    location = col_loc.text_input("Location", placeholder="Enter town name (e.g. Helsinki)")
    business_id = col_bid.text_input("Business ID", placeholder="e.g. 1234567-8")
    col_start, col_end = st.columns(2)
    date_start = col_start.date_input("Registration Date From", value=None, format="YYYY-MM-DD")
    date_end = col_end.date_input("Registration Date To", value=None, format="YYYY-MM-DD")
    submitted = st.form_submit_button("Search", type="primary")

if submitted:
    try:
        st.session_state.criteria = build_criteria(
            business_id=business_id,
            location=location,
            registration_date_start=date_start,
            registration_date_end=date_end,
        )
    except CriteriaValidationError as e:
        for message in e.errors.values():
            st.error(message)

criteria: SearchCriteria = st.session_state.criteria
if criteria is None:
    st.markdown('<p class="status-neutral">Enter at least one search criteria to begin.</p>', unsafe_allow_html=True)
    st.stop()

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
is_error = False
with st.spinner(f"Loading page {criteria.page + 1}..."):
    try:
        page = search_companies(criteria)
    except PRHAPIError:
        is_error = True
        page = ResultPage.empty(criteria.page)

if is_error:
    st.error(ERROR_MESSAGE)

st.markdown('<div class="section-header">Results</div>', unsafe_allow_html=True)

if not page.results:
    if not is_error:
        st.info(NO_RESULTS_MESSAGE)
    st.stop()

st.markdown(
    f'<p class="status-neutral">{page.total_results:,} companies · '
    f'page {page.current_page + 1} of {page.total_pages}</p>',
    unsafe_allow_html=True,
)

event = st.dataframe(
    results_df(page.results),
    use_container_width=True,
    hide_index=True,
    on_select="rerun",
    selection_mode="single-row",
    column_config={
        key: st.column_config.TextColumn(label) for key, label in COLUMN_LABELS.items()
    },
)

selected_rows = event.selection.rows if event else []
if selected_rows:
    # Only open the dialog when the selection changes, not on every rerun
    detail_key = (criteria, selected_rows[0])
    if st.session_state.get("detail_key") != detail_key:
        st.session_state.detail_key = detail_key
        show_details(page.results[selected_rows[0]])

col_prev, _, col_next = st.columns([1, 6, 1])
with col_prev:
    if st.button("← Previous", disabled=not page.has_previous):
        st.session_state.criteria = criteria.for_page(criteria.page - 1)
        st.rerun()
with col_next:
    if st.button("Next →", disabled=not page.has_next):
        st.session_state.criteria = criteria.for_page(criteria.page + 1)
        st.rerun()
