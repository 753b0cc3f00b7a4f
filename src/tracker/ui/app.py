"""
Streamlit page for browsing and creating deliverables.

Run with:
    uv run streamlit run src/tracker/ui/app.py
"""

import asyncio
from datetime import date, datetime, time

import streamlit as st

from src.tracker.client import (
    DateRangeToken,
    DeliverablesClient,
    SnapshotLoadError,
    TrackerClientError,
    ViewState,
)
from src.tracker.core.config import Settings, get_settings
from src.tracker.models.base import utc_now
from src.tracker.models.enums import Frequency
from src.tracker.ui.table import page_summary, render_table

DATE_FILTER_LABELS = {
    "": "All Dates",
    DateRangeToken.NEXT_WEEK.value: "Next Week",
    DateRangeToken.NEXT_MONTH.value: "Next Month",
    DateRangeToken.NEXT_QUARTER.value: "Next Quarter",
    DateRangeToken.NEXT_6_MONTHS.value: "Next 6 Months",
    DateRangeToken.NEXT_YEAR.value: "Next Year",
}


def _client(settings: Settings) -> DeliverablesClient:
    return DeliverablesClient(settings.api_base_url, timeout=settings.client_timeout_seconds)


async def _load(settings: Settings):
    async with _client(settings) as client:
        return await client.load_snapshot()


async def _create(settings: Settings, project_id: int, **fields):
    async with _client(settings) as client:
        return await client.create_deliverable(project_id, **fields)


def _state() -> ViewState:
    if "view_state" not in st.session_state:
        st.session_state["view_state"] = ViewState()
    return st.session_state["view_state"]


def _refresh(settings: Settings, state: ViewState) -> bool:
    try:
        state.replace_snapshot(asyncio.run(_load(settings)))
    except SnapshotLoadError as e:
        st.session_state["load_error"] = str(e)
        return False
    st.session_state.pop("load_error", None)
    return True


def render_filters(state: ViewState) -> None:
    projects = {"": "All Projects"} | {str(p.id): p.name for p in state.snapshot.projects}

    col_search, col_project, col_date = st.columns([3, 2, 2])
    with col_search:
        search = st.text_input(
            "Search",
            value=state.filters.search,
            placeholder="Search deliverables/projects/managers...",
            label_visibility="collapsed",
        )
    with col_project:
        project = st.selectbox(
            "Project",
            list(projects),
            index=list(projects).index(state.filters.project)
            if state.filters.project in projects
            else 0,
            format_func=projects.get,
            label_visibility="collapsed",
        )
    with col_date:
        date_range = st.selectbox(
            "Due",
            list(DATE_FILTER_LABELS),
            index=list(DATE_FILTER_LABELS).index(state.filters.date_range)
            if state.filters.date_range in DATE_FILTER_LABELS
            else 0,
            format_func=DATE_FILTER_LABELS.get,
            label_visibility="collapsed",
        )

    state.set_search(search)
    state.set_project_filter(project)
    state.set_date_filter(date_range)


def render_pagination(state: ViewState) -> None:
    if state.total_pages <= 1:
        return

    cols = st.columns(state.total_pages + 2)
    if cols[0].button("← Previous", disabled=state.page == 1):
        state.prev_page()
        st.rerun()
    for page in range(1, state.total_pages + 1):
        if cols[page].button(
            str(page),
            key=f"page_{page}",
            type="primary" if page == state.page else "secondary",
        ):
            state.go_to_page(page)
            st.rerun()
    if cols[-1].button("Next →", disabled=state.page == state.total_pages):
        state.next_page()
        st.rerun()


def submit_deliverable(
    settings: Settings,
    state: ViewState,
    project_id: int | None,
    *,
    title: str,
    due: date,
    frequency: str,
    manager: str,
) -> None:
    """Create the deliverable, then reload the snapshot and redraw the page."""
    if project_id is None or not title.strip() or not manager.strip():
        st.error("All fields are required.")
        return

    try:
        asyncio.run(
            _create(
                settings,
                project_id,
                title=title,
                due_date=datetime.combine(due, time.min),
                frequency=frequency,
                manager=manager,
            )
        )
    except TrackerClientError as e:
        st.error(str(e) or "Failed to create deliverable")
        return

    st.session_state["notice"] = "Deliverable created"
    _refresh(settings, state)
    st.rerun()


def render_create_form(settings: Settings, state: ViewState) -> None:
    projects = {p.id: p.name for p in state.snapshot.projects}

    with st.expander("➕ New deliverable", expanded=False):
        with st.form("create_deliverable", clear_on_submit=False):
            title = st.text_input("Title")
            project_id = st.selectbox(
                "Project", list(projects), format_func=projects.get
            )
            due: date = st.date_input("Due date")
            frequency = st.selectbox(
                "Frequency",
                [f.value for f in Frequency],
                format_func=lambda code: Frequency(code).name.replace("_", "-").title(),
            )
            manager = st.text_input("Manager")
            submitted = st.form_submit_button("Create")

        if submitted:
            submit_deliverable(
                settings,
                state,
                project_id,
                title=title,
                due=due,
                frequency=frequency,
                manager=manager,
            )


def main() -> None:
    st.set_page_config(page_title="Deliverables", layout="wide")
    settings = get_settings()
    state = _state()

    if "loaded" not in st.session_state:
        with st.spinner("Loading..."):
            st.session_state["loaded"] = _refresh(settings, state)

    st.title("Deliverables")
    notice = st.session_state.pop("notice", None)
    if notice:
        st.success(notice)
    render_filters(state)

    st.caption(page_summary(state.page, state.total_pages, len(state.filtered)))

    if st.session_state.get("load_error"):
        st.error(st.session_state["load_error"])
    else:
        st.markdown(
            render_table(state.current_page_items, utc_now()),
            unsafe_allow_html=True,
        )
        render_pagination(state)
        render_create_form(settings, state)


if __name__ == "__main__":
    main()
