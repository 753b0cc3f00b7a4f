"""HTML rendering for the deliverables table and pagination summary."""

import html
from collections.abc import Sequence
from datetime import datetime

from src.tracker.client.urgency import classify_urgency, urgency_color
from src.tracker.schemas import DeliverableRead

COLUMNS = ("Deliverable", "Project", "Due", "Frequency", "Manager")


def format_due_date(due: datetime) -> str:
    return due.strftime("%Y-%m-%d")


def page_summary(page: int, total_pages: int, matches: int) -> str:
    return f"Page {page} of {total_pages} • {matches} matches"


def _due_badge(due: datetime, now: datetime) -> str:
    label = format_due_date(due)
    return (
        f'<span class="due-badge" data-urgency="{classify_urgency(due, now).value}" '
        f'style="background-color:{urgency_color(due, now)};border-radius:16px;'
        f'padding:6px 14px;font-weight:600;" title="Due on {label}">{label}</span>'
    )


def render_table(rows: Sequence[DeliverableRead], now: datetime) -> str:
    """Render one page of deliverables as an HTML table.

    Text fields are escaped; an empty page renders a single
    "No deliverables found." row.
    """
    head = "".join(f"<th>{c}</th>" for c in COLUMNS)
    if not rows:
        body = f'<tr><td colspan="{len(COLUMNS)}">No deliverables found.</td></tr>'
    else:
        body = "".join(
            "<tr>"
            f"<td>{html.escape(d.title)}</td>"
            f"<td>{html.escape(d.project.name)}</td>"
            f"<td>{_due_badge(d.due_date, now)}</td>"
            f"<td>{html.escape(d.frequency or '')}</td>"
            f"<td>{html.escape(d.manager)}</td>"
            "</tr>"
            for d in rows
        )
    return (
        '<table class="deliverables" style="width:100%;border-collapse:collapse;">'
        f"<thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
    )
