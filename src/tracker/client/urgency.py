"""Due-date urgency buckets and their badge colors."""

from datetime import datetime
from enum import Enum

from src.tracker.client.pipeline import days_until


class Urgency(str, Enum):
    OVERDUE = "overdue"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUAL = "semi-annual"
    YEARLY = "yearly"


# Upper bound in days (inclusive) for each non-overdue bucket, checked in order
_BUCKET_LIMITS: tuple[tuple[float, Urgency], ...] = (
    (7, Urgency.WEEKLY),
    (30, Urgency.MONTHLY),
    (90, Urgency.QUARTERLY),
    (180, Urgency.SEMI_ANNUAL),
)

URGENCY_COLORS: dict[Urgency, str] = {
    Urgency.OVERDUE: "#fee2e2",
    Urgency.WEEKLY: "#fed7aa",
    Urgency.MONTHLY: "#fde68a",
    Urgency.QUARTERLY: "#bbf7d0",
    Urgency.SEMI_ANNUAL: "#bfdbfe",
    Urgency.YEARLY: "#ddd6fe",
}


def classify_urgency(due: datetime, now: datetime) -> Urgency:
    """Bucket a due date relative to `now`; overdue wins over day counts."""
    if due < now:
        return Urgency.OVERDUE
    days = days_until(due, now)
    for limit, bucket in _BUCKET_LIMITS:
        if days <= limit:
            return bucket
    return Urgency.YEARLY


def urgency_color(due: datetime, now: datetime) -> str:
    return URGENCY_COLORS[classify_urgency(due, now)]
