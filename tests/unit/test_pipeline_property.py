"""Property-based tests for the filter pipeline using hypothesis."""

from datetime import datetime, timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.tracker.client.pipeline import (
    PAGE_SIZE,
    Filters,
    filter_deliverables,
    paginate,
    sort_by_due_date,
    total_pages,
)
from src.tracker.models import Frequency
from tests.helpers import build_deliverable, build_project

pytestmark = pytest.mark.unit

NOW = datetime(2024, 1, 10)

words = st.text(alphabet="abcXYZ ", min_size=0, max_size=8)

deliverables = st.lists(
    st.builds(
        lambda offset, title, manager, project, frequency: build_deliverable(
            NOW + timedelta(hours=offset),
            title=title,
            manager=manager,
            project=build_project(project, id=len(project) + 1),
            frequency=frequency,
        ),
        st.integers(min_value=-5000, max_value=5000),
        words,
        words,
        words,
        st.one_of(st.none(), st.sampled_from([f.value for f in Frequency])),
    ),
    max_size=40,
)


@given(records=deliverables, term=words)
@settings(max_examples=100)
def test_search_returns_exact_matching_subset(records, term: str):
    result = filter_deliverables(records, Filters(search=term), NOW)

    if not term.strip():
        assert result == records
        return
    needle = term.lower()
    expected = [
        d
        for d in records
        if needle in d.title.lower()
        or needle in d.project.name.lower()
        or needle in d.manager.lower()
        or needle in (d.frequency.lower() if d.frequency else "")
    ]
    assert result == expected


@given(records=deliverables)
def test_sorted_output_is_non_decreasing(records):
    result = sort_by_due_date(filter_deliverables(records, Filters(), NOW))

    assert all(a.due_date <= b.due_date for a, b in zip(result, result[1:], strict=False))


@given(records=deliverables)
def test_pages_partition_the_filtered_set(records):
    pages = total_pages(len(records))

    chunks = [paginate(records, page) for page in range(1, pages + 1)]

    assert [d for chunk in chunks for d in chunk] == records
    assert all(0 < len(chunk) <= PAGE_SIZE for chunk in chunks)
