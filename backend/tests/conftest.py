"""Shared test configuration and fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest

from models.records import WorkItem, WorkItemStatus

FIXED_NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_item(
    status: WorkItemStatus = WorkItemStatus.NOT_STARTED,
    days: int = 1,
    start: date = date(2026, 3, 1),
    age_hours: float = 1,
    title: str = "",
) -> WorkItem:
    """Build a work item spanning ``days`` days, created ``age_hours`` before FIXED_NOW."""
    return WorkItem(
        status=status,
        start_date=start,
        end_date=start + timedelta(days=days),
        created_at=FIXED_NOW - timedelta(hours=age_hours),
        title=title,
    )


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def item_factory():
    return make_item
