"""Time feasibility: weekly hours the schedule demands versus hours available.

Every scheduled day is assumed to take ``hours_per_day`` of work; both that
figure and the weekly capacity come from the assessment configuration.
"""

import logging
import math
from collections.abc import Sequence

from models.records import WorkItem
from models.requests import AssessmentConfig
from models.schemas.time_feasibility import TimeFeasibility
from services.feasibility.formatting import round_half_up

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def _item_days(item: WorkItem) -> int:
    """Scheduled length of one item in days, at least one."""
    if item.end_date < item.start_date:
        # Only reachable for records built without validation (model_construct)
        raise ValueError(
            f"Work item {item.title or '<untitled>'!r} ends before it starts "
            f"({item.end_date} < {item.start_date})"
        )
    return max(1, (item.end_date - item.start_date).days)


def project_time_requirements(
    work_items: Sequence[WorkItem],
    hours_per_day: float,
) -> tuple[float, int]:
    """Return ``(total_estimated_hours, total_days)`` for the schedule."""
    total_days = sum(_item_days(item) for item in work_items)
    return total_days * hours_per_day, total_days


def _resolve_config(
    available_hours_per_week: float | None,
    hours_per_day: float | None,
) -> AssessmentConfig:
    overrides = {}
    if available_hours_per_week is not None:
        overrides["available_hours_per_week"] = available_hours_per_week
    if hours_per_day is not None:
        overrides["hours_per_day"] = hours_per_day
    # Raises pydantic.ValidationError for non-positive values
    return AssessmentConfig(**overrides)


def estimate_time_feasibility(
    work_items: Sequence[WorkItem],
    available_hours_per_week: float | None = None,
    hours_per_day: float | None = None,
) -> TimeFeasibility:
    """Compare the schedule's weekly demand with the person's weekly capacity.

    Omitted capacity figures fall back to ``config.settings`` (10 hours a
    week, 2 hours a day unless overridden by environment).
    """
    config = _resolve_config(available_hours_per_week, hours_per_day)
    available = config.available_hours_per_week

    total_hours, total_days = project_time_requirements(work_items, config.hours_per_day)

    if total_days == 0:
        return TimeFeasibility(
            weekly_hours_available=available,
            deficit_or_surplus=available,
        )

    weeks = math.ceil(total_days / DAYS_PER_WEEK)
    weekly_needed = total_hours / weeks if weeks > 0 else total_hours
    deficit_or_surplus = available - weekly_needed

    extension_weeks = 0
    if deficit_or_surplus < 0:
        additional_hours = abs(deficit_or_surplus) * weeks
        extension_weeks = math.ceil(additional_hours / available)

    result = TimeFeasibility(
        weekly_hours_needed=round_half_up(weekly_needed, 1),
        weekly_hours_available=available,
        deficit_or_surplus=round_half_up(deficit_or_surplus, 1),
        estimated_project_weeks=weeks,
        recommended_timeline_extension_weeks=extension_weeks,
        total_days=total_days,
        total_estimated_hours=total_hours,
    )

    logger.debug(
        "Time feasibility: %.1fh/week needed over %d weeks, %.1fh/week available",
        result.weekly_hours_needed, weeks, available,
    )
    return result
