"""Risk analysis: heuristic overwhelm index from schedule state and coverage gaps.

Heuristics are applied in a fixed order so that warnings always come out
in the same sequence:

    1. too many items in progress          +20
    2. blocked items                       +10 each
       ... of which stale (> N hours old)  +15 each
    3. missing critical skills             +15 each
    4. missing essential tools             +10 each
    5. large project                       +10

The total is capped at 100.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from config import settings
from models.records import WorkItem, WorkItemStatus
from models.schemas.risk_analysis import RiskAnalysis, RiskLevel
from models.schemas.skill_coverage import SkillCoverage
from models.schemas.tool_coverage import ToolCoverage
from services.feasibility.formatting import pluralize

logger = logging.getLogger(__name__)

MAX_IN_PROGRESS = 5
IN_PROGRESS_PENALTY = 20
BLOCKER_PENALTY = 10
STALE_BLOCKER_PENALTY = 15
CRITICAL_IMPORTANCE = 4
CRITICAL_SKILL_PENALTY = 15
ESSENTIAL_TOOL_PENALTY = 10
LARGE_PROJECT_ITEMS = 20
LARGE_PROJECT_PENALTY = 10
MAX_OVERWHELM = 100

MEDIUM_RISK_THRESHOLD = 30
HIGH_RISK_THRESHOLD = 60


def _hours_between(earlier: datetime, later: datetime) -> float:
    # Naive timestamps are read as UTC when compared against aware ones
    if (earlier.tzinfo is None) != (later.tzinfo is None):
        if earlier.tzinfo is None:
            earlier = earlier.replace(tzinfo=timezone.utc)
        else:
            later = later.replace(tzinfo=timezone.utc)
    return (later - earlier).total_seconds() / 3600


def _risk_level(overwhelm_index: int) -> RiskLevel:
    if overwhelm_index < MEDIUM_RISK_THRESHOLD:
        return RiskLevel.LOW
    if overwhelm_index < HIGH_RISK_THRESHOLD:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def analyze_risk(
    work_items: Sequence[WorkItem],
    skill_coverage: SkillCoverage,
    tool_coverage: ToolCoverage,
    now: datetime,
    stale_blocker_hours: float | None = None,
) -> RiskAnalysis:
    """Score how likely the project is to overwhelm the person.

    ``now`` is the reference time for deciding whether a blocker is stale;
    it is never read from the clock here.
    """
    if stale_blocker_hours is None:
        stale_blocker_hours = settings.stale_blocker_hours

    warnings: list[str] = []
    overwhelm = 0

    in_progress = sum(1 for i in work_items if i.status == WorkItemStatus.IN_PROGRESS)
    blocked = [i for i in work_items if i.status == WorkItemStatus.BLOCKED]
    blockers_count = len(blocked)

    if in_progress > MAX_IN_PROGRESS:
        warnings.append(
            f"Too many tasks in progress ({in_progress}). Consider focusing on fewer items."
        )
        overwhelm += IN_PROGRESS_PENALTY

    if blockers_count > 0:
        warnings.append(f"{pluralize(blockers_count, 'blocked task')} need attention.")
        overwhelm += blockers_count * BLOCKER_PENALTY

        stale = sum(
            1 for i in blocked
            if _hours_between(i.created_at, now) > stale_blocker_hours
        )
        if stale > 0:
            warnings.append(
                f"{pluralize(stale, 'blocker')} older than {stale_blocker_hours:g} hours."
            )
            overwhelm += stale * STALE_BLOCKER_PENALTY

    critical_missing = sum(
        1 for s in skill_coverage.missing_skills if s.importance >= CRITICAL_IMPORTANCE
    )
    if critical_missing > 0:
        warnings.append(
            f"{pluralize(critical_missing, 'critical skill')} missing. "
            "Tasks requiring these cannot be started."
        )
        overwhelm += critical_missing * CRITICAL_SKILL_PENALTY

    essential_missing = tool_coverage.essential_missing_count
    if essential_missing > 0:
        warnings.append(
            f"{pluralize(essential_missing, 'essential tool')} needed before work can begin."
        )
        overwhelm += essential_missing * ESSENTIAL_TOOL_PENALTY

    total_items = len(work_items)
    if total_items > LARGE_PROJECT_ITEMS:
        warnings.append(
            f"Large project with {total_items} tasks. Consider breaking into smaller milestones."
        )
        overwhelm += LARGE_PROJECT_PENALTY

    overwhelm = min(overwhelm, MAX_OVERWHELM)
    complexity = len(skill_coverage.gaps) * 2 + len(tool_coverage.missing_tools)

    logger.debug(
        "Risk analysis: overwhelm=%d blockers=%d complexity=%d warnings=%d",
        overwhelm, blockers_count, complexity, len(warnings),
    )

    return RiskAnalysis(
        overwhelm_index=overwhelm,
        blockers_count=blockers_count,
        complexity_score=complexity,
        risk_level=_risk_level(overwhelm),
        warnings=warnings,
    )
