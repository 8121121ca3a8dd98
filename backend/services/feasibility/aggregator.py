"""Feasibility aggregator: weighted composite score, status and recommendations."""

import logging

from models.schemas.feasibility import FeasibilityAssessment, FeasibilityStatus
from models.schemas.risk_analysis import RiskAnalysis, RiskLevel
from models.schemas.skill_coverage import SkillCoverage
from models.schemas.time_feasibility import TimeFeasibility
from models.schemas.tool_coverage import ToolCoverage
from services.feasibility.formatting import pluralize, round_percent

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 0.35
TOOL_WEIGHT = 0.25
TIME_WEIGHT = 0.20
RISK_WEIGHT = 0.20

GREEN_THRESHOLD = 70
YELLOW_THRESHOLD = 40

SKILL_ADVICE_THRESHOLD = 70  # below this coverage, suggest skills to learn
MAX_SKILL_RECOMMENDATIONS = 3


def _time_score(time: TimeFeasibility) -> float:
    if time.deficit_or_surplus >= 0:
        return 100.0
    if time.weekly_hours_available <= 0:
        return 0.0
    deficit_ratio = abs(time.deficit_or_surplus) / time.weekly_hours_available
    return max(0.0, 100 - deficit_ratio * 100)


def _status(score: int) -> FeasibilityStatus:
    if score >= GREEN_THRESHOLD:
        return FeasibilityStatus.GREEN
    if score >= YELLOW_THRESHOLD:
        return FeasibilityStatus.YELLOW
    return FeasibilityStatus.RED


def _build_recommendations(
    skills: SkillCoverage,
    tools: ToolCoverage,
    time: TimeFeasibility,
    risk: RiskAnalysis,
) -> list[str]:
    """Actionable advice, in a fixed order."""
    recs: list[str] = []

    extension = time.recommended_timeline_extension_weeks
    if extension > 0:
        recs.append(f"Extend timeline by {pluralize(extension, 'week')} to match available hours.")

    if skills.coverage_percent < SKILL_ADVICE_THRESHOLD:
        # sorted() is stable: equal importance keeps input order
        top_gaps = sorted(skills.gaps, key=lambda g: g.importance, reverse=True)
        for gap in top_gaps[:MAX_SKILL_RECOMMENDATIONS]:
            recs.append(f"Learn {gap.name} ({gap.learning_hours:g}h estimated).")

    if tools.essential_missing_count > 0:
        recs.append(
            f"Acquire {pluralize(tools.essential_missing_count, 'essential tool')} before starting."
        )

    if tools.estimated_total_cost > 0:
        recs.append(f"Budget ${tools.estimated_total_cost:.2f} for missing tools.")

    if risk.risk_level == RiskLevel.HIGH:
        recs.append("High overwhelm risk detected. Review warnings and simplify scope.")

    if risk.blockers_count > 0:
        recs.append(f"Resolve {pluralize(risk.blockers_count, 'blocked task')} before proceeding.")

    return recs


def aggregate_feasibility(
    skill_coverage: SkillCoverage,
    tool_coverage: ToolCoverage,
    time_feasibility: TimeFeasibility,
    risk_analysis: RiskAnalysis,
) -> FeasibilityAssessment:
    """Combine the four stage results into a 0-100 score and status bucket.

    Weights: skills 35%, tools 25%, time 20%, risk 20%. The risk
    ``complexity_score`` is carried through but does not affect the score.
    """
    time_score = _time_score(time_feasibility)
    risk_score = float(max(0, 100 - risk_analysis.overwhelm_index))

    score = round_percent(
        skill_coverage.coverage_percent * SKILL_WEIGHT
        + tool_coverage.coverage_percent * TOOL_WEIGHT
        + time_score * TIME_WEIGHT
        + risk_score * RISK_WEIGHT
    )
    status = _status(score)

    logger.debug("Feasibility score %d (%s)", score, status.value)

    return FeasibilityAssessment(
        feasibility_score=score,
        feasibility_status=status,
        recommendations=_build_recommendations(
            skill_coverage, tool_coverage, time_feasibility, risk_analysis,
        ),
        skill_coverage_percent=skill_coverage.coverage_percent,
        tool_coverage_percent=tool_coverage.coverage_percent,
        time_feasibility_score=time_score,
        risk_penalty_score=risk_score,
        skill_coverage=skill_coverage,
        tool_coverage=tool_coverage,
        time_feasibility=time_feasibility,
        risk_analysis=risk_analysis,
    )
