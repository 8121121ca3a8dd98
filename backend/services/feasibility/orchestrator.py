"""Pipeline orchestrator: wires the four evaluators and the aggregator together.

Flow:
    user_skills + required_skills  ─ evaluate_skill_coverage()   → SkillCoverage
    user_tools + required_tools    ─ evaluate_tool_coverage()    → ToolCoverage
    work_items                     ─ estimate_time_feasibility() → TimeFeasibility
            ↓                                ↓
    work_items + SkillCoverage + ToolCoverage ─ analyze_risk()   → RiskAnalysis
            ↓
    aggregate_feasibility(all four)  → FeasibilityAssessment

Every stage is a pure function of its arguments and can be called on its
own when only a partial result is needed.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from models.records import RequiredSkill, RequiredTool, Skill, Tool, WorkItem
from models.requests import AssessmentConfig
from models.schemas.feasibility import FeasibilityAssessment
from services.feasibility.aggregator import aggregate_feasibility
from services.feasibility.risk_analyzer import analyze_risk
from services.feasibility.skill_coverage import evaluate_skill_coverage
from services.feasibility.time_feasibility import estimate_time_feasibility
from services.feasibility.tool_coverage import evaluate_tool_coverage

logger = logging.getLogger(__name__)


def assess_project_feasibility(
    user_skills: Sequence[Skill],
    required_skills: Sequence[RequiredSkill],
    user_tools: Sequence[Tool],
    required_tools: Sequence[RequiredTool],
    work_items: Sequence[WorkItem],
    config: AssessmentConfig | None = None,
) -> FeasibilityAssessment:
    """Run the full feasibility pipeline for one person and one project.

    ``config.now`` defaults to the current UTC time; pass it explicitly for
    reproducible results.
    """
    if config is None:
        config = AssessmentConfig()
    now = config.now if config.now is not None else datetime.now(timezone.utc)

    # --- Stage 1: independent evaluators ---
    skill_coverage = evaluate_skill_coverage(user_skills, required_skills)
    tool_coverage = evaluate_tool_coverage(user_tools, required_tools)
    time_feasibility = estimate_time_feasibility(
        work_items,
        available_hours_per_week=config.available_hours_per_week,
        hours_per_day=config.hours_per_day,
    )

    # --- Stage 2: risk, depends on both coverage results ---
    risk_analysis = analyze_risk(work_items, skill_coverage, tool_coverage, now)

    # --- Stage 3: combine ---
    assessment = aggregate_feasibility(
        skill_coverage, tool_coverage, time_feasibility, risk_analysis,
    )

    logger.info(
        "Feasibility assessment: score=%d status=%s risk=%s recommendations=%d",
        assessment.feasibility_score,
        assessment.feasibility_status.value,
        risk_analysis.risk_level.value,
        len(assessment.recommendations),
    )
    return assessment
