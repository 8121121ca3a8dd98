"""Tests for the end-to-end feasibility pipeline."""

from datetime import date

import pytest
from pydantic import ValidationError

from models.records import RequiredSkill, RequiredTool, Skill, Tool, WorkItemStatus
from models.requests import AssessmentConfig
from models.schemas.feasibility import FeasibilityAssessment, FeasibilityStatus
from models.schemas.risk_analysis import RiskLevel
from services.feasibility.orchestrator import assess_project_feasibility

USER_SKILLS = [
    Skill(name="Python", proficiency=4),
    Skill(name="SQL", proficiency=2),
]
REQUIRED_SKILLS = [
    RequiredSkill(name="Python", importance=5, learning_hours=40),
    RequiredSkill(name="SQL", importance=4, learning_hours=20),
    RequiredSkill(name="Docker", importance=3, learning_hours=15),
]
USER_TOOLS = [Tool(name="Laptop")]
REQUIRED_TOOLS = [
    RequiredTool(name="Laptop", category="hardware", is_essential=True),
    RequiredTool(name="PyCharm", category="software", estimated_cost=89),
]


class TestAssessProjectFeasibility:
    def test_full_pipeline(self, item_factory, now):
        items = [item_factory(days=3) for _ in range(10)]
        result = assess_project_feasibility(
            USER_SKILLS, REQUIRED_SKILLS, USER_TOOLS, REQUIRED_TOOLS, items,
            AssessmentConfig(now=now),
        )
        assert isinstance(result, FeasibilityAssessment)

        # (4*5 + 2*4 + 0*3) / (5*12) = 28/60 -> 47
        assert result.skill_coverage_percent == 47
        assert result.tool_coverage_percent == 50
        assert result.time_feasibility.recommended_timeline_extension_weeks == 1
        assert result.time_feasibility_score == 80
        assert result.risk_analysis.overwhelm_index == 0
        # 47*.35 + 50*.25 + 80*.2 + 100*.2 = 16.45 + 12.5 + 16 + 20 = 64.95
        assert result.feasibility_score == 65
        assert result.feasibility_status == FeasibilityStatus.YELLOW
        assert result.recommendations == [
            "Extend timeline by 1 week to match available hours.",
            "Learn Python (40h estimated).",
            "Learn SQL (20h estimated).",
            "Learn Docker (15h estimated).",
            "Budget $89.00 for missing tools.",
        ]

    def test_all_empty_inputs(self, now):
        result = assess_project_feasibility([], [], [], [], [], AssessmentConfig(now=now))
        assert result.feasibility_score == 100
        assert result.feasibility_status == FeasibilityStatus.GREEN
        assert result.recommendations == []
        assert result.time_feasibility.deficit_or_surplus == 10

    def test_default_config(self, item_factory):
        result = assess_project_feasibility([], [], [], [], [item_factory(status=WorkItemStatus.BLOCKED)])
        # blocker created long before the real clock's now -> stale
        assert result.risk_analysis.overwhelm_index == 25
        assert result.risk_analysis.risk_level == RiskLevel.LOW

    def test_config_threads_through(self, item_factory, now):
        items = [item_factory(days=3) for _ in range(10)]
        result = assess_project_feasibility(
            [], [], [], [], items,
            AssessmentConfig(available_hours_per_week=12, hours_per_day=2, now=now),
        )
        assert result.time_feasibility.weekly_hours_available == 12
        assert result.time_feasibility.deficit_or_surplus == 0
        assert result.time_feasibility.recommended_timeline_extension_weeks == 0

    def test_invalid_config_fails_fast(self):
        with pytest.raises(ValidationError):
            assess_project_feasibility([], [], [], [], [], AssessmentConfig(hours_per_day=0))

    def test_struggling_project_is_red(self, item_factory, now):
        items = (
            [item_factory(status=WorkItemStatus.BLOCKED, age_hours=96) for _ in range(3)]
            + [item_factory(days=14, start=date(2026, 3, 1)) for _ in range(5)]
        )
        result = assess_project_feasibility(
            [],
            [RequiredSkill(name="Rust", importance=5, learning_hours=100)],
            [],
            [RequiredTool(name="GPU", is_essential=True, estimated_cost=1200)],
            items,
            AssessmentConfig(now=now),
        )
        assert result.skill_coverage_percent == 0
        assert result.tool_coverage_percent == 0
        assert result.risk_analysis.risk_level == RiskLevel.HIGH
        assert result.feasibility_status == FeasibilityStatus.RED
        assert "Resolve 3 blocked tasks before proceeding." in result.recommendations

    def test_does_not_mutate_inputs(self, item_factory, now):
        skills = list(REQUIRED_SKILLS)
        items = [item_factory(status=WorkItemStatus.BLOCKED), item_factory(days=4)]
        items_before = list(items)
        assess_project_feasibility(USER_SKILLS, skills, USER_TOOLS, REQUIRED_TOOLS, items,
                                   AssessmentConfig(now=now))
        assert skills == REQUIRED_SKILLS
        assert items == items_before

    def test_repeatable(self, item_factory, now):
        items = [item_factory(status=WorkItemStatus.IN_PROGRESS, days=2) for _ in range(7)]
        config = AssessmentConfig(now=now)
        args = (USER_SKILLS, REQUIRED_SKILLS, USER_TOOLS, REQUIRED_TOOLS, items, config)
        first = assess_project_feasibility(*args)
        second = assess_project_feasibility(*args)
        assert first.model_dump_json() == second.model_dump_json()
