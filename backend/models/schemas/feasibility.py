"""Final assessment combining all four stage outputs."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.risk_analysis import RiskAnalysis
from models.schemas.skill_coverage import SkillCoverage
from models.schemas.time_feasibility import TimeFeasibility
from models.schemas.tool_coverage import ToolCoverage


class FeasibilityStatus(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class FeasibilityAssessment(BaseModel):
    """Composite 0-100 feasibility score with status bucket and advice.

    The stage results are embedded unchanged so a caller can render
    details without re-running the pipeline.
    """
    feasibility_score: int = 0
    feasibility_status: FeasibilityStatus = FeasibilityStatus.RED
    recommendations: list[str] = []

    # Component scores that went into the weighted sum
    skill_coverage_percent: int = 0
    tool_coverage_percent: int = 0
    time_feasibility_score: float = 0.0
    risk_penalty_score: float = 0.0

    skill_coverage: SkillCoverage = SkillCoverage()
    tool_coverage: ToolCoverage = ToolCoverage()
    time_feasibility: TimeFeasibility = TimeFeasibility()
    risk_analysis: RiskAnalysis = RiskAnalysis()

    model_config = {"frozen": True}
