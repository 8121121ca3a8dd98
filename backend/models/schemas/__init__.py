"""Inter-stage Pydantic contracts for the feasibility pipeline."""

from models.schemas.skill_coverage import MatchedSkill, SkillCoverage, SkillGap
from models.schemas.tool_coverage import MatchedTool, ToolCoverage, ToolGap
from models.schemas.time_feasibility import TimeFeasibility
from models.schemas.risk_analysis import RiskAnalysis, RiskLevel
from models.schemas.feasibility import FeasibilityAssessment, FeasibilityStatus

__all__ = [
    "SkillGap",
    "MatchedSkill",
    "SkillCoverage",
    "ToolGap",
    "MatchedTool",
    "ToolCoverage",
    "TimeFeasibility",
    "RiskLevel",
    "RiskAnalysis",
    "FeasibilityStatus",
    "FeasibilityAssessment",
]
