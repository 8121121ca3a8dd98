"""Risk analysis output: overwhelm index, risk level and warnings."""

from enum import Enum

from pydantic import BaseModel


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskAnalysis(BaseModel):
    overwhelm_index: int = 0  # 0-100
    blockers_count: int = 0
    complexity_score: int = 0  # informational only, not used by the score
    risk_level: RiskLevel = RiskLevel.LOW
    warnings: list[str] = []

    model_config = {"frozen": True}
