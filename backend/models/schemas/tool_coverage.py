"""Tool coverage output: count-based match of a person's tools."""

from pydantic import BaseModel


class ToolGap(BaseModel):
    name: str
    category: str = ""
    cost: float | None = None
    is_essential: bool = False

    model_config = {"frozen": True}


class MatchedTool(BaseModel):
    name: str
    category: str = ""

    model_config = {"frozen": True}


class ToolCoverage(BaseModel):
    """Result of matching user tools against required tools."""
    coverage_percent: int = 100  # 0-100, unweighted
    matched_tools: list[MatchedTool] = []
    missing_tools: list[ToolGap] = []
    essential_missing_count: int = 0
    estimated_total_cost: float = 0.0  # sum of costs of missing tools

    model_config = {"frozen": True}
