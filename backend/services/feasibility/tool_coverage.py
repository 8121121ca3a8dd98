"""Tool coverage: count-based match of user tools to required tools.

Unlike skill coverage this is a plain ratio of matched to required tools;
a tool is either available or not.
"""

import logging
from collections.abc import Sequence

from models.records import RequiredTool, Tool
from models.schemas.tool_coverage import MatchedTool, ToolCoverage, ToolGap
from services.feasibility.formatting import round_percent

logger = logging.getLogger(__name__)


def evaluate_tool_coverage(
    user_tools: Sequence[Tool],
    required_tools: Sequence[RequiredTool],
) -> ToolCoverage:
    """Match ``user_tools`` against ``required_tools`` by case-insensitive name.

    Missing tools are counted towards the essential shortfall (when flagged
    essential) and towards the estimated cost of closing the gap.
    """
    if not required_tools:
        return ToolCoverage()

    owned = {t.name.lower() for t in user_tools}

    matched_tools: list[MatchedTool] = []
    missing_tools: list[ToolGap] = []
    essential_missing_count = 0
    estimated_total_cost = 0.0

    for req in required_tools:
        if req.name.lower() in owned:
            matched_tools.append(MatchedTool(name=req.name, category=req.category))
            continue

        missing_tools.append(ToolGap(
            name=req.name,
            category=req.category,
            cost=req.estimated_cost,
            is_essential=req.is_essential,
        ))
        if req.is_essential:
            essential_missing_count += 1
        if req.estimated_cost:
            estimated_total_cost += req.estimated_cost

    coverage_percent = round_percent(len(matched_tools) / len(required_tools) * 100)

    logger.debug(
        "Tool coverage %d%%: %d missing (%d essential), cost %.2f",
        coverage_percent, len(missing_tools), essential_missing_count, estimated_total_cost,
    )

    return ToolCoverage(
        coverage_percent=coverage_percent,
        matched_tools=matched_tools,
        missing_tools=missing_tools,
        essential_missing_count=essential_missing_count,
        estimated_total_cost=estimated_total_cost,
    )
