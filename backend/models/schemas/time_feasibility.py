"""Time feasibility output: weekly demand versus weekly capacity."""

from pydantic import BaseModel


class TimeFeasibility(BaseModel):
    weekly_hours_needed: float = 0.0
    weekly_hours_available: float = 0.0
    deficit_or_surplus: float = 0.0  # negative means a deficit
    estimated_project_weeks: int = 0
    recommended_timeline_extension_weeks: int = 0
    total_days: int = 0
    total_estimated_hours: float = 0.0

    model_config = {"frozen": True}
