from datetime import datetime

from pydantic import BaseModel, Field

from config import settings


class AssessmentConfig(BaseModel):
    available_hours_per_week: float = Field(
        default_factory=lambda: settings.available_hours_per_week,
        gt=0,
        description="Hours per week the person can put into the project",
    )
    hours_per_day: float = Field(
        default_factory=lambda: settings.hours_per_day,
        gt=0,
        description="Hours of work assumed per scheduled day",
    )
    now: datetime | None = Field(
        None, description="Reference time for stale-blocker checks (defaults to current UTC time)"
    )

    model_config = {"frozen": True, "validate_default": True}
