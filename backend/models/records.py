"""Input records supplied by the surrounding application.

All records are frozen; range checks run once, at construction.
"""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class WorkItemStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    COMPLETED = "completed"


class Skill(BaseModel):
    """A skill the person currently has."""
    name: str
    proficiency: int = Field(..., ge=0, le=5)
    category: str = ""

    model_config = {"frozen": True}


class RequiredSkill(BaseModel):
    """A skill the project needs, weighted by importance."""
    name: str
    importance: int = Field(..., ge=0, le=5)
    learning_hours: float = Field(0, ge=0)  # hours to learn from zero

    model_config = {"frozen": True}


class Tool(BaseModel):
    name: str
    category: str = ""

    model_config = {"frozen": True}


class RequiredTool(BaseModel):
    name: str
    category: str = ""
    is_essential: bool = False
    estimated_cost: float | None = Field(None, ge=0)

    model_config = {"frozen": True}


class WorkItem(BaseModel):
    """A scheduled roadmap item. Only dates and status matter here."""
    status: WorkItemStatus
    start_date: date
    end_date: date
    created_at: datetime
    title: str = ""

    model_config = {"frozen": True}

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value):
        # Accept "in-progress" as well as "in_progress"
        if isinstance(value, str):
            return value.strip().lower().replace("-", "_")
        return value

    @model_validator(mode="after")
    def _check_dates(self) -> "WorkItem":
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} is earlier than start_date {self.start_date}"
            )
        return self
