"""Skill coverage output: importance-weighted match of a person's skills."""

from pydantic import BaseModel


class SkillGap(BaseModel):
    """A required skill that is missing or rated below its importance."""
    name: str
    importance: int
    learning_hours: float = 0.0
    user_proficiency: int | None = None  # None when the skill is missing entirely

    model_config = {"frozen": True}


class MatchedSkill(BaseModel):
    name: str
    user_proficiency: int
    required_importance: int

    model_config = {"frozen": True}


class SkillCoverage(BaseModel):
    """Result of matching user skills against required skills.

    ``gaps`` includes every entry of ``missing_skills`` plus matched skills
    whose proficiency is below the required importance. All three lists
    follow the order of the required skills.
    """
    coverage_percent: int = 100  # 0-100, importance-weighted
    matched_skills: list[MatchedSkill] = []
    gaps: list[SkillGap] = []
    missing_skills: list[SkillGap] = []

    model_config = {"frozen": True}
