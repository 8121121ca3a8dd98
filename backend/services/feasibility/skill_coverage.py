"""Skill coverage: importance-weighted match of user skills to required skills.

Each required skill contributes ``proficiency * importance`` to the earned
score and ``5 * importance`` to the maximum; a skill the person lacks earns
nothing. Matching is by exact name, case-insensitive.

A required skill is a gap when it is missing, or when the person's
proficiency is below the skill's importance. The two ratings are on
different 0-5 scales (mastery vs. criticality); the comparison is kept as
a direct numeric one.
"""

import logging
from collections.abc import Sequence

from models.records import RequiredSkill, Skill
from models.schemas.skill_coverage import MatchedSkill, SkillCoverage, SkillGap
from services.feasibility.formatting import round_percent

logger = logging.getLogger(__name__)

MAX_PROFICIENCY = 5


def _normalize_name(name: str) -> str:
    return name.lower()


def evaluate_skill_coverage(
    user_skills: Sequence[Skill],
    required_skills: Sequence[RequiredSkill],
) -> SkillCoverage:
    """Match ``user_skills`` against ``required_skills``.

    Output lists preserve the order of ``required_skills``. With no
    required skills the result is full coverage and no gaps.
    """
    if not required_skills:
        return SkillCoverage()

    # Later duplicates win, same as building a dict from the list
    user_by_name = {_normalize_name(s.name): s for s in user_skills}

    matched_skills: list[MatchedSkill] = []
    gaps: list[SkillGap] = []
    missing_skills: list[SkillGap] = []

    earned = 0
    maximum = 0

    for req in required_skills:
        weight = req.importance
        maximum += MAX_PROFICIENCY * weight

        user_skill = user_by_name.get(_normalize_name(req.name))
        if user_skill is None:
            gap = SkillGap(
                name=req.name,
                importance=req.importance,
                learning_hours=req.learning_hours,
            )
            missing_skills.append(gap)
            gaps.append(gap)
            continue

        earned += user_skill.proficiency * weight
        matched_skills.append(MatchedSkill(
            name=req.name,
            user_proficiency=user_skill.proficiency,
            required_importance=req.importance,
        ))

        if user_skill.proficiency < req.importance:
            gaps.append(SkillGap(
                name=req.name,
                importance=req.importance,
                learning_hours=req.learning_hours,
                user_proficiency=user_skill.proficiency,
            ))

    # All-zero importance leaves nothing to weigh: treat as fully covered
    coverage_percent = round_percent(earned / maximum * 100) if maximum > 0 else 100

    logger.debug(
        "Skill coverage %d%%: %d matched, %d gaps, %d missing",
        coverage_percent, len(matched_skills), len(gaps), len(missing_skills),
    )

    return SkillCoverage(
        coverage_percent=coverage_percent,
        matched_skills=matched_skills,
        gaps=gaps,
        missing_skills=missing_skills,
    )
