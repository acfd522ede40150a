"""Heuristic scorer output: one employee scored against one project."""

from pydantic import BaseModel, ConfigDict

from models.schemas.levels import RecommendationLevel
from models.schemas.profiles import Employee, Project


class SkillMatch(BaseModel):
    """Value object produced by the compatibility scorer.

    ``matching_skills`` is the deduplicated union of exact and related
    matches, in normalized (lowercase) form and requirement order.
    """
    model_config = ConfigDict(frozen=True)

    employee: Employee
    project: Project
    matching_skills: list[str] = []
    exact_matches: list[str] = []
    related_matches: list[str] = []
    total_required_skills: int = 0
    compatibility_score: int = 0  # 0-100
    recommendation_level: RecommendationLevel = RecommendationLevel.STRETCH
