"""Pydantic contracts shared by the scorer, the providers and the API."""

from models.schemas.levels import ExperienceLevel, GapDifficulty, RecommendationLevel
from models.schemas.profiles import Employee, Project
from models.schemas.skill_match import SkillMatch

__all__ = [
    "Employee",
    "Project",
    "ExperienceLevel",
    "RecommendationLevel",
    "GapDifficulty",
    "SkillMatch",
]
