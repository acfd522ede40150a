from pydantic import BaseModel

from models.schemas.levels import GapDifficulty, RecommendationLevel
from models.schemas.profiles import Employee, Project


class ProjectRecommendation(BaseModel):
    project: Project
    compatibility_score: int = 0
    matching_skills: list[str] = []
    missing_skills: list[str] = []
    reasoning: str = ""
    recommendation_level: RecommendationLevel = RecommendationLevel.STRETCH


class EmployeeRecommendation(BaseModel):
    employee: Employee
    compatibility_score: int = 0
    matching_skills: list[str] = []
    additional_value: list[str] = []
    reasoning: str = ""
    recommendation_level: RecommendationLevel = RecommendationLevel.STRETCH


class ProjectRecommendationResponse(BaseModel):
    recommendations: list[ProjectRecommendation] = []
    # Diagnostics: which provider produced the list
    degraded: bool = False
    scoring_method: str = "ai"  # "ai" | "heuristic"


class EmployeeRecommendationResponse(BaseModel):
    recommendations: list[EmployeeRecommendation] = []
    degraded: bool = False
    scoring_method: str = "ai"


class SkillGapAnalysis(BaseModel):
    current_skills: list[str] = []
    required_skills: list[str] = []
    matching_skills: list[str] = []
    missing_skills: list[str] = []
    learning_path: list[str] = []
    time_estimate: str = ""
    difficulty: GapDifficulty = GapDifficulty.EASY


class SkillGapResponse(BaseModel):
    analysis: SkillGapAnalysis = SkillGapAnalysis()
    degraded: bool = False
    scoring_method: str = "ai"
