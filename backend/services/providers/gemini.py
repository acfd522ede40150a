"""Primary provider: Gemini-based recommendations.

The model is asked for JSON records keyed by subject id. The whole response
is validated before anything is returned, so a malformed answer yields
``None`` and never a partial list. So does an answer whose records name
none of the given ids.
"""

import logging

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from config import settings
from models.responses import EmployeeRecommendation, ProjectRecommendation, SkillGapAnalysis
from models.schemas.levels import GapDifficulty, RecommendationLevel
from models.schemas.profiles import Employee, Project
from services import gemini_client, prompt_builder
from services.providers.base import BaseRecommendationProvider

logger = logging.getLogger(__name__)


class _RecordBase(BaseModel):
    compatibility_score: float = Field(
        ge=0, le=100, validation_alias=AliasChoices("compatibility_score", "compatibilityScore")
    )
    matching_skills: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("matching_skills", "matchingSkills")
    )
    reasoning: str = ""
    recommendation_level: RecommendationLevel = Field(
        validation_alias=AliasChoices("recommendation_level", "recommendationLevel")
    )


class ProjectRecord(_RecordBase):
    project_id: int = Field(validation_alias=AliasChoices("project_id", "projectId"))
    missing_skills: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("missing_skills", "missingSkills")
    )


class EmployeeRecord(_RecordBase):
    employee_id: int = Field(validation_alias=AliasChoices("employee_id", "employeeId"))
    additional_value: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("additional_value", "additionalValue")
    )


class ProjectPayload(BaseModel):
    recommendations: list[ProjectRecord]


class EmployeePayload(BaseModel):
    recommendations: list[EmployeeRecord]


class SkillGapPayload(BaseModel):
    current_skills: list[str] = []
    required_skills: list[str] = []
    matching_skills: list[str] = []
    missing_skills: list[str] = []
    learning_path: list[str] = []
    time_estimate: str = ""
    difficulty: GapDifficulty


class GeminiRecommendationProvider(BaseRecommendationProvider):
    provider_name = "gemini"

    async def recommend_projects(
        self, employee: Employee, projects: list[Project]
    ) -> list[ProjectRecommendation] | None:
        if not projects:
            return []
        data = await gemini_client.generate_json(
            prompt_builder.build_project_recommendation_prompt(employee, projects)
        )
        if data is None:
            return None
        try:
            payload = ProjectPayload.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed Gemini project recommendations: %s", e)
            return None

        by_id = {p.id: p for p in projects}
        seen: set[int] = set()
        results: list[ProjectRecommendation] = []
        for rec in payload.recommendations:
            project = by_id.get(rec.project_id)
            if project is None or rec.project_id in seen:
                logger.debug("Skipping Gemini record for project %s", rec.project_id)
                continue
            seen.add(rec.project_id)
            results.append(ProjectRecommendation(
                project=project,
                compatibility_score=round(rec.compatibility_score),
                matching_skills=rec.matching_skills,
                missing_skills=rec.missing_skills,
                reasoning=rec.reasoning,
                recommendation_level=rec.recommendation_level,
            ))

        if payload.recommendations and not results:
            logger.warning("Gemini project recommendations matched none of the given ids")
            return None

        results.sort(key=lambda r: r.compatibility_score, reverse=True)
        return results[:settings.max_project_recommendations]

    async def recommend_employees(
        self, project: Project, employees: list[Employee]
    ) -> list[EmployeeRecommendation] | None:
        if not employees:
            return []
        data = await gemini_client.generate_json(
            prompt_builder.build_employee_recommendation_prompt(project, employees)
        )
        if data is None:
            return None
        try:
            payload = EmployeePayload.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed Gemini employee recommendations: %s", e)
            return None

        by_id = {e.id: e for e in employees}
        seen: set[int] = set()
        results: list[EmployeeRecommendation] = []
        for rec in payload.recommendations:
            employee = by_id.get(rec.employee_id)
            if employee is None or rec.employee_id in seen:
                logger.debug("Skipping Gemini record for employee %s", rec.employee_id)
                continue
            seen.add(rec.employee_id)
            results.append(EmployeeRecommendation(
                employee=employee,
                compatibility_score=round(rec.compatibility_score),
                matching_skills=rec.matching_skills,
                additional_value=rec.additional_value,
                reasoning=rec.reasoning,
                recommendation_level=rec.recommendation_level,
            ))

        if payload.recommendations and not results:
            logger.warning("Gemini employee recommendations matched none of the given ids")
            return None

        results.sort(key=lambda r: r.compatibility_score, reverse=True)
        return results[:settings.max_employee_recommendations]

    async def analyze_skill_gap(
        self, employee: Employee, project: Project
    ) -> SkillGapAnalysis | None:
        data = await gemini_client.generate_json(
            prompt_builder.build_skill_gap_prompt(employee, project)
        )
        if data is None:
            return None
        try:
            payload = SkillGapPayload.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed Gemini skill gap analysis: %s", e)
            return None
        return SkillGapAnalysis(**payload.model_dump())
