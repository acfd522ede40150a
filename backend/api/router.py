from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_recommendation_orchestrator
from config import settings
from models.requests import (
    CompatibilityRequest,
    EmployeeRecommendationRequest,
    ProjectRecommendationRequest,
    SkillGapRequest,
)
from models.responses import (
    EmployeeRecommendationResponse,
    ProjectRecommendationResponse,
    SkillGapResponse,
)
from models.schemas.skill_match import SkillMatch
from services.compatibility import calculate_skill_compatibility
from services.recommendation_orchestrator import RecommendationOrchestrator

router = APIRouter()


def _check_candidate_count(count: int) -> None:
    if count > settings.max_candidates_per_request:
        raise HTTPException(
            status_code=400,
            detail=f"Too many candidates. Max per request: {settings.max_candidates_per_request}",
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "recommender_mode": settings.recommender_mode,
    }


@router.post("/recommendations/projects", response_model=ProjectRecommendationResponse)
async def recommend_projects(
    body: ProjectRecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_recommendation_orchestrator),
):
    _check_candidate_count(len(body.projects))
    return await orchestrator.recommend_projects(body.employee, body.projects)


@router.post("/recommendations/employees", response_model=EmployeeRecommendationResponse)
async def recommend_employees(
    body: EmployeeRecommendationRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_recommendation_orchestrator),
):
    _check_candidate_count(len(body.employees))
    return await orchestrator.recommend_employees(body.project, body.employees)


@router.post("/compatibility", response_model=SkillMatch)
async def compatibility(body: CompatibilityRequest):
    return calculate_skill_compatibility(body.employee, body.project)


@router.post("/skill-gap", response_model=SkillGapResponse)
async def skill_gap(
    body: SkillGapRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_recommendation_orchestrator),
):
    return await orchestrator.analyze_skill_gap(body.employee, body.project)
