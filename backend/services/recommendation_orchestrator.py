"""Orchestrator: AI recommendations with a deterministic fallback.

Two providers sit behind one interface:
1. primary  - Gemini (skipped when recommender_mode is "heuristic")
2. fallback - skill-graph heuristic, total over its inputs

The primary is tried once. If it raises or returns None, the fallback runs
once and its results are reshaped into the same response models, so callers
see one schema. Only the diagnostic fields (degraded, scoring_method) tell
the two paths apart. A response never mixes results from both providers.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from config import settings
from models.responses import (
    EmployeeRecommendationResponse,
    ProjectRecommendationResponse,
    SkillGapResponse,
)
from models.schemas.profiles import Employee, Project
from services.providers.base import BaseRecommendationProvider
from services.providers.registry import get_provider

logger = logging.getLogger(__name__)

T = TypeVar("T")

METHOD_AI = "ai"
METHOD_HEURISTIC = "heuristic"


class RecommendationOrchestrator:
    def __init__(
        self,
        primary: BaseRecommendationProvider | None,
        fallback: BaseRecommendationProvider,
    ) -> None:
        self.primary = primary
        self.fallback = fallback

    async def _try_primary(
        self,
        operation: str,
        call: Callable[[BaseRecommendationProvider], Awaitable[T | None]],
    ) -> T | None:
        if self.primary is None:
            return None
        try:
            result = await call(self.primary)
        except Exception as e:
            logger.warning("%s provider failed on %s: %s", self.primary.provider_name, operation, e)
            return None
        if result is None:
            logger.warning(
                "%s provider unavailable for %s, using %s provider",
                self.primary.provider_name, operation, self.fallback.provider_name,
            )
        return result

    @property
    def _fallback_is_degraded(self) -> bool:
        # No primary means heuristic mode was configured
        return self.primary is not None

    async def recommend_projects(
        self, employee: Employee, projects: list[Project]
    ) -> ProjectRecommendationResponse:
        results = await self._try_primary(
            "recommend_projects", lambda p: p.recommend_projects(employee, projects)
        )
        if results is not None:
            return ProjectRecommendationResponse(recommendations=results, scoring_method=METHOD_AI)

        results = await self.fallback.recommend_projects(employee, projects)
        return ProjectRecommendationResponse(
            recommendations=results or [],
            degraded=self._fallback_is_degraded,
            scoring_method=METHOD_HEURISTIC,
        )

    async def recommend_employees(
        self, project: Project, employees: list[Employee]
    ) -> EmployeeRecommendationResponse:
        results = await self._try_primary(
            "recommend_employees", lambda p: p.recommend_employees(project, employees)
        )
        if results is not None:
            return EmployeeRecommendationResponse(recommendations=results, scoring_method=METHOD_AI)

        results = await self.fallback.recommend_employees(project, employees)
        return EmployeeRecommendationResponse(
            recommendations=results or [],
            degraded=self._fallback_is_degraded,
            scoring_method=METHOD_HEURISTIC,
        )

    async def analyze_skill_gap(self, employee: Employee, project: Project) -> SkillGapResponse:
        analysis = await self._try_primary(
            "analyze_skill_gap", lambda p: p.analyze_skill_gap(employee, project)
        )
        if analysis is not None:
            return SkillGapResponse(analysis=analysis, scoring_method=METHOD_AI)

        analysis = await self.fallback.analyze_skill_gap(employee, project)
        return SkillGapResponse(
            analysis=analysis,
            degraded=self._fallback_is_degraded,
            scoring_method=METHOD_HEURISTIC,
        )


def get_orchestrator() -> RecommendationOrchestrator:
    """Build an orchestrator for the configured recommender_mode."""
    fallback = get_provider("heuristic")
    if settings.recommender_mode == "heuristic":
        return RecommendationOrchestrator(primary=None, fallback=fallback)
    return RecommendationOrchestrator(primary=get_provider("gemini"), fallback=fallback)
