"""Shared dependencies for API routes."""

from services.recommendation_orchestrator import RecommendationOrchestrator, get_orchestrator


def get_recommendation_orchestrator() -> RecommendationOrchestrator:
    return get_orchestrator()
