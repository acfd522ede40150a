"""Tests for the recommendation orchestrator and its fallback."""

from unittest.mock import AsyncMock, patch

import pytest

from config import settings
from models.responses import ProjectRecommendation, SkillGapAnalysis
from models.schemas.levels import RecommendationLevel
from models.schemas.profiles import Employee, Project
from services.providers.base import BaseRecommendationProvider
from services.providers.heuristic import HeuristicRecommendationProvider
from services.recommendation_orchestrator import RecommendationOrchestrator, get_orchestrator
from services.skill_graph import SkillGraphError, clear_skill_graph
from services.skill_matching import (
    recommend_employees_for_project,
    recommend_projects_for_employee,
)

PROJECTS = [
    Project(id=1, title="Portal", required_skills=["React", "TypeScript", "Node.js"]),
    Project(id=2, title="Design system", required_skills=["React", "CSS"]),
    Project(id=3, title="Data lake", required_skills=["Python", "Spark", "SQL"]),
    Project(id=4, title="Mobile app", required_skills=["React Native"]),
]
EMPLOYEES = [
    Employee(id=1, experience_level="other", skills=["React", "TypeScript", "Node.js"]),
    Employee(id=2, experience_level="other", skills=["Python"]),
    Employee(id=3, experience_level="junior", skills=["Go"]),
    Employee(id=4, experience_level="other", skills=["React"]),
]


class RaisingProvider(BaseRecommendationProvider):
    provider_name = "raising"

    async def recommend_projects(self, employee, projects):
        raise RuntimeError("network down")

    async def recommend_employees(self, project, employees):
        raise ConnectionError("network down")

    async def analyze_skill_gap(self, employee, project):
        raise ValueError("bad payload")


class UnavailableProvider(BaseRecommendationProvider):
    provider_name = "unavailable"

    async def recommend_projects(self, employee, projects):
        return None

    async def recommend_employees(self, project, employees):
        return None

    async def analyze_skill_gap(self, employee, project):
        return None


class StaticProvider(BaseRecommendationProvider):
    provider_name = "static"

    def __init__(self):
        self.calls = 0

    async def recommend_projects(self, employee, projects):
        self.calls += 1
        return [
            ProjectRecommendation(
                project=projects[0],
                compatibility_score=91,
                matching_skills=["react"],
                reasoning="AI says yes",
                recommendation_level=RecommendationLevel.PERFECT,
            )
        ]

    async def recommend_employees(self, project, employees):
        self.calls += 1
        return []

    async def analyze_skill_gap(self, employee, project):
        self.calls += 1
        return SkillGapAnalysis(time_estimate="1 week")


class TestFallback:
    @pytest.mark.asyncio
    async def test_raising_primary_matches_heuristic(self, react_dev):
        orchestrator = RecommendationOrchestrator(RaisingProvider(), HeuristicRecommendationProvider())
        response = await orchestrator.recommend_projects(react_dev, PROJECTS)

        direct = recommend_projects_for_employee(react_dev, PROJECTS)
        assert [(r.project.id, r.compatibility_score) for r in response.recommendations] == [
            (m.project.id, m.compatibility_score) for m in direct
        ]
        assert response.degraded is True
        assert response.scoring_method == "heuristic"

    @pytest.mark.asyncio
    async def test_raising_primary_employees(self, web_project):
        orchestrator = RecommendationOrchestrator(RaisingProvider(), HeuristicRecommendationProvider())
        response = await orchestrator.recommend_employees(web_project, EMPLOYEES)

        direct = recommend_employees_for_project(web_project, EMPLOYEES)
        assert [(r.employee.id, r.compatibility_score) for r in response.recommendations] == [
            (m.employee.id, m.compatibility_score) for m in direct
        ]
        assert response.degraded is True

    @pytest.mark.asyncio
    async def test_unavailable_primary_falls_back(self, react_dev):
        orchestrator = RecommendationOrchestrator(UnavailableProvider(), HeuristicRecommendationProvider())
        response = await orchestrator.recommend_projects(react_dev, PROJECTS)
        assert response.scoring_method == "heuristic"
        assert all(r.reasoning for r in response.recommendations)

    @pytest.mark.asyncio
    async def test_skill_gap_falls_back(self, react_dev, web_project):
        orchestrator = RecommendationOrchestrator(RaisingProvider(), HeuristicRecommendationProvider())
        response = await orchestrator.analyze_skill_gap(react_dev, web_project)
        assert response.degraded is True
        assert response.analysis.missing_skills == ["TypeScript", "Node.js"]

    @pytest.mark.asyncio
    async def test_fallback_is_deterministic(self, react_dev):
        orchestrator = RecommendationOrchestrator(RaisingProvider(), HeuristicRecommendationProvider())
        first = await orchestrator.recommend_projects(react_dev, PROJECTS)
        second = await orchestrator.recommend_projects(react_dev, PROJECTS)
        assert first == second


class TestPrimary:
    @pytest.mark.asyncio
    async def test_primary_results_returned_as_is(self, react_dev):
        fallback = StaticProvider()
        orchestrator = RecommendationOrchestrator(StaticProvider(), fallback)
        response = await orchestrator.recommend_projects(react_dev, PROJECTS)

        assert response.degraded is False
        assert response.scoring_method == "ai"
        assert [r.compatibility_score for r in response.recommendations] == [91]
        assert response.recommendations[0].reasoning == "AI says yes"
        assert fallback.calls == 0

    @pytest.mark.asyncio
    async def test_empty_primary_list_is_a_success(self, web_project):
        fallback = StaticProvider()
        orchestrator = RecommendationOrchestrator(StaticProvider(), fallback)
        response = await orchestrator.recommend_employees(web_project, EMPLOYEES)
        assert response.recommendations == []
        assert response.scoring_method == "ai"
        assert fallback.calls == 0

    @pytest.mark.asyncio
    async def test_primary_skill_gap(self, react_dev, web_project):
        orchestrator = RecommendationOrchestrator(StaticProvider(), HeuristicRecommendationProvider())
        response = await orchestrator.analyze_skill_gap(react_dev, web_project)
        assert response.analysis.time_estimate == "1 week"
        assert response.degraded is False


class TestModeSwitch:
    @pytest.mark.asyncio
    async def test_ai_mode_without_key_degrades(self, react_dev):
        orchestrator = get_orchestrator()
        assert orchestrator.primary is not None
        response = await orchestrator.recommend_projects(react_dev, PROJECTS)
        assert response.degraded is True
        assert response.scoring_method == "heuristic"

    @pytest.mark.asyncio
    @patch("services.gemini_client.generate_json", new_callable=AsyncMock)
    async def test_heuristic_mode_skips_gemini(self, mock_generate, react_dev, monkeypatch):
        monkeypatch.setattr(settings, "recommender_mode", "heuristic")
        orchestrator = get_orchestrator()
        response = await orchestrator.recommend_projects(react_dev, PROJECTS)

        assert orchestrator.primary is None
        mock_generate.assert_not_awaited()
        assert response.degraded is False
        assert response.scoring_method == "heuristic"

    @pytest.mark.asyncio
    @patch("services.gemini_client.generate_json", new_callable=AsyncMock)
    async def test_ai_mode_uses_gemini_response(self, mock_generate, react_dev):
        mock_generate.return_value = {
            "recommendations": [
                {
                    "project_id": 3,
                    "compatibility_score": 35,
                    "matching_skills": [],
                    "missing_skills": ["Python", "Spark", "SQL"],
                    "reasoning": "Would need to learn the data stack",
                    "recommendation_level": "stretch",
                }
            ]
        }
        response = await get_orchestrator().recommend_projects(react_dev, PROJECTS)
        assert response.scoring_method == "ai"
        assert [r.project.id for r in response.recommendations] == [3]

    @pytest.mark.asyncio
    @patch("services.gemini_client.generate_json", new_callable=AsyncMock)
    async def test_unknown_ai_ids_fall_back(self, mock_generate, react_dev):
        mock_generate.return_value = {
            "recommendations": [
                {"project_id": 404, "compatibility_score": 90, "recommendation_level": "perfect"}
            ]
        }
        response = await get_orchestrator().recommend_projects(react_dev, PROJECTS)
        assert response.scoring_method == "heuristic"
        assert response.degraded is True
        assert [r.project.id for r in response.recommendations] == [
            m.project.id for m in recommend_projects_for_employee(react_dev, PROJECTS)
        ]


class TestGraphLoading:
    def test_bad_graph_path_fails_when_building(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "skill_graph_path", str(tmp_path / "missing.json"))
        with pytest.raises(SkillGraphError):
            get_orchestrator()

    @pytest.mark.asyncio
    async def test_fallback_keeps_graph_loaded_at_construction(self, react_dev, tmp_path, monkeypatch):
        orchestrator = RecommendationOrchestrator(RaisingProvider(), HeuristicRecommendationProvider())
        monkeypatch.setattr(settings, "skill_graph_path", str(tmp_path / "missing.json"))
        clear_skill_graph()

        response = await orchestrator.recommend_projects(react_dev, PROJECTS)
        assert response.degraded is True
        assert [r.project.id for r in response.recommendations][:1] == [1]
