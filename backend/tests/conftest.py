"""Shared test configuration, pytest markers and fixtures."""

import pytest

from config import settings
from models.schemas.profiles import Employee, Project
from services import gemini_client
from services.providers.registry import clear as clear_providers
from services.skill_graph import SkillGraph, clear_skill_graph


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _isolate_services(monkeypatch, request):
    """Reset cached singletons and keep Gemini disabled unless a test opts in."""
    if request.node.get_closest_marker("integration") is None:
        monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(gemini_client, "_client", None)
    clear_skill_graph()
    clear_providers()
    yield
    clear_skill_graph()
    clear_providers()


@pytest.fixture
def small_graph() -> SkillGraph:
    return SkillGraph.from_mapping(
        {
            "react": ["typescript", "node.js"],
            "python": ["django"],
            "a": ["b"],
            "b": ["c"],
        },
        version="test",
    )


@pytest.fixture
def react_dev() -> Employee:
    return Employee(
        id=1,
        name="Dana Reyes",
        title="Frontend Engineer",
        department="Engineering",
        experience_level="mid",
        skills=["React", "JavaScript"],
    )


@pytest.fixture
def web_project() -> Project:
    return Project(
        id=10,
        title="Customer Portal",
        description="Build the new self-service portal",
        required_skills=["React", "TypeScript", "Node.js"],
    )
