"""Abstract base class for recommendation providers."""

from abc import ABC, abstractmethod

from models.responses import EmployeeRecommendation, ProjectRecommendation, SkillGapAnalysis
from models.schemas.profiles import Employee, Project


class BaseRecommendationProvider(ABC):
    """One way of producing recommendations.

    Subclasses must implement the three operations below. Each returns
    ``None`` when the provider could not produce a complete answer; callers
    treat ``None`` as "use another provider", never as an empty result.
    """

    provider_name: str = ""

    @abstractmethod
    async def recommend_projects(
        self, employee: Employee, projects: list[Project]
    ) -> list[ProjectRecommendation] | None:
        """Projects ranked for one employee."""

    @abstractmethod
    async def recommend_employees(
        self, project: Project, employees: list[Employee]
    ) -> list[EmployeeRecommendation] | None:
        """Employees ranked for one project."""

    @abstractmethod
    async def analyze_skill_gap(
        self, employee: Employee, project: Project
    ) -> SkillGapAnalysis | None:
        """Skill gap between one employee and one target project."""
