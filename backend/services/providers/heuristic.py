"""Fallback provider: deterministic skill matching.

Wraps the two-sided recommender and reshapes each SkillMatch into the same
result models the Gemini provider returns. It never returns None.
"""

from models.responses import EmployeeRecommendation, ProjectRecommendation, SkillGapAnalysis
from models.schemas.profiles import Employee, Project
from models.schemas.skill_match import SkillMatch
from services import skill_gap, skill_matching
from services.providers.base import BaseRecommendationProvider
from services.skill_graph import SkillGraph, get_skill_graph, normalize_skill


def build_reasoning(match: SkillMatch) -> str:
    level = match.employee.experience_level.strip() or "unspecified"
    if match.total_required_skills == 0:
        return f"No required skills listed; level: {level}"
    reasoning = (
        f"{len(match.matching_skills)} of {match.total_required_skills} required skills match"
    )
    if match.related_matches:
        reasoning += (
            f" ({len(match.exact_matches)} exact, {len(match.related_matches)} transferable)"
        )
    return f"{reasoning}; level: {level}"


def missing_skills(match: SkillMatch) -> list[str]:
    """Required skills with neither an exact nor a related match.

    A skill reachable through the skill graph counts as covered here, unlike
    skill_gap.analyze_skill_gap, which still lists it as one to learn.
    """
    matched = set(match.matching_skills)
    missing: list[str] = []
    for skill in match.project.required_skills:
        norm = normalize_skill(skill)
        if norm and norm not in matched and skill.strip() not in missing:
            missing.append(skill.strip())
    return missing


def additional_value(match: SkillMatch) -> list[str]:
    required = {normalize_skill(s) for s in match.project.required_skills}
    extra: list[str] = []
    for skill in match.employee.skills:
        norm = normalize_skill(skill)
        if norm and norm not in required and skill.strip() not in extra:
            extra.append(skill.strip())
    return extra


def to_project_recommendation(match: SkillMatch) -> ProjectRecommendation:
    return ProjectRecommendation(
        project=match.project,
        compatibility_score=match.compatibility_score,
        matching_skills=list(match.matching_skills),
        missing_skills=missing_skills(match),
        reasoning=build_reasoning(match),
        recommendation_level=match.recommendation_level,
    )


def to_employee_recommendation(match: SkillMatch) -> EmployeeRecommendation:
    return EmployeeRecommendation(
        employee=match.employee,
        compatibility_score=match.compatibility_score,
        matching_skills=list(match.matching_skills),
        additional_value=additional_value(match),
        reasoning=build_reasoning(match),
        recommendation_level=match.recommendation_level,
    )


class HeuristicRecommendationProvider(BaseRecommendationProvider):
    provider_name = "heuristic"

    def __init__(self, graph: SkillGraph | None = None) -> None:
        # A bad graph file must fail here, never inside the fallback
        self._graph = graph if graph is not None else get_skill_graph()

    async def recommend_projects(
        self, employee: Employee, projects: list[Project]
    ) -> list[ProjectRecommendation]:
        matches = skill_matching.recommend_projects_for_employee(employee, projects, graph=self._graph)
        return [to_project_recommendation(m) for m in matches]

    async def recommend_employees(
        self, project: Project, employees: list[Employee]
    ) -> list[EmployeeRecommendation]:
        matches = skill_matching.recommend_employees_for_project(project, employees, graph=self._graph)
        return [to_employee_recommendation(m) for m in matches]

    async def analyze_skill_gap(self, employee: Employee, project: Project) -> SkillGapAnalysis:
        return skill_gap.analyze_skill_gap(employee, project, graph=self._graph)
