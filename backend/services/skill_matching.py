"""Two-sided heuristic recommender built on the compatibility scorer.

Both directions score every candidate, drop weak matches, sort by score
(stable, so ties keep input order) and cap the list.
"""

from collections.abc import Sequence

from config import settings
from models.schemas.profiles import Employee, Project
from models.schemas.skill_match import SkillMatch
from services.compatibility import calculate_skill_compatibility
from services.skill_graph import SkillGraph, get_skill_graph


def _rank(matches: list[SkillMatch], limit: int) -> list[SkillMatch]:
    kept = [m for m in matches if m.compatibility_score >= settings.min_compatibility_score]
    kept.sort(key=lambda m: m.compatibility_score, reverse=True)
    return kept[:limit]


def recommend_projects_for_employee(
    employee: Employee,
    projects: Sequence[Project],
    graph: SkillGraph | None = None,
) -> list[SkillMatch]:
    """Top projects for one employee (at most 10 by default)."""
    graph = graph if graph is not None else get_skill_graph()
    matches = [calculate_skill_compatibility(employee, p, graph=graph) for p in projects]
    return _rank(matches, settings.max_project_recommendations)


def recommend_employees_for_project(
    project: Project,
    employees: Sequence[Employee],
    graph: SkillGraph | None = None,
) -> list[SkillMatch]:
    """Top employees for one project (at most 15 by default)."""
    graph = graph if graph is not None else get_skill_graph()
    matches = [calculate_skill_compatibility(e, project, graph=graph) for e in employees]
    return _rank(matches, settings.max_employee_recommendations)
