"""Heuristic skill gap analysis for one employee and one target project.

Missing skills that the employee can reach through the skill graph are
"bridged": they go first in the learning path and take less time to learn.
"""

from models.responses import SkillGapAnalysis
from models.schemas.levels import GapDifficulty
from models.schemas.profiles import Employee, Project
from services.compatibility import score_skills
from services.skill_graph import SkillGraph, normalize_skill

MONTHS_PER_BRIDGED_SKILL = 1
MONTHS_PER_NEW_SKILL = 3


def _display_names(skills: list[str]) -> dict[str, str]:
    """Map normalized skill -> first spelling seen."""
    names: dict[str, str] = {}
    for skill in skills:
        norm = normalize_skill(skill)
        if norm:
            names.setdefault(norm, skill.strip())
    return names


def _difficulty(new_count: int, required_count: int) -> GapDifficulty:
    if new_count == 0:
        return GapDifficulty.EASY
    if new_count * 3 <= required_count:
        return GapDifficulty.MODERATE
    if new_count * 3 <= required_count * 2:
        return GapDifficulty.CHALLENGING
    return GapDifficulty.ADVANCED


def _time_estimate(bridged_count: int, new_count: int) -> str:
    months = bridged_count * MONTHS_PER_BRIDGED_SKILL + new_count * MONTHS_PER_NEW_SKILL
    if months == 0:
        return "No additional training needed"
    return f"{months}-{months * 2} months"


def analyze_skill_gap(
    employee: Employee,
    project: Project,
    graph: SkillGraph | None = None,
) -> SkillGapAnalysis:
    result = score_skills(
        employee.skills,
        project.required_skills,
        employee.experience_level,
        department_relevant=False,
        graph=graph,
    )
    names = _display_names(project.required_skills)
    exact = set(result.exact_matches)
    bridged = [s for s in names if s in result.related_matches]
    new = [s for s in names if s not in exact and s not in bridged]

    return SkillGapAnalysis(
        current_skills=list(employee.skills),
        required_skills=list(names.values()),
        matching_skills=[names[s] for s in result.matching_skills],
        missing_skills=[names[s] for s in names if s not in exact],
        learning_path=[names[s] for s in bridged + new],
        time_estimate=_time_estimate(len(bridged), len(new)),
        difficulty=_difficulty(len(new), len(names)),
    )
