"""Heuristic skill compatibility scorer.

Scores one employee against one project's required skills:

    raw = exact_ratio * 60 + related_bonus * 20 + experience_bonus * 15 + department_bonus * 5
    (+10 versatility bonus when every required skill is matched and the
    employee holds more skills than the project lists)

The experience bonus (0-10) and department bonus (0 or 10) enter the sum
unnormalized, so their contributions can reach 150 and 50. Scores are
rounded and clamped to 0-100. The tier gates on both the score and the
exact-match coverage, so a clamped 100 can still be a "stretch".
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from models.schemas.levels import ExperienceLevel, RecommendationLevel
from models.schemas.profiles import Employee, Project
from models.schemas.skill_match import SkillMatch
from services.skill_graph import SkillGraph, get_skill_graph, normalize_skill

logger = logging.getLogger(__name__)

# Term weights
W_EXACT = 60
W_RELATED = 20
W_EXPERIENCE = 15
W_DEPARTMENT = 5

RELATED_MATCH_UNIT = 0.1
DEPARTMENT_BONUS = 10
VERSATILITY_BONUS = 10

# (tier, min score, min exact coverage), checked in order
TIER_THRESHOLDS: list[tuple[RecommendationLevel, int, float]] = [
    (RecommendationLevel.PERFECT, 80, 0.8),
    (RecommendationLevel.GOOD, 60, 0.6),
    (RecommendationLevel.PARTIAL, 40, 0.4),
]

DEPARTMENT_KEYWORDS: dict[str, list[str]] = {
    "engineering": ["development", "api", "frontend", "backend", "infrastructure", "testing"],
    "design": ["design", "user", "interface", "experience", "prototype", "wireframe"],
    "analytics": ["data", "analytics", "visualization", "intelligence", "metrics"],
    "marketing": ["marketing", "campaign", "content", "social", "brand"],
    "product": ["product", "strategy", "roadmap", "feature", "requirements"],
    "finance": ["finance", "financial", "risk", "portfolio", "investment", "accounting"],
}


@dataclass(frozen=True)
class SkillScore:
    """Result of scoring one skill set against one requirement list."""
    score: int
    matching_skills: tuple[str, ...]
    exact_matches: tuple[str, ...]
    related_matches: tuple[str, ...]
    required_count: int
    raw_score: float


def _normalize_all(skills: Iterable[str] | None) -> list[str]:
    """Normalize and deduplicate, keeping first-seen order. Blanks are dropped."""
    seen: dict[str, None] = {}
    for skill in skills or []:
        if not isinstance(skill, str):
            continue
        norm = normalize_skill(skill)
        if norm:
            seen.setdefault(norm, None)
    return list(seen)


def experience_bonus(experience_level: str | ExperienceLevel | None) -> int:
    return ExperienceLevel.from_label(experience_level).bonus


def is_department_relevant(department: str, project: Project) -> bool:
    """True if any keyword of the employee's department appears in the project text."""
    keywords = DEPARTMENT_KEYWORDS.get((department or "").strip().lower(), [])
    project_text = f"{project.description} {project.title}".lower()
    return any(keyword in project_text for keyword in keywords)


def score_skills(
    candidate_skills: Iterable[str],
    required_skills: Iterable[str],
    experience_level: str | ExperienceLevel | None,
    department_relevant: bool,
    graph: SkillGraph | None = None,
) -> SkillScore:
    """Score a candidate skill set against required skills. Never raises."""
    if graph is None:
        graph = get_skill_graph()

    candidate = _normalize_all(candidate_skills)
    required = _normalize_all(required_skills)
    candidate_set = set(candidate)

    exact = [skill for skill in required if skill in candidate_set]
    exact_ratio = len(exact) / len(required) if required else 0.0

    reachable: set[str] = set()
    for skill in candidate:
        reachable |= graph.related_skills(skill)
    related = [skill for skill in required if skill not in candidate_set and skill in reachable]

    raw = (
        exact_ratio * W_EXACT
        + len(related) * RELATED_MATCH_UNIT * W_RELATED
        + experience_bonus(experience_level) * W_EXPERIENCE
        + (DEPARTMENT_BONUS if department_relevant else 0) * W_DEPARTMENT
    )
    if len(exact) >= len(required) and len(candidate) > len(required):
        raw += VERSATILITY_BONUS

    return SkillScore(
        score=min(100, max(0, round(raw))),
        matching_skills=tuple(exact + related),
        exact_matches=tuple(exact),
        related_matches=tuple(related),
        required_count=len(required),
        raw_score=raw,
    )


def classify(score: int, exact_count: int, required_count: int) -> RecommendationLevel:
    """Pick the first tier whose score and exact-coverage gates both pass.

    Coverage is 0 when nothing is required, so an empty requirement list can
    never clear a gate.
    """
    coverage = exact_count / required_count if required_count else 0.0
    for level, min_score, min_coverage in TIER_THRESHOLDS:
        if score >= min_score and coverage >= min_coverage:
            return level
    return RecommendationLevel.STRETCH


def calculate_skill_compatibility(
    employee: Employee,
    project: Project,
    graph: SkillGraph | None = None,
) -> SkillMatch:
    """Score one employee against one project."""
    result = score_skills(
        employee.skills,
        project.required_skills,
        employee.experience_level,
        is_department_relevant(employee.department, project),
        graph=graph,
    )
    level = classify(result.score, len(result.exact_matches), result.required_count)
    logger.debug(
        "Employee %s vs project %s: raw=%.1f score=%d level=%s",
        employee.id, project.id, result.raw_score, result.score, level.value,
    )
    return SkillMatch(
        employee=employee,
        project=project,
        matching_skills=list(result.matching_skills),
        exact_matches=list(result.exact_matches),
        related_matches=list(result.related_matches),
        total_required_skills=result.required_count,
        compatibility_score=result.score,
        recommendation_level=level,
    )
