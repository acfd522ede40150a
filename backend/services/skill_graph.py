"""Skill relationship graph: single-hop transferability lookup.

The graph is a versioned data file (``services/data/skill_graph.json`` by
default) rather than code, so it can be updated and tested independently of
the scorer. Relations are one-directional: "react" may list "node.js"
without "node.js" listing "react". Lookups never follow more than one hop.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from config import settings

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_PATH = Path(__file__).parent / "data" / "skill_graph.json"


class SkillGraphError(ValueError):
    """Raised when a skill graph file cannot be read or has the wrong shape."""


def normalize_skill(skill: str) -> str:
    """Normalize a skill name for comparison (trim + lowercase)."""
    return skill.strip().lower()


@dataclass(frozen=True)
class SkillGraph:
    """Immutable mapping from a normalized skill to its related skills."""

    relations: Mapping[str, frozenset[str]] = field(default_factory=dict)
    version: str = ""

    @classmethod
    def from_mapping(
        cls, relations: Mapping[str, Iterable[str]], version: str = ""
    ) -> "SkillGraph":
        """Build a graph, normalizing keys and values. Blank entries are dropped."""
        normalized: dict[str, set[str]] = {}
        for skill, related in relations.items():
            key = normalize_skill(skill)
            if not key:
                continue
            targets = {normalize_skill(r) for r in related}
            targets.discard("")
            targets.discard(key)
            normalized.setdefault(key, set()).update(targets)
        frozen = {k: frozenset(v) for k, v in normalized.items()}
        return cls(relations=MappingProxyType(frozen), version=version)

    def related_skills(self, skill: str) -> frozenset[str]:
        """Skills one hop away from ``skill``. Unknown skills give an empty set."""
        if not isinstance(skill, str):
            return frozenset()
        return self.relations.get(normalize_skill(skill), frozenset())

    def __len__(self) -> int:
        return len(self.relations)


def load_skill_graph(path: str | Path) -> SkillGraph:
    """Load a graph from a JSON file of the form ``{"version", "relations"}``."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SkillGraphError(f"Could not read skill graph {path}: {e}") from e

    relations = data.get("relations") if isinstance(data, dict) else None
    if not isinstance(relations, dict):
        raise SkillGraphError(f"Skill graph {path} has no 'relations' object")
    for skill, related in relations.items():
        if not isinstance(related, list) or not all(isinstance(r, str) for r in related):
            raise SkillGraphError(f"Relations for {skill!r} must be a list of strings")

    graph = SkillGraph.from_mapping(relations, version=str(data.get("version", "")))
    logger.info("Skill graph loaded from %s (version %s, %d skills)", path, graph.version, len(graph))
    return graph


_graph: SkillGraph | None = None


def get_skill_graph() -> SkillGraph:
    """Return the process-wide graph, loading it on first use."""
    global _graph
    if _graph is None:
        _graph = load_skill_graph(settings.skill_graph_path or DEFAULT_GRAPH_PATH)
    return _graph


def clear_skill_graph() -> None:
    """Forget the loaded graph. Useful for testing."""
    global _graph
    _graph = None
