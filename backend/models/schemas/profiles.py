"""Directory records consumed by the matching engine.

Records are built per request from data the directory store hands over and
are never mutated afterwards.
"""

from pydantic import BaseModel, ConfigDict


class Employee(BaseModel):
    """A person who can be matched against projects."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""
    title: str = ""
    department: str = ""
    experience_level: str = ""  # open label, e.g. "junior", "senior", "lead"
    skills: list[str] = []  # case-preserved, matched case-insensitively
    bio: str | None = None


class Project(BaseModel):
    """A project or service with the skills it requires."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str = ""
    description: str = ""
    required_skills: list[str] = []
    # Prompt context only, never scored
    priority: str | None = None
    status: str | None = None
    estimated_duration: str | None = None
    budget: str | None = None
