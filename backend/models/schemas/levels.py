"""Closed enumerations used by the scorer and the recommendation results."""

from enum import Enum


class ExperienceLevel(str, Enum):
    LEAD = "lead"
    SENIOR = "senior"
    MID = "mid"
    JUNIOR = "junior"
    OTHER = "other"

    @classmethod
    def from_label(cls, label: str | None) -> "ExperienceLevel":
        """Map a free-text label to a level. Unrecognised labels map to OTHER."""
        if not label:
            return cls.OTHER
        try:
            return cls(label.strip().lower())
        except ValueError:
            return cls.OTHER

    @property
    def bonus(self) -> int:
        return _EXPERIENCE_BONUS[self]


_EXPERIENCE_BONUS: dict[ExperienceLevel, int] = {
    ExperienceLevel.LEAD: 10,
    ExperienceLevel.SENIOR: 10,
    ExperienceLevel.MID: 7,
    ExperienceLevel.JUNIOR: 5,
    ExperienceLevel.OTHER: 0,
}


class RecommendationLevel(str, Enum):
    PERFECT = "perfect"
    GOOD = "good"
    PARTIAL = "partial"
    STRETCH = "stretch"


class GapDifficulty(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    ADVANCED = "advanced"
