"""Domain models for prakriti (constitutional) profiles."""

from dataclasses import dataclass
from enum import StrEnum


class Dosha(StrEnum):
    """One of the three Ayurvedic constitutional categories."""

    VATA = "vata"
    PITTA = "pitta"
    KAPHA = "kapha"


@dataclass(frozen=True)
class PrakritiScores:
    """Raw dosha scores for a patient; they need not sum to 100."""

    vata: float
    pitta: float
    kapha: float

    def score(self, dosha: Dosha) -> float:
        """Return the raw score for a dosha."""
        return getattr(self, dosha.value)


@dataclass(frozen=True)
class PrakritiAssessment:
    """Percentages and dominant doshas derived from raw scores."""

    percentages: dict[Dosha, int]
    dominant: tuple[Dosha, ...]
    constitution: str | None
    confidence: int
    description: str = ""
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConstitutionProfile:
    """Patient-facing description and lifestyle advice for a constitution."""

    description: str
    recommendations: tuple[str, ...]
