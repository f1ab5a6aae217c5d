"""Domain models for patients."""

from dataclasses import dataclass

from ayur_diet.domain.prakriti import PrakritiScores


@dataclass(frozen=True)
class PatientProfile:
    """Patient data consumed by the diet-plan generator."""

    id: str
    name: str
    prakriti: PrakritiScores
    goals: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()
    chronic_conditions: tuple[str, ...] = ()
