"""Prakriti scoring: percentages, dominant doshas and constitution labels."""

import math
from collections.abc import Mapping
from numbers import Real

from ayur_diet.domain.prakriti import (
    ConstitutionProfile,
    Dosha,
    PrakritiAssessment,
    PrakritiScores,
)
from ayur_diet.errors import InvalidProfileError

DEFAULT_DOMINANT_THRESHOLD = 30.0
TRIDOSHIC = "tridoshic"
_DUAL_DOSHA = 2

# Questionnaire question ids and the weight each answer adds to its dosha.
QUESTION_WEIGHTS: dict[str, float] = {
    "physical_frame": 1.0,
    "weight_gain": 1.0,
    "skin_texture": 1.0,
    "hair_quality": 1.0,
    "appetite": 1.5,
    "bowel_movements": 1.0,
    "sleep_pattern": 1.5,
    "energy_levels": 1.0,
    "stress_response": 1.5,
    "memory_learning": 1.0,
    "social_behavior": 1.0,
    "temperature_preference": 1.0,
}

# Keyed by constitution label; dual labels are alphabetical.
CONSTITUTION_PROFILES: dict[str, ConstitutionProfile] = {
    "vata": ConstitutionProfile(
        description=(
            "You have a Vata-dominant constitution. Vata is the energy of "
            "movement, composed of air and ether elements."
        ),
        recommendations=(
            "Follow a regular daily routine",
            "Eat warm, cooked, nourishing foods",
            "Practice calming activities like meditation",
            "Keep warm and avoid cold, raw foods",
            "Use warm oils for self-massage (abhyanga)",
            "Get adequate rest and avoid overstimulation",
        ),
    ),
    "pitta": ConstitutionProfile(
        description=(
            "You have a Pitta-dominant constitution. Pitta is the energy of "
            "transformation, composed of fire and water elements."
        ),
        recommendations=(
            "Eat cooling, non-spicy foods",
            "Avoid excessive heat and sun exposure",
            "Practice cooling activities like swimming",
            "Learn to manage anger and stress",
            "Take time to relax and unwind",
            "Avoid competitive situations when possible",
        ),
    ),
    "kapha": ConstitutionProfile(
        description=(
            "You have a Kapha-dominant constitution. Kapha is the energy of "
            "structure, composed of earth and water elements."
        ),
        recommendations=(
            "Eat light, warm, spicy foods",
            "Exercise regularly and vigorously",
            "Stay mentally stimulated and active",
            "Avoid heavy, oily foods",
            "Keep warm and dry",
            "Practice detachment and let go of possessions",
        ),
    ),
    "pitta-vata": ConstitutionProfile(
        description=(
            "You have a dual Vata-Pitta constitution. This combines the "
            "qualities of both doshas."
        ),
        recommendations=(
            "Balance routine with flexibility",
            "Eat warm, cooked, slightly cooling foods",
            "Practice both calming and cooling activities",
            "Manage stress through meditation and exercise",
            "Avoid extreme temperatures",
            "Maintain regular sleep patterns",
        ),
    ),
    "kapha-vata": ConstitutionProfile(
        description=(
            "You have a dual Vata-Kapha constitution. This creates an "
            "interesting dynamic between movement and stability."
        ),
        recommendations=(
            "Establish a very regular routine",
            "Eat warm, light, stimulating foods",
            "Exercise regularly but moderately",
            "Stay warm and avoid damp conditions",
            "Practice both energizing and calming activities",
            "Get adequate rest but avoid oversleeping",
        ),
    ),
    "kapha-pitta": ConstitutionProfile(
        description=(
            "You have a dual Pitta-Kapha constitution. This combines "
            "transformation with structure."
        ),
        recommendations=(
            "Eat cooling, light, non-spicy foods",
            "Exercise regularly to maintain balance",
            "Practice both cooling and energizing activities",
            "Avoid heavy, oily foods",
            "Manage anger through cooling practices",
            "Stay mentally stimulated but avoid overwork",
        ),
    ),
    TRIDOSHIC: ConstitutionProfile(
        description=(
            "You have a balanced Tridoshic constitution. All three doshas are "
            "relatively equal, giving you adaptability."
        ),
        recommendations=(
            "Follow seasonal routines and diet",
            "Maintain balance in all activities",
            "Eat a variety of fresh, whole foods",
            "Exercise moderately and regularly",
            "Practice stress management techniques",
            "Listen to your body's needs",
        ),
    ),
}


def validate_scores(scores: object) -> PrakritiScores:
    """Return the scores if they are well-formed, else raise InvalidProfileError."""
    if not isinstance(scores, PrakritiScores):
        raise InvalidProfileError("prakriti scores are required")
    for dosha in Dosha:
        value = scores.score(dosha)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidProfileError(f"{dosha.value} score must be a number")
        if not math.isfinite(value) or value < 0:
            raise InvalidProfileError(
                f"{dosha.value} score must be finite and non-negative"
            )
    return scores


def score_responses(responses: Mapping[str, Dosha | str]) -> PrakritiScores:
    """Sum questionnaire answers into raw scores using each question's weight.

    Unknown question ids are ignored. An answer that is not a dosha raises
    InvalidProfileError.
    """
    totals = dict.fromkeys(Dosha, 0.0)
    for question_id, answer in responses.items():
        weight = QUESTION_WEIGHTS.get(question_id)
        if weight is None:
            continue
        try:
            dosha = Dosha(str(answer).lower())
        except ValueError as exc:
            raise InvalidProfileError(
                f"Invalid answer for {question_id}: {answer!r}"
            ) from exc
        totals[dosha] += weight
    return PrakritiScores(
        vata=totals[Dosha.VATA],
        pitta=totals[Dosha.PITTA],
        kapha=totals[Dosha.KAPHA],
    )


def assess_prakriti(
    scores: PrakritiScores, threshold: float = DEFAULT_DOMINANT_THRESHOLD
) -> PrakritiAssessment:
    """Convert raw scores into percentages and a dominant dosha set.

    Every dosha whose rounded percentage reaches ``threshold`` is dominant.
    Two dominant doshas form a dual label such as ``pitta-vata`` and three
    form ``tridoshic``. All-zero scores produce no dominant dosha. The
    constitution's description and lifestyle recommendations are attached
    when a label exists.
    """
    validate_scores(scores)
    values = {dosha: float(scores.score(dosha)) for dosha in Dosha}
    total = sum(values.values())
    if total == 0:
        return PrakritiAssessment(
            percentages=dict.fromkeys(Dosha, 0),
            dominant=(),
            constitution=None,
            confidence=0,
        )
    if not math.isfinite(total):
        # Finite scores near the float limit overflow when summed.
        largest = max(values.values())
        values = {dosha: value / largest for dosha, value in values.items()}
        total = sum(values.values())

    percentages = {
        dosha: _round_half_up(value / total * 100) for dosha, value in values.items()
    }
    ranked = sorted(Dosha, key=lambda dosha: percentages[dosha], reverse=True)
    dominant = tuple(dosha for dosha in ranked if percentages[dosha] >= threshold)
    constitution = _constitution_label(dominant)
    profile = CONSTITUTION_PROFILES.get(constitution) if constitution else None
    return PrakritiAssessment(
        percentages=percentages,
        dominant=dominant,
        constitution=constitution,
        confidence=max(percentages.values()),
        description=profile.description if profile else "",
        recommendations=profile.recommendations if profile else (),
    )


def dominant_dosha(scores: PrakritiScores) -> Dosha | None:
    """Return the single highest-scoring dosha, or None for all-zero scores.

    Ties resolve in declaration order: vata, then pitta, then kapha.
    """
    validate_scores(scores)
    best: Dosha | None = None
    for dosha in Dosha:
        value = scores.score(dosha)
        if value > 0 and (best is None or value > scores.score(best)):
            best = dosha
    return best


def _constitution_label(dominant: tuple[Dosha, ...]) -> str | None:
    if not dominant:
        return None
    if len(dominant) == 1:
        return dominant[0].value
    if len(dominant) == _DUAL_DOSHA:
        return "-".join(sorted(dosha.value for dosha in dominant))
    return TRIDOSHIC


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
