"""Rule-based Ayurvedic diet-plan generator.

The generator is a pure function of its inputs: a patient profile, a food
catalogue and the generation date. It filters the catalogue against the
patient's allergies, chronic conditions and dominant dosha, fills the fixed
six-slot meal template from the remaining foods and attaches rationale,
warnings and recommendations.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID, uuid5

from ayur_diet.domain.foods import DoshaEffect, FoodItem, NutritionFacts, Potency
from ayur_diet.domain.patients import PatientProfile
from ayur_diet.domain.plans import (
    BREAKFAST,
    DINNER,
    EARLY_MORNING,
    EVENING_SNACK,
    LUNCH,
    MID_MORNING,
    DietPlan,
    MealAssignment,
    MealFood,
    MealSlot,
    PlanRationale,
)
from ayur_diet.domain.prakriti import Dosha
from ayur_diet.errors import InvalidProfileError
from ayur_diet.services.prakriti import (
    DEFAULT_DOMINANT_THRESHOLD,
    assess_prakriti,
    dominant_dosha,
    validate_scores,
)

DEFAULT_PLAN_DAYS = 30
PROTEIN_SOURCE_MIN_G = 5.0

ACIDITY_WARNING = "Avoid spicy foods and large meals"
ACIDITY_RECOMMENDATION = "Eat slowly and chew thoroughly"
DOSHA_RECOMMENDATIONS: dict[Dosha, tuple[str, ...]] = {
    Dosha.VATA: ("Maintain regular meal times", "Include warm, cooked foods"),
    Dosha.PITTA: (
        "Include cooling foods like coconut water",
        "Avoid excessive heating spices",
    ),
    Dosha.KAPHA: ("Make lunch the largest meal", "Include light, stimulating spices"),
}
GENERAL_RECOMMENDATIONS: tuple[str, ...] = (
    "Drink warm water throughout the day",
    "Eat in a calm environment",
    "Allow 3-4 hours between meals",
    "Avoid eating 2-3 hours before bedtime",
)

_PLAN_NAMESPACE = UUID("6f1c1a52-3a0e-4a47-9d59-8f3b0c6a2e11")

FoodFilter = Callable[[FoodItem], bool]


def is_heating(food: FoodItem) -> bool:
    return food.potency == Potency.HEATING


def is_cooling(food: FoodItem) -> bool:
    return food.potency == Potency.COOLING


def is_light(food: FoodItem) -> bool:
    return food.has_quality("LIGHT")


def is_oily(food: FoodItem) -> bool:
    return food.has_quality("OILY")


def is_vata_pacifying_protein(food: FoodItem) -> bool:
    return (
        food.vata_effect == DoshaEffect.PACIFIES
        and food.nutrition.protein >= PROTEIN_SOURCE_MIN_G
    )


@dataclass(frozen=True)
class MealPick:
    """One food position in a meal archetype.

    ``preferred`` names the archetype food. When it is missing from the
    suitable pool the first pool food passing ``fallback`` is used instead,
    and failing that the first pool food not already in the meal.
    """

    preferred: str
    quantity: str
    notes: str
    fallback: FoodFilter


@dataclass(frozen=True)
class MealArchetype:
    """Food-selection heuristic for a meal slot."""

    slot: MealSlot
    picks: tuple[MealPick, ...]
    rationale: str


MEAL_ARCHETYPES: tuple[MealArchetype, ...] = (
    MealArchetype(
        slot=EARLY_MORNING,
        picks=(
            MealPick(
                "Ginger",
                "1 inch piece",
                "Warm water with ginger for digestion",
                is_heating,
            ),
        ),
        rationale="Stimulates digestion and balances morning dosha",
    ),
    MealArchetype(
        slot=BREAKFAST,
        picks=(
            MealPick(
                "Mung Dal", "1 cup", "Light and protein-rich", is_vata_pacifying_protein
            ),
            MealPick("Ghee", "1 tsp", "For nourishment and digestion", is_oily),
        ),
        rationale="Provides sustained energy without aggravating dominant dosha",
    ),
    MealArchetype(
        slot=MID_MORNING,
        picks=(MealPick("Coconut Water", "1 cup", "Hydrating and cooling", is_cooling),),
        rationale="Maintains hydration and electrolyte balance",
    ),
    MealArchetype(
        slot=LUNCH,
        picks=(
            MealPick("Basmati Rice", "1 cup", "Easy to digest", is_cooling),
            MealPick(
                "Spinach", "1 cup cooked", "Rich in iron and nutrients", is_cooling
            ),
            MealPick("Turmeric", "1 tsp", "Anti-inflammatory properties", is_light),
        ),
        rationale="Balanced meal with all six tastes for optimal digestion",
    ),
    MealArchetype(
        slot=EVENING_SNACK,
        picks=(
            MealPick(
                "Almonds",
                "10 almonds",
                "Soaked overnight for better digestion",
                is_oily,
            ),
        ),
        rationale="Provides healthy fats and sustained energy",
    ),
    MealArchetype(
        slot=DINNER,
        picks=(
            MealPick("Mung Dal", "3/4 cup", "Light soup for easy digestion", is_light),
            MealPick("Ginger", "1/2 inch", "Aids digestion", is_light),
        ),
        rationale="Light meal to promote good sleep and digestion",
    ),
)


def generate_plan(
    patient: PatientProfile,
    catalogue: Iterable[FoodItem],
    generated_on: date,
    *,
    plan_days: int = DEFAULT_PLAN_DAYS,
    dominant_threshold: float = DEFAULT_DOMINANT_THRESHOLD,
) -> DietPlan:
    """Generate a personalized daily diet plan.

    Raises InvalidProfileError when the patient record itself is malformed.
    Empty catalogues, zero scores and missing archetype foods never raise.
    """
    _validate_patient(patient)
    start_date = _as_date(generated_on)
    if plan_days < 0:
        raise ValueError("plan_days must be non-negative")

    dosha = dominant_dosha(patient.prakriti)
    assessment = assess_prakriti(patient.prakriti, dominant_threshold)
    foods = [food for food in catalogue if isinstance(food, FoodItem)]
    suitable = filter_foods(patient, foods, dosha)

    meals = tuple(assemble_meal(archetype, suitable) for archetype in MEAL_ARCHETYPES)
    totals = NutritionFacts.zero()
    for meal in meals:
        totals = totals.plus(meal.nutrition)

    warnings, recommendations = _warnings_and_recommendations(
        patient, assessment.dominant
    )
    return DietPlan(
        id=plan_id(patient.id, start_date),
        patient=patient,
        name=f"{patient.name}'s Personalized Diet Plan",
        description=_describe(patient, dosha),
        start_date=start_date,
        end_date=start_date + timedelta(days=plan_days),
        dominant_dosha=dosha,
        meals=meals,
        rationale=_build_rationale(patient, dosha),
        nutrition=totals,
        warnings=warnings,
        recommendations=recommendations,
    )


def filter_foods(
    patient: PatientProfile, foods: Iterable[FoodItem], dosha: Dosha | None
) -> list[FoodItem]:
    """Return the foods that are safe for the patient, preserving order."""
    allergies = _terms(patient.allergies)
    conditions = _terms(patient.chronic_conditions)
    return [
        food for food in foods if _is_suitable(food, allergies, conditions, dosha)
    ]


def assemble_meal(archetype: MealArchetype, pool: Sequence[FoodItem]) -> MealAssignment:
    """Fill a meal slot from the suitable pool using the archetype picks."""
    chosen: list[MealFood] = []
    taken: list[FoodItem] = []
    for pick in archetype.picks:
        food = _resolve_pick(pick, pool, taken)
        if food is None:
            continue
        taken.append(food)
        if food.name.strip().lower() == pick.preferred.lower():
            notes = pick.notes
        else:
            notes = f"In place of {pick.preferred}"
        chosen.append(MealFood(food=food, quantity=pick.quantity, notes=notes))

    nutrition = NutritionFacts.zero()
    for item in chosen:
        nutrition = nutrition.plus(item.food.nutrition)
    return MealAssignment(
        slot=archetype.slot,
        foods=tuple(chosen),
        rationale=archetype.rationale,
        nutrition=nutrition,
    )


def plan_id(patient_id: str, generated_on: date) -> UUID:
    """Return a stable plan id for a patient and generation date."""
    return uuid5(_PLAN_NAMESPACE, f"{patient_id}:{generated_on.isoformat()}")


def _resolve_pick(
    pick: MealPick, pool: Sequence[FoodItem], taken: list[FoodItem]
) -> FoodItem | None:
    candidates = [food for food in pool if food not in taken]
    preferred = pick.preferred.lower()
    for food in candidates:
        if food.name.strip().lower() == preferred:
            return food
    for food in candidates:
        if pick.fallback(food):
            return food
    return candidates[0] if candidates else None


def _is_suitable(
    food: FoodItem,
    allergies: list[str],
    conditions: list[str],
    dosha: Dosha | None,
) -> bool:
    name = food.name.lower()
    if any(term in name for term in allergies):
        return False
    contraindications = [entry.lower() for entry in food.contraindications]
    if any(term in entry for term in conditions for entry in contraindications):
        return False
    return dosha is None or food.effect_on(dosha) != DoshaEffect.AGGRAVATES


def _build_rationale(patient: PatientProfile, dosha: Dosha | None) -> PlanRationale:
    goals = _clean(patient.goals)
    balance = f"{dosha.value} dosha" if dosha else "all three doshas"
    support = (
        f"the patient's goals: {', '.join(goals)}"
        if goals
        else "the patient's overall wellbeing"
    )
    return PlanRationale(
        ayurvedic=(
            f"This plan is designed to balance {balance} while supporting {support}. "
            "The food combinations are selected to provide all six tastes (rasa) "
            "and optimize digestion (agni)."
        ),
        nutritional=(
            "The plan provides balanced macronutrients with adequate protein for "
            "tissue repair, complex carbohydrates for sustained energy, and healthy "
            "fats for hormone production. Total daily calories are adjusted to "
            "support the patient's goals."
        ),
        lifestyle=(
            "Meal timing is aligned with natural circadian rhythms and digestive "
            "fire cycles. Food preparation methods are chosen to enhance "
            "digestibility and nutrient absorption."
        ),
    )


def _warnings_and_recommendations(
    patient: PatientProfile, dominant: tuple[Dosha, ...]
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    warnings: list[str] = []
    recommendations: list[str] = []

    if any("acidity" in condition for condition in _terms(patient.chronic_conditions)):
        warnings.append(ACIDITY_WARNING)
        recommendations.append(ACIDITY_RECOMMENDATION)

    for dosha in Dosha:
        if dosha in dominant:
            recommendations.extend(DOSHA_RECOMMENDATIONS[dosha])

    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return tuple(warnings), tuple(recommendations)


def _describe(patient: PatientProfile, dosha: Dosha | None) -> str:
    balancing = dosha.value if dosha else "dosha"
    goals = _clean(patient.goals)
    if not goals:
        return f"A {balancing}-balancing diet plan"
    return f"A {balancing}-balancing diet plan for {' and '.join(goals)}"


def _validate_patient(patient: object) -> None:
    if not isinstance(patient, PatientProfile):
        raise InvalidProfileError("patient profile is required")
    if not isinstance(patient.name, str):
        raise InvalidProfileError("patient name must be a string")
    validate_scores(patient.prakriti)
    for field_name in ("goals", "allergies", "chronic_conditions"):
        values = getattr(patient, field_name)
        if not isinstance(values, (list, tuple)):
            raise InvalidProfileError(f"{field_name} must be a list of strings")
        if not all(isinstance(value, str) for value in values):
            raise InvalidProfileError(f"{field_name} must contain only strings")


def _as_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError("generated_on must be a date")


def _clean(values: Iterable[str]) -> list[str]:
    return [value.strip() for value in values if value.strip()]


def _terms(values: Iterable[str]) -> list[str]:
    return [value.lower() for value in _clean(values)]
