"""Domain models for generated diet plans."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from ayur_diet.domain.foods import FoodItem, NutritionFacts
from ayur_diet.domain.patients import PatientProfile
from ayur_diet.domain.prakriti import Dosha


@dataclass(frozen=True)
class MealSlot:
    """A fixed position in the daily meal schedule."""

    name: str
    time: str


EARLY_MORNING = MealSlot(name="Early Morning", time="6:00 AM")
BREAKFAST = MealSlot(name="Breakfast", time="8:00 AM")
MID_MORNING = MealSlot(name="Mid-Morning", time="11:00 AM")
LUNCH = MealSlot(name="Lunch", time="1:00 PM")
EVENING_SNACK = MealSlot(name="Evening Snack", time="4:30 PM")
DINNER = MealSlot(name="Dinner", time="7:00 PM")

MEAL_TEMPLATE: tuple[MealSlot, ...] = (
    EARLY_MORNING,
    BREAKFAST,
    MID_MORNING,
    LUNCH,
    EVENING_SNACK,
    DINNER,
)


@dataclass(frozen=True)
class MealFood:
    """A food placed in a meal with a display quantity."""

    food: FoodItem
    quantity: str
    notes: str | None = None


@dataclass(frozen=True)
class MealAssignment:
    """Foods selected for one meal slot."""

    slot: MealSlot
    foods: tuple[MealFood, ...]
    rationale: str
    nutrition: NutritionFacts


@dataclass(frozen=True)
class PlanRationale:
    """Prose explaining a plan."""

    ayurvedic: str
    nutritional: str
    lifestyle: str


@dataclass(frozen=True)
class DietPlan:
    """A generated daily diet plan for a patient."""

    id: UUID
    patient: PatientProfile
    name: str
    description: str
    start_date: date
    end_date: date
    dominant_dosha: Dosha | None
    meals: tuple[MealAssignment, ...]
    rationale: PlanRationale
    nutrition: NutritionFacts
    warnings: tuple[str, ...]
    recommendations: tuple[str, ...]
