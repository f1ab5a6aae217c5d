"""Diet plan generation service and JSON serialization."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime

from ayur_diet.domain.foods import FoodItem, NutritionFacts
from ayur_diet.domain.patients import PatientProfile
from ayur_diet.domain.plans import DietPlan, MealAssignment
from ayur_diet.domain.prakriti import PrakritiAssessment
from ayur_diet.services.catalogue import FoodCatalogue
from ayur_diet.services.prakriti import DEFAULT_DOMINANT_THRESHOLD
from ayur_diet.services.rules_engine import DEFAULT_PLAN_DAYS, generate_plan

_logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Return the current date in UTC."""
    return datetime.now(tz=UTC).date()


@dataclass
class DietPlanService:
    """Application service that feeds the rules engine."""

    catalogue: FoodCatalogue
    clock: Callable[[], date] = utc_today
    plan_days: int = DEFAULT_PLAN_DAYS
    dominant_threshold: float = DEFAULT_DOMINANT_THRESHOLD

    def generate(
        self, patient: PatientProfile, foods: list[FoodItem] | None = None
    ) -> DietPlan:
        """Generate a plan from the supplied foods or the configured catalogue."""
        catalogue = foods if foods is not None else self.catalogue.list_foods()
        plan = generate_plan(
            patient,
            catalogue,
            self.clock(),
            plan_days=self.plan_days,
            dominant_threshold=self.dominant_threshold,
        )
        _logger.info(
            "Generated diet plan: patient=%s dosha=%s foods=%s warnings=%s",
            patient.id,
            plan.dominant_dosha.value if plan.dominant_dosha else "none",
            sum(len(meal.foods) for meal in plan.meals),
            len(plan.warnings),
        )
        return plan

    def list_foods(self) -> list[FoodItem]:
        """Return the configured catalogue."""
        return self.catalogue.list_foods()


def serialize_plan(plan: DietPlan) -> dict[str, object]:
    """Return a JSON-ready representation of a plan."""
    patient = plan.patient
    return {
        "id": str(plan.id),
        "patient": {
            "id": patient.id,
            "name": patient.name,
            "prakriti": {
                "vata": patient.prakriti.vata,
                "pitta": patient.prakriti.pitta,
                "kapha": patient.prakriti.kapha,
            },
            "goals": list(patient.goals),
            "allergies": list(patient.allergies),
            "chronicConditions": list(patient.chronic_conditions),
        },
        "name": plan.name,
        "description": plan.description,
        "startDate": plan.start_date.isoformat(),
        "endDate": plan.end_date.isoformat(),
        "dominantDosha": plan.dominant_dosha.value if plan.dominant_dosha else None,
        "meals": [_serialize_meal(meal) for meal in plan.meals],
        "rationale": {
            "ayurvedic": plan.rationale.ayurvedic,
            "nutritional": plan.rationale.nutritional,
            "lifestyle": plan.rationale.lifestyle,
        },
        **_serialize_totals(plan.nutrition),
        "warnings": list(plan.warnings),
        "recommendations": list(plan.recommendations),
    }


def serialize_food(food: FoodItem) -> dict[str, object]:
    """Return a JSON-ready representation of a catalogue food."""
    return {
        "id": food.id,
        "name": food.name,
        "servingSize": food.serving_size,
        "calories": food.nutrition.calories,
        "protein": food.nutrition.protein,
        "fat": food.nutrition.fat,
        "carbs": food.nutrition.carbs,
        "fiber": food.nutrition.fiber,
        "vataEffect": str(food.vata_effect),
        "pittaEffect": str(food.pitta_effect),
        "kaphaEffect": str(food.kapha_effect),
        "potency": str(food.potency),
        "taste": list(food.tastes),
        "quality": list(food.qualities),
        "contraindications": list(food.contraindications),
    }


def serialize_assessment(assessment: PrakritiAssessment) -> dict[str, object]:
    """Return a JSON-ready representation of a prakriti assessment."""
    return {
        **{dosha.value: value for dosha, value in assessment.percentages.items()},
        "dominant": [dosha.value for dosha in assessment.dominant],
        "constitution": assessment.constitution,
        "confidence": assessment.confidence,
        "description": assessment.description,
        "recommendations": list(assessment.recommendations),
    }


def _serialize_meal(meal: MealAssignment) -> dict[str, object]:
    return {
        "name": meal.slot.name,
        "time": meal.slot.time,
        "foods": [
            {
                "food": serialize_food(item.food),
                "quantity": item.quantity,
                "notes": item.notes,
            }
            for item in meal.foods
        ],
        "rationale": meal.rationale,
        **_serialize_totals(meal.nutrition),
    }


def _serialize_totals(nutrition: NutritionFacts) -> dict[str, float]:
    return {
        "totalCalories": nutrition.calories,
        "totalProtein": nutrition.protein,
        "totalFat": nutrition.fat,
        "totalCarbs": nutrition.carbs,
        "totalFiber": nutrition.fiber,
    }
