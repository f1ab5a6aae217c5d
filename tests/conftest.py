"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from ayur_diet.config import Settings
from ayur_diet.containers import AppContainer
from ayur_diet.domain.foods import DoshaEffect, FoodItem, NutritionFacts, Potency
from ayur_diet.domain.patients import PatientProfile
from ayur_diet.domain.prakriti import PrakritiScores
from ayur_diet.services.catalogue import REFERENCE_FOODS, StaticFoodCatalogue
from ayur_diet.services.plans import DietPlanService

GENERATION_DATE = date(2024, 1, 15)


@dataclass
class FixedClock:
    """Clock returning a fixed date and counting calls."""

    today: date = GENERATION_DATE
    calls: int = 0

    def __call__(self) -> date:
        self.calls += 1
        return self.today


@dataclass
class CountingCatalogue(StaticFoodCatalogue):
    """Static catalogue that records how often it was read."""

    reads: int = 0
    foods: list[FoodItem] = field(default_factory=lambda: list(REFERENCE_FOODS))

    def list_foods(self) -> list[FoodItem]:
        self.reads += 1
        return super().list_foods()


def make_food(  # noqa: PLR0913
    name: str,
    *,
    food_id: str | None = None,
    calories: float = 100,
    protein: float = 1,
    vata: DoshaEffect = DoshaEffect.NEUTRAL,
    pitta: DoshaEffect = DoshaEffect.NEUTRAL,
    kapha: DoshaEffect = DoshaEffect.NEUTRAL,
    potency: Potency = Potency.NEUTRAL,
    qualities: tuple[str, ...] = (),
    contraindications: tuple[str, ...] = (),
) -> FoodItem:
    return FoodItem(
        id=food_id or name.lower().replace(" ", "-"),
        name=name,
        serving_size="1 serving",
        nutrition=NutritionFacts(
            calories=calories, protein=protein, fat=1, carbs=10, fiber=0.5
        ),
        vata_effect=vata,
        pitta_effect=pitta,
        kapha_effect=kapha,
        potency=potency,
        qualities=qualities,
        contraindications=contraindications,
    )


def make_patient(  # noqa: PLR0913
    *,
    vata: float = 45,
    pitta: float = 35,
    kapha: float = 20,
    goals: tuple[str, ...] = ("Weight Loss", "Improve Digestion"),
    allergies: tuple[str, ...] = ("Peanuts",),
    chronic_conditions: tuple[str, ...] = ("Acidity",),
    name: str = "Ravi Sharma",
) -> PatientProfile:
    return PatientProfile(
        id="patient-1",
        name=name,
        prakriti=PrakritiScores(vata=vata, pitta=pitta, kapha=kapha),
        goals=goals,
        allergies=allergies,
        chronic_conditions=chronic_conditions,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(supabase_url=None, supabase_service_key=None)


@pytest.fixture
def patient() -> PatientProfile:
    return make_patient()


@pytest.fixture
def catalogue() -> CountingCatalogue:
    return CountingCatalogue()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def container(
    settings: Settings, catalogue: CountingCatalogue, clock: FixedClock
) -> AppContainer:
    diet_plan_service = DietPlanService(
        catalogue=catalogue,
        clock=clock,
        plan_days=settings.plan_duration_days,
        dominant_threshold=settings.dominant_threshold_percent,
    )
    return AppContainer(
        settings=settings,
        food_catalogue=catalogue,
        diet_plan_service=diet_plan_service,
    )
