"""Domain models for the food catalogue."""

from dataclasses import dataclass
from enum import StrEnum

from ayur_diet.domain.prakriti import Dosha


class DoshaEffect(StrEnum):
    """Effect of a food on a single dosha."""

    PACIFIES = "PACIFIES"
    NEUTRAL = "NEUTRAL"
    AGGRAVATES = "AGGRAVATES"


class Potency(StrEnum):
    """Thermal classification (virya) of a food."""

    HEATING = "HEATING"
    COOLING = "COOLING"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition values for one serving, or a sum of servings."""

    calories: float
    protein: float
    fat: float
    carbs: float
    fiber: float

    @classmethod
    def zero(cls) -> "NutritionFacts":
        return cls(calories=0, protein=0, fat=0, carbs=0, fiber=0)

    def plus(self, other: "NutritionFacts") -> "NutritionFacts":
        """Return the field-wise sum of two nutrition records."""
        return NutritionFacts(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            fat=self.fat + other.fat,
            carbs=self.carbs + other.carbs,
            fiber=self.fiber + other.fiber,
        )


@dataclass(frozen=True)
class FoodItem:
    """Catalogue entry with nutrition and Ayurvedic properties."""

    id: str
    name: str
    serving_size: str
    nutrition: NutritionFacts
    vata_effect: DoshaEffect
    pitta_effect: DoshaEffect
    kapha_effect: DoshaEffect
    potency: Potency
    tastes: tuple[str, ...] = ()
    qualities: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()

    def effect_on(self, dosha: Dosha) -> DoshaEffect:
        """Return the food's effect on the given dosha."""
        return getattr(self, f"{dosha.value}_effect")

    def has_quality(self, quality: str) -> bool:
        return quality.upper() in {item.upper() for item in self.qualities}
