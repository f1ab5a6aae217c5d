"""Food catalogue interfaces and the built-in reference catalogue."""

from dataclasses import dataclass, field
from typing import Protocol

from ayur_diet.domain.foods import DoshaEffect, FoodItem, NutritionFacts, Potency


class FoodCatalogue(Protocol):
    """Source of food items for plan generation."""

    def list_foods(self) -> list[FoodItem]:
        """Return every food in the catalogue."""


@dataclass
class StaticFoodCatalogue(FoodCatalogue):
    """Catalogue backed by an in-memory list."""

    foods: list[FoodItem] = field(default_factory=list)

    def list_foods(self) -> list[FoodItem]:
        return list(self.foods)


def _food(  # noqa: PLR0913
    food_id: str,
    name: str,
    serving_size: str,
    macros: tuple[float, float, float, float, float],
    effects: tuple[DoshaEffect, DoshaEffect, DoshaEffect],
    potency: Potency,
    tastes: tuple[str, ...],
    qualities: tuple[str, ...],
    contraindications: tuple[str, ...],
) -> FoodItem:
    calories, protein, fat, carbs, fiber = macros
    vata, pitta, kapha = effects
    return FoodItem(
        id=food_id,
        name=name,
        serving_size=serving_size,
        nutrition=NutritionFacts(
            calories=calories, protein=protein, fat=fat, carbs=carbs, fiber=fiber
        ),
        vata_effect=vata,
        pitta_effect=pitta,
        kapha_effect=kapha,
        potency=potency,
        tastes=tastes,
        qualities=qualities,
        contraindications=contraindications,
    )


_P = DoshaEffect.PACIFIES
_N = DoshaEffect.NEUTRAL
_A = DoshaEffect.AGGRAVATES

REFERENCE_FOODS: tuple[FoodItem, ...] = (
    _food(
        "1",
        "Basmati Rice",
        "1 cup (185g cooked)",
        (205, 4.3, 0.4, 45, 0.6),
        (_P, _N, _A),
        Potency.COOLING,
        ("SWEET",),
        ("LIGHT", "DRY"),
        ("kapha imbalance", "obesity", "diabetes"),
    ),
    _food(
        "2",
        "Mung Dal",
        "1 cup (202g cooked)",
        (212, 14.2, 0.8, 38.7, 15.4),
        (_P, _P, _N),
        Potency.COOLING,
        ("SWEET", "ASTRINGENT"),
        ("LIGHT", "DRY"),
        ("high vata (when unsprouted)",),
    ),
    _food(
        "3",
        "Ghee",
        "1 tbsp (15g)",
        (135, 0, 15, 0, 0),
        (_P, _P, _N),
        Potency.COOLING,
        ("SWEET",),
        ("HEAVY", "OILY", "SMOOTH"),
        ("high cholesterol", "obesity", "kapha imbalance"),
    ),
    _food(
        "4",
        "Ginger",
        "1 inch piece (10g)",
        (8, 0.2, 0.1, 1.8, 0.2),
        (_P, _A, _P),
        Potency.HEATING,
        ("PUNGENT",),
        ("LIGHT", "DRY", "SHARP", "HOT"),
        ("pitta imbalance", "bleeding disorders", "high fever"),
    ),
    _food(
        "5",
        "Turmeric",
        "1 tsp (3g)",
        (9, 0.3, 0.1, 1.7, 0.6),
        (_P, _A, _P),
        Potency.HEATING,
        ("BITTER", "ASTRINGENT", "PUNGENT"),
        ("LIGHT", "DRY"),
        ("pitta imbalance", "bleeding disorders", "pregnancy (high doses)"),
    ),
    _food(
        "6",
        "Coconut Water",
        "1 cup (240ml)",
        (46, 1.7, 0.5, 8.9, 2.6),
        (_P, _P, _A),
        Potency.COOLING,
        ("SWEET",),
        ("LIGHT", "OILY", "COOL"),
        ("kapha imbalance", "cough", "cold"),
    ),
    _food(
        "7",
        "Almonds",
        "1 oz (28g, about 23 nuts)",
        (164, 6, 14, 6, 3.5),
        (_P, _N, _A),
        Potency.HEATING,
        ("SWEET",),
        ("HEAVY", "OILY"),
        ("kapha imbalance", "obesity", "high ama"),
    ),
    _food(
        "8",
        "Spinach",
        "1 cup cooked (180g)",
        (41, 5.4, 0.5, 6.8, 4.3),
        (_A, _P, _P),
        Potency.COOLING,
        ("SWEET", "ASTRINGENT", "BITTER"),
        ("LIGHT", "DRY", "COOL"),
        ("vata imbalance", "kidney stones", "thyroid disorders"),
    ),
)


def reference_catalogue() -> StaticFoodCatalogue:
    """Return a catalogue holding the reference foods."""
    return StaticFoodCatalogue(list(REFERENCE_FOODS))
