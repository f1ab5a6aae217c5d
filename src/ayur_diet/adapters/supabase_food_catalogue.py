"""Supabase-backed food catalogue."""

import json
from dataclasses import dataclass

from supabase import Client

from ayur_diet.domain.foods import DoshaEffect, FoodItem, NutritionFacts, Potency
from ayur_diet.errors import InvalidCatalogueError
from ayur_diet.services.catalogue import FoodCatalogue


@dataclass
class SupabaseFoodCatalogue(FoodCatalogue):
    """Read-only catalogue stored in a Supabase table."""

    client: Client
    table: str = "food_items"

    def list_foods(self) -> list[FoodItem]:
        """Return every catalogue row ordered by name."""
        response = self.client.table(self.table).select("*").order("name").execute()
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a catalogue row into a domain model."""
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        serving_size=str(row.get("serving_size") or ""),
        nutrition=NutritionFacts(
            calories=float(row.get("calories") or 0.0),
            protein=float(row.get("protein") or 0.0),
            fat=float(row.get("fat") or 0.0),
            carbs=float(row.get("carbs") or 0.0),
            fiber=float(row.get("fiber") or 0.0),
        ),
        vata_effect=_parse_effect(row.get("vata_effect"), "vata_effect"),
        pitta_effect=_parse_effect(row.get("pitta_effect"), "pitta_effect"),
        kapha_effect=_parse_effect(row.get("kapha_effect"), "kapha_effect"),
        potency=_parse_potency(row.get("potency")),
        tastes=_parse_text_list(row.get("taste")),
        qualities=_parse_text_list(row.get("quality")),
        contraindications=_parse_text_list(row.get("contraindications")),
    )


def _parse_effect(raw: object, column: str) -> DoshaEffect:
    if raw is None:
        return DoshaEffect.NEUTRAL
    try:
        return DoshaEffect(str(raw).upper())
    except ValueError as exc:
        raise InvalidCatalogueError(f"Invalid {column} value: {raw!r}") from exc


def _parse_potency(raw: object) -> Potency:
    if raw is None:
        return Potency.NEUTRAL
    try:
        return Potency(str(raw).upper())
    except ValueError as exc:
        raise InvalidCatalogueError(f"Invalid potency value: {raw!r}") from exc


def _parse_text_list(raw: object) -> tuple[str, ...]:
    """Accept a text[] column or a JSON-encoded string array."""
    if raw is None or raw == "":
        return ()
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidCatalogueError(f"Invalid list value: {raw!r}") from exc
    if not isinstance(raw, list):
        raise InvalidCatalogueError(f"Invalid list value: {raw!r}")
    return tuple(str(item) for item in raw)
