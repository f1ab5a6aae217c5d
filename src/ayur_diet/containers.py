"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from ayur_diet.adapters.supabase_food_catalogue import SupabaseFoodCatalogue
from ayur_diet.config import Settings
from ayur_diet.services.catalogue import FoodCatalogue, reference_catalogue
from ayur_diet.services.plans import DietPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalogue: FoodCatalogue
    diet_plan_service: DietPlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Without Supabase credentials the built-in reference catalogue is used.
    """
    resolved_settings = settings or Settings()
    catalogue: FoodCatalogue
    if resolved_settings.supabase_enabled:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        catalogue = SupabaseFoodCatalogue(
            supabase_client, table=resolved_settings.food_table
        )
    else:
        catalogue = reference_catalogue()
    diet_plan_service = DietPlanService(
        catalogue=catalogue,
        plan_days=resolved_settings.plan_duration_days,
        dominant_threshold=resolved_settings.dominant_threshold_percent,
    )
    return AppContainer(
        settings=resolved_settings,
        food_catalogue=catalogue,
        diet_plan_service=diet_plan_service,
    )
