"""Pydantic models for API request payloads."""

from pydantic import BaseModel, ConfigDict, Field

from ayur_diet.domain.foods import DoshaEffect, FoodItem, NutritionFacts, Potency
from ayur_diet.domain.patients import PatientProfile
from ayur_diet.domain.prakriti import Dosha, PrakritiScores


class PrakritiPayload(BaseModel):
    """Raw dosha scores."""

    vata: float = Field(ge=0, allow_inf_nan=False)
    pitta: float = Field(ge=0, allow_inf_nan=False)
    kapha: float = Field(ge=0, allow_inf_nan=False)

    def to_domain(self) -> PrakritiScores:
        return PrakritiScores(vata=self.vata, pitta=self.pitta, kapha=self.kapha)


class QuestionnairePayload(BaseModel):
    """Questionnaire answers keyed by question id."""

    responses: dict[str, Dosha]


class PatientPayload(BaseModel):
    """Patient profile as sent by the onboarding layer."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    prakriti: PrakritiPayload
    goals: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    chronic_conditions: list[str] = Field(
        default_factory=list, alias="chronicConditions"
    )

    def to_domain(self) -> PatientProfile:
        return PatientProfile(
            id=self.id,
            name=self.name,
            prakriti=self.prakriti.to_domain(),
            goals=tuple(self.goals),
            allergies=tuple(self.allergies),
            chronic_conditions=tuple(self.chronic_conditions),
        )


class FoodPayload(BaseModel):
    """Food catalogue record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    serving_size: str = Field(default="", alias="servingSize")
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    fat: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fiber: float = Field(default=0, ge=0)
    vata_effect: DoshaEffect = Field(alias="vataEffect")
    pitta_effect: DoshaEffect = Field(alias="pittaEffect")
    kapha_effect: DoshaEffect = Field(alias="kaphaEffect")
    potency: Potency = Potency.NEUTRAL
    taste: list[str] = Field(default_factory=list)
    quality: list[str] = Field(default_factory=list)
    contraindications: list[str] = Field(default_factory=list)

    def to_domain(self) -> FoodItem:
        return FoodItem(
            id=self.id,
            name=self.name,
            serving_size=self.serving_size,
            nutrition=NutritionFacts(
                calories=self.calories,
                protein=self.protein,
                fat=self.fat,
                carbs=self.carbs,
                fiber=self.fiber,
            ),
            vata_effect=self.vata_effect,
            pitta_effect=self.pitta_effect,
            kapha_effect=self.kapha_effect,
            potency=self.potency,
            tastes=tuple(self.taste),
            qualities=tuple(self.quality),
            contraindications=tuple(self.contraindications),
        )


class GeneratePlanRequest(BaseModel):
    """Request body for plan generation."""

    patient: PatientPayload
    foods: list[FoodPayload] | None = None
