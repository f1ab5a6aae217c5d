"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from ayur_diet.api.schemas import (
    GeneratePlanRequest,
    PrakritiPayload,
    QuestionnairePayload,
)
from ayur_diet.app_logging import configure_logging
from ayur_diet.containers import AppContainer
from ayur_diet.domain.prakriti import Dosha
from ayur_diet.errors import InvalidProfileError
from ayur_diet.services.plans import (
    serialize_assessment,
    serialize_food,
    serialize_plan,
)
from ayur_diet.services.prakriti import assess_prakriti, score_responses


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, object]:
        """Return the food catalogue."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.diet_plan_service.list_foods()
        return {"foods": [serialize_food(food) for food in foods]}

    @app.post("/prakriti/assess")
    async def assess(payload: PrakritiPayload, request: Request) -> dict[str, object]:
        """Score a prakriti profile."""
        state_container: AppContainer = request.app.state.container
        assessment = assess_prakriti(
            payload.to_domain(),
            threshold=state_container.settings.dominant_threshold_percent,
        )
        return serialize_assessment(assessment)

    @app.post("/prakriti/questionnaire")
    async def assess_questionnaire(
        payload: QuestionnairePayload, request: Request
    ) -> dict[str, object]:
        """Score questionnaire answers and assess the resulting prakriti."""
        state_container: AppContainer = request.app.state.container
        scores = score_responses(payload.responses)
        assessment = assess_prakriti(
            scores, threshold=state_container.settings.dominant_threshold_percent
        )
        return {
            **serialize_assessment(assessment),
            "scores": {dosha.value: scores.score(dosha) for dosha in Dosha},
        }

    @app.post("/diet-plans/generate")
    async def generate_diet_plan(
        payload: GeneratePlanRequest, request: Request
    ) -> dict[str, object]:
        """Generate a diet plan for a patient."""
        state_container: AppContainer = request.app.state.container
        foods = (
            [food.to_domain() for food in payload.foods]
            if payload.foods is not None
            else None
        )
        try:
            plan = state_container.diet_plan_service.generate(
                payload.patient.to_domain(), foods
            )
        except InvalidProfileError as exc:
            logger.warning("Rejected patient profile %s: %s", payload.patient.id, exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return serialize_plan(plan)

    return app
