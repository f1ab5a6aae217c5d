"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from ayur_diet.api.app import create_app
from ayur_diet.errors import InvalidProfileError

RAVI = {
    "id": "1",
    "name": "Ravi Sharma",
    "prakriti": {"vata": 45, "pitta": 35, "kapha": 20},
    "goals": ["Weight Loss", "Improve Digestion"],
    "allergies": ["Peanuts"],
    "chronicConditions": ["Acidity"],
}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_foods(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/foods")

    assert response.status_code == 200
    foods = response.json()["foods"]
    assert len(foods) == 8
    assert foods[0]["name"] == "Basmati Rice"
    assert foods[0]["kaphaEffect"] == "AGGRAVATES"


def test_assess_prakriti(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/prakriti/assess", json={"vata": 20, "pitta": 60, "kapha": 20}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["dominant"] == ["pitta"]
    assert data["constitution"] == "pitta"
    assert data["description"].startswith("You have a Pitta-dominant constitution")
    assert data["recommendations"][0] == "Eat cooling, non-spicy foods"


def test_assess_prakriti_rejects_infinite_scores(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/prakriti/assess",
        content='{"vata": Infinity, "pitta": 35, "kapha": 20}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422


def test_questionnaire_weights_answers(container) -> None:
    client = TestClient(create_app(container))
    responses = {
        "physical_frame": "vata",
        "appetite": "pitta",
        "sleep_pattern": "pitta",
        "stress_response": "kapha",
        "unknown_question": "kapha",
    }

    response = client.post("/prakriti/questionnaire", json={"responses": responses})

    assert response.status_code == 200
    data = response.json()
    assert data["scores"] == {"vata": 1.0, "pitta": 3.0, "kapha": 1.5}
    assert (data["vata"], data["pitta"], data["kapha"]) == (18, 55, 27)
    assert data["dominant"] == ["pitta"]
    assert data["constitution"] == "pitta"


def test_questionnaire_rejects_unknown_dosha(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/prakriti/questionnaire", json={"responses": {"appetite": "agni"}}
    )

    assert response.status_code == 422


def test_generate_plan_from_catalogue(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/diet-plans/generate", json={"patient": RAVI})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Ravi Sharma's Personalized Diet Plan"
    assert data["startDate"] == "2024-01-15"
    assert [meal["name"] for meal in data["meals"]] == [
        "Early Morning",
        "Breakfast",
        "Mid-Morning",
        "Lunch",
        "Evening Snack",
        "Dinner",
    ]
    served = [food["food"]["name"] for meal in data["meals"] for food in meal["foods"]]
    assert "Spinach" not in served
    assert "Avoid spicy foods and large meals" in data["warnings"]
    assert "Eat in a calm environment" in data["recommendations"]


def test_generate_plan_with_supplied_foods(container) -> None:
    client = TestClient(create_app(container))
    foods = [
        {
            "id": "f1",
            "name": "Ragi Porridge",
            "servingSize": "1 bowl",
            "calories": 180,
            "protein": 6,
            "fat": 2,
            "carbs": 34,
            "fiber": 4,
            "vataEffect": "PACIFIES",
            "pittaEffect": "PACIFIES",
            "kaphaEffect": "NEUTRAL",
            "potency": "COOLING",
            "quality": ["LIGHT"],
        }
    ]

    response = client.post(
        "/diet-plans/generate", json={"patient": RAVI, "foods": foods}
    )

    assert response.status_code == 200
    data = response.json()
    assert all(meal["foods"][0]["food"]["id"] == "f1" for meal in data["meals"])
    assert data["totalCalories"] == 180 * 6


def test_generate_plan_with_empty_foods(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/diet-plans/generate", json={"patient": RAVI, "foods": []})

    assert response.status_code == 200
    data = response.json()
    assert all(meal["foods"] == [] for meal in data["meals"])
    assert data["totalCalories"] == 0


def test_generate_plan_requires_prakriti(container) -> None:
    client = TestClient(create_app(container))
    patient = {key: value for key, value in RAVI.items() if key != "prakriti"}

    response = client.post("/diet-plans/generate", json={"patient": patient})

    assert response.status_code == 422


def test_generate_plan_rejects_negative_scores(container) -> None:
    client = TestClient(create_app(container))
    patient = {**RAVI, "prakriti": {"vata": -5, "pitta": 35, "kapha": 20}}

    response = client.post("/diet-plans/generate", json={"patient": patient})

    assert response.status_code == 422


def test_generate_plan_rejects_infinite_scores(container) -> None:
    client = TestClient(create_app(container))
    body = (
        '{"patient": {"id": "p", "name": "Inf", '
        '"prakriti": {"vata": Infinity, "pitta": 35, "kapha": 20}}}'
    )

    response = client.post(
        "/diet-plans/generate",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422


def test_generate_plan_maps_invalid_profile_to_400(container, monkeypatch) -> None:
    def _reject(*_args, **_kwargs):  # type: ignore[no-untyped-def]
        raise InvalidProfileError("prakriti scores are required")

    monkeypatch.setattr(container.diet_plan_service, "generate", _reject)
    client = TestClient(create_app(container))

    response = client.post("/diet-plans/generate", json={"patient": RAVI})

    assert response.status_code == 400
    assert response.json()["detail"] == "prakriti scores are required"
