"""Tests for the HTTP API."""

import json

import pytest
from fastapi.testclient import TestClient

from diet_tracker.api.app import create_app, error_status_code
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import AnalysisError, ConflictError, NotFoundError
from tests.conftest import FakeChatClient, FakeImageStore

PNG_BYTES = b"\x89PNG\r\n\x1a\nrest-of-image"


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    response = client.post(
        "/api/auth/register", json={"username": "Alice", "password": "secret1"}
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_login_and_me(client: TestClient) -> None:
    client.post("/api/auth/register", json={"username": "bob", "password": "secret1"})

    login = client.post(
        "/api/auth/login", json={"username": "BOB", "password": "secret1"}
    )
    me = client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {login.json()['token']}"}
    )

    assert login.status_code == 200
    assert me.json()["username"] == "bob"


def test_duplicate_registration_is_rejected(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/auth/register", json={"username": "alice", "password": "secret1"}
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Username already taken"}


def test_wrong_password_is_unauthorized(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/auth/login", json={"username": "alice", "password": "nope123"}
    )

    assert response.status_code == 401


def test_logs_require_token(client: TestClient) -> None:
    missing = client.get("/api/logs/today")
    invalid = client.get(
        "/api/logs/today", headers={"Authorization": "Bearer not-a-token"}
    )

    assert missing.status_code == 401
    assert invalid.status_code == 401
    assert invalid.json() == {"message": "Token is not valid"}


def test_log_day_end_to_end(client: TestClient, auth_headers: dict[str, str]) -> None:
    day = "2024-01-01"
    client.post(
        "/api/logs/food",
        headers=auth_headers,
        json={
            "name": "Bowl",
            "calories": 500,
            "protein": 30,
            "carbs": 40,
            "fat": 10,
            "fiber": 5,
            "mealType": "lunch",
            "date": day,
        },
    )
    client.post(
        "/api/logs/water", headers=auth_headers, json={"amount": 250, "date": day}
    )
    client.post(
        "/api/logs/steps", headers=auth_headers, json={"steps": 4000, "date": day}
    )
    client.post(
        "/api/logs/weight", headers=auth_headers, json={"weight": 72.5, "date": day}
    )

    response = client.get(f"/api/logs/date/{day}", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["date"] == day
    assert body["summary"] == {
        "caloriesEaten": 500,
        "caloriesBurned": 160,
        "waterIntake": 250,
        "steps": 4000,
        "weight": 72.5,
        "protein": 30,
        "carbs": 40,
        "fat": 10,
        "fiber": 5,
    }
    entries_by_type = {entry["type"]: entry for entry in body["entries"]}
    assert sorted(entries_by_type) == ["food", "steps", "water", "weight"]
    assert entries_by_type["food"]["data"]["mealType"] == "lunch"

    food_id = entries_by_type["food"]["id"]
    deleted = client.delete(f"/api/logs/entry/{food_id}", headers=auth_headers)

    assert deleted.json()["summary"]["caloriesEaten"] == 0
    assert deleted.json()["summary"]["waterIntake"] == 250


def test_update_entry_with_client_field_names(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    created = client.post(
        "/api/logs/activity",
        headers=auth_headers,
        json={"activityType": "run", "duration": 30, "caloriesBurned": 300},
    ).json()
    entry_id = created["entries"][0]["id"]

    response = client.put(
        f"/api/logs/entry/{entry_id}",
        headers=auth_headers,
        json={"data": {"caloriesBurned": 420, "duration": 40}},
    )

    assert response.status_code == 200
    assert response.json()["summary"]["caloriesBurned"] == 420
    assert response.json()["entries"][0]["data"]["duration"] == 40


def test_update_entry_rejects_non_numeric_steps(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    day = "2024-03-01"
    created = client.post(
        "/api/logs/steps", headers=auth_headers, json={"steps": 1000, "date": day}
    ).json()

    response = client.put(
        f"/api/logs/entry/{created['entries'][0]['id']}",
        headers=auth_headers,
        json={"data": {"steps": "abc"}},
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid steps entry fields: steps"}


@pytest.mark.parametrize(
    ("data", "message"),
    [
        (
            {"mealType": "brunch", "calories": -900},
            "Invalid food entry fields: calories",
        ),
        ({"mealType": "brunch"}, "Unsupported meal type: brunch"),
        ({"productId": "not-a-uuid"}, "Invalid food entry fields: productId"),
    ],
)
def test_update_food_entry_rejects_invalid_fields(
    client: TestClient,
    auth_headers: dict[str, str],
    data: dict[str, object],
    message: str,
) -> None:
    day = "2024-03-02"
    created = client.post(
        "/api/logs/food",
        headers=auth_headers,
        json={"name": "Rice", "calories": 10, "date": day},
    ).json()

    response = client.put(
        f"/api/logs/entry/{created['entries'][0]['id']}",
        headers=auth_headers,
        json={"data": data},
    )
    after = client.get(f"/api/logs/date/{day}", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"message": message}
    assert after.status_code == 200
    assert after.json()["summary"]["caloriesEaten"] == 10
    assert after.json()["entries"][0]["data"]["mealType"] == "other"


def test_update_entry_with_unknown_product_is_not_found(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    created = client.post(
        "/api/logs/food", headers=auth_headers, json={"name": "Rice"}
    ).json()

    response = client.put(
        f"/api/logs/entry/{created['entries'][0]['id']}",
        headers=auth_headers,
        json={"data": {"productId": "00000000-0000-0000-0000-000000000001"}},
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_remove_water_floors_at_zero(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    day = "2024-02-01"
    client.post(
        "/api/logs/water", headers=auth_headers, json={"amount": 200, "date": day}
    )

    response = client.post(
        "/api/logs/water/remove",
        headers=auth_headers,
        json={"amount": 500, "date": day},
    )

    assert response.json()["summary"]["waterIntake"] == 0


def test_remove_water_on_missing_day_is_not_found(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/logs/water/remove",
        headers=auth_headers,
        json={"amount": 100, "date": "1999-01-01"},
    )

    assert response.status_code == 404


def test_invalid_payload_is_unprocessable(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post("/api/logs/steps", headers=auth_headers, json={"steps": -5})

    assert response.status_code == 422


def test_unknown_entry_is_not_found(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.delete(
        "/api/logs/entry/00000000-0000-0000-0000-000000000000", headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Entry not found"}


def test_weight_history(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.get("/api/logs/weight/history?days=3", headers=auth_headers)

    assert response.status_code == 200
    assert len(response.json()) == 3


def test_profile_endpoints(client: TestClient, auth_headers: dict[str, str]) -> None:
    initial = client.get("/api/profile", headers=auth_headers)
    updated = client.put(
        "/api/profile",
        headers=auth_headers,
        json={"name": "Alice", "weightValue": 60, "gender": "female"},
    )
    calculations = client.get("/api/profile/calculations", headers=auth_headers)

    assert initial.json()["name"] == "User"
    assert updated.json()["name"] == "Alice"
    assert updated.json()["weight"] == {"value": 60, "unit": "kg"}
    assert calculations.json()["tdee"] == updated.json()["dailyCalorieGoal"]


def test_profile_rejects_unknown_activity_level(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.put(
        "/api/profile", headers=auth_headers, json={"activityLevel": "couch"}
    )

    assert response.status_code == 400


def test_product_endpoints(client: TestClient, auth_headers: dict[str, str]) -> None:
    created = client.post(
        "/api/products",
        headers=auth_headers,
        json={
            "name": "Latte",
            "emoji": "☕",
            "category": "Coffee",
            "servingSize": 250,
            "servingUnit": "ml",
            "calories": 190,
            "variants": [{"name": "Large", "multiplier": 1.4}],
        },
    )
    product_id = created.json()["id"]

    used = client.post(f"/api/products/{product_id}/use", headers=auth_headers)
    listed = client.get("/api/products?search=lat", headers=auth_headers)
    most_used = client.get("/api/products/most-used", headers=auth_headers)
    reordered = client.post(
        "/api/products/reorder", headers=auth_headers, json={"productIds": [product_id]}
    )
    deleted = client.delete(f"/api/products/{product_id}", headers=auth_headers)
    missing = client.get(f"/api/products/{product_id}", headers=auth_headers)

    assert created.status_code == 201
    assert created.json()["servingSize"] == {"value": 250, "unit": "ml"}
    assert created.json()["variants"] == [{"name": "Large", "multiplier": 1.4}]
    assert used.json()["usageCount"] == 1
    assert [item["name"] for item in listed.json()] == ["Latte"]
    assert most_used.json()[0]["id"] == product_id
    assert reordered.status_code == 200
    assert deleted.status_code == 200
    assert missing.status_code == 404


def test_food_entry_counts_product_use(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    product_id = client.post(
        "/api/products", headers=auth_headers, json={"name": "Banana"}
    ).json()["id"]

    client.post(
        "/api/logs/food",
        headers=auth_headers,
        json={"name": "Banana", "calories": 105, "productId": product_id},
    )
    product = client.get(f"/api/products/{product_id}", headers=auth_headers)

    assert product.json()["usageCount"] == 1


def test_dashboard_endpoints(client: TestClient, auth_headers: dict[str, str]) -> None:
    today = client.get("/api/dashboard", headers=auth_headers)
    weekly = client.get("/api/dashboard/weekly", headers=auth_headers)

    assert today.status_code == 200
    assert today.json()["calories"]["goal"] == 2000
    assert today.json()["aiInsight"]
    assert weekly.status_code == 200
    assert weekly.json()["calorieGoal"] == 2000


def test_analyze_food_stores_image(
    client: TestClient,
    auth_headers: dict[str, str],
    chat_client: FakeChatClient,
    image_store: FakeImageStore,
) -> None:
    chat_client.replies.append(
        json.dumps(
            {
                "success": True,
                "totalCalories": 320,
                "items": [{"name": "Salad", "calories": 320}],
                "healthTip": "Nice and light.",
            }
        )
    )

    response = client.post(
        "/api/ai/analyze-food",
        headers=auth_headers,
        files={"image": ("meal.png", PNG_BYTES, "image/png")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["totalCalories"] == 320
    assert body["items"][0]["id"] == 1
    assert body["imagePath"].endswith(".png")
    assert len(image_store.saved) == 1


def test_analyze_food_rejects_other_file_types(
    client: TestClient, auth_headers: dict[str, str], chat_client: FakeChatClient
) -> None:
    response = client.post(
        "/api/ai/analyze-food",
        headers=auth_headers,
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert chat_client.calls == []


def test_analyze_food_reports_bad_gateway_on_garbled_reply(
    client: TestClient,
    auth_headers: dict[str, str],
    chat_client: FakeChatClient,
    image_store: FakeImageStore,
) -> None:
    chat_client.replies.append("not json")

    response = client.post(
        "/api/ai/analyze-food",
        headers=auth_headers,
        files={"image": ("meal.png", PNG_BYTES, "image/png")},
    )

    assert response.status_code == 502
    assert image_store.saved == []


def test_analyze_text(
    client: TestClient, auth_headers: dict[str, str], chat_client: FakeChatClient
) -> None:
    chat_client.replies.append(
        json.dumps({"success": True, "product": {"name": "Boiled Egg", "calories": 78}})
    )

    response = client.post(
        "/api/ai/analyze-text", headers=auth_headers, json={"description": "1 egg"}
    )

    assert response.status_code == 200
    assert response.json()["product"]["name"] == "Boiled Egg"


def test_error_status_codes() -> None:
    assert error_status_code(NotFoundError("x")) == 404
    assert error_status_code(ConflictError("x")) == 409
    assert error_status_code(AnalysisError("x")) == 502
