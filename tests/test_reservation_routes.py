"""
Tests for /api/reservations.
"""
import pytest
from fastapi.testclient import TestClient

from app.core.security import issue_token

MISSING_ID = "0123456789abcdef01234567"


@pytest.fixture
def restaurant(make_restaurant):
    return make_restaurant(name="El Cielo", address="Cra 7 # 1-1")


@pytest.fixture
def payload(regular_user, restaurant) -> dict:
    return {
        "date": "2025-06-01",
        "hour": "07:30PM",
        "restaurant_id": restaurant.id,
        "user_id": regular_user.id,
        "user_quantity": 4,
        "status": "pending",
    }


@pytest.fixture
def reservation(client: TestClient, user_headers, payload) -> dict:
    response = client.post("/api/reservations", json=payload, headers=user_headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateReservation:
    def test_create_success(self, client: TestClient, user_headers, payload):
        response = client.post("/api/reservations", json=payload, headers=user_headers)

        assert response.status_code == 201
        data = response.json()
        assert len(data["id"]) == 24
        assert data["user_quantity"] == 4
        assert data["restaurant_id"] == payload["restaurant_id"]
        assert data["deleted_at"] is None

    def test_extra_keys_are_ignored(self, client: TestClient, user_headers, payload):
        response = client.post(
            "/api/reservations",
            json={**payload, "notes": "window seat"},
            headers=user_headers,
        )

        assert response.status_code == 201
        assert "notes" not in response.json()

    def test_unknown_user(self, client: TestClient, user_headers, payload):
        response = client.post(
            "/api/reservations",
            json={**payload, "user_id": MISSING_ID},
            headers=user_headers,
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Restaurant or User not found"}

    def test_unknown_restaurant(self, client: TestClient, user_headers, payload):
        response = client.post(
            "/api/reservations",
            json={**payload, "restaurant_id": MISSING_ID},
            headers=user_headers,
        )

        assert response.status_code == 400

    def test_admin_without_user_role_is_rejected(self, client: TestClient, admin_headers, payload):
        response = client.post("/api/reservations", json=payload, headers=admin_headers)

        assert response.status_code == 403
        assert response.json() == {"message": "Access denied."}

    def test_validation_errors(self, client: TestClient, user_headers, payload):
        response = client.post(
            "/api/reservations",
            json={**payload, "hour": "7pm", "user_quantity": 1},
            headers=user_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "hour", "message": "Please provide a valid hour", "value": "7pm"},
            {
                "field": "user_quantity",
                "message": "User quantity must be greater than 1",
                "value": 1,
            },
        ]


class TestReadReservations:
    def test_get_by_id_joins_references(self, client: TestClient, user_headers, reservation, regular_user):
        response = client.get(f"/api/reservations/{reservation['id']}", headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["restaurant"]["name"] == "El Cielo"
        assert data["restaurant"]["address"] == "Cra 7 # 1-1"
        assert data["user"] == {"id": regular_user.id, "name": "Camila"}

    def test_get_not_found(self, client: TestClient, user_headers):
        response = client.get(f"/api/reservations/{MISSING_ID}", headers=user_headers)

        assert response.status_code == 404
        assert response.json() == {"message": f"Reservation with id {MISSING_ID} not found"}

    def test_list_all_is_admin_only(self, client: TestClient, user_headers, admin_headers, reservation):
        assert client.get("/api/reservations", headers=user_headers).status_code == 403

        response = client.get("/api/reservations", headers=admin_headers)

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [reservation["id"]]

    def test_list_by_user(self, client: TestClient, user_headers, reservation, regular_user):
        response = client.get(f"/api/reservations/user/{regular_user.id}", headers=user_headers)

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [reservation["id"]]

    def test_list_by_user_invalid_id(self, client: TestClient, user_headers):
        response = client.get("/api/reservations/user/xyz", headers=user_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["message"] == "Invalid user ID format"

    def test_list_by_restaurant_is_admin_only(
        self, client: TestClient, user_headers, admin_headers, reservation, restaurant
    ):
        url = f"/api/reservations/restaurant/{restaurant.id}"
        assert client.get(url, headers=user_headers).status_code == 403

        response = client.get(url, headers=admin_headers)

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [reservation["id"]]


class TestUpdateReservation:
    def test_partial_update(self, client: TestClient, user_headers, reservation):
        response = client.put(
            f"/api/reservations/{reservation['id']}",
            json={"status": "confirmed", "user_quantity": "6"},
            headers=user_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "confirmed"
        assert data["user_quantity"] == 6
        assert data["hour"] == "07:30PM"

    def test_update_not_found(self, client: TestClient, user_headers):
        response = client.put(
            f"/api/reservations/{MISSING_ID}", json={"status": "confirmed"}, headers=user_headers
        )

        assert response.status_code == 404


class TestDeleteReservation:
    def test_soft_delete(self, client: TestClient, user_headers, admin_headers, reservation):
        response = client.delete(f"/api/reservations/{reservation['id']}", headers=user_headers)

        assert response.status_code == 204
        assert client.get("/api/reservations", headers=admin_headers).json() == []

        # Direct lookups still see the soft-deleted reservation
        found = client.get(f"/api/reservations/{reservation['id']}", headers=user_headers)
        assert found.status_code == 200
        assert found.json()["deleted_at"] is not None

    def test_delete_not_found(self, client: TestClient, user_headers):
        response = client.delete(f"/api/reservations/{MISSING_ID}", headers=user_headers)

        assert response.status_code == 404

    def test_requires_user_role(self, client: TestClient, reservation):
        token = issue_token("someone", ["admin"])

        response = client.delete(
            f"/api/reservations/{reservation['id']}",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 403
