"""
Tests for /api/restaurants.
"""
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.main import app
from app.models.restaurant import Restaurant
from app.routers.restaurants import get_restaurant_service

MISSING_ID = "0123456789abcdef01234567"

PAYLOAD = {
    "name": "La Cazuela",
    "address": "Calle 10 # 5-20",
    "city": "Medellin",
    "nit": "900123456",
    "phone": "3001234567",
}


class TestCreateRestaurant:
    def test_create_success(self, client: TestClient, admin_headers):
        response = client.post("/api/restaurants", json=PAYLOAD, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert len(data["id"]) == 24
        assert data["nit"] == "900123456"
        assert data["deleted_at"] is None

        found = client.get(f"/api/restaurants/{data['id']}", headers=admin_headers)
        assert found.status_code == 200
        assert {k: found.json()[k] for k in PAYLOAD} == PAYLOAD

    def test_extra_keys_are_ignored(self, client: TestClient, admin_headers):
        response = client.post(
            "/api/restaurants",
            json={**PAYLOAD, "description": "cozy"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert "description" not in response.json()

    def test_duplicate_nit(self, client: TestClient, admin_headers, make_restaurant):
        make_restaurant(nit="900123456")

        response = client.post("/api/restaurants", json=PAYLOAD, headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Restaurant already exist"}

    def test_requires_admin(self, client: TestClient, user_headers):
        response = client.post("/api/restaurants", json=PAYLOAD, headers=user_headers)

        assert response.status_code == 403
        assert response.json() == {"message": "Access denied."}

    def test_validation_errors(self, client: TestClient, admin_headers):
        response = client.post(
            "/api/restaurants",
            json={**PAYLOAD, "name": "", "phone": "1234567890123"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json() == {
            "message": "Validation errors",
            "errors": [
                {
                    "field": "name",
                    "message": "Name must be between 1 and 30 characters",
                    "value": "",
                },
                {
                    "field": "phone",
                    "message": "Phone must be between 1 and 12 characters",
                    "value": "1234567890123",
                },
            ],
        }


class TestReadRestaurants:
    def test_any_authenticated_user_can_list(self, client: TestClient, user_headers, make_restaurant):
        make_restaurant()
        make_restaurant()

        response = client.get("/api/restaurants", headers=user_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_get_not_found(self, client: TestClient, user_headers):
        response = client.get(f"/api/restaurants/{MISSING_ID}", headers=user_headers)

        assert response.status_code == 404
        assert response.json() == {"message": f"Restaurant with id {MISSING_ID} not found"}

    def test_invalid_id(self, client: TestClient, user_headers):
        response = client.get("/api/restaurants/123", headers=user_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "restaurant_id", "message": "Invalid restaurant ID format", "value": "123"}
        ]

    def test_auth_runs_before_validation(self, client: TestClient):
        response = client.get("/api/restaurants/123")

        assert response.status_code == 401


class TestUpdateRestaurant:
    def test_partial_update(self, client: TestClient, admin_headers, make_restaurant):
        restaurant = make_restaurant(nit="111")

        response = client.put(
            f"/api/restaurants/{restaurant.id}",
            json={"city": " Cali ", "nit": "222"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["city"] == "Cali"
        assert data["nit"] == "111"
        assert data["name"] == restaurant.name

    def test_update_not_found(self, client: TestClient, admin_headers):
        response = client.put(
            f"/api/restaurants/{MISSING_ID}", json={"city": "Cali"}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json() == {"message": f"Restaurant with id {MISSING_ID} not found"}


class TestDeleteRestaurant:
    def test_delete_not_found(self, client: TestClient, admin_headers):
        response = client.delete(f"/api/restaurants/{MISSING_ID}", headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"message": f"Restaurant with id {MISSING_ID} not found"}

    def test_delete_is_soft(self, client: TestClient, session: Session, admin_headers, make_restaurant):
        restaurant = make_restaurant()

        response = client.delete(f"/api/restaurants/{restaurant.id}", headers=admin_headers)

        assert response.status_code == 204
        assert response.content == b""

        session.expire_all()
        stored = session.get(Restaurant, restaurant.id)
        assert stored is not None
        assert stored.deleted_at is not None

        listed = client.get("/api/restaurants", headers=admin_headers).json()
        assert restaurant.id not in [r["id"] for r in listed]
        assert client.get(f"/api/restaurants/{restaurant.id}", headers=admin_headers).status_code == 404


class TestUnhandledErrors:
    def test_store_failure_is_500_with_raw_error(self, client: TestClient, user_headers):
        class BrokenService:
            def get_all(self):
                raise RuntimeError("store unavailable")

        app.dependency_overrides[get_restaurant_service] = lambda: BrokenService()

        response = client.get("/api/restaurants", headers=user_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "RuntimeError", "message": "store unavailable"}
