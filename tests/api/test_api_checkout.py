"""
Check-out API tests
"""
from fastapi.testclient import TestClient

from hotel_management.models.entities import Payment


class TestCheckOutApi:

    def test_preview_and_settle(self, client: TestClient, db_session, open_rental):
        preview = client.get("/checkout/201")
        assert preview.status_code == 200
        assert preview.json()["days"] == 2
        assert preview.json()["room_price"] == 1_600_000

        response = client.post("/checkout/201", json={"method": "transfer"})

        assert response.status_code == 200
        assert response.json()["total"] == 1_600_000
        assert db_session.query(Payment).one().amount == 1_600_000
        assert client.get("/checkout/201").status_code == 404
        assert client.post("/checkout/201", json={}).status_code == 400

    def test_after_checkout_room_can_be_rented_again(self, client: TestClient, open_rental):
        client.post("/checkout/201", json={})

        data = client.get("/check-in", params={"p": 1}).json()
        room = data["chambers"]["content"][0]
        assert room["chamber_number"] == "201"
        assert room["is_empty"] is True


class TestRootEndpoints:

    def test_root_and_health(self, client: TestClient):
        assert client.get("/").json()["name"] == "Hotel Management"
        assert client.get("/health").json() == {"status": "healthy"}
