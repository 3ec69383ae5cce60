"""
Check-in API tests
Covers GET /check-in and POST /api/check-in
"""
import pytest
from fastapi.testclient import TestClient

from hotel_management.exceptions import ChamberNotFoundError
from hotel_management.models.entities import Guest, Rental


def check_in_payload(chamber_id, **kwargs):
    payload = {
        "name": "Phạm Văn D",
        "id_card": "001099000123",
        "birth": "1999-09-09",
        "passport": "",
        "address": "Hải Phòng",
        "nationality": "Việt Nam",
        "phone": "0977777777",
        "email": "d@example.com",
        "note": "",
        "chamber_id": chamber_id,
    }
    payload.update(kwargs)
    return payload


class TestCheckInPage:

    def test_default_listing(self, client: TestClient, make_chamber):
        make_chamber(price_day=300_000)
        make_chamber(price_day=5_000_000)

        response = client.get("/check-in")

        assert response.status_code == 200
        data = response.json()
        assert data["total_element"] == 1
        assert data["chambers"]["size"] == 12
        assert data["check_price1"] is True
        assert data["current_type"] == "all"
        assert data["filter_url"] == "&p=1&t=all&v=all"
        assert data["base_url"] == "/check-in?page="

    def test_filters(self, client: TestClient, make_chamber):
        make_chamber(chamber_number="101", chamber_type="single", is_vip=True)
        make_chamber(chamber_number="102", chamber_type="couple", is_vip=False)

        response = client.get("/check-in", params={"page": 0, "p": 1, "t": "single", "v": "true"})

        data = response.json()
        assert data["total_element"] == 1
        assert data["chambers"]["content"][0]["chamber_number"] == "101"
        assert data["check_type1"] is True
        assert data["check_vip1"] is True

    def test_vip_flag_is_case_sensitive(self, client: TestClient, make_chamber):
        make_chamber(is_vip=True)

        data = client.get("/check-in", params={"v": "TRUE"}).json()

        assert data["total_element"] == 0
        assert data["check_vip1"] is False
        assert data["current_vip"] == "TRUE"

    def test_high_tier_fallback(self, client: TestClient, make_chamber):
        make_chamber(price_day=4_000_000)

        data = client.get("/check-in", params={"p": 9}).json()

        assert data["total_element"] == 1
        assert data["current_price"] == 9
        assert data["check_price3"] is True


class TestRentChamber:

    def test_new_guest(self, client: TestClient, db_session, sample_chamber):
        response = client.post("/api/check-in", json=check_in_payload(sample_chamber.id))

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Check in thành công!"
        assert body["result"]["rental_id"] is not None
        assert db_session.query(Guest).count() == 1
        rental = db_session.query(Rental).one()
        assert rental.chambers[0].id == sample_chamber.id

    def test_existing_guest(self, client: TestClient, db_session, sample_chamber, sample_guest):
        payload = check_in_payload(sample_chamber.id, id_card=sample_guest.id_card, address="Vinh")

        response = client.post("/api/check-in", json=payload)

        assert response.status_code == 200
        assert db_session.query(Guest).count() == 1
        db_session.refresh(sample_guest)
        assert sample_guest.address == "Vinh"
        assert sample_guest.guest_name == "Nguyễn Văn A"

    def test_duplicate_id_card(self, client: TestClient, db_session, sample_chamber):
        db_session.add_all([Guest(guest_name="A", id_card="DUP"), Guest(guest_name="B", id_card="DUP")])
        db_session.commit()

        response = client.post("/api/check-in", json=check_in_payload(sample_chamber.id, id_card="DUP"))

        assert response.status_code == 400
        assert response.json()["message"] == "Lỗi hệ thống vui lòng thử lại sau!"
        assert db_session.query(Rental).count() == 0

    def test_blank_name_rejected(self, client: TestClient, db_session, sample_chamber):
        response = client.post("/api/check-in", json=check_in_payload(sample_chamber.id, name="   "))

        assert response.status_code == 400
        assert response.json()["message"] == "Họ tên không được để trống"
        db_session.refresh(sample_chamber)
        assert sample_chamber.is_empty is True
        assert db_session.query(Guest).count() == 0

    def test_missing_id_card_rejected(self, client: TestClient, sample_chamber):
        payload = check_in_payload(sample_chamber.id)
        del payload["id_card"]

        response = client.post("/api/check-in", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Số CMND/CCCD không được để trống"

    def test_unknown_chamber_propagates(self, client: TestClient):
        with pytest.raises(ChamberNotFoundError):
            client.post("/api/check-in", json=check_in_payload(9999))
