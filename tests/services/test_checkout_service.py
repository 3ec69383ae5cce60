"""
Tests for hotel_management/services/checkout_service.py
"""
from datetime import timedelta
import pytest

from hotel_management.models.entities import OrderFood, ServiceBill, Payment, PaymentMethod
from hotel_management.models.events import EventType
from hotel_management.models.schemas import CheckOutRequest
from hotel_management.services.checkout_service import CheckOutService


@pytest.fixture
def checkout_service(db_session):
    return CheckOutService(db_session, event_publisher=lambda e: None)


@pytest.fixture
def rental_with_orders(db_session, open_rental):
    open_rental.discount = 100_000
    db_session.add_all([
        OrderFood(total_price=150_000, people_number=2, order_date="2024-12-01",
                  discount=10_000, rental=open_rental),
        ServiceBill(total_price=60_000, order_date="2024-12-01", discount=0, rental=open_rental),
    ])
    db_session.commit()
    return open_rental


class TestPreview:

    def test_bill_breakdown(self, checkout_service, rental_with_orders):
        bill = checkout_service.preview("201")

        assert bill.rental_id == rental_with_orders.id
        assert bill.guest_name == "Nguyễn Văn A"
        assert bill.days == 2
        assert bill.room_price == 1_600_000
        assert bill.food_price == 140_000
        assert bill.service_price == 60_000
        assert bill.discount == 100_000
        assert bill.total == 1_700_000

    def test_free_room(self, checkout_service, sample_chamber):
        with pytest.raises(ValueError):
            checkout_service.preview("101")


class TestCheckOut:

    def test_settles_rental(self, checkout_service, db_session, rental_with_orders):
        now = rental_with_orders.check_in_date + timedelta(days=3)

        bill = checkout_service.check_out("201", CheckOutRequest(method=PaymentMethod.CARD), now)

        db_session.refresh(rental_with_orders)
        assert rental_with_orders.paid is True
        assert rental_with_orders.check_out_date == now
        assert rental_with_orders.chambers[0].is_empty is True
        payment = db_session.query(Payment).one()
        assert payment.amount == bill.total
        assert payment.method == PaymentMethod.CARD
        assert rental_with_orders.payment_id == payment.id
        assert bill.days == 3

    def test_room_no_longer_open(self, checkout_service, rental_with_orders):
        checkout_service.check_out("201", CheckOutRequest())

        with pytest.raises(ValueError):
            checkout_service.check_out("201", CheckOutRequest())

    def test_publishes_event(self, db_session, open_rental):
        events = []
        service = CheckOutService(db_session, event_publisher=events.append)

        service.check_out("201", CheckOutRequest())

        assert events[0].event_type == EventType.GUEST_CHECKED_OUT
        assert events[0].data["chamber_numbers"] == ["201"]
        assert events[0].data["payment_method"] == "cash"
