"""
Check-out service
Builds the bill for a room's open rental and settles it
"""
from typing import Callable
from datetime import datetime
import logging
from sqlalchemy.orm import Session
from hotel_management.models.entities import Payment
from hotel_management.models.schemas import CheckOutRequest, CheckOutPreview
from hotel_management.models.events import EventType, GuestCheckedOutData
from hotel_management.services.event_bus import event_bus, Event
from hotel_management.services.rental_service import RentalService

logger = logging.getLogger(__name__)


class CheckOutService:
    """Check-out service"""

    def __init__(self, db: Session, event_publisher: Callable[[Event], None] = None):
        self.db = db
        self.rental_service = RentalService(db)
        self._publish_event = event_publisher or event_bus.publish

    def preview(self, chamber_number: str, now: datetime = None) -> CheckOutPreview:
        """
        Bill breakdown for the room's open rental:
        room = days stayed x daily price, plus food and services (net of their
        own discounts), minus the rental discount. Never negative.
        """
        rental = self.rental_service.get_rental_check_out_info(chamber_number)
        if rental is None:
            raise ValueError(f"Phòng {chamber_number} không có khách đang ở")

        chamber = self.rental_service.get_chamber_check_out_info(chamber_number)
        guest = rental.guest
        days = self.rental_service.get_number_days_stay(chamber_number, now)
        room_price = days * (chamber.price_day or 0)
        food_price = self.rental_service.get_check_total_food_price(chamber_number)
        service_price = self.rental_service.get_check_total_service_price(chamber_number)
        discount = rental.discount or 0

        return CheckOutPreview(
            rental_id=rental.id,
            chamber_number=chamber_number,
            guest_name=guest.guest_name if guest else None,
            check_in_date=rental.check_in_date,
            days=days,
            room_price=room_price,
            food_price=food_price,
            service_price=service_price,
            discount=discount,
            total=max(0, room_price + food_price + service_price - discount),
        )

    def check_out(self, chamber_number: str, data: CheckOutRequest,
                  now: datetime = None) -> CheckOutPreview:
        """
        Settle the room's open rental.
        Records the payment, closes the rental and frees all of its rooms.
        """
        now = now or datetime.now()
        bill = self.preview(chamber_number, now)
        rental = self.rental_service.get_rental_by_id(bill.rental_id)

        payment = Payment(method=data.method, amount=bill.total, note=data.note)
        self.db.add(payment)

        rental.payment = payment
        rental.check_out_date = now
        rental.paid = True
        for chamber in rental.chambers:
            chamber.is_empty = True

        self.db.commit()

        chamber_numbers = [c.chamber_number for c in rental.chambers]
        logger.info(
            f"Rental {rental.id} checked out from {', '.join(chamber_numbers)}, total={bill.total}"
        )
        self._publish_event(Event.of(
            EventType.GUEST_CHECKED_OUT,
            GuestCheckedOutData(
                rental_id=rental.id,
                guest_id=rental.guest_id,
                guest_name=bill.guest_name or "",
                chamber_numbers=chamber_numbers,
                check_out_time=now,
                total_amount=bill.total,
                payment_method=data.method.value,
            ),
            source="checkout_service"
        ))

        return bill
