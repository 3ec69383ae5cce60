"""
Check-in service
Occupies a room, registers or refreshes the guest by ID card and opens a rental
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional
import logging
from sqlalchemy.orm import Session
from hotel_management.models.entities import Guest, Rental
from hotel_management.models.schemas import CheckInRequest
from hotel_management.models.events import EventType, GuestCheckedInData
from hotel_management.services.event_bus import event_bus, Event
from hotel_management.services.chamber_service import ChamberService
from hotel_management.services.guest_service import GuestService, GuestMatchKind
from hotel_management.services.rental_service import RentalService

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Check in thành công!"
SYSTEM_ERROR_MESSAGE = "Lỗi hệ thống vui lòng thử lại sau!"


@dataclass
class CheckInResult:
    ok: bool
    message: str
    rental: Optional[Rental] = None

    @property
    def status_code(self) -> int:
        return 200 if self.ok else 400


class CheckInService:
    """Check-in service"""

    def __init__(self, db: Session, event_publisher: Callable[[Event], None] = None):
        self.db = db
        self.chamber_service = ChamberService(db)
        self.guest_service = GuestService(db)
        self.rental_service = RentalService(db)
        self._publish_event = event_publisher or event_bus.publish

    def rent_chamber(self, request: CheckInRequest, errors: List[str]) -> CheckInResult:
        """
        Check a guest into a room.

        - validation errors short-circuit with the first message, nothing is written
        - an unknown chamber raises ChamberNotFoundError
        - a new ID card creates a guest, a known one refreshes its contact details
        - an ID card shared by several guests is reported as a system error and
          no rental is created; the room stays marked occupied
        """
        if errors:
            return CheckInResult(ok=False, message=errors[0])

        chamber = self.chamber_service.update_check_in(request.chamber_id)

        match = self.guest_service.match_guest(request.id_card)
        if match.kind == GuestMatchKind.NOT_FOUND:
            self.guest_service.add_guest_info(Guest(
                guest_name=request.name,
                birth=request.birth,
                id_card=request.id_card,
                passport=request.passport,
                address=request.address,
                nationality=request.nationality,
                phone_number=request.phone,
                email=request.email,
                is_familiar=False,
                is_vip=chamber.is_vip,
            ))
        elif match.kind == GuestMatchKind.UNIQUE:
            self.guest_service.update_complete(
                request.passport, request.address, request.phone, request.email,
                chamber.is_vip, request.id_card,
            )
        else:
            logger.error(
                f"Check-in aborted: ID card {request.id_card} matches {match.count} guests"
            )
            return CheckInResult(ok=False, message=SYSTEM_ERROR_MESSAGE)

        guest = self.guest_service.search_guest_with_card(request.id_card)
        rental = self.rental_service.add_rental_info(Rental(
            guest=guest,
            chambers=[chamber],
            check_in_date=datetime.now(),
            note=request.note,
            discount=0,
            paid=False,
        ))

        logger.info(
            f"Chamber {chamber.chamber_number} checked in, rental={rental.id} guest={rental.guest_id}"
        )
        self._publish_event(Event.of(
            EventType.GUEST_CHECKED_IN,
            GuestCheckedInData(
                rental_id=rental.id,
                guest_id=rental.guest_id,
                guest_name=guest.guest_name if guest else "",
                chamber_id=chamber.id,
                chamber_number=chamber.chamber_number,
                is_vip=bool(chamber.is_vip),
                is_new_guest=match.kind == GuestMatchKind.NOT_FOUND,
                check_in_time=rental.check_in_date,
            ),
            source="checkin_service",
        ))

        return CheckInResult(ok=True, message=SUCCESS_MESSAGE, rental=rental)
