"""
Guest service - guest store
Guests are looked up by national ID card, which is not enforced unique
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from sqlalchemy import or_
from hotel_management.config import settings
from hotel_management.models.entities import Guest
from hotel_management.models.schemas import GuestUpdate
from hotel_management.services.pagination import Page, paginate

logger = logging.getLogger(__name__)


class GuestMatchKind(str, Enum):
    NOT_FOUND = "not_found"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"


@dataclass
class GuestMatch:
    """Outcome of looking a guest up by ID card"""
    kind: GuestMatchKind
    count: int


class GuestService:
    """Guest service"""

    def __init__(self, db: Session):
        self.db = db

    def get_guest(self, guest_id: int) -> Optional[Guest]:
        return self.db.query(Guest).filter(Guest.id == guest_id).first()

    def check_exist_guest(self, id_card: str) -> int:
        """Number of guests holding this ID card"""
        return self.db.query(Guest).filter(Guest.id_card == id_card).count()

    def match_guest(self, id_card: str) -> GuestMatch:
        count = self.check_exist_guest(id_card)
        if count == 0:
            return GuestMatch(GuestMatchKind.NOT_FOUND, 0)
        if count == 1:
            return GuestMatch(GuestMatchKind.UNIQUE, 1)
        return GuestMatch(GuestMatchKind.AMBIGUOUS, count)

    def search_guest_with_card(self, id_card: str) -> Optional[Guest]:
        return self.db.query(Guest).filter(Guest.id_card == id_card).order_by(Guest.id).first()

    def add_guest_info(self, guest: Guest) -> Guest:
        self.db.add(guest)
        self.db.commit()
        self.db.refresh(guest)
        logger.info(f"Guest {guest.id} created for ID card {guest.id_card}")
        return guest

    def update_complete(self, passport: Optional[str], address: Optional[str],
                        phone_number: Optional[str], email: Optional[str],
                        is_vip: bool, id_card: str, is_familiar: bool = True) -> int:
        """
        Refresh the contact details of every guest holding id_card.
        The name is never touched. Returns the number of rows updated.
        """
        updated = self.db.query(Guest).filter(Guest.id_card == id_card).update(
            {
                Guest.passport: passport,
                Guest.address: address,
                Guest.phone_number: phone_number,
                Guest.email: email,
                Guest.is_vip: is_vip,
                Guest.is_familiar: is_familiar,
            },
            synchronize_session="fetch",
        )
        self.db.commit()
        return updated

    def update_normal(self, guest_id: int, guest_name: Optional[str], birth: Optional[str],
                      id_card: Optional[str], passport: Optional[str], address: Optional[str],
                      nationality: Optional[str], phone_number: Optional[str],
                      email: Optional[str]) -> Guest:
        """Full edit of the identity and contact fields"""
        return self.edit_guest_info(guest_id, GuestUpdate(
            guest_name=guest_name, birth=birth, id_card=id_card, passport=passport,
            address=address, nationality=nationality, phone_number=phone_number, email=email,
        ))

    def edit_guest_info(self, guest_id: int, data: GuestUpdate) -> Guest:
        guest = self.get_guest(guest_id)
        if not guest:
            raise ValueError("Khách hàng không tồn tại")

        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(guest, key, value)

        self.db.commit()
        self.db.refresh(guest)
        return guest

    def _text_query(self, text: str):
        query = self.db.query(Guest)
        if text:
            pattern = f"%{text}%"
            query = query.filter(or_(
                Guest.guest_name.like(pattern),
                Guest.id_card.like(pattern),
                Guest.phone_number.like(pattern),
                Guest.email.like(pattern),
            ))
        return query.order_by(Guest.id)

    def search_guests(self, text: str = "", page: int = 0, size: int = None) -> Page:
        return paginate(self._text_query(text), page, size or settings.PAGE_SIZE)

    def search_guests_all(self, text: str = "") -> List[Guest]:
        return self._text_query(text).all()
