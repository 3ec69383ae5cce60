"""
Rental service - rental store
Stay records plus the per-room reporting queries used by ordering and check-out.
A rental is open while it has no check-out date.
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func
from hotel_management.models.entities import Rental, Chamber, Guest, OrderFood, ServiceBill


class RentalService:
    """Rental service"""

    def __init__(self, db: Session):
        self.db = db

    def add_rental_info(self, rental: Rental) -> Rental:
        self.db.add(rental)
        self.db.commit()
        self.db.refresh(rental)
        return rental

    def get_rental_by_id(self, rental_id: int) -> Optional[Rental]:
        return self.db.query(Rental).filter(Rental.id == rental_id).first()

    def _open_rentals(self):
        return self.db.query(Rental).filter(Rental.check_out_date.is_(None))

    def get_open_rental(self, chamber_number: str) -> Optional[Rental]:
        """Most recent open rental that includes the given room"""
        return self._open_rentals().join(Rental.chambers).filter(
            Chamber.chamber_number == chamber_number
        ).order_by(Rental.check_in_date.desc(), Rental.id.desc()).first()

    def get_list_chamber_order_food(self) -> List[str]:
        """Room numbers that currently have an open rental (can order food)"""
        rows = self.db.query(Chamber.chamber_number).join(Chamber.rentals).filter(
            Rental.check_out_date.is_(None)
        ).distinct().order_by(Chamber.chamber_number).all()
        return [number for (number,) in rows]

    def get_rental_id_order_food(self, chamber_number: str) -> Optional[int]:
        rental = self.get_open_rental(chamber_number)
        return rental.id if rental else None

    def get_check_total_food_price(self, chamber_number: str) -> int:
        """Sum of (total_price - discount) over the open rental's food orders"""
        rental_id = self.get_rental_id_order_food(chamber_number)
        if rental_id is None:
            return 0
        total = self.db.query(
            func.coalesce(func.sum(OrderFood.total_price - func.coalesce(OrderFood.discount, 0)), 0)
        ).filter(OrderFood.rental_id == rental_id).scalar()
        return int(total or 0)

    def get_check_total_service_price(self, chamber_number: str) -> int:
        rental_id = self.get_rental_id_order_food(chamber_number)
        if rental_id is None:
            return 0
        total = self.db.query(
            func.coalesce(func.sum(ServiceBill.total_price - func.coalesce(ServiceBill.discount, 0)), 0)
        ).filter(ServiceBill.rental_id == rental_id).scalar()
        return int(total or 0)

    def get_number_days_stay(self, chamber_number: str, now: datetime = None) -> int:
        """Whole days since check-in, never less than 1; 0 when the room has no open rental"""
        rental = self.get_open_rental(chamber_number)
        if rental is None:
            return 0
        now = now or datetime.now()
        return max(1, (now - rental.check_in_date).days)

    def get_rental_check_out_info(self, chamber_number: str) -> Optional[Rental]:
        return self.get_open_rental(chamber_number)

    def get_guest_check_out_info(self, chamber_number: str) -> Optional[Guest]:
        rental = self.get_open_rental(chamber_number)
        return rental.guest if rental else None

    def get_chamber_check_out_info(self, chamber_number: str) -> Optional[Chamber]:
        rental = self.get_open_rental(chamber_number)
        if rental is None:
            return None
        for chamber in rental.chambers:
            if chamber.chamber_number == chamber_number:
                return chamber
        return None
