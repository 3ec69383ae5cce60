"""
Chamber service - room store
Room inventory, occupancy and the price-tier search behind the check-in listing
"""
from typing import Optional, Tuple, Union
import logging
from sqlalchemy.orm import Session
from sqlalchemy import false, or_
from hotel_management.config import settings
from hotel_management.exceptions import ChamberNotFoundError
from hotel_management.models.entities import Chamber, PriceTier
from hotel_management.models.schemas import ChamberCreate
from hotel_management.services.pagination import Page, paginate

logger = logging.getLogger(__name__)

ALL = "all"


def parse_flag(value: str) -> Optional[bool]:
    """
    Parse a text flag from a query string.
    "true" / "false" map to booleans, "all" means no filter (None).
    Matching is exact; anything else raises ValueError.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    if value == ALL:
        return None
    raise ValueError(f"Invalid flag value: {value!r}")


def tier_bounds(tier: PriceTier) -> Tuple[Optional[int], Optional[int]]:
    """Half-open [low, high) price_day range for a tier; None means unbounded"""
    if tier == PriceTier.LOW:
        return None, settings.PRICE_TIER_LOW_MAX
    if tier == PriceTier.MID:
        return settings.PRICE_TIER_LOW_MAX, settings.PRICE_TIER_MID_MAX
    return settings.PRICE_TIER_MID_MAX, None


class ChamberService:
    """Chamber service"""

    def __init__(self, db: Session):
        self.db = db

    # ============== Lookup ==============

    def get_chamber(self, chamber_id: int) -> Optional[Chamber]:
        return self.db.query(Chamber).filter(Chamber.id == chamber_id).first()

    def find_chamber(self, chamber_id: int) -> Chamber:
        """Like get_chamber, but a missing row raises ChamberNotFoundError"""
        chamber = self.get_chamber(chamber_id)
        if chamber is None:
            raise ChamberNotFoundError(chamber_id)
        return chamber

    def count(self) -> int:
        return self.db.query(Chamber).count()

    # ============== Mutations ==============

    def add_chamber(self, data: ChamberCreate) -> Chamber:
        chamber = Chamber(**data.model_dump())
        self.db.add(chamber)
        self.db.commit()
        self.db.refresh(chamber)
        logger.info(f"Chamber {chamber.chamber_number} added (id={chamber.id})")
        return chamber

    def update_check_in(self, chamber_id: int) -> Chamber:
        """Mark a chamber as occupied"""
        chamber = self.find_chamber(chamber_id)
        chamber.is_empty = False
        self.db.commit()
        return chamber

    def update_chamber_info(self, chamber_id: int, chamber_number: str, chamber_type: str,
                            price_day: int, chamber_area: Optional[int], note: Optional[str],
                            is_vip: bool) -> Chamber:
        """Overwrite every descriptive field; occupancy is left alone"""
        chamber = self.get_chamber(chamber_id)
        if not chamber:
            raise ValueError("Phòng không tồn tại")

        chamber.chamber_number = chamber_number
        chamber.chamber_type = chamber_type
        chamber.price_day = price_day
        chamber.chamber_area = chamber_area
        chamber.note = note
        chamber.is_vip = is_vip
        self.db.commit()
        self.db.refresh(chamber)
        return chamber

    def delete_chamber(self, chamber_id: int) -> None:
        chamber = self.get_chamber(chamber_id)
        if not chamber:
            raise ValueError("Phòng không tồn tại")
        if not chamber.is_empty:
            raise ValueError("Phòng đang có khách, không thể xóa")

        self.db.delete(chamber)
        self.db.commit()
        logger.info(f"Chamber {chamber.chamber_number} deleted")

    # ============== Search ==============

    def search_chamber_with_price(self, tier: PriceTier, page: int, size: int,
                                  chamber_type: str = ALL,
                                  vip: Union[str, bool] = ALL) -> Page:
        """
        One page of chambers in a price tier, filtered by type and VIP flag.

        chamber_type is compared verbatim; "all" disables the filter.
        vip accepts a bool or a text flag; an unparseable flag matches nothing.
        """
        low, high = tier_bounds(tier)
        query = self.db.query(Chamber)
        if low is not None:
            query = query.filter(Chamber.price_day >= low)
        if high is not None:
            query = query.filter(Chamber.price_day < high)

        if chamber_type is not None and chamber_type != ALL:
            query = query.filter(Chamber.chamber_type == chamber_type)

        if isinstance(vip, bool):
            query = query.filter(Chamber.is_vip == vip)
        elif vip is not None:
            try:
                flag = parse_flag(vip)
            except ValueError:
                query = query.filter(false())
            else:
                if flag is not None:
                    query = query.filter(Chamber.is_vip == flag)

        return paginate(query.order_by(Chamber.id), page, size)

    def search_chamber_with_price1(self, page: int, size: int, chamber_type: str = ALL,
                                   vip: Union[str, bool] = ALL) -> Page:
        return self.search_chamber_with_price(PriceTier.LOW, page, size, chamber_type, vip)

    def search_chamber_with_price2(self, page: int, size: int, chamber_type: str = ALL,
                                   vip: Union[str, bool] = ALL) -> Page:
        return self.search_chamber_with_price(PriceTier.MID, page, size, chamber_type, vip)

    def search_chamber_with_price3(self, page: int, size: int, chamber_type: str = ALL,
                                   vip: Union[str, bool] = ALL) -> Page:
        return self.search_chamber_with_price(PriceTier.HIGH, page, size, chamber_type, vip)

    def search_chamber(self, text: str = "", page: int = 0, size: int = None) -> Page:
        """Free-text search over number, type and note"""
        query = self.db.query(Chamber)
        if text:
            pattern = f"%{text}%"
            query = query.filter(or_(
                Chamber.chamber_number.like(pattern),
                Chamber.chamber_type.like(pattern),
                Chamber.note.like(pattern),
            ))
        return paginate(query.order_by(Chamber.id), page, size or settings.PAGE_SIZE)
