"""
Check-in room listing
Fills the view model for the check-in screen: one page of rooms plus pager and filter state
"""
from typing import Any, Dict, Union
from sqlalchemy.orm import Session
from hotel_management.config import settings
from hotel_management.models.entities import PriceTier
from hotel_management.services.chamber_service import ChamberService, ALL

VIEW_NAME = "check-in"
BASE_URL = "/check-in?page="
ROOM_TYPES = ("single", "couple", "family")


def page_window(page: int, total_pages: int):
    """
    1-based (current, begin, end) labels of a three-page window around page.
    An empty result still shows page 1.
    """
    current = page + 1
    begin = max(1, min(current - 1, total_pages))
    end = max(begin, min(current + 1, total_pages))
    return current, begin, end


class ChamberListingService:
    """Check-in room listing"""

    def __init__(self, db: Session):
        self.db = db
        self.chamber_service = ChamberService(db)

    def check_in_page(self, model: Dict[str, Any], page: int = 0, price: int = 1,
                      chamber_type: str = ALL, vip: Union[str, bool] = ALL) -> str:
        """
        Populate model with the rooms matching the price selector, type and VIP filters.

        price 1 and 2 select the low and mid tiers; any other value selects the high tier.
        Returns the view name.
        """
        tier = PriceTier.from_selector(price)
        result = self.chamber_service.search_chamber_with_price(
            tier, page, settings.PAGE_SIZE, chamber_type, vip
        )
        vip_text = str(vip).lower() if isinstance(vip, bool) else vip

        total_pages = result.total_pages
        current, begin, end = page_window(page, total_pages)

        model["chambers"] = result
        for number in (1, 2, 3):
            model[f"check_price{number}"] = tier == PriceTier(number)
        for number, room_type in enumerate(ROOM_TYPES, start=1):
            model[f"check_type{number}"] = chamber_type == room_type
        model["check_vip1"] = vip_text == "true"
        model["check_vip2"] = vip_text == "false"

        model["current_price"] = price
        model["current_type"] = chamber_type
        model["current_vip"] = vip_text

        model["begin_index"] = begin
        model["end_index"] = end
        model["current_index"] = current
        model["total_page_count"] = total_pages
        model["total_element"] = result.total_elements
        model["base_url"] = BASE_URL
        model["filter_url"] = f"&p={price}&t={chamber_type}&v={vip_text}"
        # last page link and the gap marker before it
        model["check_last"] = end < total_pages
        model["extra"] = end < total_pages - 1

        return VIEW_NAME
