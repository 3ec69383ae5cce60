"""
Domain events
Core business events published on the in-memory event bus
"""
from enum import Enum
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Dict, Any, List


class EventType(str, Enum):
    """Event types"""
    GUEST_CHECKED_IN = "guest.checked_in"
    GUEST_CHECKED_OUT = "guest.checked_out"

    FOOD_ORDERED = "order.food_placed"
    SERVICE_ORDERED = "order.service_placed"


@dataclass
class BaseEventData:
    """Event payload base class"""
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        for key, value in result.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
        return result


@dataclass
class GuestCheckedInData(BaseEventData):
    rental_id: int = 0
    guest_id: Optional[int] = None
    guest_name: str = ""
    chamber_id: int = 0
    chamber_number: str = ""
    is_vip: bool = False
    is_new_guest: bool = False
    check_in_time: datetime = field(default_factory=datetime.now)


@dataclass
class GuestCheckedOutData(BaseEventData):
    rental_id: int = 0
    guest_id: Optional[int] = None
    guest_name: str = ""
    chamber_numbers: List[str] = field(default_factory=list)
    check_out_time: datetime = field(default_factory=datetime.now)
    total_amount: int = 0
    payment_method: str = ""


@dataclass
class OrderPlacedData(BaseEventData):
    order_id: int = 0
    rental_id: int = 0
    total_price: int = 0
    discount: int = 0
