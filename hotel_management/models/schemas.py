"""
Pydantic schemas
API request/response validation
"""
from datetime import datetime
from typing import Optional, List, Any, ClassVar, Dict, Generic, Tuple, Type, TypeVar
from pydantic import BaseModel, Field, ConfigDict, ValidationError
from hotel_management.models.entities import PaymentMethod

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def collect_errors(model_cls: Type[M], payload: Any) -> Tuple[Optional[M], List[str]]:
    """
    Validate a raw payload, collecting messages instead of raising.
    Returns (model, []) on success or (None, messages) on failure.

    A schema may declare ERROR_MESSAGES keyed by (field, error type) to replace
    pydantic's default text; a null value counts as "missing".
    """
    try:
        return model_cls.model_validate(payload), []
    except ValidationError as e:
        overrides = getattr(model_cls, "ERROR_MESSAGES", {})
        messages = []
        for err in e.errors():
            loc = ".".join(str(part) for part in err.get("loc", ()))
            kind = "missing" if err["type"] == "missing" or err.get("input", "") is None else err["type"]
            if (loc, kind) in overrides:
                messages.append(overrides[(loc, kind)])
            else:
                messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
        return None, messages


class PageResponse(BaseModel, Generic[T]):
    """One page of a paginated query"""
    content: List[T]
    number: int
    size: int
    total_elements: int
    total_pages: int


class AjaxResponse(BaseModel):
    """Message envelope returned by the form-style endpoints"""
    message: Optional[str] = None
    result: Optional[Any] = None


# ============== Chamber Schemas ==============

class ChamberBase(BaseModel):
    chamber_number: str = Field(..., min_length=1, max_length=10)
    chamber_type: str = Field(..., min_length=1, max_length=30)
    is_vip: bool = False
    price_day: int = Field(..., ge=0)
    chamber_area: Optional[int] = Field(None, ge=0)
    note: Optional[str] = None


class ChamberCreate(ChamberBase):
    is_empty: bool = True


class ChamberUpdate(ChamberBase):
    """Full-field update; every column except occupancy is overwritten"""
    pass


class ChamberResponse(ChamberBase):
    id: int
    is_empty: bool
    model_config = ConfigDict(from_attributes=True)


class CheckInPageResponse(BaseModel):
    """Room listing shown on the check-in screen"""
    chambers: PageResponse[ChamberResponse]
    check_price1: bool
    check_price2: bool
    check_price3: bool
    check_type1: bool
    check_type2: bool
    check_type3: bool
    check_vip1: bool
    check_vip2: bool
    current_price: int
    current_type: str
    current_vip: str
    begin_index: int
    end_index: int
    current_index: int
    total_page_count: int
    total_element: int
    base_url: str
    filter_url: str
    extra: bool
    check_last: bool


# ============== Guest Schemas ==============

class GuestBase(BaseModel):
    guest_name: Optional[str] = Field(None, max_length=100)
    birth: Optional[str] = Field(None, max_length=20)
    id_card: Optional[str] = Field(None, max_length=30)
    passport: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    nationality: Optional[str] = Field(None, max_length=50)
    phone_number: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=100)


class GuestUpdate(GuestBase):
    is_familiar: Optional[bool] = None
    is_vip: Optional[bool] = None


class GuestResponse(GuestBase):
    id: int
    is_familiar: bool
    is_vip: bool
    model_config = ConfigDict(from_attributes=True)


# ============== Check-in Schemas ==============

class CheckInRequest(BaseModel):
    """Check-in form submitted from the room listing"""
    model_config = ConfigDict(str_strip_whitespace=True)
    ERROR_MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = {
        ("name", "missing"): "Họ tên không được để trống",
        ("name", "string_too_short"): "Họ tên không được để trống",
        ("id_card", "missing"): "Số CMND/CCCD không được để trống",
        ("id_card", "string_too_short"): "Số CMND/CCCD không được để trống",
        ("chamber_id", "missing"): "Vui lòng chọn phòng",
    }

    name: str = Field(..., min_length=1, max_length=100)
    id_card: str = Field(..., min_length=1, max_length=30)
    birth: Optional[str] = Field(None, max_length=20)
    passport: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    nationality: Optional[str] = Field(None, max_length=50)
    phone: Optional[str] = Field(None, max_length=20)
    email: Optional[str] = Field(None, max_length=100)
    note: Optional[str] = None
    chamber_id: int


# ============== Ordering Schemas ==============

ORDER_ERROR_MESSAGES: Dict[Tuple[str, str], str] = {
    ("rental_id", "missing"): "Rental ID is required",
    ("order_date", "missing"): "Order date is required",
    ("order_date", "string_too_short"): "Order date is required",
    ("people_number", "missing"): "People number is required",
    ("people_number", "greater_than"): "People number must be positive",
    ("discount", "missing"): "Discount is required",
    ("discount", "greater_than_equal"): "Discount must be non-negative",
    ("total_price", "missing"): "Total price is required",
    ("total_price", "greater_than"): "Total price must be positive",
}


class OrderFoodCreate(BaseModel):
    ERROR_MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = ORDER_ERROR_MESSAGES

    rental_id: int
    people_number: int = Field(..., gt=0)
    order_date: str = Field(..., min_length=1)
    note: Optional[str] = None
    discount: int = Field(..., ge=0)
    total_price: int = Field(..., gt=0)


class OrderServiceCreate(BaseModel):
    ERROR_MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = ORDER_ERROR_MESSAGES

    rental_id: int
    order_date: str = Field(..., min_length=1)
    note: Optional[str] = None
    discount: int = Field(..., ge=0)
    total_price: int = Field(..., gt=0)


# ============== Catalog Schemas ==============

class CategoryCreate(BaseModel):
    category_name: Optional[str] = Field(None, max_length=100)


class CategoryResponse(CategoryCreate):
    id: int
    model_config = ConfigDict(from_attributes=True)


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    price: int = Field(..., gt=0)
    image: Optional[str] = Field(None, max_length=255)
    category_id: int


class FoodItemResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: int
    image: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


# ============== Check-out Schemas ==============

class CheckOutRequest(BaseModel):
    method: PaymentMethod = PaymentMethod.CASH
    note: Optional[str] = None


class CheckOutPreview(BaseModel):
    rental_id: int
    chamber_number: str
    guest_name: Optional[str] = None
    check_in_date: datetime
    days: int
    room_price: int
    food_price: int
    service_price: int
    discount: int
    total: int
