"""
Ordering routes
Food orders and service bills for rooms with an open rental
"""
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from hotel_management.database import get_db
from hotel_management.models.schemas import (
    AjaxResponse, OrderFoodCreate, OrderServiceCreate, collect_errors
)
from hotel_management.services.order_service import (
    OrderService, FOOD_SUCCESS_MESSAGE, SERVICE_SUCCESS_MESSAGE
)
from hotel_management.services.rental_service import RentalService

router = APIRouter(tags=["Orders"])


def _reply(status_code: int, message: str, result=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=AjaxResponse(message=message, result=result).model_dump()
    )


@router.get("/orders/chambers", response_model=List[str])
def list_chambers_for_order(db: Session = Depends(get_db)):
    """Room numbers that can currently order"""
    return RentalService(db).get_list_chamber_order_food()


@router.get("/orders/rental-id/{chamber_number}")
def get_rental_id(chamber_number: str, db: Session = Depends(get_db)):
    rental_id = RentalService(db).get_rental_id_order_food(chamber_number)
    if rental_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Phòng không có khách đang ở")
    return {"rental_id": rental_id}


@router.post("/api/order-food", response_model=AjaxResponse)
def add_order_food(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data, errors = collect_errors(OrderFoodCreate, payload)
    if errors:
        return _reply(status.HTTP_400_BAD_REQUEST, errors[0])
    try:
        order = OrderService(db).add_order_food(data)
    except ValueError as e:
        return _reply(status.HTTP_400_BAD_REQUEST, str(e))
    return _reply(status.HTTP_200_OK, FOOD_SUCCESS_MESSAGE, {"order_id": order.id})


@router.post("/api/order-service", response_model=AjaxResponse)
def add_order_service(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    data, errors = collect_errors(OrderServiceCreate, payload)
    if errors:
        return _reply(status.HTTP_400_BAD_REQUEST, errors[0])
    try:
        bill = OrderService(db).add_order_service(data)
    except ValueError as e:
        return _reply(status.HTTP_400_BAD_REQUEST, str(e))
    return _reply(status.HTTP_200_OK, SERVICE_SUCCESS_MESSAGE, {"service_bill_id": bill.id})
