"""
Check-in routes
Room listing for the check-in screen and the check-in form submission
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from hotel_management.database import get_db
from hotel_management.models.schemas import (
    AjaxResponse, CheckInPageResponse, CheckInRequest, collect_errors
)
from hotel_management.services.checkin_service import CheckInService
from hotel_management.services.chamber_listing_service import ChamberListingService

router = APIRouter(tags=["Check-in"])


@router.get("/check-in", response_model=CheckInPageResponse)
def check_in_page(
    page: int = Query(0, ge=0),
    p: int = Query(1, description="Price tier selector: 1 low, 2 mid, anything else high"),
    t: str = Query("all", description="Room type, or 'all'"),
    v: str = Query("all", description="'true', 'false' or 'all'"),
    db: Session = Depends(get_db)
):
    """Rooms available for check-in, with pager and filter state"""
    model: Dict[str, Any] = {}
    ChamberListingService(db).check_in_page(model, page, p, t, v)
    model["chambers"] = model["chambers"].to_dict()
    return CheckInPageResponse.model_validate(model, from_attributes=True)


@router.post("/api/check-in", response_model=AjaxResponse)
def rent_chamber(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Check a guest into a room; 400 carries the first validation or system error"""
    request, errors = collect_errors(CheckInRequest, payload)
    result = CheckInService(db).rent_chamber(request, errors)
    body = AjaxResponse(
        message=result.message,
        result={"rental_id": result.rental.id} if result.rental else None
    )
    return JSONResponse(status_code=result.status_code, content=body.model_dump())
