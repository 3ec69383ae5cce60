"""
Guest routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_management.database import get_db
from hotel_management.models.schemas import GuestUpdate, GuestResponse, PageResponse
from hotel_management.services.guest_service import GuestService

router = APIRouter(prefix="/guests", tags=["Guests"])


@router.get("", response_model=PageResponse[GuestResponse])
def search_guests(
    text: str = "",
    page: int = Query(0, ge=0),
    size: int = Query(12, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """Search guests by name, ID card, phone or email"""
    result = GuestService(db).search_guests(text, page, size)
    return PageResponse[GuestResponse].model_validate(result.to_dict(), from_attributes=True)


@router.get("/all", response_model=List[GuestResponse])
def search_all_guests(text: str = "", db: Session = Depends(get_db)):
    return GuestService(db).search_guests_all(text)


@router.get("/{guest_id}", response_model=GuestResponse)
def get_guest(guest_id: int, db: Session = Depends(get_db)):
    guest = GuestService(db).get_guest(guest_id)
    if not guest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Khách hàng không tồn tại")
    return guest


@router.put("/{guest_id}", response_model=GuestResponse)
def edit_guest(guest_id: int, data: GuestUpdate, db: Session = Depends(get_db)):
    try:
        return GuestService(db).edit_guest_info(guest_id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
