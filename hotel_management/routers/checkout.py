"""
Check-out routes
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_management.database import get_db
from hotel_management.models.schemas import CheckOutRequest, CheckOutPreview
from hotel_management.services.checkout_service import CheckOutService

router = APIRouter(prefix="/checkout", tags=["Check-out"])


@router.get("/{chamber_number}", response_model=CheckOutPreview)
def preview_bill(chamber_number: str, db: Session = Depends(get_db)):
    """Current bill for the room's open rental"""
    try:
        return CheckOutService(db).preview(chamber_number)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{chamber_number}", response_model=CheckOutPreview)
def check_out(chamber_number: str, data: CheckOutRequest, db: Session = Depends(get_db)):
    try:
        return CheckOutService(db).check_out(chamber_number, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
