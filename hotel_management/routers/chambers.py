"""
Chamber routes
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_management.database import get_db
from hotel_management.models.schemas import (
    ChamberCreate, ChamberUpdate, ChamberResponse, PageResponse
)
from hotel_management.services.chamber_service import ChamberService

router = APIRouter(prefix="/chambers", tags=["Chambers"])


@router.get("", response_model=PageResponse[ChamberResponse])
def search_chambers(
    text: str = "",
    page: int = Query(0, ge=0),
    size: int = Query(12, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """Search rooms by number, type or note"""
    result = ChamberService(db).search_chamber(text, page, size)
    return PageResponse[ChamberResponse].model_validate(result.to_dict(), from_attributes=True)


@router.get("/count")
def count_chambers(db: Session = Depends(get_db)):
    return {"count": ChamberService(db).count()}


@router.get("/{chamber_id}", response_model=ChamberResponse)
def get_chamber(chamber_id: int, db: Session = Depends(get_db)):
    chamber = ChamberService(db).get_chamber(chamber_id)
    if not chamber:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Phòng không tồn tại")
    return chamber


@router.post("", response_model=ChamberResponse, status_code=status.HTTP_201_CREATED)
def create_chamber(data: ChamberCreate, db: Session = Depends(get_db)):
    return ChamberService(db).add_chamber(data)


@router.put("/{chamber_id}", response_model=ChamberResponse)
def update_chamber(chamber_id: int, data: ChamberUpdate, db: Session = Depends(get_db)):
    """Overwrite a room's details"""
    try:
        return ChamberService(db).update_chamber_info(
            chamber_id, data.chamber_number, data.chamber_type, data.price_day,
            data.chamber_area, data.note, data.is_vip
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{chamber_id}")
def delete_chamber(chamber_id: int, db: Session = Depends(get_db)):
    try:
        ChamberService(db).delete_chamber(chamber_id)
        return {"message": "Xóa phòng thành công"}
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
