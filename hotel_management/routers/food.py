"""
Menu catalog routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotel_management.database import get_db
from hotel_management.models.schemas import (
    CategoryCreate, CategoryResponse, FoodItemCreate, FoodItemResponse, PageResponse
)
from hotel_management.services.food_service import CategoryService, FoodItemService

router = APIRouter(tags=["Menu"])


# ============== Categories ==============

@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return CategoryService(db).load_list_categories()


@router.get("/categories/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, db: Session = Depends(get_db)):
    category = CategoryService(db).get_one(category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Danh mục không tồn tại")
    return category


@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryCreate, db: Session = Depends(get_db)):
    return CategoryService(db).save_category(data)


# ============== Food items ==============

@router.get("/foods", response_model=PageResponse[FoodItemResponse])
def list_food_items(
    text: str = "",
    page: int = Query(0, ge=0),
    size: int = Query(12, ge=1, le=100),
    db: Session = Depends(get_db)
):
    return FoodItemService(db).get_list_food_item(text, page, size).to_dict()


@router.get("/foods/options", response_model=List[FoodItemResponse])
def food_item_options(db: Session = Depends(get_db)):
    """All items, for a select box"""
    return FoodItemService(db).load_to_select_option()


@router.get("/foods/{item_id}", response_model=FoodItemResponse)
def get_food_item(item_id: int, db: Session = Depends(get_db)):
    item = FoodItemService(db).get_item(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Món ăn không tồn tại")
    return item


@router.post("/foods", response_model=FoodItemResponse, status_code=status.HTTP_201_CREATED)
def create_food_item(data: FoodItemCreate, db: Session = Depends(get_db)):
    try:
        return FoodItemService(db).save_food_item(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/foods/{item_id}")
def delete_food_item(item_id: int, db: Session = Depends(get_db)):
    FoodItemService(db).delete_food_item(item_id)
    return {"message": "Xóa món thành công"}
