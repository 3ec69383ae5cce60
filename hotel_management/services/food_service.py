"""
Menu catalog - categories and food items
"""
from typing import List, Optional
import logging
from sqlalchemy.orm import Session, joinedload
from hotel_management.config import settings
from hotel_management.models.entities import Category, FoodItem
from hotel_management.models.schemas import CategoryCreate, FoodItemCreate, FoodItemResponse
from hotel_management.services.pagination import Page, paginate

logger = logging.getLogger(__name__)


class CategoryService:
    """Menu category service"""

    def __init__(self, db: Session):
        self.db = db

    def load_list_categories(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    def get_one(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def save_category(self, data: CategoryCreate) -> Category:
        category = Category(**data.model_dump())
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category


class FoodItemService:
    """Menu item service"""

    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: int) -> Optional[FoodItem]:
        return self.db.query(FoodItem).filter(FoodItem.id == item_id).first()

    def save_food_item(self, data: FoodItemCreate) -> FoodItem:
        if not CategoryService(self.db).get_one(data.category_id):
            raise ValueError("Danh mục không tồn tại")

        item = FoodItem(**data.model_dump())
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"Food item {item.name} saved (id={item.id})")
        return item

    def delete_food_item(self, item_id: int) -> None:
        """Deleting an unknown id is a no-op"""
        item = self.get_item(item_id)
        if item is None:
            return
        self.db.delete(item)
        self.db.commit()

    def load_to_select_option(self) -> List[FoodItem]:
        return self.db.query(FoodItem).order_by(FoodItem.name).all()

    def get_list_food_item(self, text: str = "", page: int = 0, size: int = None) -> Page:
        """Items whose name contains text, as DTOs carrying the category name"""
        query = self.db.query(FoodItem).options(joinedload(FoodItem.category))
        if text:
            query = query.filter(FoodItem.name.like(f"%{text}%"))
        result = paginate(query.order_by(FoodItem.id), page, size or settings.PAGE_SIZE)
        return result.map(self._to_response)

    @staticmethod
    def _to_response(item: FoodItem) -> FoodItemResponse:
        return FoodItemResponse(
            id=item.id,
            name=item.name,
            description=item.description,
            price=item.price,
            image=item.image,
            category_id=item.category_id,
            category_name=item.category.category_name if item.category else None,
        )
