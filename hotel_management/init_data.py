"""
Sample data
Rooms on floors 1-4 across the three price tiers, plus a small menu.
Safe to run repeatedly: existing rows are matched by natural key and skipped.

    python -m hotel_management.init_data
"""
import logging
from typing import Dict

from hotel_management.database import SessionLocal, init_db
from hotel_management.models.entities import Chamber, Category, FoodItem

logger = logging.getLogger(__name__)

# (type, vip, price_day, area) per room slot on each floor
ROOM_LAYOUT = [
    ("single", False, 450_000, 18),
    ("single", False, 600_000, 20),
    ("single", True, 950_000, 22),
    ("couple", False, 1_200_000, 28),
    ("couple", True, 1_800_000, 30),
    ("family", False, 2_500_000, 40),
    ("family", True, 3_500_000, 55),
]

MENU = {
    "Món chính": [
        ("Phở Bò", "Phở bò truyền thống", 50_000),
        ("Cơm gà", "Cơm gà Hội An", 60_000),
        ("Gà nướng", "Gà nướng mật ong", 80_000),
    ],
    "Đồ uống": [
        ("Cà phê sữa đá", None, 25_000),
        ("Nước cam", "Cam vắt tươi", 30_000),
    ],
    "Tráng miệng": [
        ("Chè ba màu", None, 20_000),
    ],
}


def init_chambers(db, floors=(1, 2, 3, 4)) -> int:
    created = 0
    for floor in floors:
        for slot, (chamber_type, is_vip, price_day, area) in enumerate(ROOM_LAYOUT, start=1):
            number = f"{floor}{slot:02d}"
            if db.query(Chamber).filter(Chamber.chamber_number == number).first():
                continue
            db.add(Chamber(
                chamber_number=number,
                chamber_type=chamber_type,
                is_vip=is_vip,
                price_day=price_day,
                chamber_area=area,
                is_empty=True,
            ))
            created += 1
    db.commit()
    return created


def init_menu(db) -> int:
    created = 0
    for category_name, items in MENU.items():
        category = db.query(Category).filter(Category.category_name == category_name).first()
        if not category:
            category = Category(category_name=category_name)
            db.add(category)
            db.flush()
        for name, description, price in items:
            if db.query(FoodItem).filter(FoodItem.name == name).first():
                continue
            db.add(FoodItem(name=name, description=description, price=price, category_id=category.id))
            created += 1
    db.commit()
    return created


def seed_sample_data(db) -> Dict[str, int]:
    """Insert the sample rooms and menu; returns how many rows of each were new"""
    stats = {"chambers": init_chambers(db), "food_items": init_menu(db)}
    logger.info(f"Sample data seeded: {stats}")
    return stats


def main():
    init_db()
    db = SessionLocal()
    try:
        stats = seed_sample_data(db)
        print(f"Sample data: {stats['chambers']} rooms, {stats['food_items']} menu items added")
    finally:
        db.close()


if __name__ == '__main__':
    main()
