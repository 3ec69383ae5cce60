# Entity models
from hotel_management.models.entities import (
    Chamber, Guest, Rental, Payment, Category, FoodItem, OrderFood, ServiceBill
)

__all__ = [
    'Chamber', 'Guest', 'Rental', 'Payment', 'Category', 'FoodItem',
    'OrderFood', 'ServiceBill'
]
