# API Routers
from hotel_management.routers import checkin, chambers, guests, orders, food, checkout

__all__ = ['checkin', 'chambers', 'guests', 'orders', 'food', 'checkout']
