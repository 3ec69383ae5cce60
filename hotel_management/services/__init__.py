# Business Services
from hotel_management.services.chamber_service import ChamberService
from hotel_management.services.guest_service import GuestService
from hotel_management.services.rental_service import RentalService
from hotel_management.services.checkin_service import CheckInService
from hotel_management.services.chamber_listing_service import ChamberListingService
from hotel_management.services.order_service import OrderService
from hotel_management.services.food_service import CategoryService, FoodItemService
from hotel_management.services.checkout_service import CheckOutService

__all__ = [
    'ChamberService', 'GuestService', 'RentalService', 'CheckInService',
    'ChamberListingService', 'OrderService', 'CategoryService',
    'FoodItemService', 'CheckOutService'
]
