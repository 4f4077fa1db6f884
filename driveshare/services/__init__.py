"""
Сервисы доменной логики бронирования
"""
from .user_service import UserService
from .car_service import CarService
from .booking_service import BookingService
from .review_service import ReviewService
from .driveshare_service import DriveShareService

__all__ = [
    'UserService',
    'CarService',
    'BookingService',
    'ReviewService',
    'DriveShareService',
]
