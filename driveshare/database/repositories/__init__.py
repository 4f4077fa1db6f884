"""
Repository Pattern для работы с БД
"""
from .user_repository import UserRepository
from .car_repository import CarRepository
from .booking_repository import BookingRepository
from .review_repository import ReviewRepository

__all__ = [
    'UserRepository',
    'CarRepository',
    'BookingRepository',
    'ReviewRepository',
]
