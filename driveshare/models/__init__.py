"""
Pydantic модели для валидации данных
"""
from .user_models import UserCreate, UserResponse
from .car_models import CarCreate, CarUpdate, CarFilter, CarResponse
from .booking_models import BookingCreate, BookingStatusUpdate, BookingResponse
from .review_models import ReviewCreate, ReviewResponse

__all__ = [
    'UserCreate',
    'UserResponse',
    'CarCreate',
    'CarUpdate',
    'CarFilter',
    'CarResponse',
    'BookingCreate',
    'BookingStatusUpdate',
    'BookingResponse',
    'ReviewCreate',
    'ReviewResponse',
]
