"""
Pydantic модели для бронирований
"""
from datetime import date
from typing import Literal
from pydantic import BaseModel, Field, model_validator

BookingStatus = Literal['pending', 'confirmed', 'rejected', 'cancelled', 'completed']


class BookingCreate(BaseModel):
    """Модель для создания бронирования"""
    car_id: int = Field(..., description="ID автомобиля")
    client_id: int = Field(..., description="ID арендатора")
    start_date: date = Field(..., description="Дата начала (ГГГГ-ММ-ДД)")
    end_date: date = Field(..., description="Дата окончания (ГГГГ-ММ-ДД)")

    @model_validator(mode='after')
    def validate_dates(self) -> 'BookingCreate':
        """Дата окончания не раньше даты начала"""
        if self.end_date < self.start_date:
            raise ValueError("Дата окончания не может быть раньше даты начала")
        return self


class BookingStatusUpdate(BaseModel):
    """Модель для смены статуса бронирования"""
    status: BookingStatus


class BookingResponse(BaseModel):
    """Модель ответа с информацией о бронировании"""
    id: int
    car_id: int
    client_id: int
    owner_id: int
    start_date: date
    end_date: date
    total_price: int
    status: BookingStatus
    created_at: str

    class Config:
        from_attributes = True
