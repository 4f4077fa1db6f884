"""
Pydantic модели для отзывов
"""
import datetime
from pydantic import BaseModel, Field, field_validator

from driveshare.utils.constants import MIN_RATING, MAX_RATING


class ReviewCreate(BaseModel):
    """Модель для создания отзыва"""
    car_id: int
    user_id: int
    user_name: str = Field(..., max_length=200)
    rating: int = Field(..., description="Оценка от 1 до 5")
    comment: str = Field(default='', max_length=2000)

    @field_validator('rating')
    @classmethod
    def validate_rating(cls, v: int) -> int:
        """Валидация оценки"""
        if v < MIN_RATING or v > MAX_RATING:
            raise ValueError(f"Оценка должна быть от {MIN_RATING} до {MAX_RATING}")
        return v

    @field_validator('user_name')
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Имя автора не может быть пустым")
        return v


class ReviewResponse(BaseModel):
    """Модель ответа с информацией об отзыве"""
    id: int
    car_id: int
    user_id: int
    user_name: str
    rating: int
    comment: str
    date: datetime.date

    class Config:
        from_attributes = True
