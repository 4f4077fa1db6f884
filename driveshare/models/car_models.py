"""
Pydantic модели для автомобилей
"""
from datetime import date
from typing import List, Optional, Literal
from pydantic import BaseModel, Field, field_validator

from driveshare.utils.constants import MIN_CAR_YEAR, MAX_PRICE_PER_DAY

CarCategory = Literal['SUV', 'Berline', 'Pickup', 'Citadine', 'Sport', 'Luxe']
RentalType = Literal['classic', 'marketplace']


def _check_price(v: int) -> int:
    if v <= 0:
        raise ValueError("Цена должна быть положительной")
    if v > MAX_PRICE_PER_DAY:
        raise ValueError(f"Цена слишком большая (максимум {MAX_PRICE_PER_DAY})")
    return v


def _check_year(v: int) -> int:
    max_year = date.today().year + 1
    if v < MIN_CAR_YEAR or v > max_year:
        raise ValueError(f"Год выпуска должен быть в диапазоне {MIN_CAR_YEAR}-{max_year}")
    return v


def _check_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Поле не может быть пустым")
    return v


class CarCreate(BaseModel):
    """Модель для создания объявления"""
    rental_type: RentalType = Field(default='marketplace', description="classic - автомобиль платформы, marketplace - владельца")
    category: CarCategory = Field(..., description="Класс автомобиля")
    brand: str = Field(..., max_length=100, description="Марка")
    model: str = Field(..., max_length=100, description="Модель")
    year: int = Field(..., description="Год выпуска")
    price_per_day: int = Field(..., description="Цена за день")
    city: str = Field(..., max_length=200, description="Город")
    description: str = Field(default='', max_length=2000, description="Описание")
    images: List[str] = Field(default_factory=list, description="Ссылки на изображения в порядке показа")

    class Config:
        extra = 'forbid'

    @field_validator('brand', 'model', 'city')
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Обязательные текстовые поля не могут быть пустыми"""
        return _check_text(v)

    @field_validator('year')
    @classmethod
    def validate_year(cls, v: int) -> int:
        """Валидация года выпуска"""
        return _check_year(v)

    @field_validator('price_per_day')
    @classmethod
    def validate_price(cls, v: int) -> int:
        """Валидация цены"""
        return _check_price(v)


class CarUpdate(BaseModel):
    """Модель для частичного обновления объявления"""
    rental_type: Optional[RentalType] = None
    category: Optional[CarCategory] = None
    brand: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)
    year: Optional[int] = None
    price_per_day: Optional[int] = None
    city: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    images: Optional[List[str]] = None
    available: Optional[bool] = None

    class Config:
        extra = 'forbid'

    @field_validator('brand', 'model', 'city')
    @classmethod
    def validate_text(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return _check_text(v)
        return v

    @field_validator('year')
    @classmethod
    def validate_year(cls, v: Optional[int]) -> Optional[int]:
        if v is not None:
            return _check_year(v)
        return v

    @field_validator('price_per_day')
    @classmethod
    def validate_price(cls, v: Optional[int]) -> Optional[int]:
        if v is not None:
            return _check_price(v)
        return v


class CarFilter(BaseModel):
    """Параметры поиска по каталогу (все необязательные, объединяются через И)"""
    city: Optional[str] = Field(None, description="Подстрока названия города, без учета регистра")
    category: Optional[CarCategory] = Field(None, description="Точное совпадение класса")
    available_only: bool = Field(default=False, description="Только доступные автомобили")

    class Config:
        extra = 'forbid'

    @field_validator('city')
    @classmethod
    def validate_city(cls, v: Optional[str]) -> Optional[str]:
        """Пустая строка означает отсутствие фильтра"""
        if v is not None:
            v = v.strip()
            return v or None
        return v


class CarResponse(BaseModel):
    """Модель ответа с информацией об автомобиле"""
    id: int
    owner_id: int
    rental_type: RentalType
    category: CarCategory
    brand: str
    model: str
    year: int
    price_per_day: int
    city: str
    description: str = ''
    images: List[str] = Field(default_factory=list)
    available: bool
    created_at: Optional[str] = None

    class Config:
        from_attributes = True
