"""
Pydantic модели для пользователей
"""
import re
from typing import Optional, Literal
from pydantic import BaseModel, Field, field_validator

UserRole = Literal['client', 'owner']

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


class UserCreate(BaseModel):
    """Модель для регистрации пользователя"""
    name: str = Field(..., max_length=200, description="Отображаемое имя")
    email: str = Field(..., max_length=320, description="Email, уникальный в системе")
    role: UserRole = Field(default='client', description="Роль: арендатор или владелец")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Валидация имени"""
        v = v.strip()
        if not v:
            raise ValueError("Имя не может быть пустым")
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Валидация email (регистр сохраняется)"""
        v = v.strip()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Некорректный формат email")
        return v


class UserResponse(BaseModel):
    """Модель ответа с информацией о пользователе"""
    id: int
    name: str
    email: str
    role: UserRole
    avatar: Optional[str] = None
    balance: float = 0
    created_at: Optional[str] = None

    class Config:
        from_attributes = True
