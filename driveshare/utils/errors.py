"""
Централизованная обработка ошибок
"""
import logging
from typing import Optional, Callable
from functools import wraps

import aiosqlite
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class DriveShareError(Exception):
    """Базовое исключение доменного сервиса"""
    def __init__(self, message: str, user_message: Optional[str] = None):
        self.message = message
        self.user_message = user_message or message
        super().__init__(self.message)


class ValidationError(DriveShareError):
    """Ошибка валидации данных"""
    pass


class NotFoundError(DriveShareError):
    """Ошибка - объект не найден"""
    pass


class ConflictError(DriveShareError):
    """Конфликт: пересечение бронирований или конкурентное изменение"""
    pass


class DatabaseError(DriveShareError):
    """Ошибка работы с базой данных"""
    pass


def format_pydantic_error(error: PydanticValidationError) -> str:
    """
    Собирает читаемое сообщение из ошибки Pydantic

    Каждая ошибка выводится как "поле: причина", чтобы было видно,
    какое именно правило нарушено.
    """
    parts = []
    for item in error.errors():
        field = '.'.join(str(loc) for loc in item.get('loc', ())) or 'данные'
        message = item.get('msg', '')
        # Pydantic добавляет префикс к сообщениям из field_validator
        if message.startswith('Value error, '):
            message = message[len('Value error, '):]
        parts.append(f"{field}: {message}")
    return '; '.join(parts)


def service_errors(operation: str) -> Callable:
    """
    Декоратор для методов сервисов

    Доменные ошибки пробрасываются без изменений, ошибки валидации
    Pydantic превращаются в ValidationError, ошибки SQLite - в DatabaseError.

    Usage:
        @service_errors("создании автомобиля")
        async def add_car(self, ...):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (ValidationError, NotFoundError, ConflictError) as e:
                logger.warning(f"Ошибка при {operation}: {e.message}")
                raise
            except DatabaseError as e:
                logger.error(f"Ошибка БД при {operation}: {e.message}")
                raise
            except PydanticValidationError as e:
                message = format_pydantic_error(e)
                logger.warning(f"Ошибка валидации при {operation}: {message}")
                raise ValidationError(message) from e
            except aiosqlite.Error as e:
                logger.error(f"Ошибка БД при {operation}: {e}")
                raise DatabaseError(
                    f"Ошибка при {operation}: {e}",
                    user_message="Ошибка работы с базой данных. Попробуйте позже."
                ) from e
        return wrapper
    return decorator
