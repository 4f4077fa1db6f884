"""
Service для работы с пользователями
Каталог учетных записей: регистрация и поиск по email
"""
from typing import Optional
import asyncio
import logging

import aiosqlite

from driveshare.database.repositories.user_repository import UserRepository
from driveshare.models.user_models import UserCreate, UserResponse
from driveshare.utils.errors import ValidationError, NotFoundError, service_errors

logger = logging.getLogger(__name__)


class UserService:
    """Service для работы с пользователями"""

    def __init__(self, user_repository: UserRepository) -> None:
        """
        Инициализация сервиса

        Args:
            user_repository: Репозиторий для работы с пользователями
        """
        self.user_repository = user_repository
        self._lock = asyncio.Lock()

    @service_errors("регистрации пользователя")
    async def register(self, name: str, email: str, role: str) -> UserResponse:
        """
        Регистрирует нового пользователя

        Args:
            name: Отображаемое имя
            email: Email, уникальный с учетом регистра
            role: 'client' или 'owner'

        Returns:
            Созданный пользователь

        Raises:
            ValidationError: Если данные некорректны или email уже занят
        """
        user_data = UserCreate(name=name, email=email, role=role)

        async with self._lock:
            existing = await self.user_repository.get_by_email(user_data.email)
            if existing:
                raise ValidationError(f"Пользователь с email {user_data.email} уже зарегистрирован")

            try:
                user_id = await self.user_repository.create(
                    name=user_data.name,
                    email=user_data.email,
                    role=user_data.role
                )
            except aiosqlite.IntegrityError as e:
                raise ValidationError(
                    f"Пользователь с email {user_data.email} уже зарегистрирован"
                ) from e

        logger.info(f"Зарегистрирован пользователь {user_id} ({user_data.role})")
        return await self.require_user(user_id)

    @service_errors("входе пользователя")
    async def authenticate(self, email: str) -> UserResponse:
        """
        Находит пользователя по точному совпадению email

        Raises:
            NotFoundError: Если пользователь не найден
        """
        user = await self.user_repository.get_by_email(email)
        if not user:
            raise NotFoundError(
                f"Пользователь с email {email} не найден",
                user_message="Пользователь не найден"
            )
        return UserResponse.model_validate(user)

    async def get_user(self, user_id: int) -> Optional[UserResponse]:
        """Получает пользователя по ID или None"""
        user = await self.user_repository.get_by_id(user_id)
        return UserResponse.model_validate(user) if user else None

    @service_errors("получении пользователя")
    async def require_user(self, user_id: int) -> UserResponse:
        """
        Получает пользователя по ID

        Raises:
            NotFoundError: Если пользователь не найден
        """
        user = await self.get_user(user_id)
        if user is None:
            raise NotFoundError(f"Пользователь с ID {user_id} не найден")
        return user
