"""
Фасад доменного сервиса бронирования

Единая точка входа для слоя представления: собирает каталог учетных записей,
каталог автомобилей, журнал бронирований и отзывы поверх одной базы данных
и хранит текущего пользователя сессии.

Использование:
    async with DriveShareService(Config()) as service:
        user = await service.register("Alice", "alice@x.com", "client")
        cars = await service.search({"city": "Paris"})
"""
from datetime import date
from typing import Any, Dict, List, Optional, Union
import logging

from driveshare.config import Config, load_config
from driveshare.database.database import init_db, add_sample_data
from driveshare.database.db_pool import DatabasePool
from driveshare.database.repositories import (
    UserRepository, CarRepository, BookingRepository, ReviewRepository
)
from driveshare.models import (
    UserResponse, CarCreate, CarUpdate, CarFilter, CarResponse,
    BookingResponse, ReviewResponse
)
from driveshare.services.user_service import UserService
from driveshare.services.car_service import CarService
from driveshare.services.booking_service import BookingService
from driveshare.services.review_service import ReviewService
from driveshare.utils.cache import SimpleCache
from driveshare.utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class DriveShareService:
    """Фасад доменного сервиса: один экземпляр на процесс или на тест"""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or load_config()
        self.db_pool = DatabasePool(self.config.DB_PATH)
        self.cache = SimpleCache(default_ttl=self.config.CACHE_TTL)

        self.user_repository = UserRepository(self.db_pool, self.cache)
        self.car_repository = CarRepository(self.db_pool, self.cache)
        self.booking_repository = BookingRepository(self.db_pool)
        self.review_repository = ReviewRepository(self.db_pool)

        self.users = UserService(self.user_repository)
        self.cars = CarService(self.car_repository)
        self.bookings = BookingService(
            self.booking_repository,
            self.car_repository,
            service_fee=self.config.SERVICE_FEE
        )
        self.reviews = ReviewService(self.review_repository)

        self._current_user: Optional[UserResponse] = None

    # ------------------------------------------------------------------
    # Жизненный цикл
    # ------------------------------------------------------------------

    async def initialize(self) -> 'DriveShareService':
        """Открывает базу, создает таблицы и при необходимости добавляет демо-данные"""
        await self.db_pool.initialize()
        await init_db(self.db_pool)
        if self.config.SEED_SAMPLE_DATA:
            await self.seed_sample_data()
        return self

    async def close(self):
        """Закрывает соединение с базой"""
        await self.db_pool.close()
        self._current_user = None

    async def __aenter__(self) -> 'DriveShareService':
        return await self.initialize()

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def seed_sample_data(self) -> bool:
        """Добавляет демонстрационный маркетплейс в пустую базу"""
        added = await add_sample_data(self.db_pool, service_fee=self.config.SERVICE_FEE)
        # Данные добавлены в обход репозиториев фасада
        self.cache.clear()
        return added

    # ------------------------------------------------------------------
    # Учетные записи и сессия
    # ------------------------------------------------------------------

    async def register(self, name: str, email: str, role: str) -> UserResponse:
        """Регистрирует пользователя и делает его пользователем сессии"""
        user = await self.users.register(name, email, role)
        self._current_user = user
        return user.model_copy()

    async def login(self, email: str) -> UserResponse:
        """Входит по email; NotFoundError если пользователь не найден"""
        user = await self.users.authenticate(email)
        self._current_user = user
        logger.info(f"Пользователь {user.id} вошел в систему")
        return user.model_copy()

    def logout(self) -> None:
        """Завершает сессию; повторный вызов не является ошибкой"""
        if self._current_user is not None:
            logger.info(f"Пользователь {self._current_user.id} вышел из системы")
        self._current_user = None

    def current_user(self) -> Optional[UserResponse]:
        """Текущий пользователь сессии или None"""
        if self._current_user is None:
            return None
        return self._current_user.model_copy()

    # ------------------------------------------------------------------
    # Каталог
    # ------------------------------------------------------------------

    async def search(
        self,
        filters: Optional[Union[CarFilter, Dict[str, Any]]] = None
    ) -> List[CarResponse]:
        return await self.cars.search(filters)

    async def get_car_by_id(self, car_id: int) -> Optional[CarResponse]:
        return await self.cars.get_car_by_id(car_id)

    async def list_cars_by_owner(self, owner_id: int) -> List[CarResponse]:
        return await self.cars.list_by_owner(owner_id)

    async def add_car(
        self,
        car_data: Union[CarCreate, Dict[str, Any]],
        owner_id: int
    ) -> CarResponse:
        """Публикует объявление; владелец должен существовать"""
        await self.users.require_user(owner_id)
        return await self.cars.add_car(car_data, owner_id)

    async def update_car(
        self,
        car_id: int,
        fields: Union[CarUpdate, Dict[str, Any]]
    ) -> Optional[CarResponse]:
        return await self.cars.update_car(car_id, fields)

    async def remove_car(self, car_id: int) -> None:
        await self.cars.remove_car(car_id)

    # ------------------------------------------------------------------
    # Бронирования
    # ------------------------------------------------------------------

    async def create_booking(
        self,
        car_id: int,
        client_id: int,
        start_date: Union[str, date],
        end_date: Union[str, date]
    ) -> BookingResponse:
        """Создает бронирование от имени существующего арендатора"""
        await self.users.require_user(client_id)
        return await self.bookings.create_booking(car_id, client_id, start_date, end_date)

    async def list_bookings_for_client(self, client_id: int) -> List[BookingResponse]:
        return await self.bookings.list_for_client(client_id)

    async def list_bookings_for_owner(self, owner_id: int) -> List[BookingResponse]:
        return await self.bookings.list_for_owner(owner_id)

    async def update_booking_status(self, booking_id: int, new_status: str) -> BookingResponse:
        return await self.bookings.update_status(booking_id, new_status)

    # ------------------------------------------------------------------
    # Отзывы
    # ------------------------------------------------------------------

    async def list_reviews_for_car(self, car_id: int) -> List[ReviewResponse]:
        return await self.reviews.list_for_car(car_id)

    async def add_review(
        self,
        car_id: int,
        user_id: int,
        user_name: str,
        rating: int,
        comment: str
    ) -> ReviewResponse:
        """
        Добавляет отзыв на автомобиль

        Raises:
            NotFoundError: Если автомобиль или автор не найдены
            ValidationError: Если оценка вне 1-5 или у автора нет завершенной аренды
                этого автомобиля (когда проверка включена в конфигурации)
        """
        car = await self.cars.get_car_by_id(car_id)
        if car is None:
            logger.warning(f"Отзыв на несуществующий автомобиль {car_id}")
            raise NotFoundError(f"Автомобиль с ID {car_id} не найден")

        await self.users.require_user(user_id)
        # Данные отзыва проверяются до правила о завершенной аренде
        await self.reviews.validate_review(car_id, user_id, user_name, rating, comment)

        if self.config.REVIEW_REQUIRES_COMPLETED_BOOKING:
            if not await self.bookings.has_completed_booking(user_id, car_id):
                logger.warning(f"Отзыв без завершенной аренды: пользователь {user_id}, автомобиль {car_id}")
                raise ValidationError(
                    f"Пользователь {user_id} не завершал аренду автомобиля {car_id}",
                    user_message="Оставить отзыв можно только после завершенной аренды"
                )

        return await self.reviews.add_review(car_id, user_id, user_name, rating, comment)
