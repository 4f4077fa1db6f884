"""
Service для работы с автомобилями
Бизнес-логика каталога: поиск, объявления владельцев, доступность
"""
from typing import Any, Dict, List, Optional, Union
import logging

from driveshare.database.repositories.car_repository import CarRepository
from driveshare.models.car_models import CarCreate, CarUpdate, CarFilter, CarResponse
from driveshare.utils.errors import service_errors

logger = logging.getLogger(__name__)

CarData = Union[CarCreate, Dict[str, Any]]


class CarService:
    """Service для работы с автомобилями"""

    def __init__(self, car_repository: CarRepository) -> None:
        """
        Инициализация сервиса

        Args:
            car_repository: Репозиторий для работы с автомобилями
        """
        self.car_repository = car_repository

    @service_errors("поиске автомобилей")
    async def search(
        self,
        filters: Optional[Union[CarFilter, Dict[str, Any]]] = None
    ) -> List[CarResponse]:
        """
        Ищет автомобили по фильтру

        Args:
            filters: Город (подстрока без учета регистра), класс (точное совпадение),
                флаг "только доступные". Все условия необязательны и объединяются через И.

        Returns:
            Автомобили в порядке добавления
        """
        if filters is None:
            filters = CarFilter()
        elif not isinstance(filters, CarFilter):
            filters = CarFilter.model_validate(filters)

        cars = await self.car_repository.get_all(
            category=filters.category,
            available_only=filters.available_only
        )

        # Город фильтруется в Python: LOWER() в SQLite не понимает не-ASCII символы
        if filters.city:
            needle = filters.city.lower()
            cars = [car for car in cars if needle in car['city'].lower()]

        return [CarResponse.model_validate(car) for car in cars]

    @service_errors("получении автомобиля")
    async def get_car_by_id(self, car_id: int) -> Optional[CarResponse]:
        """
        Получает автомобиль по ID

        Returns:
            Автомобиль или None, если не найден
        """
        car = await self.car_repository.get_by_id(car_id)
        return CarResponse.model_validate(car) if car else None

    @service_errors("получении автомобилей владельца")
    async def list_by_owner(self, owner_id: int) -> List[CarResponse]:
        """Автомобили владельца в порядке добавления"""
        cars = await self.car_repository.get_by_owner(owner_id)
        return [CarResponse.model_validate(car) for car in cars]

    @service_errors("создании автомобиля")
    async def add_car(self, car_data: CarData, owner_id: int) -> CarResponse:
        """
        Создает новое объявление с валидацией через Pydantic

        Args:
            car_data: Данные автомобиля (CarCreate или словарь с теми же полями)
            owner_id: ID владельца

        Returns:
            Созданный автомобиль (всегда доступен)

        Raises:
            ValidationError: При ошибках валидации (цена, год выпуска и т.д.)
        """
        if not isinstance(car_data, CarCreate):
            car_data = CarCreate.model_validate(car_data)

        car_id = await self.car_repository.create(
            owner_id=owner_id,
            available=True,
            **car_data.model_dump()
        )
        logger.info(
            f"Владелец {owner_id} добавил автомобиль {car_id}: "
            f"{car_data.brand} {car_data.model} ({car_data.city})"
        )
        return await self.get_car_by_id(car_id)

    @service_errors("обновлении автомобиля")
    async def update_car(
        self,
        car_id: int,
        fields: Union[CarUpdate, Dict[str, Any]]
    ) -> Optional[CarResponse]:
        """
        Обновляет переданные поля автомобиля

        Returns:
            Обновленный автомобиль или None, если автомобиль не найден

        Raises:
            ValidationError: При ошибках валидации данных
        """
        if not isinstance(fields, CarUpdate):
            fields = CarUpdate.model_validate(fields)

        update_data = fields.model_dump(exclude_none=True)
        updated = await self.car_repository.update(car_id, **update_data)
        if not updated:
            logger.debug(f"Обновление: автомобиль с ID {car_id} не найден")
            return None

        if update_data:
            logger.info(f"Автомобиль {car_id} обновлен: {', '.join(sorted(update_data))}")
        return await self.get_car_by_id(car_id)

    @service_errors("удалении автомобиля")
    async def remove_car(self, car_id: int) -> None:
        """Удаляет автомобиль; повторное удаление не является ошибкой"""
        await self.car_repository.delete(car_id)
