"""
Service для работы с бронированиями
Журнал бронирований: расчет стоимости и переходы статусов
"""
from datetime import date
from typing import List, Union
import asyncio
import logging

from driveshare.database.repositories.booking_repository import BookingRepository
from driveshare.database.repositories.car_repository import CarRepository
from driveshare.models.booking_models import BookingCreate, BookingStatusUpdate, BookingResponse
from driveshare.utils.constants import ALLOWED_STATUS_TRANSITIONS, DEFAULT_SERVICE_FEE
from driveshare.utils.errors import (
    ValidationError, NotFoundError, ConflictError, service_errors
)
from driveshare.utils.helpers import (
    count_rental_days, calculate_total_price, date_ranges_overlap,
    parse_iso_date, utc_now_iso
)

logger = logging.getLogger(__name__)

DateInput = Union[str, date]


def is_transition_allowed(current_status: str, new_status: str) -> bool:
    """Разрешен ли переход между статусами бронирования"""
    return new_status in ALLOWED_STATUS_TRANSITIONS.get(current_status, frozenset())


class BookingService:
    """Service для работы с бронированиями"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        car_repository: CarRepository,
        service_fee: int = DEFAULT_SERVICE_FEE
    ) -> None:
        """
        Инициализация сервиса

        Args:
            booking_repository: Репозиторий бронирований
            car_repository: Репозиторий автомобилей (только чтение по ID)
            service_fee: Фиксированный сервисный сбор за бронирование
        """
        self.booking_repository = booking_repository
        self.car_repository = car_repository
        self.service_fee = service_fee
        # Проверка пересечений и вставка должны выполняться атомарно
        self._lock = asyncio.Lock()

    def quote(self, price_per_day: int, start_date: date, end_date: date) -> int:
        """Итоговая стоимость аренды с учетом сервисного сбора"""
        days = count_rental_days(start_date, end_date)
        return calculate_total_price(price_per_day, days, self.service_fee)

    @service_errors("создании бронирования")
    async def create_booking(
        self,
        car_id: int,
        client_id: int,
        start_date: DateInput,
        end_date: DateInput
    ) -> BookingResponse:
        """
        Создает бронирование в статусе pending

        Args:
            car_id: ID автомобиля
            client_id: ID арендатора
            start_date: Дата начала (ISO-8601 или date)
            end_date: Дата окончания (ISO-8601 или date)

        Returns:
            Созданное бронирование

        Raises:
            NotFoundError: Если автомобиль не найден
            ValidationError: Если даты некорректны или автомобиль недоступен
            ConflictError: Если даты пересекаются с активным бронированием
        """
        booking_data = BookingCreate(
            car_id=car_id,
            client_id=client_id,
            start_date=start_date,
            end_date=end_date
        )

        car = await self.car_repository.get_by_id(booking_data.car_id)
        if not car:
            raise NotFoundError(f"Автомобиль с ID {booking_data.car_id} не найден")

        if not car['available']:
            raise ValidationError(
                f"Автомобиль с ID {booking_data.car_id} недоступен для бронирования"
            )

        total_price = self.quote(car['price_per_day'], booking_data.start_date, booking_data.end_date)

        async with self._lock:
            active_bookings = await self.booking_repository.get_active_by_car(booking_data.car_id)
            for existing in active_bookings:
                if date_ranges_overlap(
                    booking_data.start_date,
                    booking_data.end_date,
                    parse_iso_date(existing['start_date']),
                    parse_iso_date(existing['end_date'])
                ):
                    raise ConflictError(
                        f"Автомобиль с ID {booking_data.car_id} уже забронирован "
                        f"с {existing['start_date']} по {existing['end_date']}",
                        user_message="Автомобиль уже забронирован на выбранные даты"
                    )

            booking_id = await self.booking_repository.create(
                car_id=booking_data.car_id,
                client_id=booking_data.client_id,
                owner_id=car['owner_id'],
                start_date=booking_data.start_date.isoformat(),
                end_date=booking_data.end_date.isoformat(),
                total_price=total_price,
                created_at=utc_now_iso()
            )

        logger.info(
            f"Создано бронирование {booking_id}: автомобиль {booking_data.car_id}, "
            f"клиент {booking_data.client_id}, сумма {total_price}"
        )
        return await self.get_booking(booking_id)

    @service_errors("получении бронирования")
    async def get_booking(self, booking_id: int) -> BookingResponse:
        """
        Получает бронирование по ID

        Raises:
            NotFoundError: Если бронирование не найдено
        """
        booking = await self.booking_repository.get_by_id(booking_id)
        if not booking:
            raise NotFoundError(f"Бронирование с ID {booking_id} не найдено")
        return BookingResponse.model_validate(booking)

    @service_errors("смене статуса бронирования")
    async def update_status(self, booking_id: int, new_status: str) -> BookingResponse:
        """
        Переводит бронирование в новый статус

        Разрешены только переходы pending -> confirmed/rejected
        и confirmed -> completed/cancelled.

        Raises:
            NotFoundError: Если бронирование не найдено
            ValidationError: Если статус неизвестен или переход запрещен
            ConflictError: Если статус успели изменить параллельно
        """
        status = BookingStatusUpdate(status=new_status).status
        booking = await self.get_booking(booking_id)

        if not is_transition_allowed(booking.status, status):
            raise ValidationError(
                f"Переход статуса {booking.status} -> {status} запрещен "
                f"для бронирования {booking_id}"
            )

        updated = await self.booking_repository.update_status(booking_id, booking.status, status)
        if not updated:
            raise ConflictError(
                f"Статус бронирования {booking_id} был изменен параллельно",
                user_message="Бронирование уже изменено. Обновите данные."
            )

        logger.info(f"Бронирование {booking_id}: {booking.status} -> {status}")
        return await self.get_booking(booking_id)

    @service_errors("получении бронирований клиента")
    async def list_for_client(self, client_id: int) -> List[BookingResponse]:
        """Бронирования арендатора в порядке создания"""
        bookings = await self.booking_repository.get_by_client(client_id)
        return [BookingResponse.model_validate(b) for b in bookings]

    @service_errors("получении бронирований владельца")
    async def list_for_owner(self, owner_id: int) -> List[BookingResponse]:
        """Бронирования автомобилей владельца в порядке создания"""
        bookings = await self.booking_repository.get_by_owner(owner_id)
        return [BookingResponse.model_validate(b) for b in bookings]

    async def has_completed_booking(self, client_id: int, car_id: int) -> bool:
        """Завершал ли арендатор аренду этого автомобиля"""
        return await self.booking_repository.exists_completed(client_id, car_id)
