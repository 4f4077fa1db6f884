"""
Unit тесты для модуля booking_service.py
"""
import pytest
from unittest.mock import AsyncMock, Mock
from driveshare.services.booking_service import BookingService, is_transition_allowed
from driveshare.database.repositories.booking_repository import BookingRepository
from driveshare.database.repositories.car_repository import CarRepository
from driveshare.utils.constants import BOOKING_STATUSES
from driveshare.utils.errors import ValidationError, NotFoundError, ConflictError

TERMINAL_STATUSES = ['rejected', 'cancelled', 'completed']


class TestTransitions:
    """Тесты таблицы переходов статусов"""

    def test_pending_transitions(self):
        allowed = {s for s in BOOKING_STATUSES if is_transition_allowed('pending', s)}
        assert allowed == {'confirmed', 'rejected'}

    def test_confirmed_transitions(self):
        allowed = {s for s in BOOKING_STATUSES if is_transition_allowed('confirmed', s)}
        assert allowed == {'completed', 'cancelled'}

    @pytest.mark.parametrize("status", TERMINAL_STATUSES)
    def test_terminal_statuses(self, status):
        assert not any(is_transition_allowed(status, s) for s in BOOKING_STATUSES)


class TestBookingService:
    """Тесты для класса BookingService"""

    @pytest.fixture
    def car_repository(self, sample_car_data):
        """Мок репозитория автомобилей"""
        repo = Mock(spec=CarRepository)
        repo.get_by_id = AsyncMock(return_value=dict(sample_car_data))
        return repo

    @pytest.fixture
    def booking_repository(self, sample_booking_data):
        """Мок репозитория бронирований"""
        repo = Mock(spec=BookingRepository)
        repo.create = AsyncMock(return_value=1)
        repo.get_by_id = AsyncMock(return_value=dict(sample_booking_data))
        repo.get_active_by_car = AsyncMock(return_value=[])
        repo.get_by_client = AsyncMock(return_value=[sample_booking_data])
        repo.get_by_owner = AsyncMock(return_value=[sample_booking_data])
        repo.update_status = AsyncMock(return_value=True)
        repo.exists_completed = AsyncMock(return_value=False)
        return repo

    @pytest.fixture
    def booking_service(self, booking_repository, car_repository):
        return BookingService(booking_repository, car_repository, service_fee=15)

    @pytest.mark.asyncio
    async def test_create_booking_price_and_owner(self, booking_service, booking_repository):
        """Стоимость: 85 * 2 дня + 15, владелец берется из автомобиля"""
        result = await booking_service.create_booking(1, 2, "2024-03-01", "2024-03-03")

        assert result.status == 'pending'
        call_kwargs = booking_repository.create.call_args.kwargs
        assert call_kwargs['total_price'] == 185
        assert call_kwargs['owner_id'] == 1
        assert call_kwargs['start_date'] == "2024-03-01"
        assert call_kwargs['end_date'] == "2024-03-03"
        assert 'status' not in call_kwargs

    @pytest.mark.asyncio
    async def test_create_booking_three_days(self, booking_service, booking_repository):
        """85 в день, 3 дня: 270"""
        await booking_service.create_booking(1, 2, "2024-03-01", "2024-03-04")

        assert booking_repository.create.call_args.kwargs['total_price'] == 270

    @pytest.mark.asyncio
    async def test_create_booking_same_day(self, booking_service, booking_repository):
        """Аренда на один день: 85 + 15"""
        await booking_service.create_booking(1, 2, "2024-03-01", "2024-03-01")

        assert booking_repository.create.call_args.kwargs['total_price'] == 100

    @pytest.mark.asyncio
    async def test_create_booking_custom_fee(self, booking_repository, car_repository):
        """Сервисный сбор берется из конфигурации"""
        service = BookingService(booking_repository, car_repository, service_fee=0)

        await service.create_booking(1, 2, "2024-03-01", "2024-03-03")

        assert booking_repository.create.call_args.kwargs['total_price'] == 170

    @pytest.mark.asyncio
    async def test_create_booking_end_before_start(self, booking_service, booking_repository):
        """Тест дат в обратном порядке"""
        with pytest.raises(ValidationError, match="раньше даты начала"):
            await booking_service.create_booking(1, 2, "2024-03-03", "2024-03-01")

        booking_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_booking_invalid_date(self, booking_service):
        """Тест некорректного формата даты"""
        with pytest.raises(ValidationError, match="start_date"):
            await booking_service.create_booking(1, 2, "01/03/2024", "2024-03-03")

    @pytest.mark.asyncio
    async def test_create_booking_car_not_found(self, booking_service, car_repository):
        """Тест бронирования несуществующего автомобиля"""
        car_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match="не найден"):
            await booking_service.create_booking(999, 2, "2024-03-01", "2024-03-03")

    @pytest.mark.asyncio
    async def test_create_booking_unavailable_car(self, booking_service, car_repository, sample_car_data):
        """Недоступный автомобиль забронировать нельзя"""
        car_repository.get_by_id.return_value = {**sample_car_data, 'available': False}

        with pytest.raises(ValidationError, match="недоступен"):
            await booking_service.create_booking(1, 2, "2024-03-01", "2024-03-03")

    @pytest.mark.asyncio
    async def test_create_booking_overlap(self, booking_service, booking_repository, sample_booking_data):
        """Пересечение с активным бронированием - конфликт"""
        booking_repository.get_active_by_car.return_value = [
            {**sample_booking_data, 'start_date': '2024-03-02', 'end_date': '2024-03-05'}
        ]

        with pytest.raises(ConflictError, match="уже забронирован"):
            await booking_service.create_booking(1, 2, "2024-03-01", "2024-03-03")

        booking_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_booking_adjacent_dates(self, booking_service, booking_repository, sample_booking_data):
        """Непересекающиеся даты не мешают бронированию"""
        booking_repository.get_active_by_car.return_value = [
            {**sample_booking_data, 'start_date': '2024-03-04', 'end_date': '2024-03-06'}
        ]

        await booking_service.create_booking(1, 2, "2024-03-01", "2024-03-03")

        booking_repository.create.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_status_pending_to_confirmed(self, booking_service, booking_repository, sample_booking_data):
        """Тест подтверждения бронирования"""
        booking_repository.get_by_id.side_effect = [
            dict(sample_booking_data),
            {**sample_booking_data, 'status': 'confirmed'},
        ]

        result = await booking_service.update_status(1, 'confirmed')

        assert result.status == 'confirmed'
        booking_repository.update_status.assert_called_once_with(1, 'pending', 'confirmed')

    @pytest.mark.asyncio
    async def test_update_status_illegal_transition(self, booking_service, booking_repository, sample_booking_data):
        """pending -> completed запрещен"""
        with pytest.raises(ValidationError, match="pending -> completed"):
            await booking_service.update_status(1, 'completed')

        booking_repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("current", TERMINAL_STATUSES)
    @pytest.mark.parametrize("requested", list(BOOKING_STATUSES))
    async def test_update_status_from_terminal(
        self, booking_service, booking_repository, sample_booking_data, current, requested
    ):
        """Из завершающих статусов любой переход запрещен"""
        booking_repository.get_by_id.return_value = {**sample_booking_data, 'status': current}

        with pytest.raises(ValidationError):
            await booking_service.update_status(1, requested)

    @pytest.mark.asyncio
    async def test_update_status_unknown_status(self, booking_service):
        """Неизвестный статус - ошибка валидации"""
        with pytest.raises(ValidationError, match="status"):
            await booking_service.update_status(1, 'archived')

    @pytest.mark.asyncio
    async def test_update_status_not_found(self, booking_service, booking_repository):
        """Тест смены статуса несуществующего бронирования"""
        booking_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await booking_service.update_status(999, 'confirmed')

    @pytest.mark.asyncio
    async def test_update_status_lost_race(self, booking_service, booking_repository):
        """Если статус успели изменить параллельно - конфликт"""
        booking_repository.update_status.return_value = False

        with pytest.raises(ConflictError):
            await booking_service.update_status(1, 'confirmed')

    @pytest.mark.asyncio
    async def test_list_for_client(self, booking_service, booking_repository):
        result = await booking_service.list_for_client(2)

        assert [b.id for b in result] == [1]
        booking_repository.get_by_client.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_list_for_owner(self, booking_service, booking_repository):
        result = await booking_service.list_for_owner(1)

        assert [b.owner_id for b in result] == [1]
        booking_repository.get_by_owner.assert_called_once_with(1)
