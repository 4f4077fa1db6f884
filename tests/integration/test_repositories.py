"""
Integration тесты репозиториев на базе в памяти
"""
import pytest
from driveshare.database.repositories import (
    UserRepository, CarRepository, BookingRepository, ReviewRepository
)
from driveshare.utils.cache import SimpleCache


@pytest.fixture
async def owner_id(db_pool):
    return await UserRepository(db_pool).create("Marie", "marie@example.com", "owner")


@pytest.fixture
def car_repository(db_pool):
    return CarRepository(db_pool, SimpleCache(default_ttl=60))


@pytest.fixture
def car_fields():
    return {
        'rental_type': 'marketplace',
        'category': 'Berline',
        'brand': 'BMW',
        'model': 'Série 3',
        'year': 2021,
        'price_per_day': 85,
        'city': 'Lyon',
        'description': 'Berline',
    }


class TestUserRepository:
    """Тесты для UserRepository"""

    @pytest.mark.asyncio
    async def test_uses_injected_empty_cache(self, db_pool):
        cache = SimpleCache(default_ttl=60)
        repo = UserRepository(db_pool, cache)
        user_id = await repo.create("Alice", "alice@x.com", "client")

        await repo.get_by_id(user_id)

        assert repo.cache is cache
        assert f"user:{user_id}" in cache

    @pytest.mark.asyncio
    async def test_create_assigns_avatar(self, db_pool):
        repo = UserRepository(db_pool)

        user_id = await repo.create("Alice", "alice@x.com", "client")
        user = await repo.get_by_id(user_id)

        assert user['avatar'] == f"https://i.pravatar.cc/150?u=u{user_id}"
        assert user['balance'] == 0

    @pytest.mark.asyncio
    async def test_get_by_email_exact(self, db_pool):
        """Поиск по email чувствителен к регистру"""
        repo = UserRepository(db_pool)
        await repo.create("Alice", "alice@x.com", "client")

        assert await repo.get_by_email("alice@x.com") is not None
        assert await repo.get_by_email("ALICE@x.com") is None


class TestCarRepository:
    """Тесты для CarRepository"""

    @pytest.mark.asyncio
    async def test_uses_injected_empty_cache(self, db_pool, owner_id, car_fields):
        """Пустой переданный кэш не заменяется собственным"""
        cache = SimpleCache(default_ttl=60)
        repo = CarRepository(db_pool, cache)
        car_id = await repo.create(owner_id=owner_id, **car_fields)

        await repo.get_by_id(car_id)

        assert repo.cache is cache
        assert f"car:{car_id}" in cache

    @pytest.mark.asyncio
    async def test_images_order_preserved(self, car_repository, owner_id, car_fields):
        car_id = await car_repository.create(
            owner_id=owner_id, images=['3.jpg', '1.jpg', '2.jpg'], **car_fields
        )

        car = await car_repository.get_by_id(car_id)

        assert car['images'] == ['3.jpg', '1.jpg', '2.jpg']
        assert car['available'] is True

    @pytest.mark.asyncio
    async def test_update_invalidates_cache(self, car_repository, owner_id, car_fields):
        """После обновления чтение возвращает новые данные"""
        car_id = await car_repository.create(owner_id=owner_id, **car_fields)
        await car_repository.get_by_id(car_id)
        await car_repository.get_all()

        assert await car_repository.update(car_id, price_per_day=99, available=False) is True

        assert (await car_repository.get_by_id(car_id))['price_per_day'] == 99
        assert await car_repository.get_all(available_only=True) == []

    @pytest.mark.asyncio
    async def test_cached_row_not_shared(self, car_repository, owner_id, car_fields):
        """Изменение полученного словаря не портит кэш"""
        car_id = await car_repository.create(owner_id=owner_id, **car_fields)
        car = await car_repository.get_by_id(car_id)
        car['city'] = 'Nice'

        assert (await car_repository.get_by_id(car_id))['city'] == 'Lyon'

    @pytest.mark.asyncio
    async def test_update_unknown(self, car_repository):
        assert await car_repository.update(999, city='Nice') is False
        assert await car_repository.update(999) is False

    @pytest.mark.asyncio
    async def test_delete(self, car_repository, owner_id, car_fields):
        car_id = await car_repository.create(owner_id=owner_id, **car_fields)

        assert await car_repository.delete(car_id) is True
        assert await car_repository.delete(car_id) is False
        assert await car_repository.get_by_id(car_id) is None

    @pytest.mark.asyncio
    async def test_ids_not_reused_after_delete(self, car_repository, owner_id, car_fields):
        """ID не переиспользуются после удаления"""
        first = await car_repository.create(owner_id=owner_id, **car_fields)
        second = await car_repository.create(owner_id=owner_id, **car_fields)
        await car_repository.delete(second)

        third = await car_repository.create(owner_id=owner_id, **car_fields)

        assert first < second < third


class TestBookingRepository:
    """Тесты для BookingRepository"""

    @pytest.fixture
    async def booking_id(self, db_pool, owner_id):
        client_id = await UserRepository(db_pool).create("Jean", "jean@example.com", "client")
        return await BookingRepository(db_pool).create(
            car_id=1,
            client_id=client_id,
            owner_id=owner_id,
            start_date='2024-03-01',
            end_date='2024-03-03',
            total_price=185,
            created_at='2024-02-15T10:00:00+00:00'
        )

    @pytest.mark.asyncio
    async def test_update_status_compare_and_set(self, db_pool, booking_id):
        """Статус меняется только при совпадении ожидаемого значения"""
        repo = BookingRepository(db_pool)

        assert await repo.update_status(booking_id, 'pending', 'confirmed') is True
        assert await repo.update_status(booking_id, 'pending', 'rejected') is False
        assert (await repo.get_by_id(booking_id))['status'] == 'confirmed'

    @pytest.mark.asyncio
    async def test_active_by_car(self, db_pool, booking_id):
        repo = BookingRepository(db_pool)
        assert len(await repo.get_active_by_car(1)) == 1

        await repo.update_status(booking_id, 'pending', 'rejected')

        assert await repo.get_active_by_car(1) == []

    @pytest.mark.asyncio
    async def test_exists_completed(self, db_pool, booking_id):
        repo = BookingRepository(db_pool)
        booking = await repo.get_by_id(booking_id)
        assert await repo.exists_completed(booking['client_id'], 1) is False

        await repo.update_status(booking_id, 'pending', 'confirmed')
        await repo.update_status(booking_id, 'confirmed', 'completed')

        assert await repo.exists_completed(booking['client_id'], 1) is True


class TestReviewRepository:
    """Тесты для ReviewRepository"""

    @pytest.mark.asyncio
    async def test_get_by_car_insertion_order(self, db_pool, owner_id):
        repo = ReviewRepository(db_pool)
        await repo.create(1, owner_id, "Marie", 4, "Bien", "2024-03-04")
        await repo.create(2, owner_id, "Marie", 2, "Bof", "2024-03-05")
        await repo.create(1, owner_id, "Marie", 5, "Top", "2024-03-06")

        reviews = await repo.get_by_car(1)

        assert [r['comment'] for r in reviews] == ["Bien", "Top"]
