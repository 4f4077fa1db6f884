"""
Конфигурация pytest и общие фикстуры
"""
import pytest

from driveshare.config import Config
from driveshare.database.db_pool import DatabasePool
from driveshare.database.database import init_db
from driveshare.services.driveshare_service import DriveShareService


@pytest.fixture
def test_config() -> Config:
    """Конфигурация с базой в памяти"""
    return Config(
        db_path=':memory:',
        log_level='DEBUG',
        service_fee=15,
        cache_ttl=60,
        review_requires_completed_booking=True,
        seed_sample_data=False,
    )


@pytest.fixture
async def db_pool():
    """Пул с пустой базой в памяти и созданными таблицами"""
    pool = DatabasePool(':memory:')
    await pool.initialize()
    await init_db(pool)
    yield pool
    await pool.close()


@pytest.fixture
async def service(test_config):
    """Изолированный экземпляр фасада с пустой базой"""
    service = DriveShareService(test_config)
    await service.initialize()
    yield service
    await service.close()


@pytest.fixture
async def seeded_service(service):
    """
    Фасад с демонстрационными данными

    Пользователи: 1 Jean (client), 2 Marie (owner), 3 Admin (owner).
    Автомобили: 1 Tesla/Paris/120, 2 BMW/Lyon/85, 3 Mini/Paris/55,
    4 Ford/Marseille/150 (недоступен).
    Бронирование 1: Jean, Tesla, completed. Отзыв 1: Jean о Tesla.
    """
    await service.seed_sample_data()
    return service


@pytest.fixture
def sample_car_data():
    """Тестовые данные автомобиля (строка репозитория)"""
    return {
        'id': 1,
        'owner_id': 1,
        'rental_type': 'marketplace',
        'category': 'Berline',
        'brand': 'BMW',
        'model': 'Série 3',
        'year': 2021,
        'price_per_day': 85,
        'city': 'Lyon',
        'description': 'Berline élégante',
        'images': ['front.jpg', 'back.jpg'],
        'available': True,
        'created_at': '2024-01-01 00:00:00'
    }


@pytest.fixture
def new_car_data():
    """Данные для создания объявления"""
    return {
        'rental_type': 'marketplace',
        'category': 'Citadine',
        'brand': 'Renault',
        'model': 'Clio',
        'year': 2020,
        'price_per_day': 40,
        'city': 'Paris',
        'description': 'Petite citadine économique',
        'images': ['clio-1.jpg', 'clio-2.jpg'],
    }


@pytest.fixture
def sample_user_data():
    """Тестовые данные пользователя"""
    return {
        'id': 1,
        'name': 'Alice',
        'email': 'alice@x.com',
        'role': 'client',
        'avatar': 'https://i.pravatar.cc/150?u=u1',
        'balance': 0,
        'created_at': '2024-01-01 00:00:00'
    }


@pytest.fixture
def sample_booking_data():
    """Тестовые данные бронирования"""
    return {
        'id': 1,
        'car_id': 1,
        'client_id': 2,
        'owner_id': 1,
        'start_date': '2024-03-01',
        'end_date': '2024-03-03',
        'total_price': 185,
        'status': 'pending',
        'created_at': '2024-02-15T10:00:00+00:00'
    }


@pytest.fixture(autouse=True)
def reset_env_vars(monkeypatch):
    """Сбрасывает переменные окружения перед каждым тестом"""
    for key in [
        'DB_PATH', 'LOG_LEVEL', 'SERVICE_FEE', 'CACHE_TTL',
        'REVIEW_REQUIRES_COMPLETED_BOOKING', 'SEED_SAMPLE_DATA'
    ]:
        monkeypatch.delenv(key, raising=False)
    yield
