"""
Инициализация схемы и демонстрационные данные маркетплейса
"""
import logging

from driveshare.database.db_pool import DatabasePool
from driveshare.database.models import ALL_TABLES, CREATE_INDEXES
from driveshare.database.repositories import (
    UserRepository, CarRepository, BookingRepository, ReviewRepository
)
from driveshare.utils.constants import DEFAULT_SERVICE_FEE, STATUS_COMPLETED
from driveshare.utils.helpers import (
    parse_iso_date, count_rental_days, calculate_total_price
)

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"name": "Jean Dupont", "email": "jean@example.com", "role": "client", "balance": 1000},
    {"name": "Marie Lavoie", "email": "marie@example.com", "role": "owner", "balance": 2500},
    # Платформа выступает владельцем автомобилей типа classic
    {"name": "Admin DriveShare", "email": "admin@driveshare.com", "role": "owner", "balance": 50000},
]

# owner - индекс в SAMPLE_USERS
SAMPLE_CARS = [
    {
        "owner": 2,
        "rental_type": "classic",
        "category": "SUV",
        "brand": "Tesla",
        "model": "Model Y",
        "year": 2023,
        "price_per_day": 120,
        "city": "Paris",
        "description": "SUV électrique spacieux et performant, idéal pour les longs trajets en famille.",
        "images": [
            "https://images.unsplash.com/photo-1619767886558-efdc259cde1a?auto=format&fit=crop&q=80&w=800",
            "https://images.unsplash.com/photo-1617788138017-80ad40651399?auto=format&fit=crop&q=80&w=800",
        ],
        "available": True,
    },
    {
        "owner": 1,
        "rental_type": "marketplace",
        "category": "Berline",
        "brand": "BMW",
        "model": "Série 3",
        "year": 2021,
        "price_per_day": 85,
        "city": "Lyon",
        "description": "Berline élégante et dynamique, parfaite pour vos rendez-vous professionnels.",
        "images": [
            "https://images.unsplash.com/photo-1555215695-3004980ad54e?auto=format&fit=crop&q=80&w=800",
        ],
        "available": True,
    },
    {
        "owner": 1,
        "rental_type": "marketplace",
        "category": "Citadine",
        "brand": "Mini",
        "model": "Cooper",
        "year": 2022,
        "price_per_day": 55,
        "city": "Paris",
        "description": "Petite voiture agile, idéale pour se garer facilement en centre-ville.",
        "images": [
            "https://images.unsplash.com/photo-1617469767053-d3b508a0d822?auto=format&fit=crop&q=80&w=800",
        ],
        "available": True,
    },
    {
        "owner": 2,
        "rental_type": "classic",
        "category": "Pickup",
        "brand": "Ford",
        "model": "F-150 Lightning",
        "year": 2023,
        "price_per_day": 150,
        "city": "Marseille",
        "description": "Puissant pickup électrique pour vos besoins de transport volumineux.",
        "images": [
            "https://images.unsplash.com/photo-1590362891991-f776e747a588?auto=format&fit=crop&q=80&w=800",
        ],
        "available": False,
    },
]

# client/owner - индексы в SAMPLE_USERS, car - индекс в SAMPLE_CARS
SAMPLE_BOOKINGS = [
    {
        "car": 0,
        "client": 0,
        "start_date": "2024-03-01",
        "end_date": "2024-03-03",
        "status": STATUS_COMPLETED,
        "created_at": "2024-02-15T10:00:00+00:00",
    },
]

SAMPLE_REVIEWS = [
    {
        "car": 0,
        "user": 0,
        "rating": 5,
        "comment": "Superbe voiture, très propre et autonomie excellente !",
        "date": "2024-03-04",
    },
]


async def init_db(db_pool: DatabasePool):
    """Инициализация базы данных и создание всех таблиц"""
    db = await db_pool.get_connection()

    try:
        for table_sql in ALL_TABLES:
            await db.execute(table_sql)

        for index_sql in CREATE_INDEXES:
            await db.execute(index_sql)

        await db.commit()
        logger.info("База данных инициализирована успешно")
    except Exception as e:
        logger.error(f"Ошибка инициализации БД: {e}")
        raise


async def add_sample_data(db_pool: DatabasePool, service_fee: int = DEFAULT_SERVICE_FEE) -> bool:
    """
    Добавляет демонстрационные данные маркетплейса

    Данные добавляются только в пустую базу.

    Returns:
        True если данные были добавлены, False если база уже заполнена
    """
    users_repo = UserRepository(db_pool)
    existing_users = await users_repo.get_all()
    if existing_users:
        logger.info("Демонстрационные данные уже добавлены")
        return False

    cars_repo = CarRepository(db_pool)
    bookings_repo = BookingRepository(db_pool)
    reviews_repo = ReviewRepository(db_pool)

    user_ids = []
    for user in SAMPLE_USERS:
        user_ids.append(await users_repo.create(**user))

    car_ids = []
    car_prices = []
    for car in SAMPLE_CARS:
        car_data = {k: v for k, v in car.items() if k != 'owner'}
        car_ids.append(await cars_repo.create(owner_id=user_ids[car['owner']], **car_data))
        car_prices.append(car['price_per_day'])

    for booking in SAMPLE_BOOKINGS:
        car_index = booking['car']
        days = count_rental_days(
            parse_iso_date(booking['start_date']),
            parse_iso_date(booking['end_date'])
        )
        await bookings_repo.create(
            car_id=car_ids[car_index],
            client_id=user_ids[booking['client']],
            owner_id=user_ids[SAMPLE_CARS[car_index]['owner']],
            start_date=booking['start_date'],
            end_date=booking['end_date'],
            total_price=calculate_total_price(car_prices[car_index], days, service_fee),
            created_at=booking['created_at'],
            status=booking['status'],
        )

    for review in SAMPLE_REVIEWS:
        await reviews_repo.create(
            car_id=car_ids[review['car']],
            user_id=user_ids[review['user']],
            user_name=SAMPLE_USERS[review['user']]['name'],
            rating=review['rating'],
            comment=review['comment'],
            date=review['date'],
        )

    logger.info(
        f"Добавлено {len(SAMPLE_USERS)} пользователей, {len(SAMPLE_CARS)} автомобилей, "
        f"{len(SAMPLE_BOOKINGS)} бронирований и {len(SAMPLE_REVIEWS)} отзывов"
    )
    return True
