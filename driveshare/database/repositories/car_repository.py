"""
Repository для работы с автомобилями
"""
import json
from typing import List, Optional, Dict, Any
from driveshare.database.db_pool import DatabasePool
from driveshare.utils.cache import SimpleCache
import logging

logger = logging.getLogger(__name__)

# Колонки, которые разрешено менять через update()
UPDATABLE_COLUMNS = (
    'rental_type', 'category', 'brand', 'model', 'year',
    'price_per_day', 'city', 'description', 'images', 'available',
)


def _row_to_car(row: Dict[str, Any]) -> Dict[str, Any]:
    """Преобразует строку таблицы в словарь автомобиля"""
    car = dict(row)
    car['images'] = json.loads(car.get('images') or '[]')
    car['available'] = bool(car['available'])
    return car


class CarRepository:
    """Repository для работы с автомобилями"""

    def __init__(self, db_pool: DatabasePool, cache: Optional[SimpleCache] = None):
        self.db_pool = db_pool
        self.cache = cache if cache is not None else SimpleCache()

    def _invalidate(self, car_id: Optional[int] = None):
        if car_id is not None:
            self.cache.delete(f"car:{car_id}")
        self.cache.delete_prefix("cars:")

    async def get_all(
        self,
        category: Optional[str] = None,
        available_only: bool = False
    ) -> List[Dict[str, Any]]:
        """Получает автомобили в порядке добавления с фильтрацией на стороне SQL"""
        cache_key = f"cars:all:{category}:{available_only}"
        cached_result = self.cache.get(cache_key)
        if cached_result is not None:
            return cached_result

        query = "SELECT * FROM cars"
        conditions = []
        params = []
        if category is not None:
            conditions.append("category = ?")
            params.append(category)
        if available_only:
            conditions.append("available = 1")
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY id"

        rows = await self.db_pool.execute_fetchall(query, tuple(params))
        result = [_row_to_car(row) for row in rows]
        self.cache.set(cache_key, result)
        return result

    async def get_by_id(self, car_id: int) -> Optional[Dict[str, Any]]:
        """Получает автомобиль по ID"""
        cache_key = f"car:{car_id}"
        cached_result = self.cache.get(cache_key)
        if cached_result is not None:
            return cached_result

        row = await self.db_pool.execute_fetchone("SELECT * FROM cars WHERE id = ?", (car_id,))
        if not row:
            return None

        car = _row_to_car(row)
        self.cache.set(cache_key, car)
        return car

    async def get_by_owner(self, owner_id: int) -> List[Dict[str, Any]]:
        """Получает автомобили владельца в порядке добавления"""
        rows = await self.db_pool.execute_fetchall(
            "SELECT * FROM cars WHERE owner_id = ? ORDER BY id",
            (owner_id,)
        )
        return [_row_to_car(row) for row in rows]

    async def create(
        self,
        owner_id: int,
        rental_type: str,
        category: str,
        brand: str,
        model: str,
        year: int,
        price_per_day: int,
        city: str,
        description: str = '',
        images: Optional[List[str]] = None,
        available: bool = True
    ) -> int:
        """Создает новый автомобиль и возвращает его ID"""
        cursor = await self.db_pool.execute(
            """INSERT INTO cars (owner_id, rental_type, category, brand, model, year,
                                 price_per_day, city, description, images, available)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                owner_id, rental_type, category, brand, model, year,
                price_per_day, city, description, json.dumps(images or []), available
            )
        )
        await self.db_pool.commit()

        self._invalidate()
        return cursor.lastrowid

    async def update(self, car_id: int, **fields: Any) -> bool:
        """
        Обновляет переданные поля автомобиля

        Returns:
            True если автомобиль существует (даже без изменений), False иначе
        """
        updates = []
        params = []

        for column in UPDATABLE_COLUMNS:
            if column not in fields:
                continue
            value = fields[column]
            if column == 'images':
                value = json.dumps(value)
            updates.append(f"{column} = ?")
            params.append(value)

        if not updates:
            return await self.get_by_id(car_id) is not None

        params.append(car_id)
        query = f"UPDATE cars SET {', '.join(updates)} WHERE id = ?"

        cursor = await self.db_pool.execute(query, tuple(params))
        await self.db_pool.commit()

        self._invalidate(car_id)
        return cursor.rowcount > 0

    async def delete(self, car_id: int) -> bool:
        """Удаляет автомобиль, возвращает True если он существовал"""
        cursor = await self.db_pool.execute("DELETE FROM cars WHERE id = ?", (car_id,))
        await self.db_pool.commit()

        self._invalidate(car_id)

        if cursor.rowcount == 0:
            logger.debug(f"Автомобиль с ID {car_id} уже отсутствует")
            return False

        logger.info(f"Автомобиль с ID {car_id} успешно удален")
        return True
