"""
Repository для работы с отзывами
"""
from typing import List, Optional, Dict, Any
from driveshare.database.db_pool import DatabasePool


class ReviewRepository:
    """Repository для работы с отзывами (только добавление и чтение)"""

    def __init__(self, db_pool: DatabasePool):
        self.db_pool = db_pool

    async def create(
        self,
        car_id: int,
        user_id: int,
        user_name: str,
        rating: int,
        comment: str,
        date: str
    ) -> int:
        """Создает отзыв и возвращает его ID"""
        cursor = await self.db_pool.execute(
            """INSERT INTO reviews (car_id, user_id, user_name, rating, comment, date)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (car_id, user_id, user_name, rating, comment, date)
        )
        await self.db_pool.commit()
        return cursor.lastrowid

    async def get_by_id(self, review_id: int) -> Optional[Dict[str, Any]]:
        """Получает отзыв по ID"""
        return await self.db_pool.execute_fetchone(
            "SELECT * FROM reviews WHERE id = ?",
            (review_id,)
        )

    async def get_by_car(self, car_id: int) -> List[Dict[str, Any]]:
        """Отзывы об автомобиле в порядке добавления"""
        return await self.db_pool.execute_fetchall(
            "SELECT * FROM reviews WHERE car_id = ? ORDER BY id",
            (car_id,)
        )
