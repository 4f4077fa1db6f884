"""
Repository для работы с бронированиями
"""
from typing import List, Optional, Dict, Any
from driveshare.database.db_pool import DatabasePool
from driveshare.utils.constants import ACTIVE_BOOKING_STATUSES, STATUS_PENDING, STATUS_COMPLETED
import logging

logger = logging.getLogger(__name__)


class BookingRepository:
    """Repository для работы с бронированиями"""

    def __init__(self, db_pool: DatabasePool):
        self.db_pool = db_pool

    async def create(
        self,
        car_id: int,
        client_id: int,
        owner_id: int,
        start_date: str,
        end_date: str,
        total_price: int,
        created_at: str,
        status: str = STATUS_PENDING
    ) -> int:
        """Создает новое бронирование и возвращает его ID"""
        cursor = await self.db_pool.execute(
            """INSERT INTO bookings (car_id, client_id, owner_id, start_date, end_date,
                                     total_price, status, created_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (car_id, client_id, owner_id, start_date, end_date, total_price, status, created_at)
        )
        await self.db_pool.commit()
        return cursor.lastrowid

    async def get_by_id(self, booking_id: int) -> Optional[Dict[str, Any]]:
        """Получает бронирование по ID"""
        return await self.db_pool.execute_fetchone(
            "SELECT * FROM bookings WHERE id = ?",
            (booking_id,)
        )

    async def get_by_client(self, client_id: int) -> List[Dict[str, Any]]:
        """Бронирования арендатора в порядке создания"""
        return await self.db_pool.execute_fetchall(
            "SELECT * FROM bookings WHERE client_id = ? ORDER BY id",
            (client_id,)
        )

    async def get_by_owner(self, owner_id: int) -> List[Dict[str, Any]]:
        """Бронирования автомобилей владельца в порядке создания"""
        return await self.db_pool.execute_fetchall(
            "SELECT * FROM bookings WHERE owner_id = ? ORDER BY id",
            (owner_id,)
        )

    async def get_active_by_car(self, car_id: int) -> List[Dict[str, Any]]:
        """Бронирования автомобиля, которые занимают его даты"""
        placeholders = ', '.join('?' for _ in ACTIVE_BOOKING_STATUSES)
        return await self.db_pool.execute_fetchall(
            f"""SELECT * FROM bookings
                WHERE car_id = ? AND status IN ({placeholders})
                ORDER BY id""",
            (car_id, *ACTIVE_BOOKING_STATUSES)
        )

    async def update_status(self, booking_id: int, expected_status: str, new_status: str) -> bool:
        """
        Меняет статус, только если текущий статус равен expected_status

        Returns:
            True если строка обновлена, False если статус уже изменил кто-то другой
        """
        cursor = await self.db_pool.execute(
            "UPDATE bookings SET status = ? WHERE id = ? AND status = ?",
            (new_status, booking_id, expected_status)
        )
        await self.db_pool.commit()
        return cursor.rowcount > 0

    async def exists_completed(self, client_id: int, car_id: int) -> bool:
        """Есть ли у арендатора завершенная аренда этого автомобиля"""
        row = await self.db_pool.execute_fetchone(
            "SELECT 1 AS found FROM bookings WHERE client_id = ? AND car_id = ? AND status = ? LIMIT 1",
            (client_id, car_id, STATUS_COMPLETED)
        )
        return row is not None
