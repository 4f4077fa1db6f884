"""
Repository для работы с пользователями
"""
from typing import List, Optional, Dict, Any
from driveshare.database.db_pool import DatabasePool
from driveshare.utils.cache import SimpleCache
from driveshare.utils.constants import AVATAR_URL_TEMPLATE
import logging

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository для работы с пользователями"""

    def __init__(self, db_pool: DatabasePool, cache: Optional[SimpleCache] = None):
        self.db_pool = db_pool
        self.cache = cache if cache is not None else SimpleCache()

    async def create(
        self,
        name: str,
        email: str,
        role: str,
        balance: float = 0
    ) -> int:
        """Создает нового пользователя и возвращает его ID"""
        async with self.db_pool.transaction():
            cursor = await self.db_pool.execute(
                "INSERT INTO users (name, email, role, balance) VALUES (?, ?, ?, ?)",
                (name, email, role, balance)
            )
            user_id = cursor.lastrowid
            # Аватар строится из ID, поэтому заполняется после вставки
            await self.db_pool.execute(
                "UPDATE users SET avatar = ? WHERE id = ?",
                (AVATAR_URL_TEMPLATE.format(user_id=user_id), user_id)
            )
        return user_id

    async def get_all(self) -> List[Dict[str, Any]]:
        """Получает всех пользователей в порядке регистрации"""
        return await self.db_pool.execute_fetchall("SELECT * FROM users ORDER BY id")

    async def get_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """Получает пользователя по ID"""
        cache_key = f"user:{user_id}"
        cached_result = self.cache.get(cache_key)
        if cached_result is not None:
            return cached_result

        result = await self.db_pool.execute_fetchone(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        )
        if result:
            self.cache.set(cache_key, result)
            return result
        return None

    async def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Получает пользователя по email (точное совпадение)"""
        return await self.db_pool.execute_fetchone(
            "SELECT * FROM users WHERE email = ?",
            (email,)
        )
