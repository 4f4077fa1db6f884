"""
Соединение с базой данных
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import aiosqlite

from driveshare.config import DEFAULT_DB_PATH, MEMORY_DB_PATH

logger = logging.getLogger(__name__)

# Применяются только к файловой базе
FILE_DB_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
)


class DatabasePool:
    """
    Держатель соединения с SQLite

    Создается явно (один на экземпляр сервиса), поэтому каждый экземпляр
    с путем ':memory:' работает со своей изолированной базой.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path
        self._connection: Optional[aiosqlite.Connection] = None

    @property
    def is_initialized(self) -> bool:
        return self._connection is not None

    async def initialize(self):
        if self._connection is not None:
            return

        connection = await aiosqlite.connect(self.db_path)
        connection.row_factory = aiosqlite.Row
        if self.db_path != MEMORY_DB_PATH:
            for pragma in FILE_DB_PRAGMAS:
                await connection.execute(pragma)
        await connection.execute("PRAGMA foreign_keys=ON")
        await connection.commit()

        self._connection = connection
        logger.info(f"Соединение с БД открыто: {self.db_path}")

    async def get_connection(self) -> aiosqlite.Connection:
        """Соединение; открывается при первом обращении"""
        if self._connection is None:
            await self.initialize()
        return self._connection

    async def close(self):
        if self._connection is None:
            return
        await self._connection.close()
        self._connection = None
        logger.info(f"Соединение с БД закрыто: {self.db_path}")

    async def execute(self, query: str, params: tuple = ()) -> aiosqlite.Cursor:
        conn = await self.get_connection()
        return await conn.execute(query, params)

    async def execute_fetchone(self, query: str, params: tuple = ()) -> Optional[Dict[str, Any]]:
        """Первая строка результата в виде словаря или None"""
        cursor = await self.execute(query, params)
        row = await cursor.fetchone()
        return dict(row) if row else None

    async def execute_fetchall(self, query: str, params: tuple = ()) -> List[Dict[str, Any]]:
        """Все строки результата в виде словарей"""
        cursor = await self.execute(query, params)
        return [dict(row) for row in await cursor.fetchall()]

    async def commit(self):
        if self._connection:
            await self._connection.commit()

    async def rollback(self):
        if self._connection:
            await self._connection.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator['DatabasePool']:
        """
        Группа изменений, которая фиксируется целиком

        Usage:
            async with db_pool.transaction():
                await db_pool.execute("INSERT ...")
                await db_pool.execute("UPDATE ...")
        """
        try:
            yield self
        except BaseException:
            await self.rollback()
            raise
        await self.commit()
