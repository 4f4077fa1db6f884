"""
Кэш строк каталога и учетных записей

Один экземпляр принадлежит одному фасаду, поэтому разные экземпляры
сервиса (и разные тесты) не видят кэш друг друга.
"""
import copy
from time import monotonic
from typing import Any, Callable, Dict, Optional, Tuple

from driveshare.utils.constants import DEFAULT_CACHE_TTL


class SimpleCache:
    """
    In-memory кэш с TTL

    Значения копируются при записи и при чтении: изменение полученного
    словаря не меняет закэшированную строку. ttl=0 отключает кэширование.
    """

    def __init__(self, default_ttl: int = DEFAULT_CACHE_TTL, clock: Callable[[], float] = monotonic):
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self.default_ttl = default_ttl
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Optional[Any]:
        """Значение по ключу или None, если ключа нет или он истек"""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None

        return copy.deepcopy(value)

    def set(self, key: str, value: Any, ttl: Optional[int] = None):
        ttl = self.default_ttl if ttl is None else ttl
        if ttl <= 0:
            return
        self._entries[key] = (copy.deepcopy(value), self._clock() + ttl)

    def delete(self, key: str):
        self._entries.pop(key, None)

    def delete_prefix(self, prefix: str):
        """Удаляет все ключи с заданным префиксом (например, все списки каталога)"""
        for key in [k for k in self._entries if k.startswith(prefix)]:
            del self._entries[key]

    def clear(self):
        self._entries.clear()
