"""
Конфигурация доменного сервиса.

Модуль загружает и валидирует конфигурационные параметры из переменных окружения
и .env файла. Некорректные значения не останавливают сервис: они логируются
и заменяются значениями по умолчанию.

Использование:
    from driveshare.config import load_config

    config = load_config()
    service = DriveShareService(config)
"""
import os
import logging
from pathlib import Path
from typing import Optional, Final
from dotenv import load_dotenv

from driveshare.utils.constants import DEFAULT_CACHE_TTL, DEFAULT_SERVICE_FEE

# Настройка логирования для модуля конфигурации
logger = logging.getLogger(__name__)

# ============================================================================
# КОНСТАНТЫ
# ============================================================================

# Имена переменных окружения
ENV_DB_PATH: Final[str] = 'DB_PATH'
ENV_LOG_LEVEL: Final[str] = 'LOG_LEVEL'
ENV_SERVICE_FEE: Final[str] = 'SERVICE_FEE'
ENV_CACHE_TTL: Final[str] = 'CACHE_TTL'
ENV_REVIEW_REQUIRES_COMPLETED_BOOKING: Final[str] = 'REVIEW_REQUIRES_COMPLETED_BOOKING'
ENV_SEED_SAMPLE_DATA: Final[str] = 'SEED_SAMPLE_DATA'

# Значения по умолчанию
DEFAULT_DB_PATH: Final[str] = ':memory:'
DEFAULT_LOG_LEVEL: Final[str] = 'INFO'
DEFAULT_CACHE_TTL_SECONDS: Final[int] = DEFAULT_CACHE_TTL

MEMORY_DB_PATH: Final[str] = ':memory:'

VALID_LOG_LEVELS: Final[frozenset] = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})
TRUE_VALUES: Final[frozenset] = frozenset({'1', 'true', 'yes', 'on'})
FALSE_VALUES: Final[frozenset] = frozenset({'0', 'false', 'no', 'off'})

# ============================================================================
# ЗАГРУЗКА ПЕРЕМЕННЫХ ОКРУЖЕНИЯ
# ============================================================================

def _load_env_file() -> Path:
    """
    Загружает переменные окружения из .env файла.

    Returns:
        Path: Путь к файлу .env

    Note:
        Файл .env должен находиться в корне проекта (на уровень выше driveshare/).
        Переменные окружения процесса имеют приоритет над файлом.
    """
    env_path = Path(__file__).parent.parent / '.env'

    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
        logger.debug(f"Загружен .env файл: {env_path}")
    else:
        logger.debug(
            f"Файл .env не найден по пути: {env_path}. "
            "Используются только переменные окружения системы."
        )

    return env_path


# Загружаем .env файл при импорте модуля
_env_file_path = _load_env_file()

# ============================================================================
# ВАЛИДАЦИЯ И ПАРСИНГ
# ============================================================================

def _validate_db_path(db_path: Optional[str]) -> str:
    """
    Валидирует путь к базе данных.

    Args:
        db_path: Путь к файлу базы данных или ':memory:'

    Returns:
        str: Валидированный путь
    """
    if not db_path or not db_path.strip():
        return DEFAULT_DB_PATH

    db_path = db_path.strip()

    if db_path != MEMORY_DB_PATH and '..' in db_path:
        logger.warning(
            f"Путь к БД содержит переход в родительский каталог: {db_path}. "
            "Рекомендуется использовать явные пути."
        )

    return db_path


def _parse_log_level(value: Optional[str]) -> str:
    """Парсит уровень логирования, при ошибке возвращает значение по умолчанию"""
    if not value:
        return DEFAULT_LOG_LEVEL

    log_level = value.strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Некорректный уровень логирования: {log_level}. "
            f"Используется значение по умолчанию: {DEFAULT_LOG_LEVEL}"
        )
        return DEFAULT_LOG_LEVEL

    return log_level


def _parse_non_negative_int(name: str, value: Optional[str], default: int) -> int:
    """
    Парсит неотрицательное целое число.

    Args:
        name: Имя переменной окружения (для сообщений)
        value: Строковое значение
        default: Значение по умолчанию

    Returns:
        int: Распарсенное значение или default

    Note:
        Некорректные значения логируются как предупреждение, но не вызывают ошибку.
    """
    if value is None or not value.strip():
        return default

    try:
        parsed = int(value.strip())
    except ValueError:
        logger.warning(f"{name} должен быть числом. Получено: {value}")
        return default

    if parsed < 0:
        logger.warning(f"{name} не может быть отрицательным. Получено: {parsed}")
        return default

    return parsed


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    """Парсит булево значение (true/false, 1/0, yes/no, on/off)"""
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False

    logger.warning(f"{name} должен быть булевым значением. Получено: {value}")
    return default

# ============================================================================
# ОБЪЕКТ КОНФИГУРАЦИИ
# ============================================================================

class Config:
    """Конфигурация доменного сервиса"""

    def __init__(
        self,
        db_path: str = DEFAULT_DB_PATH,
        log_level: str = DEFAULT_LOG_LEVEL,
        service_fee: int = DEFAULT_SERVICE_FEE,
        cache_ttl: int = DEFAULT_CACHE_TTL_SECONDS,
        review_requires_completed_booking: bool = True,
        seed_sample_data: bool = False,
    ):
        self.DB_PATH = db_path
        self.LOG_LEVEL = log_level
        self.SERVICE_FEE = service_fee
        self.CACHE_TTL = cache_ttl
        self.REVIEW_REQUIRES_COMPLETED_BOOKING = review_requires_completed_booking
        self.SEED_SAMPLE_DATA = seed_sample_data

    def __repr__(self) -> str:
        return (
            f"Config(db_path={self.DB_PATH!r}, log_level={self.LOG_LEVEL!r}, "
            f"service_fee={self.SERVICE_FEE}, cache_ttl={self.CACHE_TTL})"
        )


def load_config() -> Config:
    """
    Загружает и валидирует всю конфигурацию из переменных окружения.

    Returns:
        Config: Объект конфигурации
    """
    config = Config(
        db_path=_validate_db_path(os.getenv(ENV_DB_PATH)),
        log_level=_parse_log_level(os.getenv(ENV_LOG_LEVEL)),
        service_fee=_parse_non_negative_int(
            ENV_SERVICE_FEE, os.getenv(ENV_SERVICE_FEE), DEFAULT_SERVICE_FEE
        ),
        cache_ttl=_parse_non_negative_int(
            ENV_CACHE_TTL, os.getenv(ENV_CACHE_TTL), DEFAULT_CACHE_TTL_SECONDS
        ),
        review_requires_completed_booking=_parse_bool(
            ENV_REVIEW_REQUIRES_COMPLETED_BOOKING,
            os.getenv(ENV_REVIEW_REQUIRES_COMPLETED_BOOKING),
            True
        ),
        seed_sample_data=_parse_bool(
            ENV_SEED_SAMPLE_DATA, os.getenv(ENV_SEED_SAMPLE_DATA), False
        ),
    )
    logger.debug(f"Конфигурация загружена: {config}")
    return config

# ============================================================================
# ЭКСПОРТ ПУБЛИЧНОГО API
# ============================================================================

__all__ = [
    'Config',
    'load_config',
    'DEFAULT_DB_PATH',
    'DEFAULT_LOG_LEVEL',
]
