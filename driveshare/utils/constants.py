"""
Константы доменной модели бронирования
"""
from typing import Dict, Final, FrozenSet, Tuple

# ============================================================================
# КЭШ
# ============================================================================

DEFAULT_CACHE_TTL: Final[int] = 60

# ============================================================================
# ПОЛЬЗОВАТЕЛИ
# ============================================================================

ROLE_CLIENT: Final[str] = 'client'
ROLE_OWNER: Final[str] = 'owner'
USER_ROLES: Final[Tuple[str, ...]] = (ROLE_CLIENT, ROLE_OWNER)

AVATAR_URL_TEMPLATE: Final[str] = 'https://i.pravatar.cc/150?u=u{user_id}'

# ============================================================================
# АВТОМОБИЛИ
# ============================================================================

RENTAL_TYPES: Final[Tuple[str, ...]] = ('classic', 'marketplace')
CAR_CATEGORIES: Final[Tuple[str, ...]] = ('SUV', 'Berline', 'Pickup', 'Citadine', 'Sport', 'Luxe')

# Первый серийный автомобиль (Benz Patent-Motorwagen)
MIN_CAR_YEAR: Final[int] = 1886
MAX_PRICE_PER_DAY: Final[int] = 1000000

# ============================================================================
# БРОНИРОВАНИЯ
# ============================================================================

DEFAULT_SERVICE_FEE: Final[int] = 15

STATUS_PENDING: Final[str] = 'pending'
STATUS_CONFIRMED: Final[str] = 'confirmed'
STATUS_REJECTED: Final[str] = 'rejected'
STATUS_CANCELLED: Final[str] = 'cancelled'
STATUS_COMPLETED: Final[str] = 'completed'

BOOKING_STATUSES: Final[Tuple[str, ...]] = (
    STATUS_PENDING,
    STATUS_CONFIRMED,
    STATUS_REJECTED,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
)

ALLOWED_STATUS_TRANSITIONS: Final[Dict[str, FrozenSet[str]]] = {
    STATUS_PENDING: frozenset({STATUS_CONFIRMED, STATUS_REJECTED}),
    STATUS_CONFIRMED: frozenset({STATUS_COMPLETED, STATUS_CANCELLED}),
    STATUS_REJECTED: frozenset(),
    STATUS_CANCELLED: frozenset(),
    STATUS_COMPLETED: frozenset(),
}

# Бронирования в этих статусах занимают автомобиль на свои даты
ACTIVE_BOOKING_STATUSES: Final[Tuple[str, ...]] = (STATUS_PENDING, STATUS_CONFIRMED)

# ============================================================================
# ОТЗЫВЫ
# ============================================================================

MIN_RATING: Final[int] = 1
MAX_RATING: Final[int] = 5
