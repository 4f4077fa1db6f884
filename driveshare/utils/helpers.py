"""
Вспомогательные функции для дат и расчета стоимости аренды
"""
from datetime import date, datetime, timezone
from typing import Union


def parse_iso_date(value: Union[str, date]) -> date:
    """Приводит строку ISO-8601 (ГГГГ-ММ-ДД) или datetime к календарной дате"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def utc_now_iso() -> str:
    """Текущий момент в UTC в формате ISO-8601"""
    return datetime.now(timezone.utc).isoformat(timespec='seconds')


def count_rental_days(start_date: date, end_date: date) -> int:
    """
    Количество оплачиваемых дней аренды

    Считается как разница между датами: с 1 по 3 марта - 2 дня.
    Аренда с возвратом в тот же день оплачивается как один день.
    """
    if end_date < start_date:
        raise ValueError("Дата окончания не может быть раньше даты начала")
    return max((end_date - start_date).days, 1)


def calculate_total_price(price_per_day: int, days: int, service_fee: int) -> int:
    """Итоговая стоимость: цена за день * количество дней + сервисный сбор"""
    return price_per_day * days + service_fee


def date_ranges_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """Пересекаются ли два диапазона дат (границы включительно)"""
    return start_a <= end_b and start_b <= end_a
