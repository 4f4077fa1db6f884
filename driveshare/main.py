"""
Точка входа: поднимает сервис с демонстрационными данными и выводит каталог в лог
"""
import asyncio
import logging
from typing import Optional

from driveshare.config import Config, load_config
from driveshare.services.driveshare_service import DriveShareService

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = 'INFO'):
    """Настройка логирования"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )


async def main(config: Optional[Config] = None) -> int:
    """
    Запускает сервис, добавляет демо-данные и выводит сводку каталога

    Returns:
        Количество автомобилей в каталоге
    """
    config = config or load_config()
    setup_logging(config.LOG_LEVEL)

    async with DriveShareService(config) as service:
        await service.seed_sample_data()
        cars = await service.search()
        for car in cars:
            status = "доступен" if car.available else "недоступен"
            logger.info(
                f"[{car.id}] {car.brand} {car.model} {car.year}, {car.city}: "
                f"{car.price_per_day}/день, {status}"
            )
        logger.info(f"Всего автомобилей в каталоге: {len(cars)}")
        return len(cars)


if __name__ == "__main__":
    asyncio.run(main())
