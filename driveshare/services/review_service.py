"""
Service для работы с отзывами
"""
from datetime import date
from typing import List
import logging

from driveshare.database.repositories.review_repository import ReviewRepository
from driveshare.models.review_models import ReviewCreate, ReviewResponse
from driveshare.utils.errors import NotFoundError, service_errors

logger = logging.getLogger(__name__)


class ReviewService:
    """Service для работы с отзывами: отзывы только добавляются"""

    def __init__(self, review_repository: ReviewRepository) -> None:
        self.review_repository = review_repository

    @service_errors("получении отзывов")
    async def list_for_car(self, car_id: int) -> List[ReviewResponse]:
        """Отзывы об автомобиле в порядке добавления"""
        reviews = await self.review_repository.get_by_car(car_id)
        return [ReviewResponse.model_validate(r) for r in reviews]

    @service_errors("проверке отзыва")
    async def validate_review(
        self,
        car_id: int,
        user_id: int,
        user_name: str,
        rating: int,
        comment: str
    ) -> ReviewCreate:
        """Проверяет данные отзыва без сохранения; ValidationError при ошибке"""
        return ReviewCreate(
            car_id=car_id,
            user_id=user_id,
            user_name=user_name,
            rating=rating,
            comment=comment
        )

    @service_errors("добавлении отзыва")
    async def add_review(
        self,
        car_id: int,
        user_id: int,
        user_name: str,
        rating: int,
        comment: str
    ) -> ReviewResponse:
        """
        Добавляет отзыв с текущей датой

        Raises:
            ValidationError: Если оценка вне диапазона 1-5
        """
        review_data = await self.validate_review(car_id, user_id, user_name, rating, comment)

        review_id = await self.review_repository.create(
            date=date.today().isoformat(),
            **review_data.model_dump()
        )
        logger.info(f"Отзыв {review_id} на автомобиль {car_id}: оценка {review_data.rating}")

        review = await self.review_repository.get_by_id(review_id)
        if not review:
            raise NotFoundError(f"Отзыв с ID {review_id} не найден")
        return ReviewResponse.model_validate(review)
