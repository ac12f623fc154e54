from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.storefront.domain.entity.review_entity import ReviewEntity


class CreateReviewUseCase:
    def __init__(self, review_command_repo: IReviewCommandRepo) -> None:
        self.review_command_repo = review_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        review_command_repo: IReviewCommandRepo = Depends(Provide[Container.review_command_repo]),
    ) -> Self:
        return cls(review_command_repo=review_command_repo)

    @Logger.io
    async def create(self, *, product_id: int, content: Optional[str] = None) -> ReviewEntity:
        # The product reference is enforced by the database, not checked here
        review = await self.review_command_repo.create(
            ReviewEntity(product_id=product_id, content=content)
        )
        Logger.base.info(f'✅ [CREATE_REVIEW] Review {review.id} for product {product_id}')
        return review
