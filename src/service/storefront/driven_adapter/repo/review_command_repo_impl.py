"""
Review Command Repository Implementation - CQRS Write Side

The product reference is enforced by the reviews.product_id foreign key;
an integrity failure from the database is raised as ConstraintViolationError.
Product ids outside the integer column range are rejected the same way.
"""

from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.exception.exceptions import ConstraintViolationError
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.storefront.domain.entity.review_entity import ReviewEntity
from src.service.storefront.driven_adapter.model.review_model import ReviewModel


class ReviewCommandRepoImpl(IReviewCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, review: ReviewEntity) -> ReviewEntity:
        if not is_storable_id(review.product_id):
            raise ConstraintViolationError(
                f'Review rejected: product {review.product_id} does not exist'
            )

        async with self.session_factory() as session:
            review_model = ReviewModel(content=review.content, product_id=review.product_id)
            session.add(review_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConstraintViolationError(
                    f'Review rejected by database: product {review.product_id} does not exist'
                ) from e

            await session.refresh(review_model)
            return ReviewEntity(
                id=review_model.id,
                content=review_model.content,
                product_id=review_model.product_id,
                created_at=review_model.created_at,
                updated_at=review_model.updated_at,
            )
