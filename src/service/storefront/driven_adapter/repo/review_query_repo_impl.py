from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_review_query_repo import IReviewQueryRepo
from src.service.storefront.domain.entity.review_entity import ReviewEntity
from src.service.storefront.driven_adapter.model.review_model import ReviewModel


class ReviewQueryRepoImpl(IReviewQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_by_product_id(self, product_id: int) -> List[ReviewEntity]:
        if not is_storable_id(product_id):
            return []

        async with self.session_factory() as session:
            result = await session.execute(
                select(ReviewModel)
                .where(ReviewModel.product_id == product_id)
                .order_by(ReviewModel.id)
            )
            return [
                ReviewEntity(
                    id=review_model.id,
                    content=review_model.content,
                    product_id=review_model.product_id,
                    created_at=review_model.created_at,
                    updated_at=review_model.updated_at,
                )
                for review_model in result.scalars().all()
            ]
