from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.storefront.app.interface.i_review_query_repo import IReviewQueryRepo
from src.service.storefront.domain.entity.review_entity import ReviewEntity


class ListReviewsUseCase:
    def __init__(
        self, product_query_repo: IProductQueryRepo, review_query_repo: IReviewQueryRepo
    ) -> None:
        self.product_query_repo = product_query_repo
        self.review_query_repo = review_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
        review_query_repo: IReviewQueryRepo = Depends(Provide[Container.review_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo, review_query_repo=review_query_repo)

    @Logger.io
    async def list_by_product(self, *, product_id: int) -> Optional[List[ReviewEntity]]:
        """Reviews of a product in creation order; None when the product does not exist."""
        if await self.product_query_repo.get_by_id(product_id) is None:
            return None

        return await self.review_query_repo.list_by_product_id(product_id)
