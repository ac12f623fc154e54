from abc import ABC, abstractmethod
from typing import List

from src.service.storefront.domain.entity.review_entity import ReviewEntity


class IReviewQueryRepo(ABC):
    @abstractmethod
    async def list_by_product_id(self, product_id: int) -> List[ReviewEntity]:
        pass
