from abc import ABC, abstractmethod
from typing import Optional

from src.service.storefront.domain.entity.product_entity import ProductEntity


class IProductQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[ProductEntity]:
        pass
