from abc import ABC, abstractmethod

from src.service.storefront.domain.entity.product_entity import ProductEntity


class IProductCommandRepo(ABC):
    @abstractmethod
    async def create(self, product: ProductEntity) -> ProductEntity:
        pass
