from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.storefront.domain.entity.product_entity import ProductEntity
from src.service.storefront.driven_adapter.model.product_model import ProductModel


class ProductCommandRepoImpl(IProductCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, product: ProductEntity) -> ProductEntity:
        async with self.session_factory() as session:
            product_model = ProductModel(name=product.name)
            session.add(product_model)
            await session.commit()
            # Pull server-side timestamps
            await session.refresh(product_model)

            return ProductEntity(
                id=product_model.id,
                name=product_model.name,
                created_at=product_model.created_at,
                updated_at=product_model.updated_at,
            )
