from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.storefront.domain.entity.product_entity import ProductEntity
from src.service.storefront.driven_adapter.model.product_model import ProductModel


class ProductQueryRepoImpl(IProductQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, product_id: int) -> Optional[ProductEntity]:
        if not is_storable_id(product_id):
            return None

        async with self.session_factory() as session:
            result = await session.execute(
                select(ProductModel).where(ProductModel.id == product_id)
            )
            product_model = result.scalar_one_or_none()

            if not product_model:
                return None

            return ProductEntity(
                id=product_model.id,
                name=product_model.name,
                created_at=product_model.created_at,
                updated_at=product_model.updated_at,
            )
