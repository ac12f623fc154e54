from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import is_storable_id
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.storefront.domain.entity.user_entity import UserEntity
from src.service.storefront.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        if not is_storable_id(user_id):
            return None

        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_id))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
