from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.storefront.domain.entity.user_entity import UserEntity


class GetUserUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        """Exact primary-key lookup; None when no such user."""
        user = await self.user_query_repo.get_by_id(user_id)

        if user is None:
            Logger.base.warning(f'⚠️ [GET_USER] User {user_id} not found')
            return None

        return user
