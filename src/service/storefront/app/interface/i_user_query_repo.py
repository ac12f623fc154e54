from abc import ABC, abstractmethod
from typing import Optional

from src.service.storefront.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User query repository - read side only; users are written by another service"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        pass
