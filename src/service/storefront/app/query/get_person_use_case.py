from src.platform.logging.loguru_io import Logger
from src.service.storefront.domain.entity.person_entity import PersonEntity


class GetPersonUseCase:
    """Returns the fixed demo person; consults no input and cannot fail."""

    @classmethod
    def depends(cls) -> 'GetPersonUseCase':
        return cls()

    @Logger.io
    def get_person(self) -> PersonEntity:
        return PersonEntity.default()
