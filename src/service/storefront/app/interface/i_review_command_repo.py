from abc import ABC, abstractmethod

from src.service.storefront.domain.entity.review_entity import ReviewEntity


class IReviewCommandRepo(ABC):
    """Review command repository - CQRS write side"""

    @abstractmethod
    async def create(self, review: ReviewEntity) -> ReviewEntity:
        """
        Persist a review.

        Raises:
            ConstraintViolationError: the database rejected the row
                (e.g. product_id does not reference an existing product)
        """
        pass
