from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.command.create_product_use_case import CreateProductUseCase
from src.service.storefront.app.command.create_review_use_case import CreateReviewUseCase
from src.service.storefront.app.query.get_product_use_case import GetProductUseCase
from src.service.storefront.app.query.list_reviews_use_case import ListReviewsUseCase
from src.service.storefront.domain.entity.product_entity import ProductEntity
from src.service.storefront.domain.entity.review_entity import ReviewEntity
from src.service.storefront.driving_adapter.http_controller.schema.product_schema import (
    ProductCreateRequest,
    ProductResponse,
)
from src.service.storefront.driving_adapter.http_controller.schema.review_schema import (
    ReviewCreateRequest,
    ReviewResponse,
)


router = APIRouter()


def _to_product_response(product: ProductEntity) -> ProductResponse:
    if product.id is None:
        raise ValueError('Product ID should not be None after persistence.')
    return ProductResponse(
        id=product.id,
        name=product.name,
        created_at=product.created_at,  # type: ignore[arg-type]
        updated_at=product.updated_at,  # type: ignore[arg-type]
    )


def _to_review_response(review: ReviewEntity) -> ReviewResponse:
    if review.id is None:
        raise ValueError('Review ID should not be None after persistence.')
    return ReviewResponse(
        id=review.id,
        product_id=review.product_id,
        content=review.content,
        created_at=review.created_at,  # type: ignore[arg-type]
        updated_at=review.updated_at,  # type: ignore[arg-type]
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: ProductCreateRequest,
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.create(name=request.name)
    return _to_product_response(product)


@router.get('/{product_id}')
@Logger.io
async def get_product(
    product_id: int,
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.get_by_id(product_id=product_id)
    if product is None:
        raise NotFoundError(f'Product not found: {product_id}')
    return _to_product_response(product)


# === Reviews (nested under product) ===


@router.post('/{product_id}/review', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_review(
    product_id: int,
    request: ReviewCreateRequest,
    use_case: CreateReviewUseCase = Depends(CreateReviewUseCase.depends),
) -> ReviewResponse:
    review = await use_case.create(product_id=product_id, content=request.content)
    return _to_review_response(review)


@router.get('/{product_id}/review')
@Logger.io
async def list_reviews(
    product_id: int,
    use_case: ListReviewsUseCase = Depends(ListReviewsUseCase.depends),
) -> List[ReviewResponse]:
    reviews = await use_case.list_by_product(product_id=product_id)
    if reviews is None:
        raise NotFoundError(f'Product not found: {product_id}')
    return [_to_review_response(review) for review in reviews]
