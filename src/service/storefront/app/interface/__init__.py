"""Application layer interfaces (Ports)"""

from src.service.storefront.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.storefront.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.storefront.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.storefront.app.interface.i_review_query_repo import IReviewQueryRepo
from src.service.storefront.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IProductCommandRepo',
    'IProductQueryRepo',
    'IReviewCommandRepo',
    'IReviewQueryRepo',
    'IUserQueryRepo',
]
