"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.storefront.driven_adapter.model.product_model import ProductModel
from src.service.storefront.driven_adapter.model.review_model import ReviewModel
from src.service.storefront.driven_adapter.model.user_model import UserModel

__all__ = [
    'ProductModel',
    'ReviewModel',
    'UserModel',
]
