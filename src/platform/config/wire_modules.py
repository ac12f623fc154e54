"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.storefront.app.command import create_product_use_case, create_review_use_case
from src.service.storefront.app.query import (
    get_product_use_case,
    get_user_use_case,
    list_reviews_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    get_user_use_case,
    get_product_use_case,
    list_reviews_use_case,
    create_product_use_case,
    create_review_use_case,
]
