"""Services for catalog business logic."""

from .exceptions import (
    ProductNotFoundError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    BannerNotFoundError,
)
from .product_management import (
    get_product,
    list_products,
    add_product,
    update_product,
    delete_product,
    set_stock,
)
from .category_management import list_categories, add_category, delete_category
from .banner_management import list_active_banners, add_banner, delete_banner

__all__ = [
    # Exceptions
    'ProductNotFoundError',
    'CategoryNotFoundError',
    'DuplicateCategoryError',
    'BannerNotFoundError',
    # Products
    'get_product',
    'list_products',
    'add_product',
    'update_product',
    'delete_product',
    'set_stock',
    # Categories
    'list_categories',
    'add_category',
    'delete_category',
    # Banners
    'list_active_banners',
    'add_banner',
    'delete_banner',
]
