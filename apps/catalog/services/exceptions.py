"""Domain-specific exceptions for catalog services."""

from apps.ledger.exceptions import NotFoundError, PreconditionFailedError


class ProductNotFoundError(NotFoundError):
    """Raised when product does not exist."""
    default_detail = 'Product not found.'
    default_code = 'product_not_found'


class CategoryNotFoundError(NotFoundError):
    """Raised when category does not exist."""
    default_detail = 'Category not found.'
    default_code = 'category_not_found'


class DuplicateCategoryError(PreconditionFailedError):
    """Raised when a category with the same name already exists."""
    default_detail = 'A category with this name already exists.'
    default_code = 'duplicate_category'


class BannerNotFoundError(NotFoundError):
    """Raised when banner does not exist."""
    default_detail = 'Banner not found.'
    default_code = 'banner_not_found'
