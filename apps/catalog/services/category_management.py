"""Product category service."""

from uuid import UUID

from apps.ledger.exceptions import NotFoundError
from apps.ledger.store import ledger_store

from ..models import ProductCategory
from .exceptions import CategoryNotFoundError, DuplicateCategoryError


def list_categories():
    return ProductCategory.objects.order_by('name')


def add_category(*, name: str) -> dict:
    """
    Raises:
        DuplicateCategoryError: If the name exists (case-insensitive)
    """
    name = name.strip()
    if ProductCategory.objects.filter(name__iexact=name).exists():
        raise DuplicateCategoryError()
    return ledger_store.put('categories', None, {'name': name})


def delete_category(*, category_id: UUID) -> None:
    """Delete a category. Products keep their (now stale) category label."""
    try:
        ledger_store.delete('categories', category_id)
    except NotFoundError:
        raise CategoryNotFoundError()
