"""Product CRUD and stock operations service."""

import logging
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from rest_framework import serializers

from apps.ledger.exceptions import InvalidInputError, NotFoundError
from apps.ledger.store import ledger_store

from ..models import Product
from ..serializers import ProductSerializer
from .exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


def get_product(*, product_id: UUID) -> Product:
    try:
        return Product.objects.get(id=product_id)
    except (Product.DoesNotExist, DjangoValidationError, ValueError):
        raise ProductNotFoundError()


def list_products(*, category: Optional[str] = None):
    """All products, optionally narrowed to one category label."""
    queryset = Product.objects.all()
    if category:
        queryset = queryset.filter(category=category)
    return queryset


def add_product(
    *,
    name: str,
    price: int,
    stock: int = 0,
    category: str = '',
    description: str = '',
    image_url: str = '',
) -> dict:
    """
    Create a product through the ledger store.

    Returns:
        The stored product document

    Raises:
        InvalidInputError: If price is not positive or stock is negative
    """
    document = ledger_store.put('products', None, {
        'name': name,
        'category': category,
        'price': price,
        'stock': stock,
        'description': description,
        'image_url': image_url,
    })
    logger.info('Added product %s (%s)', document['name'], document['id'])
    return document


@transaction.atomic
def update_product(*, product_id: UUID, **changes) -> dict:
    """
    Apply a partial update to a product.

    The row is locked and only the fields in ``changes`` are written, so a
    redemption committed meanwhile keeps its stock decrement. Vouchers keep
    their own price snapshot, so price changes never touch past redemptions.

    Raises:
        ProductNotFoundError: If product does not exist
        InvalidInputError: If a changed field does not validate
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except (Product.DoesNotExist, DjangoValidationError, ValueError):
        raise ProductNotFoundError()

    serializer = ProductSerializer(product, data=changes, partial=True)
    try:
        serializer.is_valid(raise_exception=True)
    except serializers.ValidationError as e:
        raise InvalidInputError(e.detail)

    fields = list(serializer.validated_data)
    for field, value in serializer.validated_data.items():
        setattr(product, field, value)
    product.save(update_fields=[*fields, 'updated_at'])
    product.refresh_from_db()

    logger.info('Updated product %s: %s', product.name, ', '.join(fields) or 'no changes')
    return ProductSerializer(product).data


def delete_product(*, product_id: UUID) -> None:
    try:
        ledger_store.delete('products', product_id)
    except NotFoundError:
        raise ProductNotFoundError()
    logger.info('Deleted product %s', product_id)


@transaction.atomic
def set_stock(*, product_id: UUID, stock: int) -> Product:
    """Set the stock level, clamping negative values to zero."""
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except (Product.DoesNotExist, DjangoValidationError, ValueError):
        raise ProductNotFoundError()

    product.stock = max(0, int(stock))
    product.save(update_fields=['stock', 'updated_at'])
    return product
