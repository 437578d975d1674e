from django.db import models
from django.db.models import Q
import uuid


class ProductCategory(models.Model):
    """Category label. Products refer to it loosely, by name."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_categories'
        ordering = ['name']
        verbose_name_plural = 'product categories'

    def __str__(self):
        return self.name


class Product(models.Model):
    """Redeemable product priced in points."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    # Free-form label; deleting a category leaves the stale label in place.
    category = models.CharField(max_length=50, db_index=True, blank=True)
    price = models.PositiveIntegerField()
    stock = models.PositiveIntegerField(default=0)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['price', 'name']
        constraints = [
            models.CheckConstraint(condition=Q(price__gt=0), name='product_price_positive'),
            models.CheckConstraint(condition=Q(stock__gte=0), name='product_stock_non_negative'),
        ]

    def __str__(self):
        return f"{self.name} ({self.price} pts)"


class Banner(models.Model):
    """Promotional carousel entry. Purely presentational."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    image_url = models.URLField(max_length=500)
    tag = models.CharField(max_length=50, default='Featured')
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    # Layout hints for the client
    object_position = models.CharField(max_length=30, default='center')
    mobile_height = models.CharField(max_length=30, default='h-48')
    desktop_height = models.CharField(max_length=30, default='md:h-72')

    class Meta:
        db_table = 'banners'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.tag} banner"
