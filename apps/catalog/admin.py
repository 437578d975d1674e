from django.contrib import admin
from .models import Product, ProductCategory, Banner


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for redeemable products."""

    list_display = ['name', 'category', 'price', 'stock', 'updated_at']
    list_filter = ['category']
    search_fields = ['name', 'description']
    ordering = ['category', 'price']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(ProductCategory)
class ProductCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ['tag', 'active', 'object_position', 'created_at']
    list_filter = ['active']
    readonly_fields = ['created_at']
