from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.catalog'
    label = 'catalog'
    verbose_name = 'Catalog'

    def ready(self):
        from apps.ledger.store import ledger_store
        from .models import Product, ProductCategory, Banner
        from .serializers import ProductSerializer, ProductCategorySerializer, BannerSerializer

        ledger_store.register('products', Product, ProductSerializer)
        ledger_store.register('categories', ProductCategory, ProductCategorySerializer)
        ledger_store.register('banners', Banner, BannerSerializer)
