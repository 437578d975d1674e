from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'categories', views.ProductCategoryViewSet, basename='category')
router.register(r'banners', views.BannerViewSet, basename='banner')
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    # Product routes
    # GET    /api/catalog/products/               - List products (?category=)
    # POST   /api/catalog/products/               - Add product (admin)
    # GET    /api/catalog/products/{id}/          - Get product
    # PATCH  /api/catalog/products/{id}/          - Edit product (admin)
    # DELETE /api/catalog/products/{id}/          - Delete product (admin)
    # POST   /api/catalog/products/{id}/stock/    - Set stock (admin)

    # Category routes
    # GET    /api/catalog/categories/             - List categories
    # POST   /api/catalog/categories/             - Add category (admin)
    # DELETE /api/catalog/categories/{id}/        - Delete category (admin)

    # Banner routes
    # GET    /api/catalog/banners/                - Active banners, newest first
    # POST   /api/catalog/banners/                - Add banner (admin)
    # DELETE /api/catalog/banners/{id}/           - Delete banner (admin)

    path('', include(router.urls)),
]
