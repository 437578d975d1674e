from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import Product, ProductCategory, Banner
from .permissions import IsAdminOrReadOnly
from .serializers import (
    ProductSerializer,
    ProductUpdateSerializer,
    ProductFilterSerializer,
    StockSerializer,
    ProductCategorySerializer,
    CategoryCreateSerializer,
    BannerSerializer,
)
from .services import (
    list_products,
    add_product,
    update_product,
    delete_product,
    set_stock,
    list_categories,
    add_category,
    delete_category,
    list_active_banners,
    add_banner,
    delete_banner,
)


class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Product CRUD operations.

    list: Get all products (filter with ?category=)
    create: Add a product (admin)
    retrieve: Get a specific product
    partial_update: Edit a product (admin)
    destroy: Delete a product (admin)
    stock: Set the stock level (admin)
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [IsAdminOrReadOnly]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = ProductFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_products(category=filter_serializer.validated_data.get('category'))

    @extend_schema(
        parameters=[OpenApiParameter('category', str, description='Category label')],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        """Add a new product."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        document = add_product(
            name=data['name'],
            price=data['price'],
            stock=data.get('stock', 0),
            category=data.get('category', ''),
            description=data.get('description', ''),
            image_url=data.get('image_url', ''),
        )
        return Response(document, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductUpdateSerializer, responses={200: ProductSerializer})
    def partial_update(self, request, *args, **kwargs):
        """Apply a partial update to a product."""
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        document = update_product(product_id=kwargs['pk'], **serializer.validated_data)
        return Response(document)

    def destroy(self, request, *args, **kwargs):
        delete_product(product_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=StockSerializer, responses={200: ProductSerializer})
    @action(detail=True, methods=['post'])
    def stock(self, request, pk=None):
        """Set the stock level. Negative values are clamped to zero."""
        serializer = StockSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = set_stock(product_id=pk, stock=serializer.validated_data['stock'])
        return Response(ProductSerializer(product).data)


class ProductCategoryViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """List, add and delete product categories."""

    queryset = ProductCategory.objects.all()
    serializer_class = ProductCategorySerializer
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = None

    def get_queryset(self):
        return list_categories()

    @extend_schema(request=CategoryCreateSerializer, responses={201: ProductCategorySerializer})
    def create(self, request, *args, **kwargs):
        serializer = CategoryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        document = add_category(name=serializer.validated_data['name'])
        return Response(document, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        """Delete a category; products keep their label."""
        delete_category(category_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)


class BannerViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Active banners newest first; admin adds and removes them."""

    queryset = Banner.objects.all()
    serializer_class = BannerSerializer
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = None

    def get_queryset(self):
        return list_active_banners()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        document = add_banner(
            image_url=data['image_url'],
            tag=data.get('tag') or 'Featured',
            object_position=data.get('object_position', 'center'),
            mobile_height=data.get('mobile_height', 'h-48'),
            desktop_height=data.get('desktop_height', 'md:h-72'),
        )
        return Response(document, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        delete_banner(banner_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)
