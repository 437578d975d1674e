from rest_framework import serializers

from .models import Product, ProductCategory, Banner


class ProductSerializer(serializers.ModelSerializer):
    """Product document as stored in the 'products' collection."""

    price = serializers.IntegerField(min_value=1)
    stock = serializers.IntegerField(min_value=0)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'category',
            'price',
            'stock',
            'description',
            'image_url',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class ProductUpdateSerializer(serializers.Serializer):
    """Partial product update; every field optional."""

    name = serializers.CharField(max_length=200, required=False)
    category = serializers.CharField(max_length=50, required=False, allow_blank=True)
    price = serializers.IntegerField(min_value=1, required=False)
    stock = serializers.IntegerField(min_value=0, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)


class StockSerializer(serializers.Serializer):
    """New stock level. Negative values are clamped to zero."""

    stock = serializers.IntegerField()


class ProductFilterSerializer(serializers.Serializer):
    category = serializers.CharField(required=False, allow_blank=True)


class ProductCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductCategory
        fields = ['id', 'name', 'created_at']
        read_only_fields = ['id', 'created_at']


class CategoryCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name cannot be blank.')
        return value


class BannerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Banner
        fields = [
            'id',
            'image_url',
            'tag',
            'active',
            'object_position',
            'mobile_height',
            'desktop_height',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']
