from rest_framework import serializers

from .models import RedemptionVoucher


class RedemptionVoucherSerializer(serializers.ModelSerializer):
    """Voucher document as stored in the 'redemptions' collection."""

    account_name = serializers.CharField(source='account.name', read_only=True)

    class Meta:
        model = RedemptionVoucher
        fields = [
            'id',
            'account',
            'account_name',
            'product',
            'product_name',
            'points_spent',
            'status',
            'code',
            'created_at',
            'resolved_at',
        ]
        read_only_fields = ['id', 'account_name', 'created_at']


class RedemptionCreateSerializer(serializers.Serializer):
    product = serializers.UUIDField()


class RedemptionReceiptSerializer(serializers.Serializer):
    """Created voucher with the balance and stock to display immediately."""

    voucher = RedemptionVoucherSerializer()
    balance = serializers.IntegerField()
    stock = serializers.IntegerField()


class VoucherTransitionSerializer(serializers.Serializer):
    voucher = RedemptionVoucherSerializer()
    changed = serializers.BooleanField()


class VoucherFilterSerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)


class VoucherLookupSerializer(serializers.Serializer):
    code = serializers.CharField()
