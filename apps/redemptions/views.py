from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole

from .models import RedemptionVoucher
from .serializers import (
    RedemptionVoucherSerializer,
    RedemptionCreateSerializer,
    RedemptionReceiptSerializer,
    VoucherTransitionSerializer,
    VoucherFilterSerializer,
    VoucherLookupSerializer,
)
from .services import (
    create_redemption,
    list_vouchers,
    lookup_by_code,
    confirm_redemption,
    cancel_redemption,
)


class RedemptionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for redemption vouchers.

    list: Own vouchers (admin: all, ?search=)
    create: Redeem a product
    retrieve: Get a voucher
    lookup: Resolve a code to a pending voucher (admin)
    confirm: pending -> completed (admin)
    cancel: pending -> cancelled (admin or owner)
    """

    queryset = RedemptionVoucher.objects.all()
    serializer_class = RedemptionVoucherSerializer
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        """Staff-side actions are admin only."""
        if self.action in ['lookup', 'confirm']:
            return [IsAuthenticated(), IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):
        search = None
        if self.action == 'list':
            filter_serializer = VoucherFilterSerializer(data=self.request.query_params)
            filter_serializer.is_valid(raise_exception=True)
            search = filter_serializer.validated_data.get('search')
        return list_vouchers(account=self.request.user, search=search)

    @extend_schema(
        parameters=[OpenApiParameter('search', str, description='Product name, code or voucher id (admin)')],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=RedemptionCreateSerializer, responses={201: RedemptionReceiptSerializer})
    def create(self, request, *args, **kwargs):
        """Spend points on one unit of a product."""
        serializer = RedemptionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        receipt = create_redemption(
            account_id=request.user.id,
            product_id=serializer.validated_data['product'],
        )
        return Response(
            RedemptionReceiptSerializer(receipt).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        parameters=[OpenApiParameter('code', str, required=True)],
        responses={200: RedemptionVoucherSerializer},
    )
    @action(detail=False, methods=['get'])
    def lookup(self, request):
        """Resolve a scanned or typed voucher code."""
        serializer = VoucherLookupSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        voucher = lookup_by_code(code=serializer.validated_data['code'])
        return Response(RedemptionVoucherSerializer(voucher).data)

    @extend_schema(request=None, responses={200: VoucherTransitionSerializer})
    @action(detail=True, methods=['post'])
    def confirm(self, request, pk=None):
        voucher, changed = confirm_redemption(voucher_id=pk)
        return Response({
            'voucher': RedemptionVoucherSerializer(voucher).data,
            'changed': changed,
        })

    @extend_schema(request=None, responses={200: VoucherTransitionSerializer})
    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        voucher, changed = cancel_redemption(voucher_id=pk, actor=request.user)
        return Response({
            'voucher': RedemptionVoucherSerializer(voucher).data,
            'changed': changed,
        })
