from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import Wish
from .serializers import (
    WishSerializer,
    WishCreateSerializer,
    WishLikeResultSerializer,
    CooldownStatusSerializer,
    CooldownResetSerializer,
)
from .services import (
    list_wishes,
    post_wish,
    like_wish,
    delete_wish,
    cooldown_status,
    reset_cooldown,
)


class WishViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for the wishing well.

    list: All wishes, newest first, with like counts
    create: Post a wish (one per cooldown window)
    destroy: Delete a wish (owner or admin)
    like: Like a wish once
    cooldown: The caller's cooldown status
    reset: Spend points to end the cooldown
    """

    queryset = Wish.objects.all()
    serializer_class = WishSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return list_wishes(viewer=self.request.user)

    @extend_schema(request=WishCreateSerializer, responses={201: WishSerializer})
    def create(self, request, *args, **kwargs):
        serializer = WishCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        wish = post_wish(
            account_id=request.user.id,
            item_name=serializer.validated_data['item_name'],
            description=serializer.validated_data['description'],
        )
        return Response(WishSerializer(wish).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        delete_wish(wish_id=kwargs['pk'], actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: WishLikeResultSerializer})
    @action(detail=True, methods=['post'])
    def like(self, request, pk=None):
        """Repeat likes report ``changed: false``."""
        wish, changed = like_wish(wish_id=pk, account=request.user)
        return Response({
            'wish': WishSerializer(wish).data,
            'changed': changed,
        })

    @extend_schema(responses={200: CooldownStatusSerializer})
    @action(detail=False, methods=['get'])
    def cooldown(self, request):
        return Response(CooldownStatusSerializer(cooldown_status(account=request.user)).data)

    @extend_schema(request=None, responses={200: CooldownResetSerializer})
    @action(detail=False, methods=['post'], url_path='cooldown/reset')
    def reset(self, request):
        account = reset_cooldown(account_id=request.user.id)
        return Response({
            'balance': account.balance,
            'cooldown': CooldownStatusSerializer(cooldown_status(account=account)).data,
        })
