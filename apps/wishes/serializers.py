from rest_framework import serializers

from .models import Wish


class WishSerializer(serializers.ModelSerializer):
    """Wish document as stored in the 'wishes' collection."""

    like_count = serializers.SerializerMethodField()
    liked_by = serializers.SerializerMethodField()
    liked_by_me = serializers.SerializerMethodField()

    class Meta:
        model = Wish
        fields = [
            'id',
            'account',
            'account_name',
            'account_avatar',
            'item_name',
            'description',
            'created_at',
            'cooldown_waived_at',
            'like_count',
            'liked_by',
            'liked_by_me',
        ]
        read_only_fields = ['id', 'created_at', 'cooldown_waived_at']

    def get_like_count(self, obj):
        count = getattr(obj, 'like_count', None)
        return count if count is not None else obj.likes.count()

    def get_liked_by(self, obj):
        return [str(account_id) for account_id in obj.likes.values_list('account_id', flat=True)]

    def get_liked_by_me(self, obj):
        return bool(getattr(obj, 'liked_by_me', False))


class WishCreateSerializer(serializers.Serializer):
    item_name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_item_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Item name cannot be blank.')
        return value


class WishLikeResultSerializer(serializers.Serializer):
    wish = WishSerializer()
    changed = serializers.BooleanField()


class CooldownStatusSerializer(serializers.Serializer):
    on_cooldown = serializers.BooleanField()
    available_at = serializers.DateTimeField(allow_null=True)
    remaining_seconds = serializers.IntegerField()


class CooldownResetSerializer(serializers.Serializer):
    balance = serializers.IntegerField()
    cooldown = CooldownStatusSerializer()
