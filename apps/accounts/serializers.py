from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from .models import Account, PointReason
from .ranks import next_rank_for


class RankSerializer(serializers.Serializer):
    name = serializers.CharField()
    threshold = serializers.IntegerField()
    icon = serializers.CharField()


class AccountSerializer(serializers.ModelSerializer):
    """Account document as stored in the 'accounts' collection."""

    rank = RankSerializer(read_only=True)

    class Meta:
        model = Account
        fields = [
            'id',
            'name',
            'role',
            'balance',
            'total_earned',
            'rank',
            'is_approved',
            'grade',
            'avatar',
            'created_at',
        ]
        read_only_fields = ['id', 'rank', 'created_at']


class AccountProfileSerializer(AccountSerializer):
    """Current account with progress towards the next rank."""

    next_rank = serializers.SerializerMethodField()

    class Meta(AccountSerializer.Meta):
        fields = AccountSerializer.Meta.fields + ['next_rank', 'last_login']
        read_only_fields = fields

    def get_next_rank(self, obj):
        upcoming = next_rank_for(obj.total_earned)
        if upcoming is None:
            return None
        return {
            **RankSerializer(upcoming).data,
            'points_needed': upcoming.threshold - obj.total_earned,
        }


class RegistrationSerializer(serializers.Serializer):
    """Serializer for student registration."""

    name = serializers.CharField(max_length=100)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    grade = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name cannot be blank.')
        return value

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class LoginSerializer(serializers.Serializer):
    """Serializer for student login."""

    name = serializers.CharField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class AdminLoginSerializer(serializers.Serializer):
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class GuestLoginSerializer(serializers.Serializer):
    code = serializers.CharField(write_only=True)


class GrantPointsSerializer(serializers.Serializer):
    """Input for a manual point grant; the reason is advisory free text."""

    amount = serializers.IntegerField(min_value=1)
    reason = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


class StudentFilterSerializer(serializers.Serializer):
    approved = serializers.BooleanField(required=False, allow_null=True, default=None)


class PointReasonSerializer(serializers.ModelSerializer):
    class Meta:
        model = PointReason
        fields = ['id', 'title', 'created_at']
        read_only_fields = ['id', 'created_at']
