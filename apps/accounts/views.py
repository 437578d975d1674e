from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .permissions import IsAdminRole
from .serializers import (
    AccountSerializer,
    AccountProfileSerializer,
    RegistrationSerializer,
    LoginSerializer,
    AdminLoginSerializer,
    GuestLoginSerializer,
    GrantPointsSerializer,
    StudentFilterSerializer,
    PointReasonSerializer,
)
from .services import (
    register_student,
    authenticate_account,
    authenticate_admin,
    authenticate_guest,
    list_students,
    approve_account,
    delete_account,
    grant_points,
    list_point_reasons,
    add_point_reason,
    delete_point_reason,
    generate_encouragement,
)
from .session import remember_account, cached_account, forget_account


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    account = AccountSerializer()
    tokens = TokensResponseSerializer()


class RegistrationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    account = AccountSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
    code = serializers.CharField()


class SessionResponseSerializer(serializers.Serializer):
    account = AccountSerializer(allow_null=True)


def _login_response(request, account):
    """Issue JWT tokens and cache the account snapshot in the session."""
    refresh = RefreshToken.for_user(account)
    account_data = AccountSerializer(account).data
    remember_account(request, account_data)

    return Response({
        'message': 'Login successful',
        'account': account_data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    })


# =============================================================================
# Authentication
# =============================================================================

@extend_schema(
    request=RegistrationSerializer,
    responses={
        201: RegistrationResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a student account. The account cannot log in until an admin approves it.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new student account."""
    serializer = RegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data
    account = register_student(
        name=data['name'],
        password=data['password'],
        grade=data.get('grade', ''),
    )

    return Response({
        'message': 'Registration successful. Please wait for approval.',
        'account': AccountSerializer(account).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=LoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Authenticate a student with name and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with name and password."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    account = authenticate_account(**serializer.validated_data)
    return _login_response(request, account)


@extend_schema(
    request=AdminLoginSerializer,
    responses={200: AuthResponseSerializer, 401: ErrorResponseSerializer},
    description="Log in as the workshop admin with the shared admin password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def admin_login(request):
    serializer = AdminLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    account = authenticate_admin(password=serializer.validated_data['password'])
    return _login_response(request, account)


@extend_schema(
    request=GuestLoginSerializer,
    responses={200: AuthResponseSerializer, 401: ErrorResponseSerializer},
    description="Log in as a guest with the shared access code (case-insensitive).",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def guest_login(request):
    serializer = GuestLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    account = authenticate_guest(code=serializer.validated_data['code'])
    return _login_response(request, account)


@extend_schema(
    request=None,
    responses={200: MessageResponseSerializer},
    description="Logout and clear the cached session snapshot.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Logout and clear the session snapshot."""
    forget_account(request)
    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={200: SessionResponseSerializer},
    description="Return the account snapshot cached at login. Advisory only; may be stale.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def session_snapshot(request):
    return Response({'account': cached_account(request)})


# =============================================================================
# Current account
# =============================================================================

@extend_schema(
    responses={200: AccountProfileSerializer},
    description="Get the current account, freshly read, with rank and next rank.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_account(request):
    """Get current account profile."""
    account = request.user
    account.refresh_from_db()
    data = AccountProfileSerializer(account).data
    remember_account(request, AccountSerializer(account).data)
    return Response(data)


@extend_schema(
    responses={200: MessageResponseSerializer},
    description="Short encouragement message for the current account. Falls back to a fixed text.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def encouragement(request):
    account = request.user
    account.refresh_from_db()
    return Response({'message': generate_encouragement(account=account)})


# =============================================================================
# Admin: students
# =============================================================================

@extend_schema(
    parameters=[
        OpenApiParameter('approved', bool, description='Filter by approval state'),
    ],
    responses={200: AccountSerializer(many=True)},
    description="List student accounts.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def students(request):
    filter_serializer = StudentFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = list_students(approved=filter_serializer.validated_data.get('approved'))
    return Response(AccountSerializer(queryset, many=True).data)


@extend_schema(
    request=None,
    responses={200: AccountSerializer, 404: ErrorResponseSerializer},
    description="Approve a pending student registration. No-op if already approved.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def approve_student(request, pk):
    account = approve_account(account_id=pk)
    return Response(AccountSerializer(account).data)


@extend_schema(
    request=None,
    responses={204: None, 404: ErrorResponseSerializer},
    description="Reject (hard-remove) a student account.",
    tags=['admin'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def reject_student(request, pk):
    delete_account(account_id=pk)
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    request=GrantPointsSerializer,
    responses={200: AccountSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Grant points to a student. Increments both balance and lifetime total.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def grant_student_points(request, pk):
    serializer = GrantPointsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    account = grant_points(account_id=pk, **serializer.validated_data)
    return Response(AccountSerializer(account).data)


# =============================================================================
# Point reasons
# =============================================================================

@extend_schema(
    methods=['GET'],
    responses={200: PointReasonSerializer(many=True)},
    description="List point reasons.",
    tags=['admin'],
)
@extend_schema(
    methods=['POST'],
    request=PointReasonSerializer,
    responses={201: PointReasonSerializer},
    description="Add a point reason.",
    tags=['admin'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def point_reasons(request):
    if request.method == 'GET':
        return Response(PointReasonSerializer(list_point_reasons(), many=True).data)

    serializer = PointReasonSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    document = add_point_reason(title=serializer.validated_data['title'])
    return Response(document, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    responses={204: None, 404: ErrorResponseSerializer},
    description="Delete a point reason.",
    tags=['admin'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def point_reason_detail(request, pk):
    delete_point_reason(reason_id=pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
