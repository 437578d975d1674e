from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.models import Role
from apps.accounts.permissions import IsAdminRole
from apps.catalog.permissions import IsAdminOrReadOnly

from .models import Mission, MissionSubmission
from .serializers import (
    MissionSerializer,
    MissionUpdateSerializer,
    BoardEntrySerializer,
    MissionSubmissionSerializer,
    SubmissionCreateSerializer,
    SubmissionFilterSerializer,
    MissionSuggestionSerializer,
)
from .services import (
    list_missions,
    create_mission,
    update_mission,
    delete_mission,
    toggle_mission,
    mission_board,
    submit_mission,
    approve_submission,
    reject_submission,
    list_submissions,
    suggest_daily_mission,
)


class MissionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for mission definitions.

    list: Active missions (admin: all)
    create / partial_update / destroy: Admin only
    toggle: Flip the active flag (admin)
    board: Active missions with the caller's state for today
    suggestion: Generated daily mission idea (admin)
    """

    queryset = Mission.objects.all()
    serializer_class = MissionSerializer
    permission_classes = [IsAdminOrReadOnly]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_permissions(self):
        if self.action in ['toggle', 'suggestion']:
            return [IsAuthenticated(), IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):
        if self.request.user.role == Role.ADMIN:
            return list_missions()
        return list_missions(active=True)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        document = create_mission(**serializer.validated_data)
        return Response(document, status=status.HTTP_201_CREATED)

    @extend_schema(request=MissionUpdateSerializer, responses={200: MissionSerializer})
    def partial_update(self, request, *args, **kwargs):
        serializer = MissionUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        document = update_mission(mission_id=kwargs['pk'], **serializer.validated_data)
        return Response(document)

    def destroy(self, request, *args, **kwargs):
        delete_mission(mission_id=kwargs['pk'])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: MissionSerializer})
    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        mission = toggle_mission(mission_id=pk)
        return Response(MissionSerializer(mission).data)

    @extend_schema(responses={200: BoardEntrySerializer(many=True)})
    @action(detail=False, methods=['get'])
    def board(self, request):
        """Each active mission as available, pending, completed_today or expired."""
        entries = mission_board(account=request.user)
        return Response(BoardEntrySerializer(entries, many=True).data)

    @extend_schema(responses={200: MissionSuggestionSerializer})
    @action(detail=False, methods=['get'])
    def suggestion(self, request):
        return Response(suggest_daily_mission())


class SubmissionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for mission submissions.

    list: Own submissions (admin: all, ?status=)
    create: Submit a mission for review
    approve / reject: Resolve a pending submission (admin)
    """

    queryset = MissionSubmission.objects.all()
    serializer_class = MissionSubmissionSerializer
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action in ['approve', 'reject']:
            return [IsAuthenticated(), IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):
        submission_status = None
        if self.action == 'list':
            filter_serializer = SubmissionFilterSerializer(data=self.request.query_params)
            filter_serializer.is_valid(raise_exception=True)
            submission_status = filter_serializer.validated_data.get('status')
        return list_submissions(account=self.request.user, status=submission_status)

    @extend_schema(
        parameters=[OpenApiParameter('status', str, description='pending, approved or rejected')],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=SubmissionCreateSerializer, responses={201: MissionSubmissionSerializer})
    def create(self, request, *args, **kwargs):
        serializer = SubmissionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        submission = submit_mission(
            account_id=request.user.id,
            mission_id=serializer.validated_data['mission'],
        )
        return Response(
            MissionSubmissionSerializer(submission).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=None, responses={200: MissionSubmissionSerializer})
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        """Approve and credit the snapshotted points."""
        submission = approve_submission(submission_id=pk)
        return Response(MissionSubmissionSerializer(submission).data)

    @extend_schema(request=None, responses={200: MissionSubmissionSerializer})
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        submission = reject_submission(submission_id=pk)
        return Response(MissionSubmissionSerializer(submission).data)
