from rest_framework import serializers

from .models import Mission, MissionSubmission, CompletionRecord, Difficulty, SubmissionStatus


class MissionSerializer(serializers.ModelSerializer):
    """Mission document as stored in the 'missions' collection."""

    points = serializers.IntegerField(min_value=1)
    max_attempts = serializers.IntegerField(min_value=1, required=False)

    class Meta:
        model = Mission
        fields = [
            'id',
            'title',
            'description',
            'points',
            'difficulty',
            'is_active',
            'deadline',
            'max_attempts',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class MissionUpdateSerializer(serializers.Serializer):
    """Partial mission update; every field optional."""

    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    points = serializers.IntegerField(min_value=1, required=False)
    difficulty = serializers.ChoiceField(choices=Difficulty.choices, required=False)
    is_active = serializers.BooleanField(required=False)
    deadline = serializers.DateTimeField(required=False, allow_null=True)
    max_attempts = serializers.IntegerField(min_value=1, required=False)


class BoardEntrySerializer(serializers.Serializer):
    mission = MissionSerializer()
    state = serializers.CharField()


class MissionSubmissionSerializer(serializers.ModelSerializer):
    """Submission document as stored in the 'submissions' collection."""

    class Meta:
        model = MissionSubmission
        fields = [
            'id',
            'account',
            'account_name',
            'mission',
            'mission_title',
            'points',
            'status',
            'created_at',
            'resolved_at',
        ]
        read_only_fields = ['id', 'created_at']


class SubmissionCreateSerializer(serializers.Serializer):
    mission = serializers.UUIDField()


class SubmissionFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=SubmissionStatus.choices, required=False)


class CompletionRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = CompletionRecord
        fields = ['id', 'account', 'mission', 'submission', 'completed_at']
        read_only_fields = ['id']


class MissionSuggestionSerializer(serializers.Serializer):
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    points = serializers.IntegerField()
