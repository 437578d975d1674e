from django.contrib import admin
from .models import Mission, MissionSubmission, CompletionRecord


@admin.register(Mission)
class MissionAdmin(admin.ModelAdmin):
    list_display = ['title', 'points', 'difficulty', 'is_active', 'deadline', 'max_attempts']
    list_filter = ['difficulty', 'is_active']
    search_fields = ['title', 'description']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(MissionSubmission)
class MissionSubmissionAdmin(admin.ModelAdmin):
    """
    Read-only view of submissions.

    Approval goes through the API so the point credit and completion
    record are written together.
    """

    list_display = ['mission_title', 'account_name', 'points', 'status', 'created_at', 'resolved_at']
    list_filter = ['status', 'created_at']
    search_fields = ['mission_title', 'account_name']
    date_hierarchy = 'created_at'
    readonly_fields = [
        'id', 'account', 'account_name', 'mission', 'mission_title',
        'points', 'status', 'created_at', 'resolved_at',
    ]

    def has_add_permission(self, request):
        return False


@admin.register(CompletionRecord)
class CompletionRecordAdmin(admin.ModelAdmin):
    list_display = ['account', 'mission', 'completed_at']
    list_filter = ['completed_at']
    readonly_fields = ['id', 'account', 'mission', 'submission', 'completed_at']

    def has_add_permission(self, request):
        return False
