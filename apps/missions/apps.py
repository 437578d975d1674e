from django.apps import AppConfig


class MissionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.missions'
    label = 'missions'
    verbose_name = 'Missions'

    def ready(self):
        from apps.ledger.store import ledger_store
        from .models import Mission, MissionSubmission, CompletionRecord
        from .serializers import MissionSerializer, MissionSubmissionSerializer, CompletionRecordSerializer

        ledger_store.register('missions', Mission, MissionSerializer)
        ledger_store.register('submissions', MissionSubmission, MissionSubmissionSerializer, admin_only=True)
        ledger_store.register('completions', CompletionRecord, CompletionRecordSerializer, admin_only=True)
