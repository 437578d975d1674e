from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.accounts'
    label = 'accounts'
    verbose_name = 'Accounts'

    def ready(self):
        from apps.ledger.store import ledger_store
        from .models import Account, PointReason
        from .serializers import AccountSerializer, PointReasonSerializer

        ledger_store.register('accounts', Account, AccountSerializer, admin_only=True)
        ledger_store.register('point_reasons', PointReason, PointReasonSerializer, admin_only=True)
