from django.apps import AppConfig


class RedemptionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.redemptions'
    label = 'redemptions'
    verbose_name = 'Redemptions'

    def ready(self):
        from apps.ledger.store import ledger_store
        from .models import RedemptionVoucher
        from .serializers import RedemptionVoucherSerializer

        ledger_store.register('redemptions', RedemptionVoucher, RedemptionVoucherSerializer, admin_only=True)
