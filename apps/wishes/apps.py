from django.apps import AppConfig


class WishesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.wishes'
    label = 'wishes'
    verbose_name = 'Wishes'

    def ready(self):
        from apps.ledger.store import ledger_store
        from .models import Wish
        from .serializers import WishSerializer

        ledger_store.register('wishes', Wish, WishSerializer)
