from django.contrib import admin

from .models import CollectionVersion


@admin.register(CollectionVersion)
class CollectionVersionAdmin(admin.ModelAdmin):
    """Read-only view of live-query change counters."""

    list_display = ['collection', 'version', 'updated_at']
    readonly_fields = ['collection', 'version', 'updated_at']
    ordering = ['collection']

    def has_add_permission(self, request):
        return False
