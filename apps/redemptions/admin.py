from django.contrib import admin
from .models import RedemptionVoucher


@admin.register(RedemptionVoucher)
class RedemptionVoucherAdmin(admin.ModelAdmin):
    """
    Read-only view of issued vouchers.

    Status changes go through the confirm/cancel API so that the
    lifecycle rules apply.
    """

    list_display = ['code', 'account', 'product_name', 'points_spent', 'status', 'created_at', 'resolved_at']
    list_filter = ['status', 'created_at']
    search_fields = ['code', 'product_name', 'account__name']
    date_hierarchy = 'created_at'
    readonly_fields = [
        'id', 'account', 'product', 'product_name', 'points_spent',
        'status', 'code', 'created_at', 'resolved_at',
    ]

    def has_add_permission(self, request):
        return False
