from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import Account, PointReason
from .services import approve_account


@admin.register(Account)
class AccountAdmin(BaseUserAdmin):
    """
    Admin interface for workshop accounts.

    Balances are read-only here: points only move through the grant,
    redemption, mission and wish services.
    """

    list_display = [
        'name',
        'role',
        'grade',
        'balance',
        'total_earned',
        'rank_display',
        'is_approved_badge',
        'created_at',
    ]

    list_filter = ['role', 'is_approved', 'is_active', 'created_at']
    search_fields = ['name', 'grade']
    ordering = ['name']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'role', 'grade', 'avatar', 'password')
        }),
        ('Points', {
            'fields': ('balance', 'total_earned'),
        }),
        ('Status', {
            'fields': ('is_approved', 'is_active', 'is_staff', 'is_superuser'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create Account', {
            'classes': ('wide',),
            'fields': ('name', 'role', 'grade', 'password1', 'password2'),
        }),
    )

    readonly_fields = ['balance', 'total_earned', 'created_at', 'last_login']
    filter_horizontal = []

    def rank_display(self, obj):
        rank = obj.rank
        return f'{rank.icon} {rank.name}'
    rank_display.short_description = 'Rank'

    def is_approved_badge(self, obj):
        """Display approval status as colored badge."""
        if obj.is_approved:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Approved</span>'
            )
        return format_html(
            '<span style="background: #E5C49A; color: #2C1810; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Pending</span>'
        )
    is_approved_badge.short_description = 'Approval'
    is_approved_badge.admin_order_field = 'is_approved'

    actions = ['approve_students']

    @admin.action(description='Approve selected students')
    def approve_students(self, request, queryset):
        count = 0
        for account in queryset.filter(role='STUDENT', is_approved=False):
            approve_account(account_id=account.id)
            count += 1
        self.message_user(request, f'Approved {count} student(s).')


@admin.register(PointReason)
class PointReasonAdmin(admin.ModelAdmin):
    list_display = ['title', 'created_at']
    search_fields = ['title']
