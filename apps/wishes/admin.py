from django.contrib import admin
from .models import Wish, WishLike


class WishLikeInline(admin.TabularInline):
    model = WishLike
    extra = 0
    readonly_fields = ['account', 'created_at']


@admin.register(Wish)
class WishAdmin(admin.ModelAdmin):
    list_display = ['item_name', 'account_name', 'created_at', 'cooldown_waived_at']
    search_fields = ['item_name', 'account_name', 'description']
    date_hierarchy = 'created_at'
    readonly_fields = ['id', 'account', 'account_name', 'account_avatar', 'created_at', 'cooldown_waived_at']
    inlines = [WishLikeInline]
