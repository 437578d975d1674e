"""
Custom permission classes for catalog app.

Any authenticated account may browse the catalog; only the admin edits it.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

from apps.accounts.models import Role


class IsAdminOrReadOnly(BasePermission):
    """Read access for everyone signed in, write access for the admin."""

    message = 'Only the workshop admin can change the catalog.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return user.role == Role.ADMIN
