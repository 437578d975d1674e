"""
Role-based permission classes.

Usage:
    @permission_classes([IsAuthenticated, IsAdminRole])
    def approve(request, pk):
        ...
"""
from rest_framework.permissions import BasePermission

from .models import Role


class IsAdminRole(BasePermission):
    """Allows access only to the ADMIN account."""

    message = 'Only the workshop admin can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == Role.ADMIN)


class IsStudentRole(BasePermission):
    """Allows access only to approved students."""

    message = 'Only approved students can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated
            and user.role == Role.STUDENT and user.is_approved
        )
