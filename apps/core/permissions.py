"""
Custom permissions for the application.
"""
from rest_framework import permissions


class IsAuthenticatedAndActive(permissions.BasePermission):
    """
    Permission that checks if the client is authenticated and active.
    """
    def has_permission(self, request, view):
        if not request.user:
            return False
        return (
            request.user.is_authenticated and
            request.user.is_active
        )
