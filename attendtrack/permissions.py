from rest_framework import permissions


class IsManager(permissions.BasePermission):
    message = 'Access denied'

    def has_permission(self, request, view):
        if hasattr(request.user, 'role') and request.user.role == 'manager':
            return True
        return False
