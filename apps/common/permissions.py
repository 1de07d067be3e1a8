"""
Role based DRF permissions.

Roles are ranked (regular < cashier < manager < superuser); each permission
admits the named role and everything above it.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class HasRole(BasePermission):
    required_role = None
    message = 'You do not have the required role for this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.has_role(self.required_role))


class IsCashier(HasRole):
    required_role = 'cashier'
    message = 'Cashier role or higher is required.'


class IsManager(HasRole):
    required_role = 'manager'
    message = 'Manager role or higher is required.'


class IsManagerOrReadOnly(BasePermission):
    """Any authenticated user may read; writes need manager"""

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return user.has_role('manager')
