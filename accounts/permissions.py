from rest_framework.permissions import BasePermission, SAFE_METHODS

from accounts.constants import UserRole


class HasAnyRole(BasePermission):
    """
    Base class: grants access to the roles listed in `roles`.
    Superusers always pass.
    """

    roles = ()

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        if user.is_superuser:
            return True

        return user.role in self.roles


class IsAdminRole(HasAnyRole):
    roles = (UserRole.ADMIN,)


class IsStationManager(HasAnyRole):
    roles = (UserRole.STATION_MANAGER, UserRole.ADMIN)


class IsAreaManager(HasAnyRole):
    roles = (UserRole.AREA_MANAGER,)


class IsAdminOrReadOnly(BasePermission):
    """
    Read access for any authenticated user, writes for ADMIN only.
    """

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        if request.method in SAFE_METHODS:
            return True

        return user.is_admin_role
