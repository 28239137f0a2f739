from rest_framework.permissions import BasePermission


class IsStaffOrSuperuser(BasePermission):
    """Administrators are staff users; anonymous callers get a 401 through authentication."""

    message = "Unauthorized. Admin authentication required."

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and (user.is_staff or user.is_superuser))


def is_admin(user) -> bool:
    return bool(user and user.is_authenticated and (user.is_staff or user.is_superuser))
