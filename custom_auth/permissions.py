"""Role gates for views and the ownership predicate used by services."""
from rest_framework.permissions import SAFE_METHODS, BasePermission

from shared.exceptions import AuthorizationError


def user_has_role(user, *roles):
    if not (user and getattr(user, 'is_authenticated', False)):
        return False
    return user.effective_role in roles


class HasRole(BasePermission):
    """Allows access only to authenticated users holding one of ``allowed_roles``."""
    allowed_roles = ()

    def has_permission(self, request, view):
        user = request.user
        if user_has_role(user, *self.allowed_roles):
            return True
        if getattr(user, 'is_authenticated', False):
            self.message = f"User role {user.effective_role} is not authorized to access this route"
        return False


class IsChef(HasRole):
    allowed_roles = ('chef',)


class IsChefOrReadOnly(IsChef):
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)


class IsChefOrAdmin(HasRole):
    allowed_roles = ('chef', 'admin')


class IsCustomer(HasRole):
    allowed_roles = ('user',)


def authorize(user, roles=(), owner_id=None, message='Not authorized to access this resource'):
    """
    Raise AuthorizationError unless ``user`` holds one of ``roles`` or is the
    owner identified by ``owner_id``.
    """
    if roles and user_has_role(user, *roles):
        return
    if owner_id is not None and getattr(user, 'id', None) == owner_id:
        return
    raise AuthorizationError(message)
