"""
Access-control policy.

Pure functions of (authenticated principal, resource id). No store
access and no request objects, so every decision is testable in
isolation. Each ``require_*`` raises on deny and returns None on allow.
"""

from typing import Iterable, Optional

from shared.models import AuthenticatedPrincipal, Role

from .exceptions import InsufficientPermissionsError, MissingRoleError

STAFF_ROLES = frozenset({Role.STAFF, Role.ADMIN})


def _role_of(principal: Optional[AuthenticatedPrincipal]) -> Optional[Role]:
    return principal.role if principal is not None else None


def require_staff_or_admin(principal: Optional[AuthenticatedPrincipal]) -> None:
    """Allow staff and admins; 401 without a role, 403 for any other role."""
    role = _role_of(principal)
    if role is None:
        raise MissingRoleError()
    if role not in STAFF_ROLES:
        raise InsufficientPermissionsError("Staff or admin only", required="staff", has=role.value)


def require_admin(principal: Optional[AuthenticatedPrincipal]) -> None:
    """Allow admins only; 401 without a role, 403 for any other role."""
    role = _role_of(principal)
    if role is None:
        raise MissingRoleError()
    if role is not Role.ADMIN:
        raise InsufficientPermissionsError("Access denied", required="admin", has=role.value)


def can_act_on(
    principal: Optional[AuthenticatedPrincipal],
    owner_role: Role,
    resource_id: Optional[int],
    allowed_roles: Iterable[Role] = (),
) -> bool:
    """
    Whether ``principal`` may act on the ``owner_role`` record ``resource_id``.

    True when the principal *is* that record (same kind, same id), or when
    its role is one of ``allowed_roles``. An unparsable id (None) never
    matches as self.
    """
    if principal is None:
        return False
    own_id = principal.id_for(owner_role)
    if resource_id is not None and own_id is not None and own_id == resource_id:
        return True
    return principal.role is not None and principal.role in set(allowed_roles)


def require_self_or_role(
    principal: Optional[AuthenticatedPrincipal],
    owner_role: Role,
    resource_id: Optional[int],
    allowed_roles: Iterable[Role] = (),
) -> None:
    """Raise 403 unless :func:`can_act_on` allows the access."""
    allowed = tuple(allowed_roles)
    if not can_act_on(principal, owner_role, resource_id, allowed):
        raise InsufficientPermissionsError(
            "Forbidden",
            required="self or " + "/".join(r.value for r in allowed),
            has=principal.role.value if principal is not None and principal.role else None,
        )


def parse_resource_id(value: object) -> Optional[int]:
    """Parse a path id; None unless it is a positive integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        number = int(value.strip())
        return number if number > 0 else None
    return None
