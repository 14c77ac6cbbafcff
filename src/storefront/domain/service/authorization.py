"""Role checks run at the top of every order use case."""

from __future__ import annotations

from storefront.domain.exceptions import AccessDeniedError
from storefront.domain.model.identity import Caller, Role


def require_role(caller: Caller | None, *roles: Role) -> Caller:
    """Return *caller* if it holds one of *roles*, else raise AccessDeniedError."""
    if caller is None:
        raise AccessDeniedError("Authentication required")
    if not caller.has_any_role(*roles):
        allowed = ", ".join(role.value for role in roles)
        raise AccessDeniedError(f"Requires one of the roles: {allowed}")
    return caller
