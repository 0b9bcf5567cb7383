# app/core/auth.py
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from app.core.security import InvalidToken, extract_bearer_token, verify_token
from app.models.user import UserRole

# Raw Authorization header:
# - auto_error=False => a missing header does not raise here, so the
#   missing-token and invalid-token cases can answer differently.
# - the "Bearer <token>" split is done by extract_bearer_token.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


@dataclass(frozen=True)
class Principal:
    """
    Identity attached to an authenticated request.

    Built from verified token claims only; no store lookup.
    `roles` is None when the token carried no list of roles.
    """

    id: str
    roles: list[str] | None


def _roles_from_claims(roles: Any) -> list[str] | None:
    if not isinstance(roles, list):
        return None
    return [str(role) for role in roles]


def get_principal(
    authorization: str | None = Depends(authorization_header),
) -> Principal | None:
    """
    Resolve the request principal from the bearer token.

    Returns:
        Principal if a valid token is present, None if no token was sent.

    Raises:
        HTTPException(403): if the token is present but invalid/expired.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None

    try:
        claims = verify_token(token)
    except InvalidToken:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid token.",
        )

    return Principal(id=claims.id, roles=_roles_from_claims(claims.roles))


def require_authentication(
    principal: Principal | None = Depends(get_principal),
) -> Principal:
    """
    Enforce authentication.

    Raises:
        HTTPException(401): if no token was provided.
    """
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )
    return principal


def check_role(principal: Principal | None, role: str) -> None:
    """
    Pure role gate.

    Raises:
        HTTPException(403): "Access denied. No roles found." when the
            principal has no usable roles at all, "Access denied." when
            it has roles but not `role`.
    """
    if principal is None or not principal.roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. No roles found.",
        )
    if role not in principal.roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied.",
        )


def require_role(role: UserRole | str) -> Callable[..., Principal]:
    """
    Dependency factory: authenticated principal holding `role`.

    Usage:

        @router.get("", dependencies=[Depends(require_role(UserRole.ADMIN))])
    """
    required = role.value if isinstance(role, UserRole) else role

    def dependency(
        principal: Principal = Depends(require_authentication),
    ) -> Principal:
        check_role(principal, required)
        return principal

    return dependency


require_admin = require_role(UserRole.ADMIN)
require_user = require_role(UserRole.USER)
