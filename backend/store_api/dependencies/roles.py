"""
Role-based access control dependencies.
"""
from typing import Callable

from fastapi import Depends, HTTPException, status

from store_api.dependencies.auth import get_current_claims
from store_api.models.user import UserRole
from store_api.schemas.auth import TokenClaims


def require_roles(*allowed_roles: UserRole | str) -> Callable:
    """
    Dependency factory for role-based access control.

    Usage:
        @router.get("/admin-only")
        async def admin_route(claims: TokenClaims = Depends(require_roles(UserRole.ADMIN))):
            ...

    Args:
        *allowed_roles: Roles that are allowed to access the route

    Returns:
        Dependency function that validates the caller's role claims
    """
    allowed = {
        role.value if isinstance(role, UserRole) else role
        for role in allowed_roles
    }

    async def role_checker(
        claims: TokenClaims = Depends(get_current_claims)
    ) -> TokenClaims:
        if not claims.has_any_role(*allowed):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return claims

    return role_checker


def require_admin() -> Callable:
    """
    Shortcut dependency for admin-only routes.

    Usage:
        @router.get("/admin-only")
        async def admin_route(claims: TokenClaims = Depends(require_admin())):
            ...
    """
    return require_roles(UserRole.ADMIN)
