"""
Dependencies for dependency injection in routes.
"""
from store_api.dependencies.auth import get_current_claims, CurrentClaims
from store_api.dependencies.roles import require_roles, require_admin

__all__ = [
    "get_current_claims",
    "CurrentClaims",
    "require_roles",
    "require_admin",
]
