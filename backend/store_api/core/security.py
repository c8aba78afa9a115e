"""
Security utilities for password hashing and JWT token validation.
"""
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from store_api.config import Settings

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Signature, expiry, issuer and audience are all checked.

    Args:
        token: The JWT token string to decode
        settings: Settings carrying the signing key, issuer and audience

    Returns:
        Decoded payload dictionary with keys: sub, email, jti, roles, iss, aud, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )


__all__ = [
    "JWTError",
    "hash_password",
    "verify_password",
    "decode_token",
]
