"""
Core module - Security and error kinds.
"""
from store_api.core.exceptions import (
    StoreError,
    StoreUnavailableError,
    OperationFailedError,
    AmbiguousResultError,
    InvalidCredentialsError,
)
from store_api.core.security import (
    hash_password,
    verify_password,
    decode_token,
)

__all__ = [
    "StoreError",
    "StoreUnavailableError",
    "OperationFailedError",
    "AmbiguousResultError",
    "InvalidCredentialsError",
    "hash_password",
    "verify_password",
    "decode_token",
]
