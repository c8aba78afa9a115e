"""
Error kinds raised by the persistence and auth layers.

Lookups that find nothing return None; only the conditions below are errors.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class StoreError(Exception):
    """Base error with an HTTP mapping."""

    code = "STORE_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StoreUnavailableError(StoreError):
    """The document database could not be reached."""

    code = "STORE_UNAVAILABLE"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class OperationFailedError(StoreError):
    """The database rejected a write (e.g. duplicate key)."""

    code = "OPERATION_FAILED"
    status_code = status.HTTP_409_CONFLICT


class AmbiguousResultError(StoreError):
    """A single-result lookup matched more than one document."""

    code = "AMBIGUOUS_RESULT"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, collection_name: str, query: dict):
        self.collection_name = collection_name
        self.query = query
        super().__init__(
            f"More than one document in '{collection_name}' matches {query}"
        )


class InvalidCredentialsError(StoreError):
    """Credential verification did not succeed."""

    code = "INVALID_CREDENTIALS"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Global exception handler for StoreError."""
    headers = None
    if isinstance(exc, InvalidCredentialsError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "detail": exc.message},
        headers=headers,
    )
