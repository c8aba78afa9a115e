"""
Access token issuance.
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from jose import jwt

from store_api.config import Settings

logger = logging.getLogger(__name__)


class TokenService:
    """Builds signed, claims-bearing access tokens."""

    def __init__(self, settings: Settings):
        """Initialize with issuer, audience, key and TTL from settings."""
        self.settings = settings

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self.settings.jwt_access_token_expire_minutes * 60

    def issue_token(
        self,
        email: str,
        subject_id: str,
        roles: Sequence[str],
        issued_at: Optional[datetime] = None,
    ) -> str:
        """
        Create a JWT access token.

        Args:
            email: Subject email address
            subject_id: Unique user identifier
            roles: Role names (e.g. ["User"], ["Admin"])
            issued_at: Issue time, defaults to now

        Returns:
            Encoded JWT token string
        """
        if issued_at is None:
            issued_at = datetime.now(timezone.utc)
        expire = issued_at + timedelta(minutes=self.settings.jwt_access_token_expire_minutes)

        payload = {
            "sub": subject_id,
            "email": email,
            "jti": str(uuid.uuid4()),
            "roles": list(roles),
            "iss": self.settings.jwt_issuer,
            "aud": self.settings.jwt_audience,
            "iat": issued_at,
            "exp": expire,
        }

        token = jwt.encode(
            payload,
            self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm,
        )
        logger.debug(f"Issued token {payload['jti']} for {subject_id}")
        return token
