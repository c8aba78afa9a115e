"""
Authentication request/response schemas.
"""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class GetAuthTokenRequest(BaseModel):
    """Token request body."""
    username: str = Field(..., min_length=1, description="User id or email address")
    password: str = Field(..., min_length=1, description="User password")


class TokenResponse(BaseModel):
    """Issued bearer token."""
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SignUpRequest(BaseModel):
    """Registration request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=8,
        description="User password (min 8 characters)"
    )
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TokenClaims(BaseModel):
    """Decoded JWT token payload."""
    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="Subject email")
    jti: str = Field(..., description="Unique token identifier")
    roles: list[str] = Field(default_factory=list, description="Role names")
    iss: str = Field(..., description="Issuer")
    aud: str = Field(..., description="Audience")
    exp: datetime = Field(..., description="Expiration time")
    iat: datetime = Field(..., description="Issued at time")

    def has_any_role(self, *roles: str) -> bool:
        return bool(set(self.roles).intersection(roles))
