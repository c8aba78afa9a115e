"""
User request/response schemas.
"""
from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserResponse(BaseModel):
    """User information response (excludes credentials)."""
    user_id: str = Field(..., description="User ID")
    email: EmailStr = Field(..., description="User email")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    avatar_id: str = Field(..., description="Avatar image identifier")
    roles: list[str] = Field(..., description="User roles")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_user(cls, user) -> "UserResponse":
        return cls(**user.model_dump(exclude={"hashed_password"}))
