"""
User model for the User collection.
"""
from enum import Enum

from pydantic import BaseModel, EmailStr, Field


class UserRole(str, Enum):
    """Role names carried in access tokens."""
    USER = "User"
    ADMIN = "Admin"


class User(BaseModel):
    """
    User document model for MongoDB User collection.

    `hashed_password` and `roles` belong to the identity layer; the profile
    fields are owned by the store backend.
    """
    user_id: str = Field(..., alias="_id", description="Unique user identifier")
    email: EmailStr = Field(..., description="Unique email address")
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    avatar_id: str = Field(default="", description="Avatar image identifier")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    roles: list[str] = Field(
        default_factory=lambda: [UserRole.USER.value],
        description="List of role names assigned to user"
    )

    class Config:
        populate_by_name = True
