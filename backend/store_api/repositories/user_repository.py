"""
Repository for User documents.
"""
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from store_api.database.databases import store_db
from store_api.database.filters import Eq
from store_api.database.gateway import MongoGateway
from store_api.models.user import User


class UserRepository:
    """
    Typed access to the User collection.

    Lookups return None when nothing matches. If a key is shared by several
    users, AmbiguousResultError from the gateway propagates unchanged.
    """

    collection_name = store_db.Collections.USERS

    def __init__(self, gateway: MongoGateway):
        self.gateway = gateway

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Look up a user by email address.

        The address is normalized the way EmailStr stores it (lowercased
        domain), so the string given at sign-up always finds the user.
        """
        try:
            email = validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError:
            return None
        return await self.gateway.get_document(
            User, Eq("email", email), self.collection_name
        )

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        return await self.gateway.get_document(
            User, Eq("user_id", user_id), self.collection_name
        )

    async def create_user(self, user: User) -> User:
        return await self.gateway.insert_document(user, self.collection_name)
