"""
Store model for the Store collection.
"""
from pydantic import BaseModel, Field


class Store(BaseModel):
    """
    Store document model for MongoDB Store collection.

    `store_id` is the document identity (stored as `_id`) and never changes.
    """
    store_id: str = Field(..., alias="_id", description="Unique store identifier")
    name: str = Field(..., description="Store display name")
    description: str = Field(default="", description="Store description")
    owner_id: str = Field(..., description="User identity of the owner")
    avatar_id: str = Field(default="", description="Avatar image identifier")

    class Config:
        populate_by_name = True
