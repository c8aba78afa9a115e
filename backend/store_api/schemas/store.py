"""
Store request/response schemas.
"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class StoreResponse(BaseModel):
    """Store as returned by the API."""
    store_id: str = Field(..., description="Store ID")
    name: str = Field(..., description="Store display name")
    description: str = Field(..., description="Store description")
    owner_id: str = Field(..., description="Owner user ID")
    avatar_id: str = Field(..., description="Avatar image identifier")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_store(cls, store) -> "StoreResponse":
        return cls(**store.model_dump())


class StoreCreate(BaseModel):
    """Store creation request. The owner is the caller."""
    name: str = Field(..., min_length=1, max_length=200, description="Store display name")
    description: str = Field(default="", max_length=2000, description="Store description")
    avatar_id: str = Field(default="", description="Avatar image identifier")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class StoreUpdate(BaseModel):
    """Full replacement of a store's editable fields."""
    store_id: str = Field(..., description="Store to replace")
    name: str = Field(..., min_length=1, max_length=200, description="Store display name")
    description: str = Field(default="", max_length=2000, description="Store description")
    avatar_id: str = Field(default="", description="Avatar image identifier")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
