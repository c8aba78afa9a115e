"""
Store router.
"""
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from store_api.database.connections import get_gateway
from store_api.database.gateway import MongoGateway
from store_api.dependencies.auth import CurrentClaims
from store_api.dependencies.roles import require_admin
from store_api.models.store import Store
from store_api.models.user import UserRole
from store_api.repositories.store_repository import StoreRepository
from store_api.schemas.auth import TokenClaims
from store_api.schemas.store import StoreCreate, StoreResponse, StoreUpdate

router = APIRouter(tags=["Stores"])


async def get_store_repository(
    gateway: MongoGateway = Depends(get_gateway),
) -> StoreRepository:
    """Dependency to get StoreRepository instance."""
    return StoreRepository(gateway)


@router.get(
    "/GetStores",
    response_model=list[StoreResponse],
    summary="List every store (admin)",
)
async def get_stores(
    claims: TokenClaims = Depends(require_admin()),
    stores: StoreRepository = Depends(get_store_repository),
):
    """List all stores across all owners. Requires the `Admin` role."""
    return [StoreResponse.from_store(store) for store in await stores.get_stores()]


@router.get(
    "/GetMyStores",
    response_model=list[StoreResponse],
    summary="List the caller's stores",
)
async def get_my_stores(
    claims: CurrentClaims,
    stores: StoreRepository = Depends(get_store_repository),
):
    """List the stores owned by the authenticated caller."""
    owned = await stores.get_stores_by_user(claims.sub)
    return [StoreResponse.from_store(store) for store in owned]


@router.post(
    "/CreateStore",
    response_model=StoreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a store owned by the caller",
)
async def create_store(
    body: StoreCreate,
    claims: CurrentClaims,
    stores: StoreRepository = Depends(get_store_repository),
):
    store = Store(
        store_id=uuid.uuid4().hex,
        name=body.name,
        description=body.description,
        owner_id=claims.sub,
        avatar_id=body.avatar_id,
    )
    created = await stores.create_store(store)
    return StoreResponse.from_store(created)


@router.put(
    "/UpdateStore",
    response_model=StoreResponse,
    summary="Replace a store",
)
async def update_store(
    body: StoreUpdate,
    claims: CurrentClaims,
    stores: StoreRepository = Depends(get_store_repository),
):
    """
    Replace a store's editable fields.

    Only the owner or an `Admin` may update a store; the owner never changes.
    """
    existing = await stores.get_store_by_id(body.store_id)
    if existing is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Store not found",
        )

    if existing.owner_id != claims.sub and not claims.has_any_role(UserRole.ADMIN.value):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )

    replacement = Store(
        store_id=existing.store_id,
        name=body.name,
        description=body.description,
        owner_id=existing.owner_id,
        avatar_id=body.avatar_id,
    )
    updated = await stores.update_store(replacement)
    if updated is None:
        # Removed between the lookup and the replace
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Store not found",
        )
    return StoreResponse.from_store(updated)
