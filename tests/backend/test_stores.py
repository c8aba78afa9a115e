"""
Tests for the store endpoints.

These tests verify:
- Role gating of the admin-only listing, before any repository call
- Token transport (Authorization header and ?token= query parameter)
- Owner-scoped listing, creation and replacement
"""

import pytest


class TestGetStoresAuthorization:
    """Tests for GET /GetStores access control."""

    @pytest.mark.asyncio
    async def test_admin_gets_all_stores(
        self, client_with_mock_stores, mock_store_repository, admin_token, bearer, make_store
    ):
        mock_store_repository.get_stores.return_value = [
            make_store(store_id="s1", owner_id="u1"),
            make_store(store_id="s2", owner_id="u2"),
        ]

        response = await client_with_mock_stores.get("/GetStores", headers=bearer(admin_token))

        assert response.status_code == 200
        data = response.json()
        assert [store["storeId"] for store in data] == ["s1", "s2"]
        assert data[0]["ownerId"] == "u1"
        assert set(data[0]) == {"storeId", "name", "description", "ownerId", "avatarId"}

    @pytest.mark.asyncio
    async def test_non_admin_rejected_before_repository_call(
        self, client_with_mock_stores, mock_store_repository, user_token, bearer
    ):
        response = await client_with_mock_stores.get("/GetStores", headers=bearer(user_token))

        assert response.status_code == 403
        mock_store_repository.get_stores.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_token_rejected(self, client_with_mock_stores, mock_store_repository):
        response = await client_with_mock_stores.get("/GetStores")

        assert response.status_code == 401
        mock_store_repository.get_stores.assert_not_called()

    @pytest.mark.asyncio
    async def test_token_signed_with_other_key_rejected(
        self, client_with_mock_stores, mock_store_repository, test_settings, bearer
    ):
        from store_api.services.token_service import TokenService

        forged_settings = test_settings.model_copy(update={"jwt_secret_key": "not-the-key"})
        forged = TokenService(forged_settings).issue_token("x@example.com", "x", ["Admin"])

        response = await client_with_mock_stores.get("/GetStores", headers=bearer(forged))

        assert response.status_code == 401
        mock_store_repository.get_stores.assert_not_called()

    @pytest.mark.asyncio
    async def test_token_accepted_as_query_parameter(
        self, client_with_mock_stores, mock_store_repository, admin_token
    ):
        response = await client_with_mock_stores.get(f"/GetStores?token={admin_token}")

        assert response.status_code == 200
        mock_store_repository.get_stores.assert_awaited_once()


class TestOwnerEndpoints:
    """Tests for the caller-scoped store endpoints on the mock database."""

    @pytest.mark.asyncio
    async def test_create_then_list_my_stores(self, async_client, user_token, bearer):
        created = await async_client.post(
            "/CreateStore",
            json={"name": "Bakery", "description": "Bread", "avatarId": "img-1"},
            headers=bearer(user_token),
        )

        assert created.status_code == 201
        body = created.json()
        assert body["ownerId"] == "u1"
        assert body["storeId"]

        listed = await async_client.get("/GetMyStores", headers=bearer(user_token))

        assert listed.status_code == 200
        assert listed.json() == [body]

    @pytest.mark.asyncio
    async def test_my_stores_excludes_other_owners(
        self, async_client, gateway, user_token, bearer, make_store
    ):
        await gateway.insert_document(make_store(store_id="mine", owner_id="u1"), "Store")
        await gateway.insert_document(make_store(store_id="theirs", owner_id="u2"), "Store")

        response = await async_client.get("/GetMyStores", headers=bearer(user_token))

        assert [store["storeId"] for store in response.json()] == ["mine"]

    @pytest.mark.asyncio
    async def test_owner_updates_store(self, async_client, gateway, user_token, bearer, make_store):
        await gateway.insert_document(make_store(store_id="s1", owner_id="u1"), "Store")

        response = await async_client.put(
            "/UpdateStore",
            json={"storeId": "s1", "name": "Renamed", "description": "New"},
            headers=bearer(user_token),
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["ownerId"] == "u1"

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(
        self, async_client, gateway, user_token, bearer, make_store
    ):
        await gateway.insert_document(make_store(store_id="s1", owner_id="u2"), "Store")

        response = await async_client.put(
            "/UpdateStore",
            json={"storeId": "s1", "name": "Hijacked"},
            headers=bearer(user_token),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_updates_any_store_keeping_owner(
        self, async_client, gateway, admin_token, bearer, make_store
    ):
        await gateway.insert_document(make_store(store_id="s1", owner_id="u2"), "Store")

        response = await async_client.put(
            "/UpdateStore",
            json={"storeId": "s1", "name": "Moderated"},
            headers=bearer(admin_token),
        )

        assert response.status_code == 200
        assert response.json()["ownerId"] == "u2"

    @pytest.mark.asyncio
    async def test_update_missing_store_returns_404(
        self, async_client, user_token, bearer, assert_error_response
    ):
        response = await async_client.put(
            "/UpdateStore",
            json={"storeId": "ghost", "name": "Nothing"},
            headers=bearer(user_token),
        )

        assert_error_response(response, 404, "not found")

    @pytest.mark.asyncio
    async def test_duplicate_store_id_maps_to_409(
        self, client_with_mock_stores, mock_store_repository, user_token, bearer
    ):
        from store_api.core.exceptions import OperationFailedError

        mock_store_repository.create_store.side_effect = OperationFailedError("E11000 duplicate key")

        response = await client_with_mock_stores.post(
            "/CreateStore", json={"name": "Bakery"}, headers=bearer(user_token)
        )

        assert response.status_code == 409
        assert response.json()["code"] == "OPERATION_FAILED"
