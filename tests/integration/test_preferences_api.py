"""Integration tests for preference API endpoints."""
from datetime import datetime

import pytest
from httpx import AsyncClient


class TestPreferencesAPI:
    """Test preference retrieval and update."""

    @pytest.mark.asyncio
    async def test_null_before_first_update(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/preferences", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_first_update_fills_defaults(self, client: AsyncClient, auth_headers: dict):
        response = await client.put(
            "/api/v1/preferences", json={"currency": "USD"}, headers=auth_headers
        )

        assert response.json() == {"success": True}
        stored = (await client.get("/api/v1/preferences", headers=auth_headers)).json()
        assert stored["currency"] == "USD"
        assert stored["date_format"] == "DD/MM/YYYY"

    @pytest.mark.asyncio
    async def test_updates_merge(self, client: AsyncClient, auth_headers: dict):
        await client.put("/api/v1/preferences", json={"currency": "GBP"}, headers=auth_headers)
        await client.put(
            "/api/v1/preferences", json={"date_format": "YYYY-MM-DD"}, headers=auth_headers
        )

        stored = (await client.get("/api/v1/preferences", headers=auth_headers)).json()
        assert stored["currency"] == "GBP"
        assert stored["date_format"] == "YYYY-MM-DD"

    @pytest.mark.asyncio
    async def test_currency_is_upper_cased(self, client: AsyncClient, auth_headers: dict):
        await client.put("/api/v1/preferences", json={"currency": "jpy"}, headers=auth_headers)

        stored = (await client.get("/api/v1/preferences", headers=auth_headers)).json()
        assert stored["currency"] == "JPY"

    @pytest.mark.asyncio
    async def test_reapplying_same_values_only_moves_updated_at(
        self, client: AsyncClient, auth_headers: dict
    ):
        payload = {"currency": "EUR", "date_format": "MM/DD/YYYY"}
        await client.put("/api/v1/preferences", json=payload, headers=auth_headers)
        first = (await client.get("/api/v1/preferences", headers=auth_headers)).json()

        await client.put("/api/v1/preferences", json=payload, headers=auth_headers)
        second = (await client.get("/api/v1/preferences", headers=auth_headers)).json()

        assert second["id"] == first["id"]
        assert second["currency"] == first["currency"]
        assert second["date_format"] == first["date_format"]
        assert datetime.fromisoformat(second["updated_at"]) >= datetime.fromisoformat(
            first["updated_at"]
        )

    @pytest.mark.asyncio
    async def test_invalid_currency_rejected(self, client: AsyncClient, auth_headers: dict):
        response = await client.put(
            "/api/v1/preferences", json={"currency": "EURO"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["field"] == "currency"

    @pytest.mark.asyncio
    async def test_unknown_date_format_rejected(self, client: AsyncClient, auth_headers: dict):
        response = await client.put(
            "/api/v1/preferences", json={"date_format": "DD.MM.YYYY"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["field"] == "date_format"

    @pytest.mark.asyncio
    async def test_null_currency_rejected(self, client: AsyncClient, auth_headers: dict):
        response = await client.put(
            "/api/v1/preferences", json={"currency": None}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["field"] == "currency"

    @pytest.mark.asyncio
    async def test_preferences_are_per_user(
        self, client: AsyncClient, auth_headers: dict, other_auth_headers: dict
    ):
        await client.put("/api/v1/preferences", json={"currency": "CHF"}, headers=auth_headers)

        response = await client.get("/api/v1/preferences", headers=other_auth_headers)

        assert response.json() is None

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get("/api/v1/preferences")

        assert response.status_code == 401
