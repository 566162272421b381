"""Integration tests for statistics API endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.category import Category
from finance_tracker.models.enums import TransactionType
from finance_tracker.models.user import User
from finance_tracker.repositories.category import CategoryRepository


@pytest.fixture
async def recorded(client: AsyncClient, auth_headers: dict, db_session: AsyncSession, test_user: User):
    """Record a small ledger through the API."""
    repo = CategoryRepository(db_session)
    food = await repo.create(
        Category(user_id=test_user.id, name="Food", type=TransactionType.EXPENSE, color="#10b981")
    )
    salary = await repo.create(
        Category(user_id=test_user.id, name="Salary", type=TransactionType.INCOME, color="#3b82f6")
    )

    entries = [
        (food, 12.50, "2026-01-05T09:00:00"),
        (food, 30.00, "2026-02-10T09:00:00"),
        (salary, 2500.00, "2026-01-31T09:00:00"),
    ]
    for category, amount, when in entries:
        response = await client.post(
            "/api/v1/transactions",
            json={
                "category_id": category.id,
                "amount": amount,
                "type": category.type.value,
                "transaction_date": when,
            },
            headers=auth_headers,
        )
        assert response.status_code == 201

    return {"food": food, "salary": salary}


class TestSummaryEndpoint:
    """Test financial summary endpoint."""

    @pytest.mark.asyncio
    async def test_summary_in_major_units(
        self, client: AsyncClient, auth_headers: dict, recorded: dict
    ):
        response = await client.get("/api/v1/stats/summary", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "total_income": 2500.0,
            "total_expense": 42.5,
            "balance": 2457.5,
        }

    @pytest.mark.asyncio
    async def test_summary_with_window(
        self, client: AsyncClient, auth_headers: dict, recorded: dict
    ):
        response = await client.get(
            "/api/v1/stats/summary",
            params={"start_date": "2026-02-01T00:00:00", "end_date": "2026-02-28T23:59:59"},
            headers=auth_headers,
        )

        data = response.json()
        assert data["total_income"] == 0
        assert data["total_expense"] == 30.0
        assert data["balance"] == data["total_income"] - data["total_expense"]

    @pytest.mark.asyncio
    async def test_summary_empty(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/stats/summary", headers=auth_headers)

        assert response.json() == {"total_income": 0, "total_expense": 0, "balance": 0}

    @pytest.mark.asyncio
    async def test_inverted_window_rejected(self, client: AsyncClient, auth_headers: dict):
        response = await client.get(
            "/api/v1/stats/summary",
            params={"start_date": "2026-03-01T00:00:00", "end_date": "2026-02-01T00:00:00"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["field"] == "start_date"

    @pytest.mark.asyncio
    async def test_other_user_sees_nothing(
        self, client: AsyncClient, other_auth_headers: dict, recorded: dict
    ):
        response = await client.get("/api/v1/stats/summary", headers=other_auth_headers)

        assert response.json()["total_expense"] == 0

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.get("/api/v1/stats/summary")

        assert response.status_code == 401


class TestByCategoryEndpoint:
    """Test per-category breakdown endpoint."""

    @pytest.mark.asyncio
    async def test_breakdown_in_major_units(
        self, client: AsyncClient, auth_headers: dict, recorded: dict
    ):
        response = await client.get(
            "/api/v1/stats/by-category", params={"type": "expense"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == [
            {
                "category_id": recorded["food"].id,
                "category_name": "Food",
                "total": 42.5,
                "count": 2,
            }
        ]

    @pytest.mark.asyncio
    async def test_type_is_required(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/stats/by-category", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["field"] == "type"
