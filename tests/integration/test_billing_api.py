"""
Integration tests for the billing HTTP API.

These tests verify:
1. POST /v1/billing/* calculation endpoints
2. GET /v1/contracts/{contract_id}/* endpoints against the database
3. Error responses carry code, message and request ID
4. Health and metrics endpoints
"""

import pytest
from uuid import uuid4

from httpx import AsyncClient

from src.core.metrics import REGISTRY


# =============================================================================
# Cadence Tests
# =============================================================================

class TestCadenceEndpoint:

    @pytest.mark.asyncio
    async def test_resolves_annual_plan(self, client: AsyncClient):
        response = await client.post("/v1/billing/cadence", json={"plan_name": "Comfort Plus"})

        assert response.status_code == 200
        assert response.json() == {
            "plan_name": "Comfort Plus",
            "cadence": "annual",
        }

    @pytest.mark.asyncio
    async def test_matching_cadence_accepted(self, client: AsyncClient):
        response = await client.post(
            "/v1/billing/cadence",
            json={"plan_name": "Basic", "requested_cadence": "monthly"},
        )

        assert response.status_code == 200
        assert response.json()["cadence"] == "monthly"

    @pytest.mark.asyncio
    async def test_mismatch_is_rejected(self, client: AsyncClient):
        before = REGISTRY.get_sample_value(
            "petplan_cadence_check_total", {"outcome": "mismatch"}
        ) or 0.0

        response = await client.post(
            "/v1/billing/cadence",
            json={"plan_name": "Comfort Plus", "requested_cadence": "monthly"},
            headers={"X-Request-ID": "req-123"},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "CADENCE_MISMATCH"
        assert "Comfort Plus" in body["message"]
        assert body["request_id"] == "req-123"
        assert response.headers["X-Request-ID"] == "req-123"

        after = REGISTRY.get_sample_value(
            "petplan_cadence_check_total", {"outcome": "mismatch"}
        )
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_unknown_cadence_value(self, client: AsyncClient):
        response = await client.post(
            "/v1/billing/cadence",
            json={"plan_name": "Basic", "requested_cadence": "weekly"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_plan_name(self, client: AsyncClient):
        response = await client.post("/v1/billing/cadence", json={"plan_name": "   "})

        assert response.status_code == 422


# =============================================================================
# Renewal & Regularization Tests
# =============================================================================

class TestCalculationEndpoints:

    @pytest.mark.asyncio
    async def test_renewal_dates(self, client: AsyncClient):
        response = await client.post(
            "/v1/billing/renewal",
            json={
                "original_start_date": "2024-01-31",
                "current_date": "2024-02-10",
                "cadence": "monthly",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "next_renewal_date": "2024-02-29",
            "current_period_due_date": "2024-02-29",
            "last_due_date": "2024-01-31",
        }

    @pytest.mark.asyncio
    async def test_regularization_quote(self, client: AsyncClient):
        response = await client.post(
            "/v1/billing/regularization",
            json={
                "original_start_date": "2023-05-31",
                "current_date": "2023-09-10",
                "cadence": "monthly",
                "base_amount_cents": 5000,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["overdue_periods"] == 2
        assert data["periods_charged"] == 3
        assert data["amount_cents"] == 15000
        assert data["amount_display"] == "150.00"
        assert data["received_date"] == "2023-08-31"
        assert data["next_renewal_date"] == "2023-09-30"
        assert data["contract_id"] is None

    @pytest.mark.asyncio
    async def test_regularization_rejects_future_payment(self, client: AsyncClient):
        response = await client.post(
            "/v1/billing/regularization",
            json={
                "original_start_date": "2023-05-31",
                "current_date": "2023-09-10",
                "cadence": "monthly",
                "base_amount_cents": 5000,
                "last_paid_date": "2023-10-01",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_BILLING_REQUEST"

    @pytest.mark.asyncio
    async def test_regularization_requires_positive_amount(self, client: AsyncClient):
        response = await client.post(
            "/v1/billing/regularization",
            json={
                "original_start_date": "2023-05-31",
                "current_date": "2023-09-10",
                "cadence": "monthly",
                "base_amount_cents": 0,
            },
        )

        assert response.status_code == 422


# =============================================================================
# Contract Endpoint Tests
# =============================================================================

class TestContractEndpoints:

    @pytest.mark.asyncio
    async def test_contract_regularization(self, client: AsyncClient, seeded):
        response = await client.get(
            f"/v1/contracts/{seeded['unpaid']}/regularization",
            params={"current_date": "2023-09-10"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["contract_id"] == seeded["unpaid"]
        assert data["amount_cents"] == 15000
        assert data["received_date"] == "2023-08-31"

    @pytest.mark.asyncio
    async def test_payment_status_in_grace_period(self, client: AsyncClient, seeded):
        response = await client.get(
            f"/v1/contracts/{seeded['drifted']}/payment-status",
            params={"current_date": "2024-02-20"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["calculated_status"] == "inactive"
        assert data["days_past_due"] == 5
        assert data["expiration_date"] == "2024-02-15"
        assert data["grace_period_ends"] == "2024-03-01"
        assert data["action_required"] == "Plan expired - 10 days left to renew"

    @pytest.mark.asyncio
    async def test_payment_status_active_annual(self, client: AsyncClient, seeded):
        response = await client.get(
            f"/v1/contracts/{seeded['annual']}/payment-status",
            params={"current_date": "2024-01-01"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["calculated_status"] == "active"
        assert data["expiration_date"] == "2024-06-01"

    @pytest.mark.asyncio
    async def test_unknown_contract(self, client: AsyncClient):
        response = await client.get(f"/v1/contracts/{uuid4()}/payment-status")

        assert response.status_code == 404
        assert response.json()["error"] == "CONTRACT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_malformed_contract_id(self, client: AsyncClient):
        response = await client.get("/v1/contracts/not-a-uuid/regularization")

        assert response.status_code == 422


# =============================================================================
# Operational Endpoint Tests
# =============================================================================

class TestOperationalEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_metrics_exposed(self, client: AsyncClient):
        await client.post(
            "/v1/billing/cadence",
            json={"plan_name": "Basic", "requested_cadence": "monthly"},
        )

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert 'petplan_cadence_check_total{outcome="compatible"}' in response.text
        assert "petplan_http_requests_total" in response.text
