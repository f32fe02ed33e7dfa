"""
E2E tests for tenant personas against the mock RentLedger API.

These tests require the mock API server to be running on RENTLEDGER_API_BASE:
    uvicorn mock.api_server.main:app --port 8001

They are deselected by default; run with `pytest -m integration`.

Tenant personas:
- tenant_reliable: six months paid on time, one awaiting verification
- tenant_late: a late April payment and an unpaid May
- tenant_new: no payments yet, property without a tenancy start
"""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
def test_tenant_reliable_score(client: TestClient):
    """
    tenant_reliable: every payment inside the grace window
    Expected: streak of 6 and a high score
    """
    response = client.post("/v1/score", json={"user_id": "tenant_reliable", "today": "2024-06-15"})

    assert response.status_code == 200
    data = response.json()
    assert data["payment_streak"] == 6
    assert data["on_time_percentage"] == 100.0
    assert data["score"]["total"] == 917
    assert data["verification_status"] == "partially_verified"


@pytest.mark.integration
def test_tenant_late_streak_broken(client: TestClient):
    """
    tenant_late: most recent payment unpaid
    Expected: zero streak, May overdue
    """
    response = client.post("/v1/score", json={"user_id": "tenant_late", "today": "2024-05-20"})

    assert response.status_code == 200
    data = response.json()
    assert data["payment_streak"] == 0
    assert data["longest_streak"] == 1
    assert data["on_time_percentage"] == 50.0
    assert data["status_counts"]["overdue"] == 1
    assert data["next_payment_due"] == "2024-05-01"


@pytest.mark.integration
def test_tenant_new_empty_history(client: TestClient):
    """tenant_new: nothing paid yet, score stays at zero"""
    response = client.post("/v1/score", json={"user_id": "tenant_new", "today": "2024-06-15"})

    assert response.status_code == 200
    data = response.json()
    assert data["score"]["total"] == 0
    assert data["verification_status"] == "unverified"


@pytest.mark.integration
def test_unknown_tenant_upstream_404(client: TestClient):
    """Upstream 404 surfaces as service unavailable"""
    response = client.post("/v1/score", json={"user_id": "tenant_missing"})
    assert response.status_code == 503


@pytest.mark.integration
def test_tenant_balances(client: TestClient):
    response = client.get("/v1/properties/balance?user_id=tenant_late&today=2024-05-20")

    assert response.status_code == 200
    balances = response.json()["balances"]
    assert len(balances) == 1
    # March, April and May due; March and April paid
    assert balances[0]["months_elapsed"] == 3
    assert balances[0]["outstanding"] == 950.0

    response = client.get("/v1/properties/balance?user_id=tenant_new&today=2024-06-15")
    assert response.json()["balances"] == []
