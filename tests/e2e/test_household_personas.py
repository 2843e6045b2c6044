"""
E2E tests for household personas going through the full form flow.

Each persona types raw digits into the three fields, the client masks them
through /v1/input-mask, then submits the masked text to /v1/assessment.

Household personas:
- saver: low spending, no debts, controlled
- stretched: spending near 40% of income, moderate
- renter: rent-heavy budget, high with expense review
- overdrawn: debts larger than income, critical
"""

import pytest
from fastapi.testclient import TestClient


def _submit(client: TestClient, income: str, expenses: str, debts: str) -> dict:
    masked = {}
    for field, typed in (("income", income), ("expenses", expenses), ("debts", debts)):
        response = client.post("/v1/input-mask", json={"value": typed})
        assert response.status_code == 200
        masked[field] = response.json()["value"]

    response = client.post("/v1/assessment", json=masked)
    assert response.status_code == 200
    return response.json()


@pytest.mark.integration
def test_saver_controlled(client: TestClient):
    data = _submit(client, "800000", "150000", "0")

    assert data["tier"] == "controlled"
    assert data["risk_score_display"] == "18,75"
    assert data["plan"]["debt_payment_amount"] == 0.0
    assert data["plan"]["expense_review"] is None


@pytest.mark.integration
def test_stretched_moderate(client: TestClient):
    data = _submit(client, "400000", "120000", "40000")

    assert data["tier"] == "moderate"
    assert data["risk_score"] == 40.0
    assert data["plan"]["advisory"]["title"] == "⚠️ Atenção"


@pytest.mark.integration
def test_renter_high_with_review(client: TestClient):
    data = _submit(client, "250000", "160000", "20000")

    assert data["tier"] == "high"
    assert data["risk_score"] == 72.0
    assert data["plan"]["expense_review"] is not None
    assert data["plan"]["essential_spending"] == "🏡 Manter gastos essenciais abaixo de R$ 1.250,00."


@pytest.mark.integration
def test_overdrawn_critical(client: TestClient):
    data = _submit(client, "180000", "150000", "1200000")

    assert data["tier"] == "critical"
    assert data["risk_score"] == 100.0
    # 30% of 1.800,00 is less than 10% of 12.000,00
    assert data["plan"]["debt_payment_amount"] == 540.0
    assert data["plan"]["advisory"]["severity"] == "highest"


@pytest.mark.integration
def test_empty_form_is_rejected(client: TestClient):
    """Fields left blank mask to "" and the submission fails as a whole"""
    masked = client.post("/v1/input-mask", json={"value": ""}).json()["value"]

    response = client.post(
        "/v1/assessment",
        json={"income": masked, "expenses": masked, "debts": masked},
    )

    assert response.status_code == 422
