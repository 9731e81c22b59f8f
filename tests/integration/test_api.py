"""Integration tests for API endpoints"""

import pytest
from datetime import datetime
from decimal import Decimal
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


def _submit(client: TestClient, payload: dict, **overrides) -> dict:
    response = client.post("/v1/applications", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-ID" in response.headers


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_desk_applications_submitted_total" in response.text


def test_submit_application(client: TestClient, application_payload: dict):
    """Test POST /v1/applications creates a pending application"""
    data = _submit(client, application_payload)

    assert data["id"]
    assert data["status"] == "pending"
    assert data["full_name"] == "Jane Borrower"
    assert Decimal(data["loan_amount"]) == Decimal("20000")
    assert datetime.fromisoformat(data["submitted_at"]).tzinfo is not None


def test_submit_ignores_client_supplied_status(client: TestClient, application_payload: dict):
    data = _submit(client, application_payload, status="approved", id="chosen-by-client")

    assert data["status"] == "pending"
    assert data["id"] != "chosen-by-client"


@pytest.mark.parametrize(
    "field,value",
    [
        ("loan_amount", 999),
        ("loan_amount", 100001),
        ("credit_score", 299),
        ("credit_score", 851),
        ("monthly_income", 0),
        ("monthly_income", -100),
        ("monthly_income", 10**12),
        ("loan_amount", "25000.005"),
        ("email", "not-an-email"),
        ("phone_number", "555"),
        ("full_name", "J"),
        ("purpose", ""),
        ("employment_status", ""),
    ],
)
def test_submit_rejects_invalid_fields(client: TestClient, application_payload: dict, field, value):
    response = client.post("/v1/applications", json={**application_payload, field: value})

    assert response.status_code == 422
    assert client.get("/v1/stats").json()["total_applications"] == 0


def test_submit_accepts_range_bounds(client: TestClient, application_payload: dict):
    _submit(client, application_payload, loan_amount=1000, credit_score=300, monthly_income=1)
    _submit(client, application_payload, loan_amount=100000, credit_score=850)


def test_get_application(client: TestClient, application_payload: dict):
    created = _submit(client, application_payload)

    response = client.get(f"/v1/applications/{created['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert response.json()["purpose"] == "Education"


def test_get_application_not_found(client: TestClient):
    response = client.get("/v1/applications/00000000-0000-0000-0000-000000000000")
    assert response.status_code == 404


def test_list_applications_with_status_filter(client: TestClient, application_payload: dict):
    first = _submit(client, application_payload)
    second = _submit(client, application_payload, full_name="Alex Second")
    client.post(f"/v1/applications/{first['id']}/status", json={"status": "approved"})

    everything = client.get("/v1/applications").json()
    pending = client.get("/v1/applications", params={"status": "pending"}).json()

    assert everything["count"] == 2
    assert {a["id"] for a in everything["applications"]} == {first["id"], second["id"]}
    assert [a["id"] for a in pending["applications"]] == [second["id"]]


def test_list_applications_rejects_unknown_status(client: TestClient):
    response = client.get("/v1/applications", params={"status": "archived"})
    assert response.status_code == 422


def test_risk_assessment_endpoint(client: TestClient, application_payload: dict):
    """760 credit score, 20000 / 120000 ratio -> Low"""
    created = _submit(client, application_payload)

    response = client.get(f"/v1/applications/{created['id']}/risk")

    assert response.status_code == 200
    data = response.json()
    assert data["level"] == "Low"
    assert data["debt_to_income_percent"] == 16.7
    assert data["recommendations"] == ["Excellent candidate for approval"]


def test_risk_assessment_high(client: TestClient, application_payload: dict):
    created = _submit(client, application_payload, credit_score=580, loan_amount=90000, monthly_income=5000)

    data = client.get(f"/v1/applications/{created['id']}/risk").json()

    assert data["level"] == "High"
    assert data["debt_to_income_ratio"] == 1.5
    assert len(data["recommendations"]) == 2


def test_risk_assessment_not_found(client: TestClient):
    response = client.get("/v1/applications/missing/risk")
    assert response.status_code == 404


def test_approve_then_reject_is_refused(client: TestClient, application_payload: dict):
    """Approved is terminal: a later rejection returns 409 and changes nothing"""
    created = _submit(client, application_payload)

    approve = client.post(
        f"/v1/applications/{created['id']}/status",
        json={"status": "approved"},
        headers={"X-Actor-ID": "reviewer-7"},
    )
    assert approve.status_code == 200
    assert approve.json()["status"] == "approved"

    reject = client.post(f"/v1/applications/{created['id']}/status", json={"status": "rejected"})
    assert reject.status_code == 409
    detail = reject.json()["detail"]
    assert detail["current_status"] == "approved"
    assert detail["requested_status"] == "rejected"

    assert client.get(f"/v1/applications/{created['id']}").json()["status"] == "approved"


def test_status_update_not_found(client: TestClient):
    response = client.post("/v1/applications/missing/status", json={"status": "approved"})
    assert response.status_code == 404


def test_status_update_rejects_pending_target(client: TestClient, application_payload: dict):
    created = _submit(client, application_payload)

    response = client.post(f"/v1/applications/{created['id']}/status", json={"status": "pending"})

    assert response.status_code == 422


def test_stats_empty(client: TestClient):
    response = client.get("/v1/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["total_applications"] == 0
    assert data["approved_applications"] == 0
    assert data["pending_applications"] == 0
    assert data["rejected_applications"] == 0
    assert Decimal(data["total_amount"]) == 0
    assert Decimal(data["approved_amount"]) == 0
    assert Decimal(data["avg_loan_amount"]) == 0
    assert data["approval_rate"] == 0


def test_stats_follow_record_changes(client: TestClient, application_payload: dict):
    """Stats are recomputed after every create and status update"""
    first = _submit(client, application_payload, loan_amount=10000)
    _submit(client, application_payload, loan_amount=30000)
    third = _submit(client, application_payload, loan_amount=5000)

    client.post(f"/v1/applications/{first['id']}/status", json={"status": "approved"})
    client.post(f"/v1/applications/{third['id']}/status", json={"status": "rejected"})

    data = client.get("/v1/stats").json()

    assert data["total_applications"] == 3
    assert data["approved_applications"] == 1
    assert data["pending_applications"] == 1
    assert data["rejected_applications"] == 1
    assert Decimal(data["total_amount"]) == Decimal("45000")
    assert Decimal(data["approved_amount"]) == Decimal("10000")
    assert Decimal(data["avg_loan_amount"]) == Decimal("15000")
    assert data["approval_rate"] == 33
    assert data["status_breakdown"] == [
        {"status": "approved", "count": 1},
        {"status": "pending", "count": 1},
        {"status": "rejected", "count": 1},
    ]


def test_submission_trend(client: TestClient, application_payload: dict):
    first = _submit(client, application_payload)
    second = _submit(client, application_payload)
    submitted_days = {
        datetime.fromisoformat(created["submitted_at"]).date().isoformat() for created in (first, second)
    }

    data = client.get("/v1/stats/trend", params={"days": 7}).json()

    assert data["days"] == 7
    assert {point["day"] for point in data["points"]} == submitted_days
    assert sum(point["applications"] for point in data["points"]) == 2


def test_submission_trend_with_empty_days(client: TestClient):
    data = client.get("/v1/stats/trend", params={"days": 7, "include_empty_days": True}).json()

    assert len(data["points"]) == 8
    assert all(point["applications"] == 0 for point in data["points"])


def test_reference_endpoint(client: TestClient):
    data = client.get("/v1/reference").json()

    assert "Home Purchase" in data["loan_purposes"]
    assert "Full-time" in data["employment_statuses"]
    assert data["min_credit_score"] == 300
    assert data["max_credit_score"] == 850
    assert Decimal(data["max_loan_amount"]) == Decimal("100000")
