"""
Application wiring tests for the HTTP surface.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

import main as app_main

client = TestClient(app_main.app)


def test_health_endpoint():
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_forecast_endpoint_serializes_results():
    body = {
        "series": [{"period": f"2025-{i:02d}", "value": v} for i, v in enumerate([100] * 7, start=1)],
        "metric_type": "users",
        "subject_key": "CI",
        "target_year": 2026,
        "method": "moving_average",
    }
    response = client.post("/api/v1/forecast", json=body)
    assert response.status_code == 200
    payload = response.json()
    assert payload["method"] == "moving_average"
    assert len(payload["results"]) == 12
    assert payload["results"][0] == {
        "step": 1,
        "predicted": 100,
        "confidence": "medium",
        "method": "moving_average",
        "lower_bound": 100,
        "upper_bound": 100,
    }
    assert payload["summary"]["confidence"] == "medium"


def test_forecast_endpoint_rejects_negative_values():
    body = {
        "series": [{"period": "2025-01", "value": -5}],
        "metric_type": "users",
        "subject_key": "CI",
        "target_year": 2026,
    }
    response = client.post("/api/v1/forecast", json=body)
    assert response.status_code == 422


def test_forecast_endpoint_handles_explosive_growth():
    body = {
        "series": [{"period": "2025-01", "value": 1}, {"period": "2025-02", "value": 1e30}],
        "metric_type": "revenue",
        "subject_key": "SN",
        "target_year": 2026,
        "method": "growth_rate",
    }
    response = client.post("/api/v1/forecast", json=body)
    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 12
    assert all(0 <= r["lower_bound"] <= r["predicted"] <= r["upper_bound"] for r in results)


def test_best_method_and_methods_endpoints():
    response = client.post("/api/v1/forecast/best-method", json={"values": [100, 120, 144, 172.8]})
    assert response.status_code == 200
    assert response.json() == {"method": "growth_rate"}

    response = client.get("/api/v1/forecast/methods")
    assert response.status_code == 200
    assert len(response.json()["methods"]) == 4


def test_objectives_endpoint():
    body = {
        "subject_key": "CI",
        "target_year": 2026,
        "method": "moving_average",
        "adjustment_percent": 10,
        "metrics": [{"metric_type": "orders", "series": [{"period": "2025-01", "value": 100}]}],
    }
    response = client.post("/api/v1/forecast/objectives", json=body)
    assert response.status_code == 200
    payload = response.json()
    assert payload["method"] == "moving_average"
    assert [s["target_value"] for s in payload["suggestions"]] == [110] * 12
