def test_health_endpoints(client):
    live = client.get("/api/health")
    assert live.status_code == 200
    assert live.json()["status"] == "ok"

    ready = client.get("/api/health/ready")
    assert ready.status_code == 200
    payload = ready.json()
    assert payload["status"] == "ok"
    assert payload["database"]["ok"] is True
    assert payload["database"]["missing_tables"] == []


def test_responses_carry_request_id(client):
    response = client.get("/api/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_ready_reports_occurrence_indexes_and_workload_defaults(client):
    payload = client.get("/api/health/ready").json()

    assert payload["database"]["missing_indexes"] == []
    assert payload["workload_defaults"]["max_faculty_credits"] == 30
