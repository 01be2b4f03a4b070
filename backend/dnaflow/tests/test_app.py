from .conftest import client


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_metrics_exposed(client):
    client.get("/api/users")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "request_count" in resp.text


def test_cors_allows_local_client(client):
    resp = client.options(
        "/api/workflows",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PUT",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"
