def test_unknown_endpoint_uses_error_envelope(client):
    response = client.get("/no-such-endpoint", headers={"X-Trace-ID": "trace-404"})

    assert response.status_code == 404
    assert response.json() == {
        "code": "NOT_FOUND",
        "message": "Not Found",
        "details": None,
        "trace_id": "trace-404",
    }


def test_wrong_method_uses_error_envelope(client):
    response = client.post("/health")

    assert response.status_code == 405
    body = response.json()
    assert body["code"] == "METHOD_NOT_ALLOWED"
    assert set(body) == {"code", "message", "details", "trace_id"}
    assert "GET" in response.headers["allow"]


def test_validation_error_reports_parameter_named_path(client):
    response = client.get("/halolight/navigation/breadcrumbs")

    assert response.status_code == 422
    error = response.json()["details"]["errors"][0]
    assert error["field"] == "path"
    assert error["loc"] == ["query", "path"]
