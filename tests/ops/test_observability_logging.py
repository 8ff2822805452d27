import json
import logging
from types import SimpleNamespace

from starlette.requests import Request
from starlette.responses import Response

from app.halolight.core.logging import bind_trace_id, current_trace_id, log_json, unbind_trace_id
from app.halolight.core.session import Session
from app.halolight.middleware.observability import build_request_log_payload
from app.halolight.services.access_guard import AccessGuard
from tests.session_helpers import as_user


def test_build_request_log_payload():
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/halolight/navigation/menu",
        "headers": [],
        "route": SimpleNamespace(path="/halolight/navigation/menu"),
    }
    request = Request(scope)
    request.state.trace_id = "trace-1"
    request.state.session = Session.authenticated(["*"], user_id="user-1")
    request.state.error_code = None
    response = Response(status_code=200)

    payload = build_request_log_payload(request=request, response=response, latency_ms=12.3456)

    assert payload["event"] == "http_request"
    assert payload["trace_id"] == "trace-1"
    assert payload["user_id"] == "user-1"
    assert payload["route"] == "/halolight/navigation/menu"
    assert payload["method"] == "GET"
    assert payload["status_code"] == 200
    assert payload["latency_ms"] == 12.35


def test_navigation_decisions_are_logged_as_json(scenario_registry, caplog):
    guard = AccessGuard(scenario_registry)

    with caplog.at_level(logging.INFO, logger="halolight.navigation"):
        guard.authorize(Session.authenticated({"users:read"}, user_id="u-9"), "/users/new")

    records = [json.loads(record.getMessage()) for record in caplog.records if record.name == "halolight.navigation"]
    assert records[-1] == {
        "event": "navigation_decision",
        "path": "/users/new",
        "user_id": "u-9",
        "authenticated": True,
        "outcome": "forbidden",
        "route": "/users/new",
        "missing": ["users:write"],
    }


def test_log_json_tags_bound_trace_id(caplog):
    logger = logging.getLogger("halolight.test")
    token = bind_trace_id("trace-bound")
    try:
        with caplog.at_level(logging.INFO, logger="halolight.test"):
            log_json(logger, {"event": "sample"})
            log_json(logger, {"event": "explicit", "trace_id": "trace-own"})
    finally:
        unbind_trace_id(token)

    records = [json.loads(record.getMessage()) for record in caplog.records if record.name == "halolight.test"]
    assert records == [
        {"event": "sample", "trace_id": "trace-bound"},
        {"event": "explicit", "trace_id": "trace-own"},
    ]
    assert current_trace_id() is None


def test_request_trace_id_reaches_navigation_decision_log(client, caplog):
    with caplog.at_level(logging.INFO, logger="halolight.navigation"):
        response = client.get(
            "/halolight/navigation/authorize",
            params={"path": "/dashboard"},
            headers={**as_user("dashboard:view"), "X-Trace-ID": "trace-nav"},
        )

    assert response.headers["X-Trace-ID"] == "trace-nav"
    records = [json.loads(record.getMessage()) for record in caplog.records if record.name == "halolight.navigation"]
    assert records[-1]["outcome"] == "allow"
    assert records[-1]["trace_id"] == "trace-nav"
