import pytest
from fastapi.testclient import TestClient

from app.halolight.services.route_registry import build_registry
from tests.session_helpers import header_session_provider


@pytest.fixture()
def scenario_registry():
    return build_registry(
        [
            {"path": "/users", "label": "用户管理", "required_permissions": ["users:read"], "order": 0},
            {"path": "/users/new", "label": "新建用户", "required_permissions": ["users:write"], "parent_path": "/users"},
        ]
    )


@pytest.fixture()
def client():
    from app.main import create_app

    app = create_app(session_provider=header_session_provider)
    with TestClient(app) as client:
        yield client
