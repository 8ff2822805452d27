from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from app.halolight.constants.routes import DEFAULT_ROUTES
from app.halolight.core.config import settings
from app.halolight.core.error_catalog import InvalidRouteConfig
from app.halolight.core.logging import log_json
from app.halolight.schemas.navigation import RouteConfig
from app.halolight.services.route_registry import RouteRegistry, build_registry

logger = logging.getLogger("halolight.navigation")

_ROUTE_LIST = TypeAdapter(list[RouteConfig])


def load_route_configs(path: str | Path) -> list[RouteConfig]:
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise InvalidRouteConfig(str(config_path), f"unreadable: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise InvalidRouteConfig(str(config_path), f"invalid JSON: {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("routes")
    if not isinstance(raw, list):
        raise InvalidRouteConfig(str(config_path), "expected a list of routes or an object with a 'routes' list")

    try:
        return _ROUTE_LIST.validate_python(raw)
    except ValidationError as exc:
        raise InvalidRouteConfig(str(config_path), exc.errors(include_url=False, include_context=False)) from exc


def load_default_registry(config_path: str | None = None) -> RouteRegistry:
    path = settings.ROUTES_CONFIG_PATH if config_path is None else config_path
    if path:
        configs = load_route_configs(path)
        source = str(path)
    else:
        configs = [RouteConfig.model_validate(item) for item in DEFAULT_ROUTES]
        source = "builtin"
    log_json(logger, {"event": "route_config_loaded", "source": source, "routes": len(configs)})
    return build_registry(configs, source=source)
