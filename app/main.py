from fastapi import FastAPI

from app.halolight.api import api_router
from app.halolight.core.config import settings
from app.halolight.core.errors import setup_exception_handlers
from app.halolight.core.logging import configure_logging
from app.halolight.core.session import SessionProvider
from app.halolight.middleware.observability import ObservabilityMiddleware
from app.halolight.middleware.trace import TraceIdMiddleware
from app.halolight.services.route_config import load_default_registry
from app.halolight.services.route_registry import RouteRegistry


def create_app(
    registry: RouteRegistry | None = None,
    session_provider: SessionProvider | None = None,
) -> FastAPI:
    configure_logging()
    # The registry is fully built and validated before the app can serve requests.
    registry = registry if registry is not None else load_default_registry()
    app = FastAPI(title=settings.APP_NAME)
    app.state.registry = registry
    app.state.session_provider = session_provider
    app.add_middleware(TraceIdMiddleware)
    app.add_middleware(ObservabilityMiddleware)
    setup_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
