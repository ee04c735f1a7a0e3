import logging

from fastapi import FastAPI, Request
from sqlalchemy.orm import sessionmaker
from prometheus_client import CollectorRegistry
from prometheus_fastapi_instrumentator import Instrumentator

from guest_order.version import VERSION
from guest_order.api import routes
from guest_order.api.responses import error_response
from guest_order.core.config import settings
from guest_order.core.errors import GuestOrderError, INTERNAL_ERROR
from guest_order.core.logging import configure_logging
from guest_order.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def create_app(session_factory: sessionmaker | None = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    if session_factory is None:
        session_factory = create_session_factory(create_db_engine(settings.POSTGRES_DSN, echo=settings.SQL_ECHO))

    app = FastAPI(title="Guest Order Service", version=VERSION)
    app.state.session_factory = session_factory

    # Instrument the app BEFORE adding routes; one registry per app instance
    Instrumentator(registry=CollectorRegistry()).instrument(app).expose(
        app,
        include_in_schema=False,
        endpoint=f"{settings.SERVICE_PREFIX}/metrics",
        should_gzip=True,
    )

    @app.exception_handler(GuestOrderError)
    async def guest_order_error_handler(request: Request, exc: GuestOrderError):
        if exc.status_code < 500:
            logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(INTERNAL_ERROR, 500)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get(f"{settings.SERVICE_PREFIX}/health")
    def guest_order_health():
        return {"status": "ok"}

    @app.get("/v1/_info")
    def info():
        return {"service": "guest-order", "version": VERSION}

    app.include_router(routes.router, prefix=settings.SERVICE_PREFIX, tags=["guest-orders"])
    return app
