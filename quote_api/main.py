from __future__ import annotations

from fastapi import FastAPI, Response
from sqlalchemy.orm import Session, sessionmaker

from quote_api.api.quotes import router as quotes_router
from quote_api.core.config import Settings, settings
from quote_api.core.http_middleware import install_request_logging
from quote_api.core.logging import configure_logging
from quote_api.db.session import build_engine, build_session_factory
from quote_api.services.quotes import health_check


def create_app(cfg: Settings | None = None, session_factory: sessionmaker[Session] | None = None) -> FastAPI:
    """Build the application around one connection pool.

    Tests pass their own ``session_factory``; otherwise an engine is built
    from ``cfg`` (the process settings by default).
    """
    cfg = cfg or settings
    configure_logging(cfg.LOG_LEVEL)
    app = FastAPI(title=cfg.APP_NAME, version="0.1.0")
    if session_factory is None:
        session_factory = build_session_factory(build_engine(cfg))
    app.state.session_factory = session_factory
    install_request_logging(app)

    app.include_router(quotes_router, prefix="/quotes")

    @app.get("/", include_in_schema=False)
    def liveness():
        health_check()
        return Response(status_code=200)

    return app


app = create_app()
