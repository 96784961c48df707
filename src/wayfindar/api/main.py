# src/wayfindar/api/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.middleware.sessions import SessionMiddleware

from wayfindar.config import Settings, settings as default_settings
from wayfindar.db.base import build_engine, build_session_factory, engine as default_engine
from wayfindar.db.bootstrap import initialize_database
from wayfindar.logging_setup import setup_logging

from .controllers import APP_NAME, CONTROLLERS, error_payload
from .routing import LowercaseRouteMiddleware, map_controller_route

logger = logging.getLogger("wayfindar")

# 30 days, same as the usual framework default
HSTS_HEADER = "max-age=2592000"


async def add_hsts_header(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("Strict-Transport-Security", HSTS_HEADER)
    return response


async def production_error_handler(request: Request, exc: Exception) -> JSONResponse:
    payload = error_payload()
    logger.exception("Unhandled error on %s %s (request_id=%s)",
                     request.method, request.url.path, payload.request_id, exc_info=exc)
    return JSONResponse(status_code=500, content=payload.model_dump())


async def development_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": type(exc).__name__, "detail": str(exc), "path": request.url.path},
    )


def create_app(app_settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    app_settings = app_settings or default_settings
    if engine is None:
        engine = default_engine if app_settings is default_settings else build_engine(app_settings.DATABASE_URL)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(level=app_settings.LOG_LEVEL)
        # runs before the server accepts requests; never raises store errors
        app.state.startup_report = initialize_database(
            engine, session_factory, seed=app_settings.SEED_ON_STARTUP
        )
        logger.info("%s application started (env=%s)", APP_NAME, app_settings.APP_ENV)
        yield
        engine.dispose()

    app = FastAPI(title=f"{APP_NAME} API", version="1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.startup_report = None

    # ---------------------------
    # Middleware (last added runs first)
    # ---------------------------
    app.add_middleware(
        SessionMiddleware,
        secret_key=app_settings.SESSION_SECRET_KEY,
        session_cookie=app_settings.SESSION_COOKIE_NAME,
        max_age=app_settings.SESSION_IDLE_TIMEOUT_MINUTES * 60,
        same_site="lax",
        https_only=not app_settings.is_development,
    )
    app.add_middleware(LowercaseRouteMiddleware, controllers=[c.name for c in CONTROLLERS])
    if app_settings.is_development:
        app.add_exception_handler(Exception, development_error_handler)
    else:
        app.add_exception_handler(Exception, production_error_handler)
        app.middleware("http")(add_hsts_header)
        app.add_middleware(HTTPSRedirectMiddleware)

    static_dir = Path(app_settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    # ---------------------------
    # Health
    # ---------------------------
    @app.get("/health")
    def health():
        return {"status": "ok"}

    map_controller_route(app, CONTROLLERS, name="default", default_controller="home", default_action="index")
    return app


app = create_app()
