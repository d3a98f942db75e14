from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from hypermedia_demo import __version__
from hypermedia_demo.config import DemoConfig, EnhancementConfig, load_demo_config
from hypermedia_demo.enhancement import is_enhanced_client, vary_header
from hypermedia_demo.errors import ErrorInfo, error_rendering, fail
from hypermedia_demo.home import ensure_demo_layout, resolve_demo_home
from hypermedia_demo.ui.rendering import render
from hypermedia_demo.ui.router import router as ui_router

logger = logging.getLogger(__name__)


def _configure_logging(config: DemoConfig, log_path: Path) -> None:
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=config.logging.max_size_mb * 1024 * 1024,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    file_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(config.logging.level)
    # Avoid adding duplicate handlers if reloaded
    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        root.addHandler(file_handler)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        home = resolve_demo_home()
        paths = ensure_demo_layout(home)
        config = load_demo_config(paths)

        _configure_logging(config, paths.log_path)

        logger.info("Hypermedia demo starting up")
        logger.info(f"Logs directory: {paths.logs_dir}")

        app.state.demo_home = home
        app.state.demo_paths = paths
        app.state.demo_config = config

        yield

        logger.info("Hypermedia demo shutting down")

    app = FastAPI(title="Hypermedia Demo", version=__version__, lifespan=_lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    def _render_error(request: Request, error: ErrorInfo) -> Response:
        config = getattr(request.app.state, "demo_config", None)
        enhancement = config.enhancement if config is not None else EnhancementConfig()
        enhanced = is_enhanced_client(request.headers, enhancement)
        return render(
            request,
            error_rendering(error, enhanced),
            status_code=error.status_code,
            headers={"Vary": vary_header(enhancement)},
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        return _render_error(
            request,
            fail(status_code=422, message="Request validation failed", details=exc.errors()),
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> Response:
        return _render_error(request, fail(status_code=exc.status_code, message=str(exc.detail)))

    @app.exception_handler(StarletteHTTPException)
    async def _starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        return _render_error(
            request,
            fail(
                status_code=exc.status_code,
                message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
            ),
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        # Avoid leaking internals to the client.
        return _render_error(request, fail(status_code=500, message="Internal server error"))

    app.include_router(ui_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
