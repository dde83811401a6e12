"""
Application assembly for the String Analyzer Service.

``create_app`` wires settings, logging, the string store, the request
pipeline, the router and the error handlers into a FastAPI instance.
A default instance is created at import time as ``app`` so it can be
served directly::

    uvicorn string_analyzer.main:app
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .errors import RouteNotFound, ServiceError, error_response
from .logging_config import setup_logging
from .pipeline import run_stages
from .routes import router
from .store import StringStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build a configured application.

    The store is loaded here rather than in a startup hook so that the
    collection is ready as soon as the app exists, including under test
    transports that do not run lifespan events.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    store = StringStore(settings.strings_file)
    store.load()
    app.state.store = store

    app.middleware("http")(run_stages)
    app.include_router(router, tags=["strings"])

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return error_response(exc)

    # Unmatched paths and methods both fall through to "Route not found"
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return error_response(RouteNotFound())
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "message": str(exc.detail)},
        )

    return app


app = create_app()


def main() -> None:
    logger.info("Server listening on port %d", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    main()
