# bookshelf/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import Catalog, catalog_router
from .config import Config, get_config


logger = logging.getLogger(__name__)

APP_TITLE = "Bookshelf API"
APP_VERSION = "1.0.0"


def _configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, config.APP_LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as plain text, the way existing clients expect them."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or mistyped bodies are a client error, not a crash."""
    logger.warning(
        "Invalid request body for %s %s: %s",
        request.method,
        request.url.path,
        exc.errors()[0]["msg"] if exc.errors() else "unknown error",
    )
    return PlainTextResponse("Invalid request body.", status_code=status.HTTP_400_BAD_REQUEST)


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return PlainTextResponse(
        "Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def create_app(config: Optional[Config] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    """Build the application around its own catalogue.

    A fresh seeded ``Catalog`` is created unless one is passed in.
    """
    config = config or get_config()
    _configure_logging(config)

    app = FastAPI(
        title=APP_TITLE,
        description="In-memory CRUD over an ordered list of book titles.",
        version=APP_VERSION,
    )
    app.state.config = config
    app.state.catalog = catalog if catalog is not None else Catalog()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/")
    def health_check():
        return {"status": "ok", "books": len(app.state.catalog)}

    app.include_router(catalog_router)
    return app


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    import uvicorn

    config = app.state.config
    logger.info("Server is running on %s:%d", config.APP_HOST, config.APP_PORT)
    uvicorn.run(
        app,
        host=config.APP_HOST,
        port=config.APP_PORT,
        log_level=config.APP_LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
