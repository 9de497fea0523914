"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..app import Application
from ..logging_config import get_logger
from .routes import dice, observability

logger = get_logger(__name__)

# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or get_app()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Dice Throw Log Demo API",
        description="Dice throws reported through a structured event channel",
        version="0.1.0",
        lifespan=lifespan,
    )

    cors_origins = application.settings.cors_origins
    if cors_origins:
        fastapi_app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @fastapi_app.exception_handler(ArithmeticError)
    async def arithmetic_error_handler(request: Request, exc: ArithmeticError):
        """Log unhandled arithmetic faults as exception events, answer 500."""
        application.source.exception(
            f"Unhandled {type(exc).__name__} in {request.url.path}: {exc}", exc
        )
        logger.error("Unhandled arithmetic error in %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    fastapi_app.include_router(dice.create_dice_router(application))
    fastapi_app.include_router(observability.create_observability_router(application))

    return fastapi_app
