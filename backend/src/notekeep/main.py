# Main application entry point
import os
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, notes_router, users_router
from .config import get_settings
from .core.exceptions import AppError, ErrorKind
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .core.services.bootstrap_service import BootstrapService
from .database import AsyncSessionLocal, create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting NoteKeep application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Tests run against their own in-memory database
    if os.getenv("NOTEKEEP_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB setup due to NOTEKEEP_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
            async with AsyncSessionLocal() as session:
                await BootstrapService(session).run(settings)
        except Exception as e:
            logger.error("Failed to initialize database", exc_info=e)
            raise

    yield

    logger.info("Shutting down NoteKeep application")


app = FastAPI(
    title=settings.app_name,
    description="User-scoped notes with JWT authentication and role-based access",
    version=__version__,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(users_router, prefix="/api")


def error_response(kind: ErrorKind, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=kind.label, message=message, details=details)
    headers = {"WWW-Authenticate": "Bearer"} if kind.status_code == 401 else None
    return JSONResponse(status_code=kind.status_code, content=body.to_body(), headers=headers)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.kind, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # drop the "body"/"path"/"query" location prefix
        field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        details.setdefault(field, error["msg"])
    return error_response(ErrorKind.VALIDATION, "Request validation failed", details)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = ErrorResponse(error=HTTPStatus(exc.status_code).phrase, message=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.to_body(), headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return error_response(ErrorKind.INTERNAL, ErrorKind.INTERNAL.label)


# Root endpoint
@app.get("/")
async def root():
    return {"message": "NoteKeep API", "version": __version__}


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notekeep.main:app", host=settings.host, port=settings.port, reload=settings.reload)
