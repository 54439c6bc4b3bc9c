"""StackIt Q&A FastAPI Application."""
from datetime import datetime
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.config import get_settings
from app.database import initialize_connection_pool, close_connection_pool
from app.models.schemas import ApiResponse, ErrorResponse, HealthCheck
from app.routers import auth, profile, questions, answers, notifications
from app.middleware.request_logging import RequestLoggingMiddleware

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

logger.info(f"CORS allowed origins: {settings.allowed_origins}")
# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="StackIt Q&A API",
    version="1.0.0",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

app.add_middleware(RequestLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup_event():
    """Initialize resources on application startup."""
    logger.info("Initializing application resources...")
    try:
        initialize_connection_pool(minconn=settings.db_pool_min, maxconn=settings.db_pool_max)
        logger.info("Application startup complete")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise


@app.on_event("shutdown")
async def shutdown_event():
    """Clean up resources on application shutdown."""
    logger.info("Shutting down application...")
    try:
        close_connection_pool()
        logger.info("Application shutdown complete")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")


# Include routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(questions.router)
app.include_router(answers.router)
app.include_router(notifications.router)


@app.get("/", response_model=ApiResponse[HealthCheck])
async def health_check():
    """Health check endpoint."""
    health = HealthCheck(
        status="healthy",
        timestamp=datetime.utcnow()
    )
    return {"ok": True, "data": health}


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid input")
    return f"{location}: {message}" if location else message


# Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc):
    if exc.status_code >= 500:
        logger.error(f"Server error on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content={"ok": False, "error": _describe_validation_error(exc)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request, exc):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"ok": False, "error": "Internal server error"},
    )
