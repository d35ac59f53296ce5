"""
FastAPI application for User Service.

Registers customers and employees, validating CPF, email and personal data
before anything is persisted.
"""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .db.connection import db_manager
from .db.schema import apply_schema
from .domain.exceptions import UserServiceException
from .logging_config import get_logger, setup_logging
from .models import HealthResponse, ProblemDetails
from .routers import customer_router, employee_router

setup_logging(settings.LOG_LEVEL, settings.SERVICE_NAME)
logger = get_logger(__name__)

ERROR_TITLE = "An error occured"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting User Service")
    await db_manager.connect()
    if settings.AUTO_INIT_DB:
        await apply_schema(db_manager)
    logger.info("User Service started")

    yield

    logger.info("Shutting down User Service")
    await db_manager.disconnect()
    logger.info("User Service shutdown complete")


app = FastAPI(
    title="User Service",
    description="Customer and employee registration",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(customer_router)
app.include_router(employee_router)


@app.exception_handler(UserServiceException)
async def domain_exception_handler(request: Request, exc: UserServiceException):
    """Answer domain rule violations with 400."""
    logger.warning(
        "Domain exception",
        path=request.url.path,
        method=request.method,
        exception_type=type(exc).__name__,
        error=exc.message,
    )
    problem = ProblemDetails(
        title=ERROR_TITLE, status=status.HTTP_400_BAD_REQUEST, detail=exc.message
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=problem.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    problem = ProblemDetails(
        title=ERROR_TITLE,
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=problem.model_dump()
    )


@app.get("/healthz", response_model=HealthResponse)
async def health_check():
    """Health check endpoint. Answers 503 when the database is unreachable."""
    try:
        await db_manager.fetchval("SELECT 1")
    except Exception as e:
        logger.error("Health check failed", error=str(e))
        unhealthy = HealthResponse(
            status="unhealthy", service=settings.SERVICE_NAME, database="unreachable"
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=unhealthy.model_dump(mode="json"),
        )

    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        database="connected",
        timestamp=datetime.now(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
