import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.api.v1.endpoints.auth import router as auth_router
from literacy.api.v1.endpoints.modules import router as modules_router
from literacy.api.v1.endpoints.progress import router as progress_router
from literacy.api.v1.endpoints.quiz import router as quiz_router
from literacy.constants.constants import Message
from literacy.core.config import settings
from literacy.core.database import session_manager, aget_db
from literacy.core.exceptions import InternalError, PlatformError
from literacy.core.rate_limit import limiter
from literacy.utils.seed.seed_catalog import seed_catalog

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Async context manager for app lifespan events"""

    try:
        logger.info("Starting computer literacy platform...")

        logger.info("Initializing database connection pool and tables...")
        await session_manager.init()
        logger.info("Database ready")

        if settings.SEED_ON_STARTUP:
            async with session_manager.get_session() as db:
                await seed_catalog(db, force=settings.FORCE_SEED)

    except Exception as e:
        logger.critical(f"Application startup failed: {str(e)}")
        raise

    try:
        logger.info("Application startup complete")
        yield
    finally:
        logger.info("Closing database connections...")
        await session_manager.close()
        logger.info("Application shutdown complete")


app = FastAPI(
    title="Computer Literacy Platform API",
    description="Course modules, quizzes and learner progress",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PlatformError)
async def platform_exception_handler(request: Request, exc: PlatformError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Validation Error: {exc.errors()}")
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": Message.invalid_data.value, "errors": errors},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}: {exc}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_content())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_content())


@app.get("/", tags=["Health Check"])
async def health_check(db: AsyncSession = Depends(aget_db)):
    try:
        await db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "service": "Computer Literacy Platform API",
            "database": "connected",
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "service": "Computer Literacy Platform API",
            "database": "disconnected",
        }


app.include_router(auth_router, prefix=settings.API_PREFIX, tags=["Authentication"])
app.include_router(modules_router, prefix=settings.API_PREFIX, tags=["Modules"])
app.include_router(progress_router, prefix=settings.API_PREFIX, tags=["Progress"])
app.include_router(quiz_router, prefix=settings.API_PREFIX, tags=["Quiz"])

logger.info(f"Loaded {len(app.routes)} routes")
