import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

# Import all models to ensure they're registered with SQLAlchemy Base
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS
from .database import Base, engine
from .domain.companies.router import router as companies_router
from .domain.orders.router import router as orders_router
from .domain.tasks.router import router as tasks_router
from .errors import DomainError, ErrorType, StorageError
from .routes import auth_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ErrorType.VALIDATION: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.STORAGE: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except SQLAlchemyError as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="FieldOps API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Map service layer errors to HTTP responses"""
    status_code = ERROR_STATUS_CODES.get(exc.error_type, 400)
    if isinstance(exc, StorageError):
        logger.error(f"{request.method} {request.url.path} - Storage error: {exc.__cause__ or exc}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": {"type": exc.error_type.value, "message": "Internal server error"}},
        )

    logger.warning(f"{request.method} {request.url.path} - {exc.error_type.value}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path} - Database error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": {"type": ErrorType.STORAGE.value, "message": "Internal server error"}},
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise


logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router)
app.include_router(companies_router)
app.include_router(orders_router)
app.include_router(tasks_router)


@app.get("/")
def root():
    return {"message": "FieldOps API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
