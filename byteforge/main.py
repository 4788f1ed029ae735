"""
Main FastAPI application entry point
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from datetime import datetime, timezone
from pathlib import Path
import time
import logging

from byteforge.config import settings
from byteforge.core.exceptions import (
    ContentError, ContentValidationError, DuplicateKeyError, NotFoundError
)
from byteforge.database import init_db, check_db_connection

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
request_logger = logging.getLogger("byteforge.requests")

if settings.REQUEST_LOG_FILE:
    Path(settings.REQUEST_LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(settings.REQUEST_LOG_FILE)
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
    request_logger.addHandler(file_handler)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Content API for the ByteForge Java learning platform: categories, topics and subtopics",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS - only the configured frontend, with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request and add its processing time to the response headers"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = f"{process_time:.4f}"
    request_logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({process_time * 1000:.1f} ms)"
    )
    return response


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info(f"🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    try:
        init_db()
        if check_db_connection():
            logger.info("✅ Database connection successful")
        else:
            logger.error("❌ Database connection failed")
    except Exception as e:
        logger.error(f"❌ Database initialization error: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("👋 Shutting down application...")


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    db_status = check_db_connection()

    return {
        "status": "ok" if db_status else "degraded",
        "database": db_status,
        "mongodb": db_status,  # key expected by clients of the earlier API
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# ============================================================
# Error mapping
# ============================================================

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"error": exc.message})


@app.exception_handler(DuplicateKeyError)
async def duplicate_key_handler(request: Request, exc: DuplicateKeyError):
    return JSONResponse(status_code=409, content={"error": exc.message})


@app.exception_handler(ContentValidationError)
async def content_validation_handler(request: Request, exc: ContentValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message, "fields": exc.fields})


@app.exception_handler(ContentError)
async def content_error_handler(request: Request, exc: ContentError):
    logger.error(f"Unmapped content error: {exc.message}")
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Bad or missing body fields -> 400, naming the missing ones"""
    errors = exc.errors()
    missing = [str(e["loc"][-1]) for e in errors if e.get("type") == "missing" and e.get("loc")]
    message = f"Missing required fields: {', '.join(missing)}" if missing else "Invalid request data"
    return JSONResponse(
        status_code=400,
        content={"error": message, "details": jsonable_encoder(errors)}
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    """Unique index hit by a write that raced past the service checks"""
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=409,
        content={"error": f"Duplicate key: {exc.orig}" if settings.DEBUG else "Duplicate key"}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) if settings.DEBUG else "Internal server error"}
    )


# Include routers - subtopics first so /topics/subtopics/... is not read as a topic id
from byteforge.routers import categories, subtopics, topics  # noqa: E402

app.include_router(subtopics.router)
app.include_router(topics.router)
app.include_router(categories.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "byteforge.main:app",
        host="0.0.0.0",
        port=3001,
        reload=settings.DEBUG
    )
