from sqlalchemy import DateTime, create_engine, text
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from datetime import datetime, timezone
from typing import Generator
import logging

from byteforge.config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """Pool options per backend; SQLite keeps a single shared connection"""
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "poolclass": QueuePool,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


# Create engine with connection pooling
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **_engine_options(settings.DATABASE_URL),
)

# SessionLocal class for creating database sessions
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for all models
Base = declarative_base()

# Timestamps used for ordering keep microseconds; plain MySQL DATETIME drops them
PreciseDateTime = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


def utcnow() -> datetime:
    """Naive UTC now, set from Python so ties within one second still order"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_db() -> Generator:
    """
    Database session dependency for FastAPI routes

    Usage:
        @router.get("/categories")
        def get_categories(db: Session = Depends(get_db)):
            return category_service.list(db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database - create all tables"""
    try:
        # Import models so they register on Base.metadata
        from byteforge.models import Category, Topic, SubTopic  # noqa: F401

        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database tables created successfully")
    except Exception as e:
        logger.error(f"❌ Error creating database tables: {e}")
        raise


def check_db_connection() -> bool:
    """Check if database connection is alive"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


def commit_or_rollback(db) -> None:
    """Commit the session's unit of work; roll it back if the commit fails"""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
