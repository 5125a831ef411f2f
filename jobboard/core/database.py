import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from jobboard.core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(database_url: str) -> dict:
    """Build engine options for the configured backend."""
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across the request threadpool
        return {"connect_args": {"check_same_thread": False}}

    kwargs = {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,
        "max_overflow": 20,
    }
    if settings.DATABASE_SSL:
        kwargs["connect_args"] = {"sslmode": "require"}
    return kwargs


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Imports every model so it is registered on Base.metadata, then creates any
    missing tables when AUTO_CREATE_TABLES is enabled. Deployments that manage
    the schema with Alembic should set AUTO_CREATE_TABLES=false and run
    "alembic upgrade head" instead.
    """
    import jobboard.models  # noqa: F401  Import models to register them

    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables synchronized from model declarations")
