import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

from jobboard.core.config import settings
from jobboard.core.database import init_db
from jobboard.core.errors import register_exception_handlers
from jobboard.core.logging_config import log_requests, setup_logging
from jobboard.api.endpoints import admin, applications, auth, companies, health, jobs, upload, users

setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up Job Board API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Job Board API...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Job board REST API: users, companies, jobs and applications",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.middleware("http")(log_requests)

# Include routers
app.include_router(health.router)
for router in (auth.router, jobs.router, applications.router, upload.router, users.router, companies.router, admin.router):
    app.include_router(router, prefix=settings.API_PREFIX)

# Serve locally stored uploads
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
