"""
Cohort Tools API - Main Application

FastAPI backend with:
- MongoDB for cohorts and students
- Student reads populate their cohort inline
- JWT-gated /auth route group

Run: uvicorn cohort_api.main:app --reload --port 5005
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cohort_api.api.error_handlers import register_error_handlers
from cohort_api.api.routes import api_router, auth_router
from cohort_api.core.config import get_settings
from cohort_api.db.mongodb import (
    close_mongo_client,
    get_mongo_db,
    init_mongo_indexes,
    test_mongo_connection,
)

logger = logging.getLogger(__name__)

settings = get_settings()


def setup_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open MongoDB and create indexes on startup, close the client on shutdown."""
    setup_logging(settings.log_level)
    init_mongo_indexes(get_mongo_db())
    logger.info("Cohort Tools API started")
    yield
    close_mongo_client()
    logger.info("Cohort Tools API shut down")


# Create FastAPI app
app = FastAPI(
    title="Cohort Tools API",
    description="""
    REST API for managing bootcamp cohorts and their students.

    ## Resources
    - **Cohorts**: list, get, create, update, delete
    - **Students**: same verbs, with the referenced cohort populated on read
    - **Auth**: bearer-token protected route group
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware (frontend dev servers)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")
app.include_router(auth_router)


@app.get("/", tags=["Root"])
async def root():
    """Static greeting."""
    return {"message": "Hello from the route /"}


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check."""
    mongo_ok = test_mongo_connection()
    return {
        "status": "healthy" if mongo_ok else "degraded",
        "mongodb": "connected" if mongo_ok else "disconnected",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("cohort_api.main:app", host=settings.host, port=settings.port, reload=settings.debug)
