"""
StudyConnect Backend - Main Application

FastAPI backend with:
- MongoDB for students, organizations and posts
- bcrypt password hashing
- JSON error responses of the form {"error": "..."}

Run: uvicorn app.main:app --reload
 or: python -m app.main
"""

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.core.errors import StartupError, register_exception_handlers
from app.db.mongodb import connect_mongo, test_mongo_connection

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="StudyConnect Backend",
    description="""
    Opportunity board for students and organizations.

    ## Features
    - **Authentication**: registration and login for students and organizations
    - **CV**: one profile per student
    - **Posts**: internships, volunteering, mentorship and events published by organizations
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (only the configured frontend origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


def init_storage(app: FastAPI, settings: Settings) -> None:
    """
    Connect to MongoDB once, before requests are served.
    The process exits if the URI is missing or the server is unreachable.
    """
    try:
        client, db = connect_mongo(settings)
    except StartupError as e:
        logger.error(str(e))
        sys.exit(1)

    app.state.mongo_client = client
    app.state.db = db


# Startup event
@app.on_event("startup")
def startup_event():
    """Open the MongoDB connection and ensure indexes."""
    init_storage(app, settings)
    logger.info(f"Environment: {settings.environment}")


@app.on_event("shutdown")
def shutdown_event():
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        logger.info("MongoDB connection closed")


@app.get("/health", tags=["Health"])
def health_check(request: Request):
    """Liveness check. Always 200; reports the MongoDB state alongside."""
    client = getattr(request.app.state, "mongo_client", None)
    return {
        "status": "OK",
        "message": "StudyConnect Backend is running!",
        "mongodb": "connected"
        if client is not None and test_mongo_connection(client, settings.mongodb_health_timeout_ms)
        else "disconnected"
    }


if __name__ == "__main__":
    import uvicorn

    if not settings.mongodb_uri:
        logger.error("Missing MONGODB_URI environment variable")
        sys.exit(1)

    uvicorn.run(app, host=settings.host, port=settings.port)
