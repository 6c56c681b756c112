"""
MongoDB Connection Utility

MongoDB stores:
- students: auth credentials plus CV profile fields
- organizations: auth credentials plus organization name/phone
- posts: opportunity listings published by organizations

The client is created once at startup (see app.main) and the Database handle
is kept on app.state; routes receive it through the get_db dependency.
"""
import logging
from typing import Optional, Tuple

from fastapi import Request
import pymongo
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.config import Settings
from app.core.errors import StartupError

logger = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "students": "students",
    "organizations": "organizations",
    "posts": "posts"
}


def connect_mongo(settings: Settings) -> Tuple[MongoClient, Database]:
    """
    Create the client, verify the server answers, and ensure indexes.

    Raises StartupError when the URI is missing or the server is unreachable;
    the caller decides to exit.
    """
    if not settings.mongodb_uri:
        raise StartupError("Missing MONGODB_URI environment variable")

    try:
        client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
        # ping command checks connection
        client.admin.command("ping")
        db = client.get_default_database(default=settings.mongodb_db)
        init_mongo_indexes(db)
    except PyMongoError as e:
        raise StartupError(f"MongoDB connection error: {e}") from e

    logger.info(f"Connected to MongoDB database '{db.name}'")
    return client, db


def test_mongo_connection(client: MongoClient, timeout_ms: Optional[int] = None) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.

    timeout_ms caps the whole round-trip, server selection included.
    """
    try:
        with pymongo.timeout(timeout_ms / 1000 if timeout_ms else None):
            client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB connection failed: {e}")
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes. Unique email indexes back up the registration check;
    the post indexes serve the two list queries.
    """
    db[COLLECTIONS["students"]].create_index("email", unique=True)
    db[COLLECTIONS["organizations"]].create_index("email", unique=True)

    db[COLLECTIONS["posts"]].create_index([
        ("orgId", ASCENDING),
        ("createdAt", DESCENDING)
    ])
    db[COLLECTIONS["posts"]].create_index([
        ("status", ASCENDING),
        ("createdAt", DESCENDING)
    ])

    logger.info("MongoDB indexes ensured")


def get_db(request: Request) -> Database:
    """
    Dependency for FastAPI route injection.
    Usage:
        @router.get("/posts")
        def list_posts(db: Database = Depends(get_db)):
            ...
    """
    return request.app.state.db
