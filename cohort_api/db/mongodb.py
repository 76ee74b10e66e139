"""
MongoDB Connection Utility

MongoDB stores:
- cohorts: program/schedule metadata for a class batch
- students: people, each optionally referencing one cohort by ObjectId

The client is created lazily and closed by the application lifespan.
Routes receive the database through `Depends(get_mongo_db)`, so tests can
swap in an in-memory database with `app.dependency_overrides`.
"""
import logging
from datetime import timezone
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cohort_api.core.config import get_settings

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        # Datetimes come back tz-aware in UTC, the way they were stored
        _client = MongoClient(settings.mongodb_uri, tz_aware=True, tzinfo=timezone.utc)
        logger.info("MongoDB client created for %s", settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the cohort tools database. Also used as a FastAPI dependency."""
    return get_mongo_client()[get_settings().mongodb_db]


def close_mongo_client() -> None:
    """Close the shared client, if one was opened."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")


# Collection name constants (avoid typos)
COLLECTIONS = {
    "cohorts": "cohorts",
    "students": "students",
}


def get_collection(db: Database, name: str) -> Collection:
    """Get a specific collection by its key in COLLECTIONS."""
    return db[COLLECTIONS[name]]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        get_mongo_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    # Slugs are meant to be unique; sparse so cohorts without one don't collide.
    # CohortService never stores a null slug, which a sparse index would still cover.
    get_collection(db, "cohorts").create_index(
        [("slug", ASCENDING)], unique=True, sparse=True
    )

    # Index on cohort for the students-by-cohort listing
    get_collection(db, "students").create_index([("cohort", ASCENDING)])

    logger.info("MongoDB indexes created successfully")
