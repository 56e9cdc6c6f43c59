from contextlib import asynccontextmanager
import logging
from motor.motor_asyncio import AsyncIOMotorClient
from app.services.review_store import ReviewStore
from config import DATABASE_URL, DATABASE_NAME, REVIEW_COLLECTION

logger = logging.getLogger(__name__)
db_config = {
    "db_url": DATABASE_URL,
    "db_name": DATABASE_NAME,
    "review_collection": REVIEW_COLLECTION,
}

async def connect():
    client = AsyncIOMotorClient(db_config["db_url"], serverSelectionTimeoutMS=5000, tz_aware=True)
    await client.admin.command("ping")
    return client

@asynccontextmanager
async def lifespan(app):
    """Async context manager for MongoDB connection lifecycle"""
    try:
        connection = await connect()
        app.state.mongo_client = connection
        app.state.review_store = ReviewStore(
            connection[db_config["db_name"]][db_config["review_collection"]]
        )
        logger.info("✅ MongoDB connection established at startup (database %s).", db_config["db_name"])
    except Exception as e:
        logger.error(f"❌ MongoDB connection failed at startup: {e}")
        raise

    yield  # FastAPI app runs here

    mongo_client = getattr(app.state, "mongo_client", None)
    if mongo_client:
        mongo_client.close()
        logger.info("🔌 MongoDB connection closed at shutdown.")
    logger.info("🚪 Shutting down FastAPI app.")
