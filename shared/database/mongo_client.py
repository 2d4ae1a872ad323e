# shared/database/mongo_client.py
# One long-lived MongoDB connection per process.
# Built explicitly at startup and handed to the routes; never a module global.

from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from constants import DEFAULT_DB_NAME
from shared.config import Settings
from shared.logging.logger import get_logger

logger = get_logger("mongo_client")


class StorageConnectionError(Exception):
    """Raised when the initial ping to MongoDB fails."""
    pass


class MongoStore:
    """
    Owns the MongoClient and the database handle.

    Usage:
        store = MongoStore.from_settings(settings)
        store.connect()          # raises StorageConnectionError
        orders = store.collection("orders")
        ...
        store.close()
    """

    def __init__(self, client: MongoClient, db: Database):
        self._client = client
        self._db     = db
        self.db_name = db.name

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        client = MongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )
        # Database comes from the URL path, e.g. .../vegetable_order_app
        return cls(client, client.get_default_database(default=DEFAULT_DB_NAME))

    def connect(self) -> None:
        """
        Pings the server once. No retry: a failure here is for the caller
        (and ultimately the orchestrator) to deal with.
        """
        try:
            self._client.admin.command("ping")
        except PyMongoError as e:
            raise StorageConnectionError(str(e)) from e
        logger.info(f"MongoDB connected successfully (db={self.db_name})")

    def collection(self, name: str) -> Collection:
        return self._db[name]

    def close(self) -> None:
        self._client.close()
        logger.info("MongoDB connection closed")


def connect_or_exit(settings: Settings, store: Optional[MongoStore] = None) -> MongoStore:
    """
    Connects at process start. Exits with status 1 when MongoDB is unreachable
    so Kubernetes restarts the pod.
    """
    store = store or MongoStore.from_settings(settings)
    try:
        store.connect()
    except StorageConnectionError as e:
        logger.error("MongoDB connection error", extra={"error": str(e)})
        raise SystemExit(1)
    return store
