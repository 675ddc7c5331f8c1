# productstore/data/database.py
from pymongo import MongoClient
from pymongo.collection import Collection

from productstore.utils.settings import MONGO_URL, MONGO_DB, MONGO_COLLECTION, MONGO_TIMEOUT_MS
from productstore.utils.retry import mongo_connect_retry
from productstore.utils.logging import get_logger

logger = get_logger(__name__)


class Database:
    """
    Process-wide MongoDB handle.
    Opened once on application startup, closed on shutdown, and handed to
    the request handlers through dependencies (see productstore.api.deps).
    """

    def __init__(
        self,
        url: str | None = None,
        name: str | None = None,
        collection: str | None = None,
        client: MongoClient | None = None,
    ):
        self.url = url or MONGO_URL
        self.name = name or MONGO_DB
        self.collection_name = collection or MONGO_COLLECTION
        self._client = client
        #an injected client belongs to the caller, we never ping or close it
        self._owns_client = client is None

    @property
    def connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        if self._client is None:
            self._client = MongoClient(self.url, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
            self._ping()
        logger.info(f"Connected to MongoDB database '{self.name}'")

    @mongo_connect_retry()
    def _ping(self) -> None:
        self._client.admin.command("ping")

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    @property
    def products(self) -> Collection:
        if self._client is None:
            raise RuntimeError("Database is not connected")
        return self._client[self.name][self.collection_name]
