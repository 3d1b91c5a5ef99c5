"""
MongoDB Connection Management.

Owns the single AsyncIOMotorClient shared by all requests.

Responsibility:
    - Create the motor client once at application startup
    - Verify connectivity with PING (fail fast, no retry)
    - Close the client on shutdown

Architecture Notes:
    - Infrastructure Layer (external dependency on MongoDB)
    - One instance per application, stored on app.state (no module globals)
    - motor clients are safe for concurrent use by many requests

Business Rules:
    - Server selection timeout: 5000ms (MONGO_TIMEOUT_MS)
    - Database: the one named in MONGO_URI, else MONGO_DB_NAME
    - Initial connection failure raises StoreConnectionError; the server exits

Error Handling:
    - connect(): any PyMongoError -> StoreConnectionError

Examples:
    >>> connection = MongoConnection(uri="mongodb://localhost:27017")
    >>> await connection.connect()
    >>> collection = connection.collection
    >>> connection.close()
"""

import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import ConfigurationError as MongoConfigurationError
from pymongo.errors import PyMongoError

from src.domain.shared.exceptions import StoreConnectionError

# Configure logger for this module
logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Process-wide MongoDB connection handle.

    Attributes:
        uri: MongoDB connection string
        database_name: Fallback database name when the URI names none
        collection_name: Collection holding submissions
        timeout_ms: Server selection timeout in milliseconds
    """

    def __init__(
        self,
        uri: str,
        database_name: str = "submissions_db",
        collection_name: str = "submissions",
        timeout_ms: int = 5000,
    ) -> None:
        self.uri = uri
        self.database_name = database_name
        self.collection_name = collection_name
        self.timeout_ms = timeout_ms

        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise StoreConnectionError("MongoDB client is not connected")
        return self._database

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self.database[self.collection_name]

    async def connect(self) -> None:
        """
        Create the client and verify connectivity with PING.

        Raises:
            StoreConnectionError: If the URI is invalid or the server does not
                answer within timeout_ms

        Implementation Details:
            - No retry: startup failure is fatal by policy
            - Safe to call twice (second call is a no-op)
        """
        if self._client is not None:
            logger.debug("MongoDB client already connected")
            return

        logger.info(
            f"Connecting to MongoDB: database={self.database_name}, "
            f"collection={self.collection_name}, timeout={self.timeout_ms}ms"
        )

        try:
            client = AsyncIOMotorClient(
                self.uri, serverSelectionTimeoutMS=self.timeout_ms
            )
            database = client.get_default_database(default=self.database_name)
        except (MongoConfigurationError, ValueError) as e:
            logger.error(f"Invalid MongoDB configuration: {e}")
            raise StoreConnectionError(f"Invalid MongoDB configuration: {e}") from e

        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB connection failed: {e}")
            client.close()
            raise StoreConnectionError(f"MongoDB connection failed: {e}") from e

        self._client = client
        self._database = database
        logger.info(f"MongoDB connected: database={database.name}")

    def close(self) -> None:
        """
        Close the client. Safe to call multiple times (idempotent).
        """
        if self._client is None:
            logger.debug("MongoDB client already closed or not initialized")
            return

        logger.info("Closing MongoDB client")
        try:
            self._client.close()
        finally:
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")
