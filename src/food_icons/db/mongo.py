"""MongoDB connection management for the durable icon cache (Motor async driver)."""

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)


class MongoDB:
    """
    MongoDB connection manager.

    Holds one client per process so every cache store shares the same
    connection pool.
    """

    client: AsyncIOMotorClient | None = None
    _db_name: str = "food_icons"

    @classmethod
    def connect(cls, uri: str, db_name: str = "food_icons", timeout_ms: int = 2000) -> None:
        """
        Initialize the MongoDB client.

        Args:
            uri: MongoDB connection URI
            db_name: Database holding the icon cache collection
            timeout_ms: Server selection timeout; cache reads give up after it
        """
        if cls.client is not None:
            cls.client.close()
        cls.client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=timeout_ms)
        cls._db_name = db_name

    @classmethod
    def close(cls) -> None:
        """Close the MongoDB client."""
        if cls.client is not None:
            cls.client.close()
            cls.client = None

    @classmethod
    def get_database(cls, name: str | None = None) -> AsyncIOMotorDatabase:
        """
        Get a database instance.

        Raises:
            RuntimeError: If MongoDB is not connected
        """
        if cls.client is None:
            raise RuntimeError("MongoDB not connected. Call MongoDB.connect() first.")
        return cls.client[name or cls._db_name]

    @classmethod
    def get_collection(cls, collection: str, db_name: str | None = None) -> AsyncIOMotorCollection:
        """Get a collection from the configured (or named) database."""
        return cls.get_database(db_name)[collection]

    @classmethod
    def is_connected(cls) -> bool:
        """Check if MongoDB is connected."""
        return cls.client is not None
