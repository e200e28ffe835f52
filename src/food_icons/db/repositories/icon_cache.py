"""MongoDB-backed durable tier of the icon resolution cache."""

import logging
import re
from datetime import UTC, datetime

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from food_icons.core.exceptions import CacheStoreError

from .base import CacheStore

logger = logging.getLogger(__name__)


class MongoCacheStore(CacheStore):
    """
    Key-value cache entries stored one document per key.

    Document format:
        {"_id": "<namespace>:<version>:<locale>_<name>",
         "value": '{"icon": "🍎"}',
         "updated_at": datetime}

    Keying on `_id` gives the unique index for free and lets prefix
    deletes use an anchored regex on it.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize store with a MongoDB collection.

        Args:
            collection: Motor collection instance
        """
        self.collection = collection

    async def get(self, key: str) -> str | None:
        try:
            doc = await self.collection.find_one({"_id": key}, {"value": 1})
        except PyMongoError as e:
            raise CacheStoreError(f"Cache read failed: {e}", operation="get", key=key) from e

        if not doc:
            return None
        value = doc.get("value")
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        try:
            await self.collection.update_one(
                {"_id": key},
                {"$set": {"value": value, "updated_at": datetime.now(UTC)}},
                upsert=True,
            )
        except PyMongoError as e:
            raise CacheStoreError(f"Cache write failed: {e}", operation="set", key=key) from e

    async def delete_prefix(self, prefix: str) -> int:
        try:
            result = await self.collection.delete_many(
                {"_id": {"$regex": f"^{re.escape(prefix)}"}}
            )
        except PyMongoError as e:
            raise CacheStoreError(f"Cache purge failed: {e}", operation="delete_prefix", key=prefix) from e

        logger.info(f"Purged {result.deleted_count} durable icon cache entries with prefix '{prefix}'")
        return result.deleted_count
