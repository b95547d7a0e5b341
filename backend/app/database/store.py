"""
Document store client.

Every collection is a flat set of schema-less documents. Documents leave
the store as plain dicts carrying a string "id"; schema is applied by the
caller when it decodes them into models.
"""
from typing import Any, Optional, Protocol

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class DocumentStore(Protocol):
    """Read/write interface used by page loaders and entity managers."""

    async def list_all(self, collection: str) -> list[dict[str, Any]]:
        ...

    async def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        ...

    async def find(
        self, collection: str, query: dict[str, Any], sort: Optional[list] = None
    ) -> list[dict[str, Any]]:
        ...

    async def count(self, collection: str, query: dict[str, Any]) -> int:
        ...

    async def insert(self, collection: str, data: dict[str, Any]) -> str:
        ...

    async def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> Optional[dict[str, Any]]:
        ...

    async def delete(self, collection: str, doc_id: str) -> bool:
        ...


def _to_object_id(doc_id: str) -> Optional[ObjectId]:
    """Convert a string id to ObjectId, None if it is not a valid one."""
    try:
        return ObjectId(doc_id)
    except (InvalidId, TypeError):
        return None


def _from_mongo(doc: dict[str, Any]) -> dict[str, Any]:
    """Replace Mongo's _id with a string id."""
    data = {k: v for k, v in doc.items() if k != "_id"}
    data["id"] = str(doc["_id"])
    return data


class MongoDocumentStore:
    """DocumentStore backed by a motor database."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def list_all(self, collection: str) -> list[dict[str, Any]]:
        """Return every document of a collection in natural order, unbounded."""
        cursor = self.db[collection].find({})
        docs = await cursor.to_list(length=None)
        return [_from_mongo(d) for d in docs]

    async def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        oid = _to_object_id(doc_id)
        if oid is None:
            return None
        doc = await self.db[collection].find_one({"_id": oid})
        return _from_mongo(doc) if doc else None

    async def find(
        self, collection: str, query: dict[str, Any], sort: Optional[list] = None
    ) -> list[dict[str, Any]]:
        cursor = self.db[collection].find(query)
        if sort:
            cursor = cursor.sort(sort)
        docs = await cursor.to_list(length=None)
        return [_from_mongo(d) for d in docs]

    async def count(self, collection: str, query: dict[str, Any]) -> int:
        return await self.db[collection].count_documents(query)

    async def insert(self, collection: str, data: dict[str, Any]) -> str:
        """Insert a document and return its store-assigned id."""
        doc = {k: v for k, v in data.items() if k not in ("id", "_id")}
        result = await self.db[collection].insert_one(doc)
        return str(result.inserted_id)

    async def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> Optional[dict[str, Any]]:
        """
        Apply changes to a document, never touching its id.

        Returns:
            The updated document, or None if it does not exist
        """
        oid = _to_object_id(doc_id)
        if oid is None:
            return None
        changes = {k: v for k, v in changes.items() if k not in ("id", "_id")}
        if changes:
            doc = await self.db[collection].find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        else:
            doc = await self.db[collection].find_one({"_id": oid})
        return _from_mongo(doc) if doc else None

    async def delete(self, collection: str, doc_id: str) -> bool:
        oid = _to_object_id(doc_id)
        if oid is None:
            return False
        result = await self.db[collection].delete_one({"_id": oid})
        return result.deleted_count > 0
