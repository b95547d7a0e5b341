"""
In-memory document store for backend tests.
"""

import asyncio
from typing import Any, Optional


class FakeStore:
    """
    In-memory DocumentStore.

    list_all honors `errors` (raised on read), `gates` (awaited before
    returning) and counts every call in `reads`.
    """

    def __init__(self, collections: Optional[dict[str, list[dict[str, Any]]]] = None):
        self.collections = {name: list(docs) for name, docs in (collections or {}).items()}
        self.reads: dict[str, int] = {}
        self.errors: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self._next_id = 0

    def read_count(self, collection: Optional[str] = None) -> int:
        if collection is None:
            return sum(self.reads.values())
        return self.reads.get(collection, 0)

    async def list_all(self, collection: str) -> list[dict[str, Any]]:
        self.reads[collection] = self.reads.get(collection, 0) + 1
        if collection in self.gates:
            await self.gates[collection].wait()
        if collection in self.errors:
            raise self.errors[collection]
        return [dict(d) for d in self.collections.get(collection, [])]

    async def get(self, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        for doc in self.collections.get(collection, []):
            if doc.get("id") == doc_id:
                return dict(doc)
        return None

    async def find(self, collection: str, query: dict[str, Any], sort=None) -> list[dict[str, Any]]:
        docs = [
            dict(d) for d in self.collections.get(collection, [])
            if all(d.get(k) == v for k, v in query.items())
        ]
        for field, direction in reversed(sort or []):
            docs.sort(key=lambda d: d.get(field), reverse=direction < 0)
        return docs

    async def count(self, collection: str, query: dict[str, Any]) -> int:
        return len(await self.find(collection, query))

    async def insert(self, collection: str, data: dict[str, Any]) -> str:
        self._next_id += 1
        doc_id = f"id-{self._next_id}"
        self.collections.setdefault(collection, []).append({**data, "id": doc_id})
        return doc_id

    async def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> Optional[dict[str, Any]]:
        for doc in self.collections.get(collection, []):
            if doc.get("id") == doc_id:
                doc.update({k: v for k, v in changes.items() if k not in ("id", "_id")})
                return dict(doc)
        return None

    async def delete(self, collection: str, doc_id: str) -> bool:
        docs = self.collections.get(collection, [])
        for index, doc in enumerate(docs):
            if doc.get("id") == doc_id:
                del docs[index]
                return True
        return False
