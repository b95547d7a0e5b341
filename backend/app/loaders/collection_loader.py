"""
Authenticated collection loader.

Bridges session resolution and a one-shot collection read:

    LOADING --(session resolved, no user)--> UNAUTHENTICATED
    LOADING --(session resolved, user)-----> FETCHING --> READY

READY and UNAUTHENTICATED are terminal for a mount. A read failure is
logged once and reported as a typed failure next to an empty entity
list; it is never raised to the caller.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.session import SessionProvider
from app.database.store import DocumentStore

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


class LoaderState(str, Enum):
    """Presentation state of a loader."""
    LOADING = "loading"
    FETCHING = "fetching"
    UNAUTHENTICATED = "unauthenticated"
    READY = "ready"


class FailureKind(str, Enum):
    """Why a collection read failed."""
    STORE_ERROR = "store_error"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class DecodeError:
    """A stored document that does not fit the entity model."""
    index: int
    document_id: Optional[str]
    message: str


@dataclass(frozen=True)
class LoadFailure:
    kind: FailureKind
    cause: str


@dataclass
class LoadResult(Generic[EntityT]):
    """Outcome of one collection read."""
    entities: list[EntityT] = field(default_factory=list)
    decode_errors: list[DecodeError] = field(default_factory=list)
    failure: Optional[LoadFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(
        cls, entities: list[EntityT], decode_errors: Optional[list[DecodeError]] = None
    ) -> "LoadResult[EntityT]":
        return cls(entities=entities, decode_errors=decode_errors or [])

    @classmethod
    def failed(cls, kind: FailureKind, cause: str) -> "LoadResult[EntityT]":
        return cls(failure=LoadFailure(kind=kind, cause=cause))


def decode_documents(
    model: type[EntityT], documents: Iterable[dict[str, Any]]
) -> tuple[list[EntityT], list[DecodeError]]:
    """
    Decode raw documents one by one.

    Malformed documents are reported as DecodeError entries; the others
    are returned in store order.
    """
    entities: list[EntityT] = []
    errors: list[DecodeError] = []
    for index, doc in enumerate(documents):
        doc_id = doc.get("id") if isinstance(doc, dict) else None
        try:
            entities.append(model.model_validate(doc))
        except ValidationError as e:
            errors.append(DecodeError(
                index=index,
                document_id=str(doc_id) if doc_id is not None else None,
                message="; ".join(
                    f"{'.'.join(str(p) for p in err['loc']) or 'document'}: {err['msg']}"
                    for err in e.errors()
                ),
            ))
    return entities, errors


class CollectionLoader(Generic[EntityT]):
    """
    Loads one collection for the current session.

    Each mount issues at most one read. Unmounting cancels a pending load
    and discards whatever it would have produced; mounting again starts
    over with a fresh read.
    """

    def __init__(
        self,
        session: SessionProvider,
        store: DocumentStore,
        collection: str,
        model: type[EntityT],
        timeout: Optional[float] = None,
    ):
        self.session = session
        self.store = store
        self.collection = collection
        self.model = model
        self.timeout = timeout

        self.state = LoaderState.LOADING
        self.result: Optional[LoadResult[EntityT]] = None
        self._task: Optional[asyncio.Task] = None
        self._mount_id = 0

    @property
    def mounted(self) -> bool:
        return self._task is not None

    @property
    def entities(self) -> list[EntityT]:
        return self.result.entities if self.result else []

    def mount(self) -> asyncio.Task:
        """Start loading. No-op while already mounted."""
        if self._task is not None:
            return self._task
        self._mount_id += 1
        self.state = LoaderState.LOADING
        self.result = None
        self._task = asyncio.create_task(self._run(self._mount_id))
        return self._task

    def unmount(self) -> None:
        """Cancel a pending load and detach from its result."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
        self._task = None
        self._mount_id += 1

    async def wait(self) -> Optional[LoadResult[EntityT]]:
        """Wait for the current mount to settle."""
        task = self._task
        if task is None:
            return self.result
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            # Only an unmount of the awaited mount is swallowed
            if not task.cancelled():
                raise
        return self.result

    async def load(self) -> Optional[LoadResult[EntityT]]:
        """Mount and wait for the outcome."""
        self.mount()
        return await self.wait()

    async def _run(self, mount_id: int) -> None:
        session = await self.session.wait_until_resolved()
        if mount_id != self._mount_id:
            return

        if session.user is None:
            self.state = LoaderState.UNAUTHENTICATED
            return

        self.state = LoaderState.FETCHING
        result = await self._fetch()
        if mount_id != self._mount_id:
            return

        self.result = result
        self.state = LoaderState.READY

    async def _fetch(self) -> LoadResult[EntityT]:
        try:
            documents = await asyncio.wait_for(
                self.store.list_all(self.collection), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.error(
                f"Failed to fetch {self.collection} data: timed out after {self.timeout}s"
            )
            return LoadResult.failed(FailureKind.TIMEOUT, f"timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"Failed to fetch {self.collection} data: {e}")
            return LoadResult.failed(FailureKind.STORE_ERROR, str(e))

        entities, errors = decode_documents(self.model, documents)
        if errors:
            logger.warning(
                f"Skipped {len(errors)} of {len(errors) + len(entities)} "
                f"malformed {self.collection} documents"
            )
        return LoadResult.success(entities, errors)
