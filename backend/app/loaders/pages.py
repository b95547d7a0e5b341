"""
Settings page loaders, one per domain collection.

A page has a primary collection (handed to its manager) and optionally
related collections it needs alongside, e.g. the phases page also loads
projects so a phase can be attached to one.
"""
import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

from app.config import get_settings
from app.core.session import SessionProvider
from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.loaders.collection_loader import (
    CollectionLoader,
    DecodeError,
    LoaderState,
    LoadFailure,
)
from app.models.phase import Phase
from app.models.position import EmployeePosition
from app.models.project import Project
from app.models.role import Role


_PROGRESS =(LoaderState.LOADING, LoaderState.FETCHING, LoaderState.READY)


@dataclass
class PageView:
    """What a settings page renders."""
    collection: str
    state: LoaderState
    items: list[Any] = field(default_factory=list)
    related: dict[str, list[Any]] = field(default_factory=dict)
    error: Optional[LoadFailure] = None
    decode_errors: list[DecodeError] = field(default_factory=list)


class PageLoader:
    """Runs the loaders of one page against the same session."""

    def __init__(self, primary: CollectionLoader, related: Optional[dict[str, CollectionLoader]] = None):
        self.primary = primary
        self.related = related or {}

    def _loaders(self) -> list[CollectionLoader]:
        return [self.primary, *self.related.values()]

    def mount(self) -> None:
        for loader in self._loaders():
            loader.mount()

    def unmount(self) -> None:
        for loader in self._loaders():
            loader.unmount()

    async def load(self) -> PageView:
        self.mount()
        await asyncio.gather(*(loader.wait() for loader in self._loaders()))
        return self.view()

    def view(self) -> PageView:
        """Snapshot of the page; READY only once every loader is."""
        loaders = self._loaders()
        states = {loader.state for loader in loaders}
        if LoaderState.UNAUTHENTICATED in states:
            state = LoaderState.UNAUTHENTICATED
        else:
            # Least advanced loader wins
            state = min(states, key=_PROGRESS.index)

        error = None
        decode_errors: list[DecodeError] = []
        for loader in loaders:
            if loader.result is None:
                continue
            if error is None and loader.result.failure is not None:
                error = loader.result.failure
            decode_errors.extend(loader.result.decode_errors)

        return PageView(
            collection=self.primary.collection,
            state=state,
            items=list(self.primary.entities),
            related={name: list(loader.entities) for name, loader in self.related.items()},
            error=error,
            decode_errors=decode_errors,
        )


def _loader(
    session: SessionProvider,
    store: DocumentStore,
    collection: str,
    model: type,
    timeout: Optional[float],
) -> CollectionLoader:
    if timeout is None:
        timeout = get_settings().read_timeout_seconds
    return CollectionLoader(session, store, collection, model, timeout=timeout)


def phases_page(
    session: SessionProvider, store: DocumentStore, timeout: Optional[float] = None
) -> PageLoader:
    return PageLoader(
        _loader(session, store, Collections.PHASES, Phase, timeout),
        {"projects": _loader(session, store, Collections.PROJECTS, Project, timeout)},
    )


def positions_page(
    session: SessionProvider, store: DocumentStore, timeout: Optional[float] = None
) -> PageLoader:
    return PageLoader(
        _loader(session, store, Collections.EMPLOYEE_POSITIONS, EmployeePosition, timeout)
    )


def projects_page(
    session: SessionProvider, store: DocumentStore, timeout: Optional[float] = None
) -> PageLoader:
    return PageLoader(_loader(session, store, Collections.PROJECTS, Project, timeout))


def roles_page(
    session: SessionProvider, store: DocumentStore, timeout: Optional[float] = None
) -> PageLoader:
    return PageLoader(_loader(session, store, Collections.ROLES, Role, timeout))


PAGES = {
    "phases": phases_page,
    "positions": positions_page,
    "projects": projects_page,
    "roles": roles_page,
}
