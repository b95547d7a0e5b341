"""
Tests for the authenticated collection loaders.

These tests cover:
- Loading every settings collection in store order
- Session gating (unresolved, no user)
- Read failures, timeouts and malformed documents
- Mount / unmount / remount read counts
"""

import asyncio
import logging

import pytest

from app.core.session import ResolvedSession
from app.loaders.collection_loader import (
    CollectionLoader,
    FailureKind,
    LoaderState,
    decode_documents,
)
from app.loaders.pages import PAGES, phases_page, projects_page, roles_page
from app.models.phase import Phase
from app.models.position import EmployeePosition
from app.models.project import Project
from app.models.role import Role

from fakes import FakeStore

LOADER_LOGGER = "app.loaders.collection_loader"


def _docs(collection: str, count: int) -> list[dict]:
    if collection == "phases":
        return [{"id": f"ph{i}", "name": f"Phase {i}", "pep_element": f"PEP{i}", "project_id": "p1"} for i in range(count)]
    if collection == "employee-positions":
        return [{"id": f"pos{i}", "name": f"Position {i}", "code": f"C{i}"} for i in range(count)]
    if collection == "projects":
        return [{"id": f"p{i}", "identifier": f"PRJ{i}", "name": f"Project {i}"} for i in range(count)]
    return [{"id": f"r{i}", "name": f"Role {i}"} for i in range(count)]


MODELS = {
    "phases": Phase,
    "employee-positions": EmployeePosition,
    "projects": Project,
    "roles": Role,
}


# =============================================================================
# Successful loads
# =============================================================================

class TestLoaderSuccess:
    """A signed-in session loads the collection as stored."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("collection", list(MODELS))
    async def test_loads_all_documents_in_store_order(self, signed_in, collection):
        """Every collection ends READY with N entities in store order."""
        docs = list(reversed(_docs(collection, 5)))
        store = FakeStore({collection: docs})
        loader = CollectionLoader(signed_in, store, collection, MODELS[collection])

        result = await loader.load()

        assert loader.state == LoaderState.READY
        assert result.ok
        assert [e.id for e in loader.entities] == [d["id"] for d in docs]
        assert store.read_count(collection) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("domain", list(PAGES))
    async def test_every_page_is_ready_with_its_items(self, signed_in, domain):
        """Each settings page hands its manager the full primary collection."""
        page = PAGES[domain](signed_in, FakeStore({
            name: _docs(name, 3) for name in MODELS
        }), timeout=1)

        view = await page.load()

        assert view.state == LoaderState.READY
        assert len(view.items) == 3
        assert view.error is None

    @pytest.mark.asyncio
    async def test_roles_page_hands_roles_to_manager(self, signed_in):
        """Signed-in roles page: r1 Admin then r2 Viewer."""
        store = FakeStore({"roles": [
            {"id": "r1", "name": "Admin"},
            {"id": "r2", "name": "Viewer"},
        ]})

        view = await roles_page(signed_in, store, timeout=1).load()

        assert view.state == LoaderState.READY
        assert [r.model_dump(include={"id", "name"}) for r in view.items] == [
            {"id": "r1", "name": "Admin"},
            {"id": "r2", "name": "Viewer"},
        ]

    @pytest.mark.asyncio
    async def test_phases_page_loads_projects_alongside(self, signed_in):
        store = FakeStore({"phases": _docs("phases", 2), "projects": _docs("projects", 4)})

        view = await phases_page(signed_in, store, timeout=1).load()

        assert view.state == LoaderState.READY
        assert len(view.items) == 2
        assert len(view.related["projects"]) == 4
        assert store.read_count("phases") == 1
        assert store.read_count("projects") == 1

    @pytest.mark.asyncio
    async def test_page_is_not_ready_while_a_related_read_is_pending(self, signed_in):
        store = FakeStore({"phases": _docs("phases", 2), "projects": _docs("projects", 1)})
        store.gates["projects"] = asyncio.Event()
        page = phases_page(signed_in, store, timeout=1)

        page.mount()
        await asyncio.sleep(0.01)

        assert page.primary.state == LoaderState.READY
        assert page.view().state == LoaderState.FETCHING

        store.gates["projects"].set()
        view = await page.load()

        assert view.state == LoaderState.READY
        assert len(view.related["projects"]) == 1

    @pytest.mark.asyncio
    async def test_empty_collection_is_ready_without_error(self, signed_in):
        view = await projects_page(signed_in, FakeStore(), timeout=1).load()

        assert view.state == LoaderState.READY
        assert view.items == []
        assert view.error is None


# =============================================================================
# Session gating
# =============================================================================

class TestLoaderSessionGating:
    """The store is only read once a user is known."""

    @pytest.mark.asyncio
    async def test_no_user_is_unauthenticated_and_never_reads(self, signed_out):
        store = FakeStore({"roles": _docs("roles", 2)})
        loader = CollectionLoader(signed_out, store, "roles", Role)

        result = await loader.load()

        assert loader.state == LoaderState.UNAUTHENTICATED
        assert result is None
        assert loader.entities == []
        assert store.read_count() == 0

    @pytest.mark.asyncio
    async def test_unresolved_session_stays_loading_without_reading(self, user):
        session = ResolvedSession(resolving=True)
        store = FakeStore({"roles": _docs("roles", 2)})
        loader = CollectionLoader(session, store, "roles", Role)

        loader.mount()
        await asyncio.sleep(0.01)

        assert session.is_resolving
        assert loader.state == LoaderState.LOADING
        assert store.read_count() == 0

        session.resolve(user)
        await loader.wait()

        assert loader.state == LoaderState.READY
        assert len(loader.entities) == 2
        assert store.read_count("roles") == 1

    @pytest.mark.asyncio
    async def test_session_resolving_to_no_user_ends_unauthenticated(self):
        session = ResolvedSession(resolving=True)
        store = FakeStore()
        loader = CollectionLoader(session, store, "projects", Project)

        loader.mount()
        session.resolve(None)
        await loader.wait()

        assert loader.state == LoaderState.UNAUTHENTICATED
        assert store.read_count() == 0

    @pytest.mark.asyncio
    async def test_page_is_unauthenticated_when_signed_out(self, signed_out):
        store = FakeStore()

        view = await phases_page(signed_out, store, timeout=1).load()

        assert view.state == LoaderState.UNAUTHENTICATED
        assert store.read_count() == 0


# =============================================================================
# Failures
# =============================================================================

class TestLoaderFailures:
    """Read failures end READY with an empty list and a typed failure."""

    @pytest.mark.asyncio
    async def test_network_error_is_ready_empty_with_one_error_log(self, signed_in, caplog):
        store = FakeStore({"projects": _docs("projects", 3)})
        store.errors["projects"] = ConnectionError("network unavailable")
        loader = CollectionLoader(signed_in, store, "projects", Project)

        with caplog.at_level(logging.DEBUG, logger=LOADER_LOGGER):
            result = await loader.load()

        assert loader.state == LoaderState.READY
        assert loader.entities == []
        assert result.failure.kind == FailureKind.STORE_ERROR
        assert "network unavailable" in result.failure.cause

        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert "network unavailable" in errors[0].getMessage()
        assert "projects" in errors[0].getMessage()

    @pytest.mark.asyncio
    async def test_read_timeout_is_reported_as_timeout(self, signed_in, caplog):
        store = FakeStore()
        store.gates["roles"] = asyncio.Event()
        loader = CollectionLoader(signed_in, store, "roles", Role, timeout=0.05)

        with caplog.at_level(logging.ERROR, logger=LOADER_LOGGER):
            result = await loader.load()

        assert loader.state == LoaderState.READY
        assert result.failure.kind == FailureKind.TIMEOUT
        assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 1

    @pytest.mark.asyncio
    async def test_page_view_exposes_failure(self, signed_in):
        store = FakeStore()
        store.errors["roles"] = RuntimeError("permission denied")

        view = await roles_page(signed_in, store, timeout=1).load()

        assert view.state == LoaderState.READY
        assert view.items == []
        assert view.error.cause == "permission denied"

    @pytest.mark.asyncio
    async def test_malformed_documents_are_skipped_and_reported(self, signed_in, caplog):
        docs = [
            {"id": "pos1", "name": "Foreman", "code": "FRM"},
            {"id": "pos2", "name": "Missing code"},
            {"id": "pos3", "name": "Welder", "code": "WLD"},
        ]
        loader = CollectionLoader(signed_in, FakeStore({"employee-positions": docs}), "employee-positions", EmployeePosition)

        with caplog.at_level(logging.WARNING, logger=LOADER_LOGGER):
            result = await loader.load()

        assert result.ok
        assert [e.id for e in result.entities] == ["pos1", "pos3"]
        assert len(result.decode_errors) == 1
        assert result.decode_errors[0].index == 1
        assert result.decode_errors[0].document_id == "pos2"
        assert "code" in result.decode_errors[0].message
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


class TestDecodeDocuments:
    def test_keeps_valid_documents_in_order(self):
        entities, errors = decode_documents(Role, [
            {"id": "r1", "name": "Admin", "permissions": ["settings"]},
            {"id": "r2", "name": ""},
            {"id": "r3", "name": "Viewer", "permissions": ["not-a-permission"]},
            {"id": "r4", "name": "Clerk"},
        ])

        assert [e.id for e in entities] == ["r1", "r4"]
        assert [e.index for e in errors] == [1, 2]


# =============================================================================
# Lifecycle
# =============================================================================

class TestLoaderLifecycle:
    """Mounting issues one read; unmounting discards a pending one."""

    @pytest.mark.asyncio
    async def test_mount_twice_reads_once(self, signed_in):
        store = FakeStore({"roles": _docs("roles", 1)})
        loader = CollectionLoader(signed_in, store, "roles", Role)

        loader.mount()
        loader.mount()
        await loader.wait()

        assert store.read_count("roles") == 1

    @pytest.mark.asyncio
    async def test_remount_reads_once_per_mount(self, signed_in):
        store = FakeStore({"roles": _docs("roles", 2)})
        loader = CollectionLoader(signed_in, store, "roles", Role)

        await loader.load()
        loader.unmount()
        await loader.load()
        loader.unmount()
        await loader.load()

        assert store.read_count("roles") == 3
        assert loader.state == LoaderState.READY
        assert len(loader.entities) == 2

    @pytest.mark.asyncio
    async def test_unmount_discards_pending_result(self, signed_in):
        store = FakeStore({"projects": _docs("projects", 2)})
        store.gates["projects"] = asyncio.Event()
        loader = CollectionLoader(signed_in, store, "projects", Project)

        loader.mount()
        await asyncio.sleep(0.01)
        assert loader.state == LoaderState.FETCHING

        loader.unmount()
        store.gates["projects"].set()
        await asyncio.sleep(0.01)

        assert not loader.mounted
        assert loader.result is None
        assert loader.state != LoaderState.READY
        assert store.read_count("projects") == 1

    @pytest.mark.asyncio
    async def test_wait_after_unmount_returns_without_error(self, signed_in):
        store = FakeStore()
        store.gates["roles"] = asyncio.Event()
        loader = CollectionLoader(signed_in, store, "roles", Role)

        loader.mount()
        waiter = asyncio.ensure_future(loader.wait())
        await asyncio.sleep(0.01)
        loader.unmount()

        assert await waiter is None

    @pytest.mark.asyncio
    async def test_waiter_on_an_unmounted_load_returns_after_remount(self, signed_in):
        store = FakeStore({"roles": _docs("roles", 2)})
        store.gates["roles"] = asyncio.Event()
        loader = CollectionLoader(signed_in, store, "roles", Role)

        loader.mount()
        waiter = asyncio.ensure_future(loader.wait())
        await asyncio.sleep(0.01)
        loader.unmount()
        loader.mount()

        assert await waiter is None

        store.gates["roles"].set()
        result = await loader.wait()

        assert len(result.entities) == 2
        assert store.read_count("roles") == 2
