"""
Page loaders: session-gated, one-shot collection reads.
"""
from app.loaders.collection_loader import (
    CollectionLoader,
    DecodeError,
    FailureKind,
    LoaderState,
    LoadFailure,
    LoadResult,
    decode_documents,
)
from app.loaders.pages import (
    PAGES,
    PageLoader,
    PageView,
    phases_page,
    positions_page,
    projects_page,
    roles_page,
)

__all__ = [
    "CollectionLoader",
    "DecodeError",
    "FailureKind",
    "LoaderState",
    "LoadFailure",
    "LoadResult",
    "decode_documents",
    "PAGES",
    "PageLoader",
    "PageView",
    "phases_page",
    "positions_page",
    "projects_page",
    "roles_page",
]
