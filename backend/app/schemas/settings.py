"""
Settings pages request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.loaders.collection_loader import FailureKind, LoaderState
from app.loaders.pages import PageView


# ==================== Page views ====================


class LoadErrorResponse(BaseModel):
    """A failed collection read."""
    kind: FailureKind
    cause: str


class DecodeErrorResponse(BaseModel):
    """A stored document that could not be decoded."""
    index: int
    document_id: Optional[str] = None
    message: str


class PageResponse(BaseModel):
    """
    Settings page payload.

    items is empty both when the collection is empty and when the read
    failed; error tells the two apart.
    """
    collection: str
    state: LoaderState
    items: list[dict[str, Any]] = Field(default_factory=list)
    related: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)
    error: Optional[LoadErrorResponse] = None
    decode_errors: list[DecodeErrorResponse] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: PageView) -> "PageResponse":
        return cls(
            collection=view.collection,
            state=view.state,
            items=[item.model_dump() for item in view.items],
            related={
                name: [item.model_dump() for item in items]
                for name, items in view.related.items()
            },
            error=(
                LoadErrorResponse(kind=view.error.kind, cause=view.error.cause)
                if view.error else None
            ),
            decode_errors=[
                DecodeErrorResponse(index=e.index, document_id=e.document_id, message=e.message)
                for e in view.decode_errors
            ],
        )


# ==================== Manager requests ====================


class PhaseCreate(BaseModel):
    project_id: str = Field(..., description="Owning project ID")
    name: str = Field(..., description="Phase name")
    pep_element: str = Field(..., description="PEP element code")


class PositionCreate(BaseModel):
    name: str = Field(..., description="Position name")
    code: str = Field(..., description="Position code")


class ProjectCreate(BaseModel):
    identifier: str = Field(..., description="Project identifier")
    name: str = Field(..., description="Project name")
    requires_control_approval: bool = False
    requires_site_manager_approval: bool = False
    special_hour_type_ids: list[str] = Field(default_factory=list)
    unproductive_hour_type_ids: list[str] = Field(default_factory=list)
    absence_type_ids: list[str] = Field(default_factory=list)


class ProjectUpdate(BaseModel):
    """Partial project update; omitted fields are left untouched."""
    identifier: Optional[str] = None
    name: Optional[str] = None
    requires_control_approval: Optional[bool] = None
    requires_site_manager_approval: Optional[bool] = None
    special_hour_type_ids: Optional[list[str]] = None
    unproductive_hour_type_ids: Optional[list[str]] = None
    absence_type_ids: Optional[list[str]] = None


class RoleWrite(BaseModel):
    name: str = Field(..., description="Role name")
    permissions: list[str] = Field(default_factory=list, description="Permission keys")


class PermissionToggleRequest(BaseModel):
    current: list[str] = Field(default_factory=list, description="Permissions currently checked")
    key: str = Field(..., description="Permission being toggled")
    checked: bool


class PermissionDefinitionResponse(BaseModel):
    key: str
    label: str
    sub_permissions: list["PermissionDefinitionResponse"] = Field(default_factory=list)


class PermissionGroupResponse(BaseModel):
    category: str
    permissions: list[PermissionDefinitionResponse]
