"""
Project model for the projects collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Project(BaseModel):
    """
    Project document model.

    Approval flags and hour/absence type lists default to empty when the
    stored document predates them.
    """
    id: Optional[str] = Field(None, description="Store-assigned project ID")
    identifier: str = Field(..., min_length=1, description="Unique upper-case identifier")
    name: str = Field(..., min_length=1, description="Project name")
    requires_control_approval: bool = Field(
        default=False,
        description="Daily reports need management-control approval"
    )
    requires_site_manager_approval: bool = Field(
        default=False,
        description="Daily reports need site-manager approval"
    )
    special_hour_type_ids: list[str] = Field(default_factory=list)
    unproductive_hour_type_ids: list[str] = Field(default_factory=list)
    absence_type_ids: list[str] = Field(default_factory=list)
