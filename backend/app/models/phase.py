"""
Phase model for the phases collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Phase(BaseModel):
    """A work phase belonging to one project."""
    id: Optional[str] = Field(None, description="Store-assigned phase ID")
    name: str = Field(..., min_length=1, description="Phase name")
    pep_element: str = Field(..., min_length=1, description="PEP element code")
    project_id: Optional[str] = Field(None, description="Owning project ID")
