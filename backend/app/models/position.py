"""
Employee position model for the employee-positions collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class EmployeePosition(BaseModel):
    id: Optional[str] = Field(None, description="Store-assigned position ID")
    name: str = Field(..., min_length=1, description="Position name")
    code: str = Field(..., min_length=1, description="Unique upper-case code")
