"""
Saved bill-split calculation model.
"""
from typing import Optional

from pydantic import BaseModel, Field


class SavedCalculation(BaseModel):
    """
    A named bill split saved by a user.

    tip_amount, total_amount and per_person_amount are derived when the
    calculation is made and stored as-is; they are not recomputed on read.
    """
    id: Optional[str] = Field(None, description="Store-assigned calculation ID")
    user_id: Optional[str] = Field(None, description="Owner user ID")
    name: str = Field(..., description="Label given by the user")
    bill: float = Field(..., description="Bill amount")
    tip: float = Field(..., description="Tip percentage")
    people: int = Field(..., description="Number of people splitting the bill")
    tip_amount: float = Field(..., description="Tip in currency units")
    total_amount: float = Field(..., description="Bill plus tip")
    per_person_amount: float = Field(..., description="Total divided by people")
    created_at: str = Field(..., description="ISO-8601 creation timestamp")
