"""
Bill-split calculation schemas.
"""
from pydantic import BaseModel, Field


class CalculationInput(BaseModel):
    """Inputs of a bill split."""
    bill: float = Field(..., gt=0, description="Bill amount")
    tip: float = Field(default=15, ge=0, le=100, description="Tip percentage")
    people: int = Field(default=1, ge=1, description="Number of people")


class CalculationCreate(CalculationInput):
    name: str = Field(..., min_length=1, description="Name to save the calculation under")


class CalculationPreview(BaseModel):
    """Derived amounts of a split that is not saved."""
    tip_amount: float
    total_amount: float
    per_person_amount: float
