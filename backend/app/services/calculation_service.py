"""
Bill-split calculator and saved calculations.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from app.database.databases.tipsplit_db import Collections
from app.database.store import DocumentStore
from app.models.calculation import SavedCalculation

logger = logging.getLogger(__name__)

MAX_TIP_PERCENT = 100


@dataclass(frozen=True)
class SplitResult:
    tip_amount: float
    total_amount: float
    per_person_amount: float


def calculate_split(bill: float, tip: float, people: int) -> SplitResult:
    """
    Split a bill with tip between people.

    Args:
        bill: Bill amount
        tip: Tip percentage (15 means 15%)
        people: Number of people; 0 or less yields a per-person amount of 0

    Returns:
        SplitResult rounded to cents
    """
    tip_amount = bill * tip / 100
    total_amount = bill + tip_amount
    per_person_amount = total_amount / people if people > 0 else 0.0
    return SplitResult(
        tip_amount=round(tip_amount, 2),
        total_amount=round(total_amount, 2),
        per_person_amount=round(per_person_amount, 2),
    )


def validate_inputs(bill: float, tip: float, people: int) -> None:
    """
    Raises:
        ValueError: If an input is out of range
    """
    if bill <= 0:
        raise ValueError("Bill amount must be greater than zero.")
    if tip < 0 or tip > MAX_TIP_PERCENT:
        raise ValueError(f"Tip percentage must be between 0 and {MAX_TIP_PERCENT}.")
    if people < 1:
        raise ValueError("Number of people must be at least 1.")


class CalculationService:
    """Service for saved calculations, scoped to their owner."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def save(
        self, user_id: str, name: str, bill: float, tip: float, people: int
    ) -> SavedCalculation:
        """
        Calculate a split and save it under a name.

        Raises:
            ValueError: If the name is blank or an input is out of range
        """
        name = name.strip()
        if not name:
            raise ValueError("Calculation name cannot be empty.")
        validate_inputs(bill, tip, people)

        split = calculate_split(bill, tip, people)
        data = {
            "user_id": user_id,
            "name": name,
            "bill": bill,
            "tip": tip,
            "people": people,
            "tip_amount": split.tip_amount,
            "total_amount": split.total_amount,
            "per_person_amount": split.per_person_amount,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        calculation_id = await self.store.insert(Collections.SAVED_CALCULATIONS, data)
        logger.info(f"Saved calculation {calculation_id} for user {user_id}")
        return SavedCalculation(id=calculation_id, **data)

    async def list_for_user(self, user_id: str) -> list[SavedCalculation]:
        """Saved calculations of a user, newest first."""
        docs = await self.store.find(
            Collections.SAVED_CALCULATIONS,
            {"user_id": user_id},
            sort=[("created_at", -1)],
        )
        return [SavedCalculation(**d) for d in docs]

    async def get(self, user_id: str, calculation_id: str) -> Optional[SavedCalculation]:
        doc = await self.store.get(Collections.SAVED_CALCULATIONS, calculation_id)
        if doc is None or doc.get("user_id") != user_id:
            return None
        return SavedCalculation(**doc)

    async def delete(self, user_id: str, calculation_id: str) -> bool:
        """Delete one of the user's calculations. Other users' entries are untouched."""
        if await self.get(user_id, calculation_id) is None:
            return False
        return await self.store.delete(Collections.SAVED_CALCULATIONS, calculation_id)
