"""Repository for Household model operations."""

from sqlalchemy.orm import Session
from recipe_sharing.models.household import Household


class HouseholdRepository:
    """Repository for Household model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, household_id: int) -> Household | None:
        """
        Get household by ID.

        Args:
            household_id: Household ID

        Returns:
            Household object or None if not found
        """
        return self.db.query(Household).filter(Household.id == household_id).first()
