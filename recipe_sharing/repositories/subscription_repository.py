"""Repository for Subscription model operations."""

from sqlalchemy.orm import Session
from recipe_sharing.models.subscription import Subscription


class SubscriptionRepository:
    """Repository for Subscription model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, household_id: int, collection_id: int) -> Subscription | None:
        """
        Get a household's subscription to a collection.

        Args:
            household_id: Subscribing household ID
            collection_id: Collection ID

        Returns:
            Subscription object or None if not subscribed
        """
        return (
            self.db.query(Subscription)
            .filter(
                Subscription.household_id == household_id,
                Subscription.collection_id == collection_id,
            )
            .first()
        )

    def create_no_commit(self, subscription: Subscription) -> Subscription:
        """
        Create a subscription without committing.

        Raises:
            IntegrityError: If (household_id, collection_id) already exists
        """
        self.db.add(subscription)
        self.db.flush()
        return subscription

    def delete(self, household_id: int, collection_id: int) -> int:
        """
        Delete a subscription without committing.

        Args:
            household_id: Subscribing household ID
            collection_id: Collection ID

        Returns:
            Number of rows deleted (0 if the household was not subscribed)
        """
        return (
            self.db.query(Subscription)
            .filter(
                Subscription.household_id == household_id,
                Subscription.collection_id == collection_id,
            )
            .delete(synchronize_session=False)
        )
