import logging

from sqlalchemy.orm import Session

from recipe_sharing.core.exceptions import (
    NotFoundException,
    ForbiddenException,
    ValidationException,
)
from recipe_sharing.database import transaction
from recipe_sharing.models.subscription import Subscription
from recipe_sharing.repositories.collection_repository import CollectionRepository
from recipe_sharing.repositories.subscription_repository import SubscriptionRepository
from recipe_sharing.services.ownership import is_owned

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Service layer for collection subscriptions"""

    def __init__(self, db: Session):
        self.db = db
        self.subscription_repo = SubscriptionRepository(db)
        self.collection_repo = CollectionRepository(db)

    def remove_subscription(self, household_id: int, collection_id: int) -> bool:
        """
        Drop a household's subscription inside the caller's transaction.

        Used by the cascade once the household owns a copy of the collection.
        Absence of the subscription is not an error.

        Returns:
            True if a subscription row was deleted
        """
        removed = self.subscription_repo.delete(household_id, collection_id) > 0
        if removed:
            logger.info(
                "Removed subscription of household %s to collection %s",
                household_id,
                collection_id,
            )
        return removed

    def subscribe(self, household_id: int, collection_id: int) -> bool:
        """
        Subscribe a household to a public collection.

        Args:
            household_id: Subscribing household
            collection_id: Collection to subscribe to

        Returns:
            True if subscribed now, False if the household was already subscribed

        Raises:
            NotFoundException: If collection doesn't exist
            ValidationException: If the household owns the collection
            ForbiddenException: If the collection is not public
        """
        with transaction(self.db):
            collection = self.collection_repo.get_by_id(collection_id)
            if not collection:
                raise NotFoundException(f"Collection {collection_id} not found")

            if is_owned(collection, household_id):
                raise ValidationException("Cannot subscribe to your own collection")

            if not collection.public:
                raise ForbiddenException("Cannot subscribe to a private collection")

            if self.subscription_repo.get(household_id, collection_id):
                return False

            self.subscription_repo.create_no_commit(
                Subscription(household_id=household_id, collection_id=collection_id)
            )

        logger.info("Household %s subscribed to collection %s", household_id, collection_id)
        return True

    def unsubscribe(self, household_id: int, collection_id: int) -> bool:
        """
        Unsubscribe a household from a collection.

        Returns:
            True if a subscription was removed, False if there was none
        """
        with transaction(self.db):
            return self.remove_subscription(household_id, collection_id)

    def is_subscribed(self, household_id: int, collection_id: int) -> bool:
        """Check whether a household is subscribed to a collection"""
        return self.subscription_repo.get(household_id, collection_id) is not None
