"""Read-only access grant from a household to a collection it does not own."""

from datetime import datetime
from sqlalchemy import Integer, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from recipe_sharing.models.base import Base, utcnow

if TYPE_CHECKING:
    from recipe_sharing.models.household import Household


class Subscription(Base):
    """
    Household subscription to a public collection.

    Removed automatically when the household receives its own copy of the
    collection, since the copy replaces the shared reference.
    """

    __tablename__ = "collection_subscriptions"

    household_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("households.id", ondelete="CASCADE"),
        primary_key=True,
    )
    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    # Relationships
    household: Mapped["Household"] = relationship("Household", back_populates="subscriptions")

    def __repr__(self) -> str:
        return f"<Subscription(household_id={self.household_id}, collection_id={self.collection_id})>"
