"""Household model: the tenant isolation boundary."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from recipe_sharing.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from recipe_sharing.models.subscription import Subscription


class Household(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    Every collection, recipe and ingredient belongs to exactly one household.
    Households read each other's public collections through subscriptions and
    receive private copies when they edit something they do not own.
    """

    __tablename__ = "households"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    subscriptions: Mapped[list["Subscription"]] = relationship(
        "Subscription",
        back_populates="household",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Household(id={self.id}, name='{self.name}')>"
