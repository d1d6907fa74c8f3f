from sqlalchemy import String, Integer, Boolean, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from recipe_sharing.models.base import Base, TimestampMixin, HouseholdOwnedMixin

if TYPE_CHECKING:
    from recipe_sharing.models.collection_recipe import CollectionRecipe


class Collection(Base, TimestampMixin, HouseholdOwnedMixin):
    """
    Named group of recipes owned by a household.

    Public collections can be subscribed to by other households. Recipes are
    linked through the collection_recipes junction, so copying a collection
    only duplicates membership rows, never the recipes themselves.
    """

    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    subtitle: Mapped[str | None] = mapped_column(String(255), nullable=True)
    filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    filename_dark: Mapped[str | None] = mapped_column(String(255), nullable=True)
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    url_slug: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # Relationships
    memberships: Mapped[list["CollectionRecipe"]] = relationship(
        "CollectionRecipe",
        back_populates="collection",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("household_id", "parent_id", name="uq_collections_household_parent"),
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, household_id={self.household_id}, parent_id={self.parent_id})>"
