"""Junction between collections and recipes."""

from datetime import datetime
from sqlalchemy import Integer, ForeignKey, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from recipe_sharing.models.base import Base, utcnow

if TYPE_CHECKING:
    from recipe_sharing.models.collection import Collection


class CollectionRecipe(Base):
    """
    Membership of a recipe in a collection.

    Constraints:
    - Primary key (collection_id, recipe_id) - a recipe appears once per collection
    - Rows are removed with either side (ON DELETE CASCADE)
    """

    __tablename__ = "collection_recipes"

    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
    )
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        primary_key=True,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    collection: Mapped["Collection"] = relationship("Collection", back_populates="memberships")

    __table_args__ = (
        Index("ix_collection_recipes_recipe_collection", "recipe_id", "collection_id"),
    )

    def __repr__(self) -> str:
        return f"<CollectionRecipe(collection_id={self.collection_id}, recipe_id={self.recipe_id})>"
