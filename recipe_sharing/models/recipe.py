from sqlalchemy import String, Integer, Boolean, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from recipe_sharing.models.base import Base, TimestampMixin, HouseholdOwnedMixin

if TYPE_CHECKING:
    from recipe_sharing.models.recipe_ingredient import RecipeIngredient


class Recipe(Base, TimestampMixin, HouseholdOwnedMixin):
    """
    Recipe owned by a household.

    The ingredient list lives in recipe_ingredients. A recipe copy gets its own
    ingredient list rows that still reference the original ingredients.
    """

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    prep_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    cook_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    url_slug: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    image_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pdf_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    # Read-only; rows of a deleted recipe are removed by CleanupService
    ingredients: Mapped[list["RecipeIngredient"]] = relationship(
        "RecipeIngredient",
        primaryjoin="Recipe.id == foreign(RecipeIngredient.recipe_id)",
        back_populates="recipe",
        viewonly=True,
    )

    __table_args__ = (
        UniqueConstraint("household_id", "parent_id", name="uq_recipes_household_parent"),
    )

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, household_id={self.household_id}, parent_id={self.parent_id})>"
