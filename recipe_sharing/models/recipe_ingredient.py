from sqlalchemy import String, Integer, Boolean, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from recipe_sharing.models.base import Base

if TYPE_CHECKING:
    from recipe_sharing.models.recipe import Recipe
    from recipe_sharing.models.ingredient import Ingredient


class RecipeIngredient(Base):
    """
    One line of a recipe's ingredient list.

    Ownership flows from the recipe; there is no household_id here.
    parent_id points at the line this one was duplicated from when the recipe
    was copied.
    """

    __tablename__ = "recipe_ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No foreign key: rows outlive their recipe until the cleanup reads them
    recipe_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    ingredient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ingredients.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quantity: Mapped[str | None] = mapped_column(String(50), nullable=True)
    quantity4: Mapped[str | None] = mapped_column(String(50), nullable=True)  # Scaled for four servings
    unit: Mapped[str | None] = mapped_column(String(50), nullable=True)
    preparation: Mapped[str | None] = mapped_column(String(100), nullable=True)
    primary_ingredient: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("recipe_ingredients.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    recipe: Mapped["Recipe"] = relationship(
        "Recipe",
        primaryjoin="foreign(RecipeIngredient.recipe_id) == Recipe.id",
        back_populates="ingredients",
        viewonly=True,
    )
    ingredient: Mapped["Ingredient"] = relationship("Ingredient")

    __table_args__ = (
        Index("ix_recipe_ingredients_recipe_ingredient", "recipe_id", "ingredient_id"),
    )

    def __repr__(self) -> str:
        return f"<RecipeIngredient(id={self.id}, recipe_id={self.recipe_id}, ingredient_id={self.ingredient_id})>"
