from sqlalchemy import insert, select, literal
from sqlalchemy.orm import Session

from recipe_sharing.models.recipe import Recipe
from recipe_sharing.models.recipe_ingredient import RecipeIngredient


class RecipeRepository:
    """Repository for Recipe and recipe ingredient list data access"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Get recipe by ID"""
        return self.db.query(Recipe).filter(Recipe.id == recipe_id).first()

    def create_no_commit(self, recipe: Recipe) -> Recipe:
        """Create recipe without committing (for atomic ops)"""
        self.db.add(recipe)
        self.db.flush()
        return recipe

    def delete_no_commit(self, recipe: Recipe) -> None:
        """Delete recipe without committing (memberships cascade; ingredient rows are left for cleanup)"""
        self.db.delete(recipe)
        self.db.flush()

    def copy_ingredient_rows(self, source_recipe_id: int, target_recipe_id: int) -> int:
        """
        Duplicate the ingredient list of one recipe onto another.

        Ingredient references are kept unchanged; each new row's parent_id
        points at the row it was copied from. Caller responsible for commit.

        Returns:
            Number of ingredient rows inserted
        """
        source_rows = select(
            RecipeIngredient.quantity,
            RecipeIngredient.quantity4,
            RecipeIngredient.unit,
            RecipeIngredient.preparation,
            RecipeIngredient.primary_ingredient,
            RecipeIngredient.ingredient_id,
            literal(target_recipe_id),
            RecipeIngredient.id,
        ).where(RecipeIngredient.recipe_id == source_recipe_id)

        result = self.db.execute(
            insert(RecipeIngredient).from_select(
                [
                    "quantity",
                    "quantity4",
                    "unit",
                    "preparation",
                    "primary_ingredient",
                    "ingredient_id",
                    "recipe_id",
                    "parent_id",
                ],
                source_rows,
            )
        )
        return result.rowcount

    def delete_ingredient_rows(self, recipe_id: int) -> int:
        """
        Delete every ingredient list row of a recipe without committing.

        Returns:
            Number of rows deleted
        """
        return (
            self.db.query(RecipeIngredient)
            .filter(RecipeIngredient.recipe_id == recipe_id)
            .delete(synchronize_session=False)
        )
