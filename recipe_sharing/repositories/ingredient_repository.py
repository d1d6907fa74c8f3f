from sqlalchemy import select
from sqlalchemy.orm import Session

from recipe_sharing.models.ingredient import Ingredient
from recipe_sharing.models.recipe_ingredient import RecipeIngredient


class IngredientRepository:
    """Repository for Ingredient data access"""

    def __init__(self, db: Session):
        self.db = db

    def create_no_commit(self, ingredient: Ingredient) -> Ingredient:
        """Create ingredient without committing (for atomic ops)"""
        self.db.add(ingredient)
        self.db.flush()
        return ingredient

    def find_orphaned_ids(self, household_id: int, deleted_recipe_id: int) -> list[int]:
        """
        Find household-owned ingredients that only the deleted recipe used.

        Candidates come from deleted_recipe_id's ingredient rows, so this must
        run before those rows are removed. A candidate is orphaned when no
        other recipe, from any household, still references it.

        Args:
            household_id: Household whose ingredients are candidates
            deleted_recipe_id: Recipe being deleted

        Returns:
            Sorted list of orphaned ingredient ids
        """
        used_by_deleted = select(RecipeIngredient.ingredient_id).where(
            RecipeIngredient.recipe_id == deleted_recipe_id
        )
        still_referenced = select(RecipeIngredient.ingredient_id).where(
            RecipeIngredient.recipe_id != deleted_recipe_id
        )
        rows = (
            self.db.query(Ingredient.id)
            .filter(
                Ingredient.household_id == household_id,
                Ingredient.id.in_(used_by_deleted),
                Ingredient.id.not_in(still_referenced),
            )
            .order_by(Ingredient.id)
            .all()
        )
        return [ingredient_id for (ingredient_id,) in rows]

    def delete_by_ids(self, ingredient_ids: list[int]) -> int:
        """
        Delete ingredients by id without committing.

        Returns:
            Number of ingredients deleted
        """
        if not ingredient_ids:
            return 0
        return (
            self.db.query(Ingredient)
            .filter(Ingredient.id.in_(ingredient_ids))
            .delete(synchronize_session=False)
        )
