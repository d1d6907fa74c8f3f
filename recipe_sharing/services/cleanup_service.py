import logging

from sqlalchemy.orm import Session

from recipe_sharing.core.exceptions import NotFoundException
from recipe_sharing.database import transaction
from recipe_sharing.models.results import CleanupResult
from recipe_sharing.repositories.ingredient_repository import IngredientRepository
from recipe_sharing.repositories.recipe_repository import RecipeRepository

logger = logging.getLogger(__name__)


class CleanupService:
    """
    Reclaims rows left behind by a recipe deletion.

    Each public method is its own transaction. Deleting zero rows is a normal
    outcome, not an error.
    """

    def __init__(self, db: Session):
        self.db = db
        self.recipe_repo = RecipeRepository(db)
        self.ingredient_repo = IngredientRepository(db)

    def cleanup_orphaned_ingredients(self, household_id: int, deleted_recipe_id: int) -> list[int]:
        """
        Delete household-owned ingredients only the deleted recipe used.

        Reads the recipe's ingredient rows, so it must run before
        cleanup_orphaned_recipe_ingredients removes them.

        Args:
            household_id: Household that deleted the recipe
            deleted_recipe_id: Recipe that was deleted

        Returns:
            Ids of the deleted ingredients
        """
        self._validate_recipe_id(deleted_recipe_id)
        with transaction(self.db):
            return self._delete_orphans(household_id, deleted_recipe_id)

    def cleanup_orphaned_recipe_ingredients(self, recipe_id: int) -> int:
        """
        Delete the ingredient list rows of a recipe.

        Returns:
            Number of rows deleted
        """
        self._validate_recipe_id(recipe_id)
        with transaction(self.db):
            deleted = self.recipe_repo.delete_ingredient_rows(recipe_id)

        logger.info("Deleted %s ingredient row(s) of recipe %s", deleted, recipe_id)
        return deleted

    def reap_after_recipe_deletion(self, household_id: int, deleted_recipe_id: int) -> CleanupResult:
        """
        Delete a recipe's ingredient rows and the ingredients they orphaned.

        Both steps run in one transaction. The orphan candidates are read
        from the ingredient rows before those rows are deleted.

        Args:
            household_id: Household that owned the recipe
            deleted_recipe_id: Recipe that was deleted

        Returns:
            CleanupResult with the row count and orphaned ingredient ids
        """
        self._validate_recipe_id(deleted_recipe_id)
        with transaction(self.db):
            orphaned_ids = self.ingredient_repo.find_orphaned_ids(household_id, deleted_recipe_id)
            deleted_rows = self.recipe_repo.delete_ingredient_rows(deleted_recipe_id)
            self.ingredient_repo.delete_by_ids(orphaned_ids)

        logger.info(
            "Cleanup after deleting recipe %s for household %s: %s ingredient row(s), orphans %s",
            deleted_recipe_id,
            household_id,
            deleted_rows,
            orphaned_ids,
        )
        return CleanupResult(
            deleted_recipe_ingredients=deleted_rows,
            deleted_orphaned_ingredients=orphaned_ids,
        )

    def perform_complete_cleanup_after_recipe_delete(
        self, recipe_id: int, household_id: int
    ) -> CleanupResult:
        """Recipe-first alias of reap_after_recipe_deletion, as called by the delete flow"""
        return self.reap_after_recipe_deletion(household_id, recipe_id)

    def _delete_orphans(self, household_id: int, deleted_recipe_id: int) -> list[int]:
        orphaned_ids = self.ingredient_repo.find_orphaned_ids(household_id, deleted_recipe_id)
        self.ingredient_repo.delete_by_ids(orphaned_ids)
        if orphaned_ids:
            logger.info(
                "Deleted orphaned ingredients %s of household %s", orphaned_ids, household_id
            )
        return orphaned_ids

    @staticmethod
    def _validate_recipe_id(recipe_id: int) -> None:
        # Ids are assigned from 1; anything else was never a recipe
        if recipe_id < 1:
            raise NotFoundException(f"Recipe with ID {recipe_id} not found")
