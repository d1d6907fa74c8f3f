import logging

from sqlalchemy.orm import Session

from recipe_sharing.core.exceptions import NotFoundException, ForbiddenException
from recipe_sharing.database import transaction
from recipe_sharing.models.results import RecipeDeletionResult
from recipe_sharing.repositories.collection_repository import CollectionRepository
from recipe_sharing.repositories.recipe_repository import RecipeRepository
from recipe_sharing.services.cleanup_service import CleanupService
from recipe_sharing.services.ownership import is_owned

logger = logging.getLogger(__name__)


class RecipeService:
    """Service layer for recipe deletion"""

    def __init__(self, db: Session):
        self.db = db
        self.recipe_repo = RecipeRepository(db)
        self.collection_repo = CollectionRepository(db)
        self.cleanup = CleanupService(db)

    def delete_recipe(
        self, household_id: int, recipe_id: int, collection_id: int | None = None
    ) -> RecipeDeletionResult:
        """
        Delete a recipe, or remove it from one of the household's collections.

        A household that owns the recipe deletes it (collection memberships go
        with it), then its ingredient rows and the ingredients only it used
        are reclaimed in a second transaction. A household that doesn't own
        the recipe can only take it out of a collection it owns.

        Args:
            household_id: Acting household
            recipe_id: Recipe to delete
            collection_id: Collection context, required when the recipe isn't owned

        Returns:
            RecipeDeletionResult describing what was removed

        Raises:
            NotFoundException: If recipe doesn't exist or isn't in the collection
            ForbiddenException: If the household owns neither recipe nor collection
        """
        recipe = self.recipe_repo.get_by_id(recipe_id)
        if not recipe:
            raise NotFoundException(f"Recipe {recipe_id} not found")

        if not is_owned(recipe, household_id):
            return self._remove_from_collection(household_id, recipe_id, collection_id)

        with transaction(self.db):
            self.recipe_repo.delete_no_commit(recipe)
        logger.info("Household %s deleted recipe %s", household_id, recipe_id)

        cleanup = self.cleanup.perform_complete_cleanup_after_recipe_delete(recipe_id, household_id)
        return RecipeDeletionResult(deleted=True, cleanup=cleanup)

    def _remove_from_collection(
        self, household_id: int, recipe_id: int, collection_id: int | None
    ) -> RecipeDeletionResult:
        if collection_id is None:
            raise ForbiddenException("You can only delete recipes owned by your household")

        collection = self.collection_repo.get_by_id_and_household(collection_id, household_id)
        if not collection:
            raise ForbiddenException(
                "You can only remove recipes from collections owned by your household"
            )

        with transaction(self.db):
            removed = self.collection_repo.remove_recipe(collection_id, recipe_id)
            if removed == 0:
                raise NotFoundException("Recipe not found in this collection")

        logger.info(
            "Household %s removed recipe %s from collection %s", household_id, recipe_id, collection_id
        )
        return RecipeDeletionResult(removed_from_collection_id=collection_id)
