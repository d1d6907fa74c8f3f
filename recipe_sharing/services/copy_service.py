import logging

from sqlalchemy.orm import Session

from recipe_sharing.config import settings
from recipe_sharing.models.collection import Collection
from recipe_sharing.models.ingredient import Ingredient
from recipe_sharing.models.recipe import Recipe
from recipe_sharing.repositories.collection_repository import CollectionRepository
from recipe_sharing.repositories.ingredient_repository import IngredientRepository
from recipe_sharing.repositories.recipe_repository import RecipeRepository

logger = logging.getLogger(__name__)


class CopyService:
    """
    Single-entity copy operations.

    Each copy is a new row owned by the requesting household whose parent_id
    points at the source row, together with the source's direct child rows.
    Nothing is committed here; callers run these inside one unit of work.

    Inserting a second copy of the same source for the same household violates
    the (household_id, parent_id) unique constraint and raises IntegrityError
    on flush. Callers check for an existing copy first.
    """

    def __init__(self, db: Session):
        self.db = db
        self.collection_repo = CollectionRepository(db)
        self.recipe_repo = RecipeRepository(db)
        self.ingredient_repo = IngredientRepository(db)

    def copy_collection(self, collection: Collection, household_id: int) -> Collection:
        """
        Copy a collection and its recipe memberships for a household.

        The copy is private to the household and its title is marked as a
        copy. Memberships still reference the original recipes until those
        are copied themselves.

        Args:
            collection: Source collection (freshly read)
            household_id: Household that will own the copy

        Returns:
            The new collection, flushed so its id is assigned
        """
        copy = Collection(
            title=f"{collection.title}{settings.COLLECTION_COPY_SUFFIX}",
            subtitle=collection.subtitle,
            filename=collection.filename,
            filename_dark=collection.filename_dark,
            public=False,
            url_slug=collection.url_slug,
            household_id=household_id,
            parent_id=collection.id,
        )
        self.collection_repo.create_no_commit(copy)
        memberships = self.collection_repo.copy_memberships(collection.id, copy.id)

        logger.info(
            "Copied collection %s to %s for household %s (%s memberships)",
            collection.id,
            copy.id,
            household_id,
            memberships,
        )
        return copy

    def copy_recipe(self, recipe: Recipe, household_id: int) -> Recipe:
        """
        Copy a recipe and its ingredient list for a household.

        Ingredient list rows keep pointing at the same ingredients; an
        ingredient is only copied when it is edited itself.

        Args:
            recipe: Source recipe (freshly read)
            household_id: Household that will own the copy

        Returns:
            The new recipe, flushed so its id is assigned
        """
        copy = Recipe(
            name=recipe.name,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            description=recipe.description,
            archived=recipe.archived,
            public=recipe.public,
            url_slug=recipe.url_slug,
            image_filename=recipe.image_filename,
            pdf_filename=recipe.pdf_filename,
            household_id=household_id,
            parent_id=recipe.id,
        )
        self.recipe_repo.create_no_commit(copy)
        rows = self.recipe_repo.copy_ingredient_rows(recipe.id, copy.id)

        logger.info(
            "Copied recipe %s to %s for household %s (%s ingredient rows)",
            recipe.id,
            copy.id,
            household_id,
            rows,
        )
        return copy

    def copy_ingredient(self, ingredient: Ingredient, household_id: int) -> Ingredient:
        """
        Copy an ingredient for a household.

        Args:
            ingredient: Source ingredient (freshly read)
            household_id: Household that will own the copy

        Returns:
            The new ingredient, flushed so its id is assigned
        """
        copy = Ingredient(
            name=ingredient.name,
            fresh=ingredient.fresh,
            cost=ingredient.cost,
            stockcode=ingredient.stockcode,
            supermarket_category=ingredient.supermarket_category,
            pantry_category=ingredient.pantry_category,
            public=ingredient.public,
            household_id=household_id,
            parent_id=ingredient.id,
        )
        self.ingredient_repo.create_no_commit(copy)

        logger.info(
            "Copied ingredient %s to %s for household %s", ingredient.id, copy.id, household_id
        )
        return copy
