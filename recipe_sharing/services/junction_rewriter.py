"""Repoints many-to-many rows from an original resource to a household's copy."""

import logging
from enum import Enum as PyEnum

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from recipe_sharing.models.collection import Collection
from recipe_sharing.models.collection_recipe import CollectionRecipe
from recipe_sharing.models.recipe import Recipe
from recipe_sharing.models.recipe_ingredient import RecipeIngredient

logger = logging.getLogger(__name__)


class Junction(str, PyEnum):
    """Junction tables the rewriter can repoint (container -> child)"""

    COLLECTION_RECIPE = "collection_recipes"
    RECIPE_INGREDIENT = "recipe_ingredients"


class JunctionRewriter:
    """
    Repoints junction rows within one household's containers.

    The update predicate always restricts rows to containers owned by the
    acting household, so rows under another household's collection or recipe
    are never modified even when they reference the same child.
    """

    def __init__(self, db: Session):
        self.db = db

    def rewrite_membership(
        self,
        junction: Junction,
        household_id: int,
        old_child_id: int,
        new_child_id: int,
        container_id: int | None = None,
    ) -> int:
        """
        Point the household's junction rows at new_child_id instead of old_child_id.

        Args:
            junction: Which junction table to rewrite
            household_id: Household whose containers are in scope
            old_child_id: Child currently referenced (the original)
            new_child_id: Child to reference instead (the copy)
            container_id: Restrict to one container; None means every container
                the household owns

        Returns:
            Number of junction rows repointed or collapsed

        Re-running with the same arguments is a no-op: no row references
        old_child_id any more.
        """
        if junction is Junction.COLLECTION_RECIPE:
            rewritten = self._rewrite_collection_recipes(
                household_id, old_child_id, new_child_id, container_id
            )
        else:
            rewritten = self._rewrite_recipe_ingredients(
                household_id, old_child_id, new_child_id, container_id
            )

        logger.info(
            "Rewrote %s %s row(s) for household %s: %s -> %s (container=%s)",
            rewritten,
            junction.value,
            household_id,
            old_child_id,
            new_child_id,
            container_id,
        )
        return rewritten

    def _rewrite_collection_recipes(
        self, household_id: int, old_recipe_id: int, new_recipe_id: int, collection_id: int | None
    ) -> int:
        owned_collections = select(Collection.id).where(Collection.household_id == household_id)
        if collection_id is not None:
            owned_collections = owned_collections.where(Collection.id == collection_id)

        # (collection_id, recipe_id) is unique: where the copy is already a
        # member, drop the stale row instead of updating it into a duplicate.
        already_linked = [
            linked_id
            for (linked_id,) in self.db.query(CollectionRecipe.collection_id)
            .filter(
                CollectionRecipe.recipe_id == new_recipe_id,
                CollectionRecipe.collection_id.in_(owned_collections),
            )
            .all()
        ]
        collapsed = 0
        if already_linked:
            collapsed = (
                self.db.query(CollectionRecipe)
                .filter(
                    CollectionRecipe.collection_id.in_(already_linked),
                    CollectionRecipe.recipe_id == old_recipe_id,
                )
                .delete(synchronize_session=False)
            )

        result = self.db.execute(
            update(CollectionRecipe)
            .where(
                CollectionRecipe.collection_id.in_(owned_collections),
                CollectionRecipe.recipe_id == old_recipe_id,
            )
            .values(recipe_id=new_recipe_id)
            .execution_options(synchronize_session=False)
        )
        return collapsed + result.rowcount

    def _rewrite_recipe_ingredients(
        self, household_id: int, old_ingredient_id: int, new_ingredient_id: int, recipe_id: int | None
    ) -> int:
        owned_recipes = select(Recipe.id).where(Recipe.household_id == household_id)
        if recipe_id is not None:
            owned_recipes = owned_recipes.where(Recipe.id == recipe_id)

        result = self.db.execute(
            update(RecipeIngredient)
            .where(
                RecipeIngredient.recipe_id.in_(owned_recipes),
                RecipeIngredient.ingredient_id == old_ingredient_id,
            )
            .values(ingredient_id=new_ingredient_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
