"""
Copy-on-write cascade for household resource isolation.

A household may only write rows it owns. When it edits a collection, recipe or
ingredient owned by another household, it first receives a private copy, and
the junction rows inside its own containers are repointed to that copy. The
cascade runs outermost container first (collection, then recipe, then
ingredient) so each inner copy is wired into the already-effective container.
"""

import logging
from typing import Callable, TypeVar

from sqlalchemy.orm import Session

from recipe_sharing.config import settings
from recipe_sharing.core.exceptions import ConstraintViolationException
from recipe_sharing.database import transaction
from recipe_sharing.models.cascade_action import CascadeAction
from recipe_sharing.models.collection import Collection
from recipe_sharing.models.ingredient import Ingredient
from recipe_sharing.models.recipe import Recipe
from recipe_sharing.models.results import (
    CopyResult,
    CascadeCopyResult,
    CascadeCopyWithSlugsResult,
    FullCascadeCopyResult,
)
from recipe_sharing.services.copy_service import CopyService
from recipe_sharing.services.junction_rewriter import Junction, JunctionRewriter
from recipe_sharing.services.ownership import OwnershipResolver, is_owned
from recipe_sharing.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CascadeService:
    """Service layer for copy-on-write cascades"""

    def __init__(self, db: Session):
        self.db = db
        self.resolver = OwnershipResolver(db)
        self.copier = CopyService(db)
        self.rewriter = JunctionRewriter(db)
        self.subscriptions = SubscriptionService(db)

    def copy_recipe_for_edit(self, household_id: int, recipe_id: int) -> CopyResult:
        """
        Make sure the household owns a recipe it is about to edit.

        If the recipe belongs to another household, it is copied (with its
        ingredient list) and every membership row in the household's own
        collections is repointed to the copy.

        Args:
            household_id: Acting household
            recipe_id: Recipe about to be edited

        Returns:
            CopyResult with copied=False and the recipe's own id if already
            owned, or the id of the household's copy

        Raises:
            NotFoundException: If recipe doesn't exist
        """

        def operation() -> CopyResult:
            recipe = self.resolver.load_for_update(Recipe, recipe_id)
            if is_owned(recipe, household_id):
                return CopyResult(copied=False, new_id=recipe.id)

            copy, copied = self._resolve_recipe(recipe, household_id)
            self.rewriter.rewrite_membership(
                Junction.COLLECTION_RECIPE, household_id, recipe.id, copy.id
            )
            return CopyResult(copied=copied, new_id=copy.id)

        return self._run_atomic(operation, f"copy recipe {recipe_id} for household {household_id}")

    def copy_ingredient_for_edit(self, household_id: int, ingredient_id: int) -> CopyResult:
        """
        Make sure the household owns an ingredient it is about to edit.

        If the ingredient belongs to another household, it is copied and the
        ingredient rows of every recipe the household owns are repointed.

        Raises:
            NotFoundException: If ingredient doesn't exist
        """

        def operation() -> CopyResult:
            ingredient = self.resolver.load_for_update(Ingredient, ingredient_id)
            if is_owned(ingredient, household_id):
                return CopyResult(copied=False, new_id=ingredient.id)

            copy, copied = self._resolve_ingredient(ingredient, household_id)
            self.rewriter.rewrite_membership(
                Junction.RECIPE_INGREDIENT, household_id, ingredient.id, copy.id
            )
            return CopyResult(copied=copied, new_id=copy.id)

        return self._run_atomic(
            operation, f"copy ingredient {ingredient_id} for household {household_id}"
        )

    def copy_collection_for_edit(self, household_id: int, collection_id: int) -> CopyResult:
        """
        Make sure the household owns a collection it is about to edit.

        A collection owned by another household is copied together with its
        recipe memberships, and the household's subscription to the original
        is dropped. No recipe is copied.

        Raises:
            NotFoundException: If collection doesn't exist
        """

        def operation() -> CopyResult:
            collection = self.resolver.load_for_update(Collection, collection_id)
            if is_owned(collection, household_id):
                return CopyResult(copied=False, new_id=collection.id)

            actions: list[CascadeAction] = []
            new_collection_id = self._take_collection(collection, household_id, actions)
            return CopyResult(
                copied=CascadeAction.COLLECTION_COPIED in actions, new_id=new_collection_id
            )

        return self._run_atomic(
            operation, f"copy collection {collection_id} for household {household_id}"
        )

    def cascade_copy_with_context(
        self, household_id: int, collection_id: int, recipe_id: int
    ) -> CascadeCopyResult:
        """
        Make sure the household owns both a collection and a recipe in it.

        Steps, in one transaction:
        1. Copy the collection if not owned, dropping the household's
           subscription to the original.
        2. Copy the recipe if not owned and repoint the effective collection's
           membership row to the copy.

        Returns:
            Effective collection/recipe ids and the ordered action log. If
            nothing needed copying, ids equal the inputs and the log is empty.

        Raises:
            NotFoundException: If collection or recipe doesn't exist
        """
        return self._run_atomic(
            lambda: self._cascade(household_id, collection_id, recipe_id),
            f"cascade collection {collection_id} / recipe {recipe_id} for household {household_id}",
        )

    def cascade_copy_ingredient_with_context(
        self, household_id: int, collection_id: int, recipe_id: int, ingredient_id: int
    ) -> FullCascadeCopyResult:
        """
        Cascade collection and recipe, then make sure the household owns the ingredient.

        The ingredient is resolved after the recipe so that the ingredient rows
        of the effective (possibly just copied) recipe are the ones repointed.

        Raises:
            NotFoundException: If any of the ids doesn't exist
        """

        def operation() -> FullCascadeCopyResult:
            cascade = self._cascade(household_id, collection_id, recipe_id)
            actions = list(cascade.actions_taken)

            ingredient = self.resolver.load_for_update(Ingredient, ingredient_id)
            new_ingredient_id = ingredient.id
            if not is_owned(ingredient, household_id):
                copy, copied = self._resolve_ingredient(ingredient, household_id)
                new_ingredient_id = copy.id
                if copied:
                    actions.append(CascadeAction.INGREDIENT_COPIED)
                self.rewriter.rewrite_membership(
                    Junction.RECIPE_INGREDIENT,
                    household_id,
                    ingredient.id,
                    new_ingredient_id,
                    container_id=cascade.new_recipe_id,
                )

            return FullCascadeCopyResult(
                new_collection_id=cascade.new_collection_id,
                new_recipe_id=cascade.new_recipe_id,
                actions_taken=actions,
                new_ingredient_id=new_ingredient_id,
            )

        return self._run_atomic(
            operation,
            f"cascade ingredient {ingredient_id} in recipe {recipe_id} for household {household_id}",
        )

    def trigger_cascade_copy_with_context(
        self, household_id: int, collection_id: int, recipe_id: int
    ) -> CascadeCopyWithSlugsResult:
        """
        Collection/recipe cascade that also reports the url slugs of new copies.

        Callers use the slugs to redirect to the household's copy. A slug is
        None when that level was already owned or an earlier copy was reused.

        Raises:
            NotFoundException: If collection or recipe doesn't exist
        """

        def operation() -> CascadeCopyWithSlugsResult:
            cascade = self._cascade(household_id, collection_id, recipe_id)
            result = CascadeCopyWithSlugsResult(
                new_collection_id=cascade.new_collection_id,
                new_recipe_id=cascade.new_recipe_id,
                actions_taken=cascade.actions_taken,
            )
            if CascadeAction.COLLECTION_COPIED in cascade.actions_taken:
                collection = self.db.get(Collection, cascade.new_collection_id)
                result.new_collection_slug = collection.url_slug
            if CascadeAction.RECIPE_COPIED in cascade.actions_taken:
                recipe = self.db.get(Recipe, cascade.new_recipe_id)
                result.new_recipe_slug = recipe.url_slug
            return result

        return self._run_atomic(
            operation,
            f"cascade collection {collection_id} / recipe {recipe_id} for household {household_id}",
        )

    def trigger_copy_if_needed(self, household_id: int, recipe_id: int) -> int:
        """Return the recipe id the household should write to, copying if needed"""
        return self.copy_recipe_for_edit(household_id, recipe_id).new_id

    def trigger_ingredient_copy_if_needed(self, household_id: int, ingredient_id: int) -> int:
        """Return the ingredient id the household should write to, copying if needed"""
        return self.copy_ingredient_for_edit(household_id, ingredient_id).new_id

    def _cascade(self, household_id: int, collection_id: int, recipe_id: int) -> CascadeCopyResult:
        """Collection/recipe cascade; runs inside the caller's transaction."""
        collection = self.resolver.load_for_update(Collection, collection_id)
        recipe = self.resolver.load_for_update(Recipe, recipe_id)

        actions: list[CascadeAction] = []
        new_collection_id = collection.id
        new_recipe_id = recipe.id

        if not is_owned(collection, household_id):
            new_collection_id = self._take_collection(collection, household_id, actions)

        if not is_owned(recipe, household_id):
            copy, copied = self._resolve_recipe(recipe, household_id)
            new_recipe_id = copy.id
            if copied:
                actions.append(CascadeAction.RECIPE_COPIED)
            self.rewriter.rewrite_membership(
                Junction.COLLECTION_RECIPE,
                household_id,
                recipe.id,
                new_recipe_id,
                container_id=new_collection_id,
            )

        return CascadeCopyResult(
            new_collection_id=new_collection_id,
            new_recipe_id=new_recipe_id,
            actions_taken=actions,
        )

    def _take_collection(
        self, collection: Collection, household_id: int, actions: list[CascadeAction]
    ) -> int:
        """Resolve the household's copy of a foreign collection, recording actions taken."""
        copy, copied = self._resolve_collection(collection, household_id)
        if copied:
            actions.append(CascadeAction.COLLECTION_COPIED)
            self.subscriptions.remove_subscription(household_id, collection.id)
            actions.append(CascadeAction.UNSUBSCRIBED_FROM_ORIGINAL)
        return copy.id

    def _resolve_collection(self, collection: Collection, household_id: int) -> tuple[Collection, bool]:
        existing = self.resolver.find_existing_copy(Collection, household_id, collection.id)
        if existing:
            return existing, False
        return self.copier.copy_collection(collection, household_id), True

    def _resolve_recipe(self, recipe: Recipe, household_id: int) -> tuple[Recipe, bool]:
        existing = self.resolver.find_existing_copy(Recipe, household_id, recipe.id)
        if existing:
            return existing, False
        return self.copier.copy_recipe(recipe, household_id), True

    def _resolve_ingredient(self, ingredient: Ingredient, household_id: int) -> tuple[Ingredient, bool]:
        existing = self.resolver.find_existing_copy(Ingredient, household_id, ingredient.id)
        if existing:
            return existing, False
        return self.copier.copy_ingredient(ingredient, household_id), True

    def _run_atomic(self, operation: Callable[[], T], description: str) -> T:
        """
        Run operation as one transaction, re-running it after a copy conflict.

        A ConstraintViolationException here means a concurrent request from
        the same household inserted the same copy first. The transaction is
        already rolled back; the re-run finds that copy and reuses it.
        """
        attempt = 1
        while True:
            try:
                with transaction(self.db):
                    return operation()
            except ConstraintViolationException:
                if attempt > settings.COPY_CONFLICT_RETRIES:
                    logger.error("Giving up on %s after %s attempt(s)", description, attempt)
                    raise
                logger.warning(
                    "Copy conflict during %s (attempt %s), retrying with existing copy",
                    description,
                    attempt,
                )
                attempt += 1
