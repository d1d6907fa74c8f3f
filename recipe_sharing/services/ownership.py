"""Ownership checks for household-owned resources."""

from typing import TypeVar

from sqlalchemy.orm import Session

from recipe_sharing.core.exceptions import NotFoundException
from recipe_sharing.models.collection import Collection
from recipe_sharing.models.ingredient import Ingredient
from recipe_sharing.models.recipe import Recipe

OwnedResource = TypeVar("OwnedResource", Collection, Recipe, Ingredient)


def is_owned(resource: Collection | Recipe | Ingredient, household_id: int) -> bool:
    """Check whether a household owns a resource (the only household allowed to mutate it)."""
    return resource.household_id == household_id


class OwnershipResolver:
    """
    Loads resources for copy decisions inside the active transaction.

    Rows are re-read from the database (never served from the session's
    identity map) and locked with SELECT ... FOR UPDATE where the dialect
    supports it, so two requests from the same household serialize on the
    source row instead of both deciding to copy it.
    """

    def __init__(self, db: Session):
        self.db = db

    def load_for_update(self, model: type[OwnedResource], resource_id: int) -> OwnedResource:
        """
        Read and lock a resource row.

        Raises:
            NotFoundException: If no row has this id
        """
        resource = self.db.get(
            model, resource_id, with_for_update=True, populate_existing=True
        )
        if resource is None:
            raise NotFoundException(f"{model.__name__} with ID {resource_id} not found")
        return resource

    def find_existing_copy(
        self, model: type[OwnedResource], household_id: int, source_id: int
    ) -> OwnedResource | None:
        """
        Get the household's private copy of a source row, if one was already made.

        Args:
            model: Collection, Recipe or Ingredient
            household_id: Household that would own the copy
            source_id: Id of the row the copy descends from

        Returns:
            The existing copy or None
        """
        return (
            self.db.query(model)
            .filter(model.household_id == household_id, model.parent_id == source_id)
            .populate_existing()
            .first()
        )
