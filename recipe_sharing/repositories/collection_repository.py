from sqlalchemy import insert, select, literal, func
from sqlalchemy.orm import Session

from recipe_sharing.models.collection import Collection
from recipe_sharing.models.collection_recipe import CollectionRecipe


class CollectionRepository:
    """Repository for Collection and collection membership data access"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, collection_id: int) -> Collection | None:
        """Get collection by ID"""
        return self.db.query(Collection).filter(Collection.id == collection_id).first()

    def get_by_id_and_household(self, collection_id: int, household_id: int) -> Collection | None:
        """
        Get collection ensuring it belongs to the household (multi-tenant safety).

        Returns None if collection doesn't exist or belongs to another household.
        """
        return (
            self.db.query(Collection)
            .filter(Collection.id == collection_id, Collection.household_id == household_id)
            .first()
        )

    def create_no_commit(self, collection: Collection) -> Collection:
        """Create collection without committing (for atomic ops)"""
        self.db.add(collection)
        self.db.flush()
        return collection

    def copy_memberships(self, source_collection_id: int, target_collection_id: int) -> int:
        """
        Duplicate every recipe membership of one collection onto another.

        Recipe references and display order are kept; added_at is reset.
        Caller responsible for commit.

        Returns:
            Number of membership rows inserted
        """
        source_rows = select(
            literal(target_collection_id),
            CollectionRecipe.recipe_id,
            func.now(),
            CollectionRecipe.display_order,
        ).where(CollectionRecipe.collection_id == source_collection_id)

        result = self.db.execute(
            insert(CollectionRecipe).from_select(
                ["collection_id", "recipe_id", "added_at", "display_order"], source_rows
            )
        )
        return result.rowcount

    def remove_recipe(self, collection_id: int, recipe_id: int) -> int:
        """
        Remove a recipe from a collection without committing.

        Returns:
            Number of membership rows deleted (0 or 1)
        """
        return (
            self.db.query(CollectionRecipe)
            .filter(
                CollectionRecipe.collection_id == collection_id,
                CollectionRecipe.recipe_id == recipe_id,
            )
            .delete(synchronize_session=False)
        )
