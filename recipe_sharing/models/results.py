"""Result objects returned by the copy-on-write engine and recipe cleanup."""

from dataclasses import dataclass, field

from recipe_sharing.models.cascade_action import CascadeAction


@dataclass
class CopyResult:
    """
    Outcome of a single copy-for-edit.

    Attributes:
        copied: True if a new row was created by this call
        new_id: Id the caller should write to (the copy, or the input id if owned)
    """

    copied: bool
    new_id: int


@dataclass
class CascadeCopyResult:
    """
    Effective (owned) ids after a collection/recipe cascade.

    Attributes:
        new_collection_id: Collection the household owns for this chain
        new_recipe_id: Recipe the household owns for this chain
        actions_taken: Ordered log of what the cascade did
    """

    new_collection_id: int
    new_recipe_id: int
    actions_taken: list[CascadeAction] = field(default_factory=list)


@dataclass
class FullCascadeCopyResult(CascadeCopyResult):
    """Cascade result extended with the effective ingredient id."""

    new_ingredient_id: int = 0


@dataclass
class CleanupResult:
    """
    Rows removed after a recipe deletion.

    Attributes:
        deleted_recipe_ingredients: Number of ingredient list rows deleted
        deleted_orphaned_ingredients: Ids of household ingredients deleted as orphans
    """

    deleted_recipe_ingredients: int = 0
    deleted_orphaned_ingredients: list[int] = field(default_factory=list)


@dataclass
class RecipeDeletionResult:
    """
    Outcome of a recipe delete request.

    Attributes:
        deleted: True if the recipe row itself was deleted
        removed_from_collection_id: Set when only a collection membership was removed
        cleanup: Rows reclaimed after the deletion, if the recipe was deleted
    """

    deleted: bool = False
    removed_from_collection_id: int | None = None
    cleanup: CleanupResult | None = None


@dataclass
class CascadeCopyWithSlugsResult(CascadeCopyResult):
    """
    Cascade result extended with url slugs of the copies, for redirects.

    A slug is only set when that level was copied by this call.
    """

    new_collection_slug: str | None = None
    new_recipe_slug: str | None = None
