from pydantic import BaseModel


class CleanupResponse(BaseModel):
    """Schema for rows reclaimed after a recipe deletion"""

    model_config = {"from_attributes": True}

    deleted_recipe_ingredients: int
    deleted_orphaned_ingredients: list[int]


class RecipeDeletionResponse(BaseModel):
    """Schema for recipe delete result"""

    model_config = {"from_attributes": True}

    deleted: bool
    removed_from_collection_id: int | None = None
    cleanup: CleanupResponse | None = None
