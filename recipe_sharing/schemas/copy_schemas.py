from pydantic import BaseModel, Field

from recipe_sharing.models.cascade_action import CascadeAction


class CopyResultResponse(BaseModel):
    """Schema for a single copy-for-edit result"""

    model_config = {"from_attributes": True}

    copied: bool
    new_id: int


class CascadeCopyRequest(BaseModel):
    """Schema for cascading a recipe edit inside a collection"""

    collection_id: int = Field(..., gt=0)
    recipe_id: int = Field(..., gt=0)


class CascadeCopyResponse(BaseModel):
    """Schema for collection/recipe cascade result"""

    model_config = {"from_attributes": True}

    new_collection_id: int
    new_recipe_id: int
    actions_taken: list[CascadeAction]


class CascadeCopyWithSlugsResponse(CascadeCopyResponse):
    """Schema for collection/recipe cascade result with slugs of new copies"""

    new_collection_slug: str | None = None
    new_recipe_slug: str | None = None


class FullCascadeCopyRequest(CascadeCopyRequest):
    """Schema for cascading an ingredient edit inside a recipe and collection"""

    ingredient_id: int = Field(..., gt=0)


class FullCascadeCopyResponse(CascadeCopyResponse):
    """Schema for collection/recipe/ingredient cascade result"""

    new_ingredient_id: int
