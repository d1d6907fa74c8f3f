from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recipe_sharing.database import get_db
from recipe_sharing.dependencies import get_current_household
from recipe_sharing.models.household import Household
from recipe_sharing.services.cascade_service import CascadeService
from recipe_sharing.services.recipe_service import RecipeService
from recipe_sharing.schemas.copy_schemas import CopyResultResponse
from recipe_sharing.schemas.recipe_schemas import RecipeDeletionResponse

router = APIRouter()


@router.post("/{recipe_id}/copy-for-edit", response_model=CopyResultResponse)
async def copy_recipe_for_edit(
    recipe_id: int,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Get an editable copy of a recipe for the acting household"""
    service = CascadeService(db)
    return service.copy_recipe_for_edit(household.id, recipe_id)


@router.delete("/{recipe_id}", response_model=RecipeDeletionResponse)
async def delete_recipe(
    recipe_id: int,
    collection_id: int | None = None,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Delete an owned recipe, or remove a shared one from an owned collection"""
    service = RecipeService(db)
    return service.delete_recipe(household.id, recipe_id, collection_id)
