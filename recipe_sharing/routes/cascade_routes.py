from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recipe_sharing.database import get_db
from recipe_sharing.dependencies import get_current_household
from recipe_sharing.models.household import Household
from recipe_sharing.services.cascade_service import CascadeService
from recipe_sharing.schemas.copy_schemas import (
    CascadeCopyRequest,
    CascadeCopyWithSlugsResponse,
    FullCascadeCopyRequest,
    FullCascadeCopyResponse,
)

router = APIRouter()


@router.post("/recipe", response_model=CascadeCopyWithSlugsResponse)
async def cascade_recipe(
    data: CascadeCopyRequest,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """
    Copy collection and recipe as needed before editing a recipe in a collection.

    Slugs of any new copies are returned so the client can redirect to them.
    """
    service = CascadeService(db)
    return service.trigger_cascade_copy_with_context(household.id, data.collection_id, data.recipe_id)


@router.post("/ingredient", response_model=FullCascadeCopyResponse)
async def cascade_ingredient(
    data: FullCascadeCopyRequest,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Copy collection, recipe and ingredient as needed before editing an ingredient"""
    service = CascadeService(db)
    return service.cascade_copy_ingredient_with_context(
        household.id, data.collection_id, data.recipe_id, data.ingredient_id
    )
