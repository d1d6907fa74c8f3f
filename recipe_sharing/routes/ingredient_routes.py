from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recipe_sharing.database import get_db
from recipe_sharing.dependencies import get_current_household
from recipe_sharing.models.household import Household
from recipe_sharing.services.cascade_service import CascadeService
from recipe_sharing.schemas.copy_schemas import CopyResultResponse

router = APIRouter()


@router.post("/{ingredient_id}/copy-for-edit", response_model=CopyResultResponse)
async def copy_ingredient_for_edit(
    ingredient_id: int,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Get an editable copy of an ingredient for the acting household"""
    service = CascadeService(db)
    return service.copy_ingredient_for_edit(household.id, ingredient_id)
