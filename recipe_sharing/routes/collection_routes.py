from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from recipe_sharing.database import get_db
from recipe_sharing.dependencies import get_current_household
from recipe_sharing.models.household import Household
from recipe_sharing.services.cascade_service import CascadeService
from recipe_sharing.services.subscription_service import SubscriptionService
from recipe_sharing.schemas.copy_schemas import CopyResultResponse
from recipe_sharing.schemas.subscription_schemas import SubscriptionResponse

router = APIRouter()


@router.post("/{collection_id}/copy-for-edit", response_model=CopyResultResponse)
async def copy_collection_for_edit(
    collection_id: int,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Get an editable copy of a collection, replacing the subscription to it"""
    service = CascadeService(db)
    return service.copy_collection_for_edit(household.id, collection_id)


@router.post("/{collection_id}/subscription", response_model=SubscriptionResponse)
async def subscribe(
    collection_id: int,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Subscribe the acting household to a public collection"""
    service = SubscriptionService(db)
    changed = service.subscribe(household.id, collection_id)
    return SubscriptionResponse(collection_id=collection_id, subscribed=True, changed=changed)


@router.delete("/{collection_id}/subscription", response_model=SubscriptionResponse)
async def unsubscribe(
    collection_id: int,
    household: Household = Depends(get_current_household),
    db: Session = Depends(get_db),
):
    """Unsubscribe the acting household from a collection"""
    service = SubscriptionService(db)
    changed = service.unsubscribe(household.id, collection_id)
    return SubscriptionResponse(collection_id=collection_id, subscribed=False, changed=changed)
