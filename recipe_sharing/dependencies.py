from fastapi import Depends, Request
from sqlalchemy.orm import Session

from recipe_sharing.config import settings
from recipe_sharing.core.exceptions import UnauthorizedException
from recipe_sharing.database import get_db
from recipe_sharing.models.household import Household
from recipe_sharing.repositories.household_repository import HouseholdRepository


async def get_current_household(request: Request, db: Session = Depends(get_db)) -> Household:
    """
    FastAPI dependency resolving the acting household.

    Flow:
    1. Read the household id from the configured header (X-Household-ID)
    2. Load the Household record
    3. Return it for use in endpoints

    Raises:
        UnauthorizedException: If the header is missing, malformed or unknown
    """
    raw_id = request.headers.get(settings.HOUSEHOLD_HEADER)
    if not raw_id:
        raise UnauthorizedException(f"Missing {settings.HOUSEHOLD_HEADER} header")

    try:
        household_id = int(raw_id)
    except ValueError:
        raise UnauthorizedException(f"Invalid {settings.HOUSEHOLD_HEADER} header")

    household = HouseholdRepository(db).get_by_id(household_id)
    if not household:
        raise UnauthorizedException(f"Household {household_id} not found")

    return household
