from pydantic import BaseModel


class SubscriptionResponse(BaseModel):
    """Schema for subscribe/unsubscribe result"""

    collection_id: int
    subscribed: bool
    changed: bool
