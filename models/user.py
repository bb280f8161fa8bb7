from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional

SubscriptionTier = Literal["free", "premium", "lifetime"]


class User(BaseModel):
    """A golfer and the subscription tier that controls insight visibility."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    subscription_tier: SubscriptionTier = "free"
    created_at: Optional[datetime] = None

    @property
    def is_premium(self) -> bool:
        return self.subscription_tier in ("premium", "lifetime")
