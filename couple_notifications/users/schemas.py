from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """Routing information read from a `users` document."""
    model_config = ConfigDict(extra="ignore")

    userId: str
    firstName: Optional[str] = None
    avatar: Optional[str] = None
    partnerId: Optional[str] = None
    fcmTokens: List[str] = []
