from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel


class NotificationView(str, Enum):
    """App screen the client opens when the notification is tapped."""
    CHAT = "chat"
    MEMORIES = "memories"
    LETTERS = "letters"
    DAILY_QUESTION = "dailyQuestion"


class DispatchStatus(str, Enum):
    SENT = "SENT"
    NO_RECIPIENT = "NO_RECIPIENT"
    NO_TOKENS = "NO_TOKENS"


class NotificationContent(BaseModel):
    title: str
    body: str
    icon: Optional[str] = None
    tag: str


class NotificationPayload(BaseModel):
    notification: NotificationContent
    data: Dict[str, str]

    @classmethod
    def build(cls, title: str, body: str, icon: Optional[str], tag: str,
              view: NotificationView) -> "NotificationPayload":
        return cls(
            notification=NotificationContent(title=title, body=body, icon=icon, tag=tag),
            data={'view': view.value},
        )


class TokenResult(BaseModel):
    """Outcome of a push to a single device token"""
    token: str
    success: bool
    error_code: Optional[str] = None
    error_message: Optional[str] = None


class DispatchResult(BaseModel):
    recipientId: str
    status: DispatchStatus
    tokens_processed: int = 0
    tokens_succeeded: int = 0
    tokens_failed: int = 0
    invalid_tokens_removed: int = 0
