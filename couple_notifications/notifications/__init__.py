from .gateway import DEAD_TOKEN_CODES, FcmGateway
from .schemas import (
    DispatchResult,
    DispatchStatus,
    NotificationPayload,
    NotificationView,
    TokenResult,
)
from .service import NotificationDispatcher

__all__ = [
    "DEAD_TOKEN_CODES",
    "DispatchResult",
    "DispatchStatus",
    "FcmGateway",
    "NotificationDispatcher",
    "NotificationPayload",
    "NotificationView",
    "TokenResult",
]
