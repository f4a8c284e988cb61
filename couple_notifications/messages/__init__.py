from .schemas import MessageType
from .summary import get_message_body

__all__ = ["MessageType", "get_message_body"]
