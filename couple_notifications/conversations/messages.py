import logging
from typing import Any, Dict, Optional

from .partners import get_paired_actor
from ..firebase import ClientContext
from ..messages import get_message_body
from ..notifications import DispatchResult, NotificationPayload, NotificationView

logger = logging.getLogger(__name__)


async def on_new_message(context: ClientContext, message: Dict[str, Any],
                         conversation_id: str) -> Optional[DispatchResult]:
    """
    Notify the sender's partner about a new chat message.

    Args:
        context: Store and gateway handles
        message: The created message document
        conversation_id: ID of the conversation holding the message

    Returns:
        The dispatch result, or None when nobody was notified
    """
    sender_id = message.get('senderId')
    if not sender_id:
        logger.error(f"Message in conversation {conversation_id} has no senderId")
        return None

    sender = await get_paired_actor(context, sender_id)
    if sender is None:
        return None

    payload = NotificationPayload.build(
        title=f"رسالة جديدة من {sender.firstName or ''}".rstrip(),
        body=get_message_body(message, context.settings.message_preview_length),
        icon=sender.avatar,
        tag=f"chat_{conversation_id}",
        view=NotificationView.CHAT,
    )
    return await context.dispatcher.send_notification(sender.partnerId, payload)
