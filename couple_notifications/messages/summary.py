from typing import Any, Mapping

from .schemas import MessageType

DEFAULT_PREVIEW_LENGTH = 100
NEW_MESSAGE_PLACEHOLDER = "رسالة جديدة..."

MESSAGE_PREVIEWS = {
    MessageType.IMAGE.value: "🖼️ بعت صورة جديدة",
    MessageType.AUDIO.value: "🎤 بعت رسالة صوتية",
    MessageType.KISS.value: "😘 بعت بوسة",
    MessageType.HEARTBEAT_PULSE.value: "❤️ بعت نبضة قلب",
}


def get_message_body(message: Mapping[str, Any], max_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """
    Build the notification body for a chat message.

    Stickers and media get a fixed preview; anything else is treated as text
    and truncated to `max_length` characters.
    """
    message_type = message.get('type')
    if isinstance(message_type, MessageType):
        message_type = message_type.value

    preview = MESSAGE_PREVIEWS.get(message_type)
    if preview is not None:
        return preview

    text = message.get('text')
    if not text:
        return NEW_MESSAGE_PLACEHOLDER
    return str(text)[:max_length]
