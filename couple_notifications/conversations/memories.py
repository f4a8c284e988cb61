import logging
from typing import Any, Dict, Optional

from .partners import get_paired_actor
from ..firebase import ClientContext
from ..notifications import DispatchResult, NotificationPayload, NotificationView

logger = logging.getLogger(__name__)


async def on_new_memory(context: ClientContext, memory: Dict[str, Any]) -> Optional[DispatchResult]:
    """Notify the creator's partner that a memory was added."""
    creator_id = memory.get('creatorId')
    if not creator_id:
        logger.error("Memory document has no creatorId")
        return None

    creator = await get_paired_actor(context, creator_id)
    if creator is None:
        return None

    payload = NotificationPayload.build(
        title="ذكرى جديدة! ✨",
        body=f"{creator.firstName or ''} ضاف ذكرى جديدة: \"{memory.get('title') or ''}\"".lstrip(),
        icon=creator.avatar,
        tag="new_memory",
        view=NotificationView.MEMORIES,
    )
    return await context.dispatcher.send_notification(creator.partnerId, payload)
