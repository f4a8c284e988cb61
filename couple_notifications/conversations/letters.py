import logging
from typing import Any, Dict, Optional

from .partners import get_paired_actor
from ..firebase import ClientContext
from ..notifications import DispatchResult, NotificationPayload, NotificationView

logger = logging.getLogger(__name__)


async def on_new_letter(context: ClientContext, letter: Dict[str, Any]) -> Optional[DispatchResult]:
    writer_id = letter.get('writerId')
    if not writer_id:
        logger.error("Letter document has no writerId")
        return None

    writer = await get_paired_actor(context, writer_id)
    if writer is None:
        return None

    # The letter stays sealed until its condition is met, only the condition is shown
    payload = NotificationPayload.build(
        title="جواب جديد في انتظارك! 💌",
        body=f"{writer.firstName or ''} كتبلك جواب: \"افتح لما {letter.get('condition') or ''}\"".lstrip(),
        icon=writer.avatar,
        tag="new_letter",
        view=NotificationView.LETTERS,
    )
    return await context.dispatcher.send_notification(writer.partnerId, payload)
