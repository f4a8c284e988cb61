import logging
from typing import Any, Dict, List, Optional

from .partners import get_paired_actor
from ..firebase import ClientContext
from ..notifications import DispatchResult, NotificationPayload, NotificationView

logger = logging.getLogger(__name__)


def find_new_answerers(before: Optional[Dict[str, Any]], after: Optional[Dict[str, Any]]) -> List[str]:
    """
    List users whose answer appeared between two versions of a daily question.

    A user counts when they have an entry in `after` but their answer was
    missing or empty in `before`. The result is sorted so the choice of who to
    notify does not depend on the order Firestore returned the map in.
    """
    before_answers = (before or {}).get('answers') or {}
    after_answers = (after or {}).get('answers') or {}
    return sorted(
        user_id for user_id in after_answers
        if not before_answers.get(user_id)
    )


async def on_daily_question_answer(context: ClientContext, before: Optional[Dict[str, Any]],
                                   after: Optional[Dict[str, Any]]) -> Optional[DispatchResult]:
    """
    Notify a user's partner once that user answers the daily question.

    Args:
        context: Store and gateway handles
        before: Document data before the update
        after: Document data after the update

    Returns:
        The dispatch result, or None when nobody was notified
    """
    answerers = find_new_answerers(before, after)
    if not answerers:
        logger.debug("Daily question update added no new answers")
        return None
    if len(answerers) > 1:
        # Only one partner is notified per update; bulk writes notify the first
        logger.warning(f"Daily question update added several answers {answerers}, notifying for {answerers[0]} only")

    answered_user = await get_paired_actor(context, answerers[0])
    if answered_user is None:
        return None

    payload = NotificationPayload.build(
        title="إجابة جديدة! 🤔",
        body=f"{answered_user.firstName or ''} جاوب على سؤال النهاردة. ادخل شوف إجابته!".lstrip(),
        icon=answered_user.avatar,
        tag="new_answer",
        view=NotificationView.DAILY_QUESTION,
    )
    return await context.dispatcher.send_notification(answered_user.partnerId, payload)
