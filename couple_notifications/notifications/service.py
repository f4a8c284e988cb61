import asyncio
import logging
from typing import List

from .gateway import DEAD_TOKEN_CODES, FcmGateway
from .schemas import DispatchResult, DispatchStatus, NotificationPayload, TokenResult
from ..users import UserDirectory

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Delivers a push notification to every device of one recipient.

    Delivery is best effort. The dispatcher never retries a failed send:
    retrying is left to the trigger runtime for the whole invocation and
    to FCM for individual deliveries, so a retry added here could deliver
    the same notification twice.
    """

    def __init__(self, users: UserDirectory, gateway: FcmGateway):
        self.users = users
        self.gateway = gateway
        logger.debug("NotificationDispatcher initialized")

    async def send_notification(self, recipient_id: str, payload: NotificationPayload) -> DispatchResult:
        """
        Send a notification to all of a recipient's devices and prune dead tokens

        Args:
            recipient_id: The user ID to notify
            payload: Notification content and client data

        Returns:
            DispatchResult: Delivery counts for this recipient

        Raises:
            Any Firestore or FCM error, unchanged
        """
        recipient = await asyncio.to_thread(self.users.get_user, recipient_id)
        if recipient is None:
            logger.info(f"Recipient {recipient_id} not found, skipping notification")
            return DispatchResult(recipientId=recipient_id, status=DispatchStatus.NO_RECIPIENT)

        tokens = list(recipient.fcmTokens)
        if not tokens:
            logger.info(f"No device tokens found for user {recipient_id}")
            return DispatchResult(recipientId=recipient_id, status=DispatchStatus.NO_TOKENS)

        results: List[TokenResult] = await asyncio.to_thread(self.gateway.send_multicast, tokens, payload)

        removals = []
        for result in results:
            if result.success:
                continue
            logger.error(
                f"Failure sending notification to {result.token}: "
                f"{result.error_code} {result.error_message or ''}".rstrip()
            )
            if result.error_code in DEAD_TOKEN_CODES:
                removals.append(asyncio.to_thread(self.users.remove_device_token, recipient_id, result.token))

        await asyncio.gather(*removals)

        succeeded = sum(1 for r in results if r.success)
        dispatch_result = DispatchResult(
            recipientId=recipient_id,
            status=DispatchStatus.SENT,
            tokens_processed=len(results),
            tokens_succeeded=succeeded,
            tokens_failed=len(results) - succeeded,
            invalid_tokens_removed=len(removals),
        )
        logger.info(
            f"Notification sent to user {recipient_id}: "
            f"{succeeded}/{len(results)} delivered, {len(removals)} tokens removed"
        )
        return dispatch_result
