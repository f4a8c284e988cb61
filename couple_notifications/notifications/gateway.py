import logging
from typing import List, Optional

from firebase_admin import exceptions, messaging

from .schemas import NotificationPayload, TokenResult

logger = logging.getLogger(__name__)

# Error codes that mean the device token will never work again
INVALID_REGISTRATION_TOKEN = "invalid-registration-token"
TOKEN_NOT_REGISTERED = "registration-token-not-registered"
DEAD_TOKEN_CODES = frozenset({INVALID_REGISTRATION_TOKEN, TOKEN_NOT_REGISTERED})

INVALID_ARGUMENT = "invalid-argument"
# FCM: "The registration token is not a valid FCM registration token"
INVALID_TOKEN_MESSAGE = "not a valid fcm registration token"


def normalize_error_code(error: Optional[Exception]) -> Optional[str]:
    """
    Map a Firebase Admin exception to the error code used for token cleanup.

    Args:
        error: Exception attached to a failed send response

    Returns:
        A lower-case, hyphenated error code, or None when there is no error
    """
    if error is None:
        return None
    if isinstance(error, messaging.UnregisteredError):
        return TOKEN_NOT_REGISTERED
    # INVALID_ARGUMENT also covers payload problems (message too big, bad
    # webpush fields), only a rejected token counts as dead
    if isinstance(error, exceptions.InvalidArgumentError):
        if INVALID_TOKEN_MESSAGE in str(error).lower():
            return INVALID_REGISTRATION_TOKEN
        return INVALID_ARGUMENT
    code = getattr(error, 'code', None)
    if not code:
        return "unknown"
    return str(code).lower().replace('_', '-')


class FcmGateway:
    """Firebase Cloud Messaging client that reports an outcome per token."""

    def __init__(self, app=None, batch_size: int = 500):
        self.app = app
        self.batch_size = batch_size

    @staticmethod
    def build_message(token: str, payload: NotificationPayload) -> messaging.Message:
        content = payload.notification
        return messaging.Message(
            token=token,
            notification=messaging.Notification(
                title=content.title,
                body=content.body,
            ),
            android=messaging.AndroidConfig(
                notification=messaging.AndroidNotification(tag=content.tag),
            ),
            webpush=messaging.WebpushConfig(
                notification=messaging.WebpushNotification(
                    icon=content.icon,
                    tag=content.tag,
                ),
            ),
            # FCM data values must be strings
            data={k: str(v) for k, v in payload.data.items()},
        )

    def send_multicast(self, tokens: List[str], payload: NotificationPayload) -> List[TokenResult]:
        """
        Send one payload to every token, batching at the FCM send_each limit.

        Each token gets its own message in the batch (`MulticastMessage.tokens`
        is deprecated). Request level failures raise FirebaseError to the
        caller. Results are returned in the same order as `tokens`.
        """
        results: List[TokenResult] = []
        for i in range(0, len(tokens), self.batch_size):
            batch = tokens[i:i + self.batch_size]
            messages = [self.build_message(token, payload) for token in batch]
            batch_response = messaging.send_each(messages, app=self.app)

            for token, resp in zip(batch, batch_response.responses):
                if resp.success:
                    results.append(TokenResult(token=token, success=True))
                    continue
                results.append(TokenResult(
                    token=token,
                    success=False,
                    error_code=normalize_error_code(resp.exception),
                    error_message=str(resp.exception) if resp.exception else None,
                ))

            logger.debug(
                f"FCM batch sent: {batch_response.success_count} succeeded, "
                f"{batch_response.failure_count} failed"
            )
        return results
