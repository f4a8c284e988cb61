import logging
from typing import Optional

from firebase_admin import firestore

from .schemas import User

logger = logging.getLogger(__name__)

DEFAULT_USERS_COLLECTION = "users"


class UserDirectory:
    """Reads user routing records and prunes their device tokens."""

    def __init__(self, firestore_db, collection: str = DEFAULT_USERS_COLLECTION):
        self.firestore_db = firestore_db
        self.collection = collection

    def get_user(self, user_id: str) -> Optional[User]:
        """
        Get a user's profile from Firestore by user ID.

        Args:
            user_id: The user's ID

        Returns:
            The user, or None if no such document exists
        """
        if not user_id:
            return None

        user_doc = self.firestore_db.collection(self.collection).document(user_id).get()
        if not user_doc.exists:
            logger.debug(f"User {user_id} not found")
            return None

        user_data = user_doc.to_dict() or {}
        # Documents written by older clients may hold a null token list
        if user_data.get('fcmTokens') is None:
            user_data['fcmTokens'] = []
        return User(userId=user_id, **{k: v for k, v in user_data.items() if k != 'userId'})

    def remove_device_token(self, user_id: str, token: str) -> None:
        """Remove exactly one device token from the user's token set."""
        user_ref = self.firestore_db.collection(self.collection).document(user_id)
        user_ref.update({'fcmTokens': firestore.ArrayRemove([token])})
        logger.info(f"Removed invalid token for user {user_id}")
