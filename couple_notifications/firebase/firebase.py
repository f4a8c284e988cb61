import json
import logging
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

from ..config import Settings
from ..notifications.gateway import FcmGateway
from ..notifications.service import NotificationDispatcher
from ..users.users_db import UserDirectory

logger = logging.getLogger(__name__)


@dataclass
class ClientContext:
    """Store and gateway handles shared by the event handlers."""
    users: UserDirectory
    gateway: FcmGateway
    settings: Settings

    @property
    def dispatcher(self) -> NotificationDispatcher:
        return NotificationDispatcher(self.users, self.gateway)


def _load_credential(firebase_secret: Optional[str]):
    if not firebase_secret:
        # Cloud Functions provides Application Default Credentials
        return None
    try:
        cert_dict = json.loads(firebase_secret)
        if isinstance(cert_dict, str):
            cert_dict = json.loads(cert_dict)
    except json.JSONDecodeError as e:
        raise ValueError(f"FIREBASE_SECRET is not valid JSON: {e}") from e
    return credentials.Certificate(cert_dict)


def get_firebase_app(settings: Settings) -> firebase_admin.App:
    """Return the default Firebase app, initializing it on first use."""
    try:
        app = firebase_admin.get_app()
        logger.info("Retrieved existing Firebase app")
    except ValueError:
        app = firebase_admin.initialize_app(credential=_load_credential(settings.firebase_secret))
        logger.info(f"Initialized Firebase app. App name: {app.name}")
    return app


def create_context(settings: Settings) -> ClientContext:
    app = get_firebase_app(settings)
    return ClientContext(
        users=UserDirectory(firestore.client(app), collection=settings.users_collection),
        gateway=FcmGateway(app, batch_size=settings.fcm_batch_size),
        settings=settings,
    )
