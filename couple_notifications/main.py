"""
Cloud Functions entry points.

Each Firestore trigger adapts its event to plain document data and runs the
matching handler from `conversations`. Errors are left to the Functions
runtime, which owns retries for the whole invocation.
"""
import asyncio
import logging
from typing import Optional

from firebase_functions import firestore_fn

from . import conversations
from .config import settings
from .firebase import ClientContext, create_context
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

_context: Optional[ClientContext] = None


def get_context() -> ClientContext:
    """Configure logging and build the Firebase client context once per function instance."""
    global _context
    if _context is None:
        setup_logging(settings)
        _context = create_context(settings)
    return _context


def _snapshot_data(snapshot) -> Optional[dict]:
    if snapshot is None:
        return None
    return snapshot.to_dict()


@firestore_fn.on_document_created(
    document="conversations/{convoId}/messages/{messageId}",
    region=settings.function_region,
)
def on_new_message(event: firestore_fn.Event[Optional[firestore_fn.DocumentSnapshot]]) -> None:
    message = _snapshot_data(event.data)
    if message is None:
        logger.warning(f"Message {event.params.get('messageId')} has no data")
        return
    asyncio.run(conversations.on_new_message(get_context(), message, event.params["convoId"]))


@firestore_fn.on_document_created(
    document="conversations/{convoId}/memories/{memoryId}",
    region=settings.function_region,
)
def on_new_memory(event: firestore_fn.Event[Optional[firestore_fn.DocumentSnapshot]]) -> None:
    memory = _snapshot_data(event.data)
    if memory is None:
        logger.warning(f"Memory {event.params.get('memoryId')} has no data")
        return
    asyncio.run(conversations.on_new_memory(get_context(), memory))


@firestore_fn.on_document_created(
    document="conversations/{convoId}/letters/{letterId}",
    region=settings.function_region,
)
def on_new_letter(event: firestore_fn.Event[Optional[firestore_fn.DocumentSnapshot]]) -> None:
    letter = _snapshot_data(event.data)
    if letter is None:
        logger.warning(f"Letter {event.params.get('letterId')} has no data")
        return
    asyncio.run(conversations.on_new_letter(get_context(), letter))


@firestore_fn.on_document_updated(
    document="conversations/{convoId}/dailyQuestions/{date}",
    region=settings.function_region,
)
def on_daily_question_answer(
        event: firestore_fn.Event[firestore_fn.Change[Optional[firestore_fn.DocumentSnapshot]]]
) -> None:
    if event.data is None:
        return
    before = _snapshot_data(event.data.before)
    after = _snapshot_data(event.data.after)
    asyncio.run(conversations.on_daily_question_answer(get_context(), before, after))
