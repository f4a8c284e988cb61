import asyncio
import logging
from typing import Optional

from ..firebase import ClientContext
from ..users import User

logger = logging.getLogger(__name__)


async def get_paired_actor(context: ClientContext, actor_id: Optional[str]) -> Optional[User]:
    """
    Look up the user who triggered an event, if they have a partner to notify.

    Returns None for unknown or unpaired users; callers then do nothing.
    """
    actor = await asyncio.to_thread(context.users.get_user, actor_id)
    if actor is None:
        logger.info(f"Acting user {actor_id} not found, skipping notification")
        return None
    if not actor.partnerId or actor.partnerId == actor.userId:
        logger.info(f"User {actor_id} has no partner, skipping notification")
        return None
    return actor
