"""ProfileBroadcaster - Background task for pushing profile snapshots to WebSocket clients.

Broadcasts the active registry's snapshot payload on the profile topic at
VISGOTH_BROADCAST_HZ.
"""

import asyncio
import math
from typing import Optional

from visgoth.core.config import DEFAULT_BROADCAST_HZ, settings
from visgoth.core.logging_config import get_logger
from visgoth.services.websocket.manager import manager
from .instance import get_visgoth

logger = get_logger("profile_broadcaster")

_broadcast_task: Optional[asyncio.Task] = None
_stop_event: Optional[asyncio.Event] = None


def is_running() -> bool:
    return _broadcast_task is not None and not _broadcast_task.done()


async def _profile_broadcast_loop(stop_event: asyncio.Event) -> None:
    """Background loop that broadcasts profile snapshots.

    Args:
        stop_event: Event to signal shutdown
    """
    hz = settings.VISGOTH_BROADCAST_HZ
    if not math.isfinite(hz) or hz <= 0:
        logger.warning(f"Invalid broadcast rate {hz!r} Hz, using {DEFAULT_BROADCAST_HZ} Hz")
        hz = DEFAULT_BROADCAST_HZ
    interval = 1.0 / hz
    topic = settings.VISGOTH_PROFILE_TOPIC

    manager.register_topic(topic)
    logger.info(f"Profile broadcaster started at {hz} Hz on '{topic}'")

    while not stop_event.is_set():
        try:
            registry = get_visgoth()

            if not registry.is_enabled():
                logger.debug("Profiling disabled, skipping broadcast")
            elif not manager.has_subscribers(topic):
                logger.debug(f"No subscribers on '{topic}', skipping broadcast")
            else:
                payload = registry.snapshot().to_payload()
                await manager.broadcast(topic, payload)
                logger.debug(f"Broadcasted profile snapshot with {len(payload['profile'])} metrics")

        except Exception as e:
            logger.error(f"Error in profile broadcast loop: {e}")

        try:
            await asyncio.wait_for(stop_event.wait(), timeout=interval)
            break
        except asyncio.TimeoutError:
            continue

    logger.info("Profile broadcaster stopped")


def start_profile_broadcaster() -> None:
    """Start the background profile broadcaster task."""
    global _broadcast_task, _stop_event

    if is_running():
        logger.warning("Profile broadcaster already running")
        return

    _stop_event = asyncio.Event()
    _broadcast_task = asyncio.create_task(_profile_broadcast_loop(_stop_event))
    logger.info("Profile broadcaster task created")


def stop_profile_broadcaster() -> None:
    """Stop the background profile broadcaster task."""
    global _broadcast_task, _stop_event

    if _stop_event:
        _stop_event.set()

    if _broadcast_task and not _broadcast_task.done():
        _broadcast_task.cancel()

    _broadcast_task = None
    _stop_event = None
    logger.info("Profile broadcaster stop requested")
