"""Profiled message send path.

A profiled message is an ordinary ``{type, content}`` message with the
current snapshot attached under ``visgoth``. Delivery goes through the
WebSocket connection manager; there is no retry or delivery guarantee.
"""

from typing import Any, Dict, Optional

from visgoth.core.config import settings
from visgoth.core.logging_config import get_logger
from visgoth.services.websocket.manager import manager
from .instance import AnyRegistry, get_visgoth
from .models import ProfiledMessageModel

logger = get_logger(__name__)


def build_profiled_message(
    msg_type: str,
    content: Any,
    registry: Optional[AnyRegistry] = None,
) -> Dict[str, Any]:
    """Build the outbound envelope from a fresh snapshot."""
    registry = registry if registry is not None else get_visgoth()
    snapshot = registry.snapshot()
    message = ProfiledMessageModel(
        type=msg_type,
        content=content,
        visgoth=snapshot.to_payload(),
    )
    return message.model_dump()


async def send_profiled_message(
    msg_type: str,
    content: Any,
    topic: Optional[str] = None,
    registry: Optional[AnyRegistry] = None,
) -> Dict[str, Any]:
    """Broadcast a profiled message on a topic.

    Args:
        msg_type: Message type tag
        content: Arbitrary caller-supplied content
        topic: WebSocket topic (defaults to VISGOTH_PROFILE_TOPIC)
        registry: Registry to snapshot (defaults to the active one)

    Returns:
        The message that was handed to the transport
    """
    topic = topic or settings.VISGOTH_PROFILE_TOPIC
    message = build_profiled_message(msg_type, content, registry)
    await manager.broadcast(topic, message)
    logger.debug(f"Sent profiled '{msg_type}' message on {topic}")
    return message
