import asyncio
from typing import Any, Dict, List, Set

from fastapi import WebSocket

from visgoth.core.logging_config import get_logger

logger = get_logger(__name__)


class ConnectionManager:
    """Topic -> websocket fan-out used as the transport for profiled messages.

    Sends to one connection are serialised in broadcast order; a slow client
    delays its own queue but never loses a message to a later one.
    """

    def __init__(self):
        self.active_connections: Dict[str, List[WebSocket]] = {}
        self._send_locks: Dict[WebSocket, asyncio.Lock] = {}
        self._pending: Set[asyncio.Task] = set()

    def register_topic(self, topic: str):
        """Pre-registers a topic so it appears in the topic list even with no active connections."""
        if topic not in self.active_connections:
            self.active_connections[topic] = []

    def has_subscribers(self, topic: str) -> bool:
        return bool(self.active_connections.get(topic))

    async def connect(self, websocket: WebSocket, topic: str):
        await websocket.accept()
        if topic not in self.active_connections:
            self.active_connections[topic] = []
        self.active_connections[topic].append(websocket)

    def disconnect(self, websocket: WebSocket, topic: str):
        if topic in self.active_connections:
            try:
                self.active_connections[topic].remove(websocket)
            except ValueError:
                pass
        if not any(websocket in conns for conns in self.active_connections.values()):
            self._send_locks.pop(websocket, None)

    async def _send(self, conn: WebSocket, topic: str, msg: Any):
        lock = self._send_locks.setdefault(conn, asyncio.Lock())
        async with lock:
            if conn not in self.active_connections.get(topic, []):
                return
            try:
                if isinstance(msg, bytes):
                    await conn.send_bytes(msg)
                else:
                    await conn.send_json(msg)
            except Exception as e:
                logger.debug(f"Dropping connection on '{topic}': {e}")
                self.disconnect(conn, topic)

    async def broadcast(self, topic: str, message: Any):
        for connection in list(self.active_connections.get(topic, [])):
            # Fire and forget; the per-connection lock keeps delivery order
            task = asyncio.create_task(self._send(connection, topic, message))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    def get_public_topics(self) -> List[str]:
        return sorted(self.active_connections.keys())


manager = ConnectionManager()
