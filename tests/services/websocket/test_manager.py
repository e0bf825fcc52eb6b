"""
Tests for WebSocket ConnectionManager
"""
import asyncio
import pytest
from unittest.mock import AsyncMock, Mock
from visgoth.services.websocket.manager import ConnectionManager


async def _drain():
    """Let fire-and-forget send tasks run."""
    await asyncio.sleep(0.01)


class TestConnectionManager:
    """Test suite for ConnectionManager"""

    def test_initialization(self):
        manager = ConnectionManager()
        assert manager.active_connections == {}

    def test_register_topic_idempotent(self):
        """Test registering same topic twice doesn't overwrite"""
        manager = ConnectionManager()
        manager.register_topic("visgoth_profile")
        manager.active_connections["visgoth_profile"].append("dummy")
        manager.register_topic("visgoth_profile")

        assert manager.active_connections["visgoth_profile"] == ["dummy"]
        assert manager.has_subscribers("visgoth_profile")

    @pytest.mark.asyncio
    async def test_connect_new_topic(self):
        manager = ConnectionManager()
        websocket = AsyncMock()

        await manager.connect(websocket, "new_topic")

        websocket.accept.assert_called_once()
        assert websocket in manager.active_connections["new_topic"]

    def test_disconnect_removes_connection(self):
        manager = ConnectionManager()
        websocket = Mock()
        manager.active_connections["topic"] = [websocket]

        manager.disconnect(websocket, "topic")

        assert websocket not in manager.active_connections["topic"]
        assert not manager.has_subscribers("topic")

    def test_disconnect_unknown_is_silent(self):
        manager = ConnectionManager()
        manager.disconnect(Mock(), "nonexistent")
        manager.active_connections["topic"] = []
        manager.disconnect(Mock(), "topic")

    @pytest.mark.asyncio
    async def test_broadcast_json_to_connections(self):
        """Test profile payloads go out as JSON"""
        manager = ConnectionManager()
        websocket1 = AsyncMock()
        websocket2 = AsyncMock()
        manager.active_connections["topic"] = [websocket1, websocket2]

        message = {"type": "tile", "visgoth": {"profile": {"fps": 60.0}}}
        await manager.broadcast("topic", message)
        await _drain()

        websocket1.send_json.assert_called_once_with(message)
        websocket2.send_json.assert_called_once_with(message)

    @pytest.mark.asyncio
    async def test_broadcast_bytes_to_connections(self):
        manager = ConnectionManager()
        websocket = AsyncMock()
        manager.active_connections["topic"] = [websocket]

        await manager.broadcast("topic", b"raw")
        await _drain()

        websocket.send_bytes.assert_called_once_with(b"raw")

    @pytest.mark.asyncio
    async def test_broadcast_queues_messages_for_slow_client(self):
        """Back-to-back messages to a busy client are delivered in order"""
        manager = ConnectionManager()
        sent = []

        async def slow_send(msg):
            await asyncio.sleep(0.05)
            sent.append(msg)

        websocket = AsyncMock()
        websocket.send_json.side_effect = slow_send
        manager.active_connections["visgoth_profile"] = [websocket]

        await manager.broadcast("visgoth_profile", {"type": "snapshot"})
        await manager.broadcast("visgoth_profile", {"type": "request_tile"})
        await manager.broadcast("visgoth_profile", {"type": "snapshot", "n": 2})
        await asyncio.sleep(0.3)

        assert sent == [
            {"type": "snapshot"},
            {"type": "request_tile"},
            {"type": "snapshot", "n": 2},
        ]

    @pytest.mark.asyncio
    async def test_queued_messages_skip_disconnected_client(self):
        manager = ConnectionManager()
        websocket = AsyncMock()
        manager.active_connections["topic"] = [websocket]

        await manager.broadcast("topic", {"a": 1})
        manager.disconnect(websocket, "topic")
        await _drain()

        websocket.send_json.assert_not_called()

    @pytest.mark.asyncio
    async def test_broadcast_removes_dead_connections(self):
        manager = ConnectionManager()
        dead_ws = AsyncMock()
        dead_ws.send_json.side_effect = Exception("Connection dead")
        alive_ws = AsyncMock()
        manager.active_connections["topic"] = [dead_ws, alive_ws]

        await manager.broadcast("topic", {"a": 1})
        await _drain()

        assert dead_ws not in manager.active_connections["topic"]
        assert alive_ws in manager.active_connections["topic"]

    @pytest.mark.asyncio
    async def test_broadcast_to_nonexistent_topic(self):
        manager = ConnectionManager()
        await manager.broadcast("nonexistent", {"a": 1})

    def test_get_public_topics_returns_sorted(self):
        manager = ConnectionManager()
        manager.register_topic("zebra")
        manager.register_topic("alpha")
        manager.register_topic("visgoth_profile")

        assert manager.get_public_topics() == ["alpha", "visgoth_profile", "zebra"]
