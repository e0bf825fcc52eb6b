"""
Tests for building and sending profiled messages over the WebSocket transport.
"""

from unittest.mock import AsyncMock, patch

import pytest

from visgoth.services.profiling import MetricName, Sample, SessionContext, VisgothRegistry, set_visgoth
from visgoth.services.profiling.messaging import build_profiled_message, send_profiled_message


@pytest.fixture
def registry():
    registry = VisgothRegistry(session=SessionContext("session-42", clock=lambda: 1700000000000))
    sample = Sample(MetricName.FPS)
    sample.record(20)
    registry.register(sample)
    set_visgoth(registry)
    return registry


def test_build_profiled_message_envelope(registry):
    message = build_profiled_message("request_tile", {"tile": [1, 2]})

    assert message["type"] == "request_tile"
    assert message["content"] == {"tile": [1, 2]}
    assert message["visgoth"]["metadata"] == {
        "client_id": "session-42",
        "timestamp": 1700000000000,
    }
    assert message["visgoth"]["profile"]["fps"] == pytest.approx(50.0)
    # No bandwidth data: nan becomes null on the wire
    assert message["visgoth"]["profile"]["bandwidth"] is None


def test_build_profiled_message_with_null_registry():
    message = build_profiled_message("ping", None)

    assert message["visgoth"]["profile"] == {}
    assert message["visgoth"]["metadata"]["client_id"] == ""


@pytest.mark.asyncio
async def test_send_profiled_message_broadcasts(registry):
    with patch("visgoth.services.profiling.messaging.manager") as mock_manager:
        mock_manager.broadcast = AsyncMock()

        message = await send_profiled_message("request_tile", {"x": 1}, topic="tiles")

    mock_manager.broadcast.assert_awaited_once_with("tiles", message)
    assert message["visgoth"]["metadata"]["client_id"] == "session-42"


@pytest.mark.asyncio
async def test_send_profiled_message_default_topic(registry):
    from visgoth.core.config import settings

    with patch("visgoth.services.profiling.messaging.manager") as mock_manager:
        mock_manager.broadcast = AsyncMock()
        await send_profiled_message("hello", "world")

    topic, _ = mock_manager.broadcast.call_args[0]
    assert topic == settings.VISGOTH_PROFILE_TOPIC
