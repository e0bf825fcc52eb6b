from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from visgoth.core.config import settings
from visgoth.services.websocket.manager import manager

router = APIRouter()

@router.get("/topics")
async def list_topics():
    """Returns registered websocket topics"""
    return {
        "topics": manager.get_public_topics(),
        "description": {
            settings.VISGOTH_PROFILE_TOPIC: "Periodic profile snapshots and profiled messages",
        }
    }

@router.websocket("/ws/{topic}")
async def websocket_endpoint(websocket: WebSocket, topic: str):
    await manager.connect(websocket, topic)
    try:
        while True:
            # Keep connection open; client may not send messages.
            msg = await websocket.receive()
            if msg.get("type") == "websocket.disconnect":
                break
    except WebSocketDisconnect:
        pass
    except RuntimeError:
        # Starlette raises if receive() is called after disconnect.
        pass
    finally:
        manager.disconnect(websocket, topic)
