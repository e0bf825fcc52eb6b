from fastapi import APIRouter
from .websocket import router as ws_router
from .profile import router as profile_router

router = APIRouter(prefix="/api/v1")
router.include_router(profile_router)
router.include_router(ws_router)
